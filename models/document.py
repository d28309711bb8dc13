# models/document.py
from sqlalchemy import Column, String, Text
from .base import Base


class Document(Base):
     """
     Document model - lease copies, inspection reports, invoices and the like.
     Table: documents
     """

     id = Column(String(36), primary_key=True)
     property_id = Column(String(36), nullable=False, index=True)
     document_type = Column(String(100), nullable=False)
     content = Column(Text, nullable=False)

     def __repr__(self):
          return f"<Document(id={self.id}, type='{self.document_type}')>"
