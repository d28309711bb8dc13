# models/financial_transaction.py
from sqlalchemy import Column, Numeric, String, Text
from .base import Base


class FinancialTransaction(Base):
     """
     FinancialTransaction model - income or expense booked against a property.
     Table: financial_transactions. Append-only from the public API.
     """

     id = Column(String(36), primary_key=True)
     property_id = Column(String(36), nullable=False, index=True)
     date = Column(String(32), nullable=False)
     amount = Column(Numeric(12, 2), nullable=False)
     transaction_type = Column(String(50), nullable=False)
     description = Column(Text, nullable=False)
     category = Column(String(100), nullable=False)
     payment_method = Column(String(50), nullable=False)
     recorded_by = Column(String(255), nullable=False)  # caller identity at creation

     def __repr__(self):
          return f"<FinancialTransaction(id={self.id}, property_id={self.property_id}, amount={self.amount})>"
