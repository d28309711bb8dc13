# models/property.py
from sqlalchemy import JSON, Column, Float, Integer, Numeric, String, Text
from .base import Base

PROPERTY_TYPES = ("residential", "commercial")


class Property(Base):
     """
     Property model - a residential or commercial building under management.
     Table: properties
     """

     id = Column(String(36), primary_key=True)
     address = Column(String(255), nullable=False)
     owner = Column(String(255), nullable=False)  # caller identity at creation
     valuation = Column(Numeric(12, 2), nullable=False)
     status = Column(String(50), nullable=False)
     created_at = Column(String(32), nullable=False)

     # Layout
     square_footage = Column(Float, nullable=False)
     bedrooms = Column(Integer, nullable=False)
     bathrooms = Column(Float, nullable=False)
     amenities = Column(JSON, nullable=False, default=list)
     images = Column(JSON, nullable=False, default=list)
     property_type = Column(String(20), nullable=False, index=True)  # residential, commercial

     # Compliance
     last_inspection_date = Column(String(32), nullable=False)
     insurance_info = Column(Text, nullable=False, default="")
     tax_details = Column(JSON, nullable=False)  # annual_amount, last_paid_date, next_due_date

     def __repr__(self):
          return f"<Property(id={self.id}, address='{self.address}', type='{self.property_type}')>"
