# models/tenant.py
from sqlalchemy import JSON, Column, Integer, String
from .base import Base


class Tenant(Base):
     """
     Tenant model - prospective or current occupant.
     Table: tenants. Append-only from the public API.
     """

     id = Column(String(36), primary_key=True)

     # Contact
     name = Column(String(200), nullable=False)
     email = Column(String(255), nullable=False)
     phone = Column(String(50), nullable=False)
     emergency_contact = Column(String(255), nullable=False, default="")

     # Screening
     background_check_status = Column(String(50), nullable=False)
     credit_score = Column(Integer, nullable=False)
     rental_history = Column(JSON, nullable=False, default=list)  # previous_address, landlord_contact, duration
     payment_preferences = Column(String(255), nullable=False, default="")

     def __repr__(self):
          return f"<Tenant(id={self.id}, name='{self.name}')>"
