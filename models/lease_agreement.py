# models/lease_agreement.py
from sqlalchemy import JSON, Column, Numeric, String, Text
from .base import Base

# renewal_status value that closes a lease to further rent payments
RENEWAL_COMPLETED = "completed"


class LeaseAgreement(Base):
     """
     LeaseAgreement model - rental agreement between a tenant and a property.
     Table: lease_agreements

     property_id and tenant reference rows in properties / tenants. They are
     checked when the lease is created but carry no database constraint, so
     removing a property leaves its leases in place.
     """

     id = Column(String(36), primary_key=True)
     property_id = Column(String(36), nullable=False, index=True)
     tenant = Column(String(36), nullable=False, index=True)

     # Pricing
     rent = Column(Numeric(12, 2), nullable=False)
     security_deposit = Column(Numeric(12, 2), nullable=False)

     # Lease period (ISO dates, compared as strings)
     start_date = Column(String(32), nullable=False)
     end_date = Column(String(32), nullable=False)
     created_at = Column(String(32), nullable=False)

     # Terms
     digital_signature = Column(Text, nullable=False)
     utility_responsibilities = Column(JSON, nullable=False, default=list)
     renewal_status = Column(String(50), nullable=False, default="pending")

     # History
     rent_payment_history = Column(JSON, nullable=False, default=list)  # payment_date, amount, status
     lease_violations = Column(JSON, nullable=False, default=list)  # date, description, resolved

     @property
     def is_completed(self) -> bool:
          return self.renewal_status == RENEWAL_COMPLETED

     def __repr__(self):
          return f"<LeaseAgreement(id={self.id}, tenant={self.tenant}, property_id={self.property_id})>"
