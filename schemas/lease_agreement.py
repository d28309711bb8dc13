# schemas/lease_agreement.py
"""
Pydantic schemas for LeaseAgreement API request/response validation.
"""
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict


class RentPaymentRecord(BaseModel):
     """One entry of a lease's rent payment history."""
     payment_date: str
     amount: float
     status: str


class LeaseViolation(BaseModel):
     date: str
     description: str
     resolved: bool = False


class LeaseAgreementPayload(BaseModel):
     """Schema for creating a lease agreement."""
     property_id: str = Field("", max_length=36)
     tenant: str = Field("", max_length=36, description="Tenant ID (must exist)")
     rent: Decimal = Field(Decimal(0), max_digits=12, decimal_places=2)
     start_date: str = Field("", max_length=32, description="ISO date, must sort before end_date")
     end_date: str = Field("", max_length=32)
     digital_signature: str = ""
     security_deposit: Decimal = Field(Decimal(0), max_digits=12, decimal_places=2)
     utility_responsibilities: List[str] = Field(default_factory=list)
     renewal_status: str = Field("pending", max_length=50)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": "2f1c8a6e-6f8a-4c1e-9b57-0c1f1d0f6b11",
                    "tenant": "7d4e2b90-3a41-4f0e-8f6e-5e2b1c9a7d22",
                    "rent": 2000.00,
                    "start_date": "2024-01-01",
                    "end_date": "2024-12-31",
                    "digital_signature": "signed:maria",
                    "security_deposit": 4000.00,
                    "utility_responsibilities": ["electricity", "internet"],
                    "renewal_status": "pending"
               }
          }
     )


class LeaseAgreementUpdate(LeaseAgreementPayload):
     """
     Schema for updating a lease agreement.

     History arrays are only replaced when sent explicitly.
     """
     rent_payment_history: Optional[List[RentPaymentRecord]] = None
     lease_violations: Optional[List[LeaseViolation]] = None


class RentPaymentPayload(BaseModel):
     """Request body for POST /api/leases/payments."""
     lease_id: str = Field(..., description="Lease to record the payment against")
     amount: Decimal = Field(
          ..., max_digits=12, decimal_places=2, description="Amount paid (must match the lease rent)"
     )

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "lease_id": "9b0e7f3c-1d2a-4c5b-8e6f-7a8b9c0d1e2f",
                    "amount": 2000.00
               }
          }
     )


class LeaseAgreementResponse(BaseModel):
     """Schema for lease agreement response."""
     id: str
     property_id: str
     tenant: str
     rent: Decimal
     start_date: str
     end_date: str
     created_at: str
     digital_signature: str
     security_deposit: Decimal
     utility_responsibilities: List[str]
     rent_payment_history: List[RentPaymentRecord]
     lease_violations: List[LeaseViolation]
     renewal_status: str

     model_config = ConfigDict(from_attributes=True)
