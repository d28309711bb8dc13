# schemas/tenant.py
"""
Pydantic schemas for Tenant API request/response validation.
"""
from typing import List
from pydantic import BaseModel, Field, ConfigDict


class RentalHistoryEntry(BaseModel):
     """A previous tenancy. Every field must be sent."""
     previous_address: str
     landlord_contact: str
     duration: str


class TenantPayload(BaseModel):
     """Schema for creating a tenant."""
     name: str = Field("", max_length=200)
     email: str = Field("", max_length=255)
     phone: str = Field("", max_length=50)
     emergency_contact: str = Field("", max_length=255)
     background_check_status: str = Field("", max_length=50)
     credit_score: int = Field(0, ge=0)
     rental_history: List[RentalHistoryEntry] = Field(default_factory=list)
     payment_preferences: str = Field("", max_length=255)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Maria Santos",
                    "email": "maria@example.com",
                    "phone": "+63 917 555 0101",
                    "emergency_contact": "Jose Santos +63 917 555 0102",
                    "background_check_status": "cleared",
                    "credit_score": 720,
                    "rental_history": [
                         {
                              "previous_address": "8 Mango Ave",
                              "landlord_contact": "landlord@example.com",
                              "duration": "2 years"
                         }
                    ],
                    "payment_preferences": "bank transfer"
               }
          }
     )


class TenantResponse(BaseModel):
     """Schema for tenant response."""
     id: str
     name: str
     email: str
     phone: str
     emergency_contact: str
     background_check_status: str
     credit_score: int
     rental_history: List[RentalHistoryEntry]
     payment_preferences: str

     model_config = ConfigDict(from_attributes=True)
