# schemas/property.py
"""
Pydantic schemas for Property API request/response validation.

Payload fields default to empty values on purpose: a missing field is
reported by the property service as InvalidPayload, not by the framework.
Tax details are the exception: a sent sub-record must be complete.
"""
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict


class TaxDetails(BaseModel):
     """Property tax sub-record."""
     annual_amount: float
     last_paid_date: str
     next_due_date: str


class PropertyPayload(BaseModel):
     """Schema for creating or updating a property."""
     address: str = Field("", max_length=255)
     valuation: Decimal = Field(Decimal(0), max_digits=12, decimal_places=2)
     status: str = Field("", max_length=50)
     square_footage: float = 0
     bedrooms: int = Field(0, ge=0)
     bathrooms: float = 0
     amenities: List[str] = Field(default_factory=list)
     images: List[str] = Field(default_factory=list)
     property_type: str = Field("", max_length=20, description="residential or commercial")
     insurance_info: str = ""
     tax_details: Optional[TaxDetails] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "address": "12 Harbor View, Cebu City",
                    "valuation": 350000.00,
                    "status": "available",
                    "square_footage": 1200,
                    "bedrooms": 3,
                    "bathrooms": 2,
                    "amenities": ["parking", "pool"],
                    "images": [],
                    "property_type": "residential",
                    "insurance_info": "Policy 42-A",
                    "tax_details": {
                         "annual_amount": 4200.00,
                         "last_paid_date": "2024-01-15",
                         "next_due_date": "2025-01-15"
                    }
               }
          }
     )


class PropertyResponse(BaseModel):
     """Schema for property response."""
     id: str
     address: str
     owner: str
     valuation: Decimal
     status: str
     created_at: str
     square_footage: float
     bedrooms: int
     bathrooms: float
     amenities: List[str]
     images: List[str]
     property_type: str
     last_inspection_date: str
     insurance_info: str
     tax_details: TaxDetails

     model_config = ConfigDict(from_attributes=True)
