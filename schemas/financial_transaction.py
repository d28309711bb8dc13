# schemas/financial_transaction.py
"""
Pydantic schemas for FinancialTransaction API request/response validation.
"""
from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict


class FinancialTransactionPayload(BaseModel):
     """Schema for recording a financial transaction."""
     property_id: str = Field("", max_length=36)
     amount: Decimal = Field(Decimal(0), max_digits=12, decimal_places=2)
     transaction_type: str = Field("", max_length=50)
     description: str = ""
     category: str = Field("", max_length=100)
     payment_method: str = Field("", max_length=50)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": "2f1c8a6e-6f8a-4c1e-9b57-0c1f1d0f6b11",
                    "amount": 2000.00,
                    "transaction_type": "income",
                    "description": "January rent",
                    "category": "rent",
                    "payment_method": "bank transfer"
               }
          }
     )


class FinancialTransactionResponse(BaseModel):
     """Schema for financial transaction response."""
     id: str
     property_id: str
     date: str
     amount: Decimal
     transaction_type: str
     description: str
     category: str
     payment_method: str
     recorded_by: str

     model_config = ConfigDict(from_attributes=True)
