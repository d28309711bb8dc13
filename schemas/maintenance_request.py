# schemas/maintenance_request.py
"""
Pydantic schemas for MaintenanceRequest API request/response validation.
"""
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict


class WorkOrder(BaseModel):
     order_date: str
     contractor: str
     status: str
     notes: str = ""


class MaintenanceRequestPayload(BaseModel):
     """Schema for creating a maintenance request."""
     property_id: str = Field("", max_length=36)
     description: str = ""
     priority: str = Field("", max_length=50, description="e.g. low, medium, high, urgent")
     images: List[str] = Field(default_factory=list)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": "2f1c8a6e-6f8a-4c1e-9b57-0c1f1d0f6b11",
                    "description": "Kitchen sink leaking",
                    "priority": "high",
                    "images": []
               }
          }
     )


class MaintenanceRequestUpdate(MaintenanceRequestPayload):
     """Schema for updating a maintenance request (progress, assignment, costs)."""
     status: Optional[str] = Field(None, max_length=50)
     assigned_to: Optional[str] = Field(None, max_length=255)
     estimated_cost: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     actual_cost: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     completion_date: Optional[str] = Field(None, max_length=32)
     tenant_feedback: Optional[str] = None


class MaintenanceRequestResponse(BaseModel):
     """Schema for maintenance request response."""
     id: str
     property_id: str
     description: str
     status: str
     created_at: str
     priority: str
     assigned_to: str
     estimated_cost: Decimal
     actual_cost: Decimal
     completion_date: str
     tenant_feedback: str
     images: List[str]
     work_orders: List[WorkOrder]

     model_config = ConfigDict(from_attributes=True)
