# routers/properties.py
"""
Property API routes.

Provides create / read / update / delete for properties plus a filter by
property type. Failures answer {"Err": {"<Kind>": "<message>"}}.
"""
from typing import List
from fastapi import APIRouter, Depends, status

from dependencies import get_caller, get_property_service
from schemas.property import PropertyPayload, PropertyResponse
from services import PropertyService

router = APIRouter(prefix="/api/properties", tags=["properties"])


@router.post(
     "",
     response_model=PropertyResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new property"
)
def create_property(
     payload: PropertyPayload,
     service: PropertyService = Depends(get_property_service),
     caller: str = Depends(get_caller),
):
     """
     Create a property owned by the caller.

     - **property_type**: must be `residential` or `commercial`
     - **tax_details**: annual amount, last paid date and next due date are all required
     - zero counts as missing for valuation, square footage, bedrooms and bathrooms
     """
     return service.create(payload, owner=caller)


@router.get("", response_model=List[PropertyResponse], summary="List all properties")
def get_all_properties(service: PropertyService = Depends(get_property_service)):
     return service.get_all()


@router.get(
     "/type/{property_type}",
     response_model=List[PropertyResponse],
     summary="List properties of one type"
)
def get_properties_by_type(
     property_type: str,
     service: PropertyService = Depends(get_property_service),
):
     return service.get_by_type(property_type)


@router.get("/{property_id}", response_model=PropertyResponse, summary="Get a property")
def get_property_by_id(property_id: str, service: PropertyService = Depends(get_property_service)):
     return service.get_by_id(property_id)


@router.put("/{property_id}", response_model=PropertyResponse, summary="Update a property")
def update_property(
     property_id: str,
     payload: PropertyPayload,
     service: PropertyService = Depends(get_property_service),
):
     """
     Replace the fields present in the body; other stored fields are kept.
     Sent tax_details must be complete and replace the whole sub-record.
     """
     return service.update(property_id, payload)


@router.delete("/{property_id}", response_model=None, summary="Delete a property")
def delete_property(property_id: str, service: PropertyService = Depends(get_property_service)):
     """
     Remove a property. Leases, transactions, maintenance requests and
     documents that reference it are left as they are.
     """
     service.delete(property_id)
     return None
