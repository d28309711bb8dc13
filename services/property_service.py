# services/property_service.py
"""
Property Service - business logic for the properties table.
"""
import threading
from typing import List

from errors import InvalidPayload, NotFound
from models import Property, PROPERTY_TYPES
from schemas.property import PropertyPayload
from utils.clock import now_iso
from utils.ids import new_id

from .base import RecordService

TAX_DETAILS_REQUIRED = "Annual amount, last paid date, and next due date are required for tax details"


class PropertyService(RecordService):
     """Service class for property records."""

     model = Property
     label = "Property"
     plural = "properties"
     _lock = threading.Lock()

     def create(self, payload: PropertyPayload, owner: str) -> Property:
          """
          Create a property owned by the calling identity.

          Raises:
               InvalidPayload: If a required field is missing or zero, the
                    property type is unknown, or tax details are incomplete
          """
          self.require(
               (
                    payload.address,
                    payload.valuation,
                    payload.status,
                    payload.square_footage,
                    payload.bedrooms,
                    payload.bathrooms,
               ),
               "Address, valuation, status, square footage, bedrooms, and bathrooms are required",
          )

          if payload.property_type not in PROPERTY_TYPES:
               raise InvalidPayload("Property type must be either 'residential' or 'commercial'")

          tax = payload.tax_details
          if tax is None:
               raise InvalidPayload(TAX_DETAILS_REQUIRED)
          self.require((tax.annual_amount, tax.last_paid_date, tax.next_due_date), TAX_DETAILS_REQUIRED)

          now = now_iso()
          with self._lock:
               prop = Property(
                    id=new_id(),
                    owner=owner,
                    created_at=now,
                    last_inspection_date=now,
                    **payload.model_dump(),
               )
               return self._insert(prop)

     def get_by_type(self, property_type: str) -> List[Property]:
          properties = [p for p in self._all() if p.property_type == property_type]
          if not properties:
               raise NotFound(f"No {property_type} properties found")
          return properties
