# services/maintenance_service.py
import threading
from decimal import Decimal

from errors import NotFound
from models import MaintenanceRequest, Property
from schemas.maintenance_request import MaintenanceRequestPayload
from utils.clock import now_iso
from utils.ids import new_id

from .base import RecordService

DEFAULT_STATUS = "pending"


class MaintenanceService(RecordService):
     """Service class for maintenance requests. Requests are never deleted."""

     model = MaintenanceRequest
     label = "Maintenance request"
     plural = "maintenance requests"
     _lock = threading.Lock()

     def create(self, payload: MaintenanceRequestPayload) -> MaintenanceRequest:
          """
          Open a maintenance request against an existing property.

          New requests start pending, unassigned and with zero costs.
          """
          self.require(
               (payload.property_id, payload.description, payload.priority),
               "Property ID, description, and priority are required",
          )

          if self.db.get(Property, payload.property_id) is None:
               raise NotFound("Property not found")

          with self._lock:
               request = MaintenanceRequest(
                    id=new_id(),
                    created_at=now_iso(),
                    status=DEFAULT_STATUS,
                    assigned_to="",
                    estimated_cost=Decimal("0"),
                    actual_cost=Decimal("0"),
                    completion_date="",
                    tenant_feedback="",
                    work_orders=[],
                    **payload.model_dump(),
               )
               return self._insert(request)
