# services/tenant_service.py
import threading

from models import Tenant
from schemas.tenant import TenantPayload
from utils.ids import new_id

from .base import RecordService


class TenantService(RecordService):
     """Tenants are created and read; the API exposes no update or delete."""

     model = Tenant
     label = "Tenant"
     plural = "tenants"
     _lock = threading.Lock()

     def create(self, payload: TenantPayload) -> Tenant:
          self.require(
               (
                    payload.name,
                    payload.email,
                    payload.phone,
                    payload.background_check_status,
                    payload.credit_score,
               ),
               "Name, email, phone, background check status, and credit score are required",
          )

          with self._lock:
               return self._insert(Tenant(id=new_id(), **payload.model_dump()))
