# services/lease_service.py
"""
Lease Service - lease agreements and their rent payment history.

A lease references an existing tenant and property, and its period must
start strictly before it ends (ISO date strings, compared as text).

Rent payments are appended to the lease's payment history. A payment is
accepted only when the amount equals the lease rent exactly and the lease
has not been marked completed. Completion is never set here: callers move
renewal_status to "completed" through a regular update.
"""
import logging
import threading

from errors import InvalidDate, NotFound, PaymentCompleted, PaymentFailed
from models import LeaseAgreement, Property, Tenant
from schemas.lease_agreement import LeaseAgreementPayload, RentPaymentPayload
from utils.clock import now_iso
from utils.ids import new_id

from .base import RecordService

logger = logging.getLogger(__name__)

PAYMENT_STATUS_COMPLETED = "completed"


class LeaseService(RecordService):
     """Service class for lease agreement records."""

     model = LeaseAgreement
     label = "Lease agreement"
     plural = "lease agreements"
     _lock = threading.Lock()

     def create(self, payload: LeaseAgreementPayload) -> LeaseAgreement:
          """
          Create a lease agreement.

          Checks run in order: required fields, tenant exists, property
          exists, then the lease period.

          Raises:
               InvalidPayload: If a required field is missing or zero
               NotFound: If the tenant or property doesn't exist
               InvalidDate: If start_date doesn't sort before end_date
          """
          self.require(
               (
                    payload.property_id,
                    payload.tenant,
                    payload.rent,
                    payload.start_date,
                    payload.end_date,
                    payload.digital_signature,
                    payload.security_deposit,
               ),
               "Property ID, tenant, rent, start date, end date, digital signature, and security deposit are required",
          )

          # Verify tenant exists
          if self.db.get(Tenant, payload.tenant) is None:
               raise NotFound("Tenant not found")

          # Verify property exists
          if self.db.get(Property, payload.property_id) is None:
               raise NotFound("Property not found")

          if payload.start_date >= payload.end_date:
               raise InvalidDate("Start date must be before end date")

          with self._lock:
               lease = LeaseAgreement(
                    id=new_id(),
                    created_at=now_iso(),
                    rent_payment_history=[],
                    lease_violations=[],
                    **payload.model_dump(),
               )
               return self._insert(lease)

     def record_rent_payment(self, payload: RentPaymentPayload) -> LeaseAgreement:
          """
          Append a completed rent payment to a lease.

          Raises:
               NotFound: If the lease doesn't exist
               PaymentCompleted: If the lease is marked completed
               PaymentFailed: If the amount differs from the lease rent
          """
          with self._lock:
               lease = self.get_by_id(payload.lease_id)

               if lease.is_completed:
                    logger.warning("Rejected payment on completed lease %s", lease.id)
                    raise PaymentCompleted("Lease agreement has already been completed")

               if payload.amount != lease.rent:
                    logger.warning(
                         "Rejected payment of %s on lease %s (rent is %s)",
                         payload.amount, lease.id, lease.rent,
                    )
                    raise PaymentFailed(f"Payment amount does not match the required rent of {lease.rent}")

               payment = {
                    "payment_date": now_iso(),
                    "amount": float(payload.amount),
                    "status": PAYMENT_STATUS_COMPLETED,
               }
               # Assign a new list so the JSON column is flagged dirty
               lease.rent_payment_history = [*lease.rent_payment_history, payment]
               self._save(lease)

          logger.info(
               "Recorded rent payment of %s on lease %s (%d payments)",
               payload.amount, lease.id, len(lease.rent_payment_history),
          )
          return lease
