# services/financial_transaction_service.py
import threading
from typing import List

from errors import NotFound
from models import FinancialTransaction, Property
from schemas.financial_transaction import FinancialTransactionPayload
from utils.clock import now_iso
from utils.ids import new_id

from .base import RecordService


class FinancialTransactionService(RecordService):
     """Transactions are append-only: create, list, fetch and filter by property."""

     model = FinancialTransaction
     label = "Financial transaction"
     plural = "financial transactions"
     _lock = threading.Lock()

     def create(self, payload: FinancialTransactionPayload, recorded_by: str) -> FinancialTransaction:
          self.require(
               (
                    payload.property_id,
                    payload.amount,
                    payload.transaction_type,
                    payload.description,
                    payload.category,
                    payload.payment_method,
               ),
               "Property ID, amount, transaction_type, description, category, and payment method are required",
          )

          if self.db.get(Property, payload.property_id) is None:
               raise NotFound("Property not found")

          with self._lock:
               transaction = FinancialTransaction(
                    id=new_id(),
                    recorded_by=recorded_by,
                    date=now_iso(),
                    **payload.model_dump(),
               )
               return self._insert(transaction)

     def get_by_property_id(self, property_id: str) -> List[FinancialTransaction]:
          """
          All transactions booked against a property.

          The property itself may have been deleted since; its transactions stay.
          """
          transactions = [t for t in self._all() if t.property_id == property_id]
          if not transactions:
               raise NotFound(f"No transactions found for property {property_id}")
          return transactions
