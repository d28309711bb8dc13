# services/base.py
"""
Shared repository behaviour for the six record tables.

Each service wraps one table: it looks records up by their string id,
enumerates them in key order, merges update payloads over stored rows and
removes rows. Mutations run under the table's lock and commit before the
lock is released, so concurrent read-modify-write sequences on one table
never interleave.
"""
import logging
import threading
from typing import Any, Iterable, List, Optional, Set

from pydantic import BaseModel
from sqlalchemy.orm import Session

from errors import InvalidPayload, NotFound

logger = logging.getLogger(__name__)


class RecordService:
     """Base class for table-backed record services."""

     model: Any = None
     label = "Record"
     plural = "records"
     _lock = threading.Lock()

     # Payload fields never copied onto a stored row
     ignored_fields: Set[str] = set()

     def __init__(self, db: Session):
          self.db = db

     # -----------------------------------------------------------------
     # Lookups
     # -----------------------------------------------------------------

     def find(self, record_id: str) -> Optional[Any]:
          if not record_id:
               return None
          return self.db.get(self.model, record_id)

     def exists(self, record_id: str) -> bool:
          return self.find(record_id) is not None

     def _all(self) -> List[Any]:
          return self.db.query(self.model).order_by(self.model.id).all()

     def get_all(self) -> List[Any]:
          records = self._all()
          if not records:
               raise NotFound(f"No {self.plural} found")
          return records

     def get_by_id(self, record_id: str) -> Any:
          record = self.find(record_id)
          if record is None:
               raise NotFound(f"{self.label} with ID {record_id} not found")
          return record

     def count(self) -> int:
          return self.db.query(self.model).count()

     # -----------------------------------------------------------------
     # Mutations
     # -----------------------------------------------------------------

     def _insert(self, record: Any) -> Any:
          self.db.add(record)
          self.db.commit()
          self.db.refresh(record)
          logger.info("Created %s %s", self.label.lower(), record.id)
          return record

     def _save(self, record: Any) -> Any:
          self.db.commit()
          self.db.refresh(record)
          return record

     def update(self, record_id: str, payload: BaseModel) -> Any:
          """
          Shallow merge: every field the caller sent replaces the stored
          value; everything else on the row is left untouched.
          """
          with self._lock:
               record = self.get_by_id(record_id)
               changes = payload.model_dump(
                    exclude_unset=True,
                    exclude_none=True,
                    exclude=self.ignored_fields,
               )
               for field, value in changes.items():
                    setattr(record, field, value)
               self._save(record)
          logger.info("Updated %s %s (%s)", self.label.lower(), record_id, ", ".join(sorted(changes)) or "no fields")
          return record

     def delete(self, record_id: str) -> None:
          with self._lock:
               record = self.get_by_id(record_id)
               self.db.delete(record)
               self.db.commit()
          logger.info("Deleted %s %s", self.label.lower(), record_id)

     # -----------------------------------------------------------------
     # Validation helpers
     # -----------------------------------------------------------------

     @staticmethod
     def require(values: Iterable[Any], message: str) -> None:
          """
          Raise InvalidPayload when any value is falsy.

          Zero counts as missing, the same as an empty string.
          """
          if not all(values):
               raise InvalidPayload(message)
