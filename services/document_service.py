# services/document_service.py
import threading

from errors import NotFound
from models import Document, Property
from schemas.document import DocumentPayload
from utils.ids import new_id

from .base import RecordService


class DocumentService(RecordService):
     """Service class for property documents."""

     model = Document
     label = "Document"
     plural = "documents"
     _lock = threading.Lock()

     # Metadata is validated on creation but never stored
     ignored_fields = {"metadata"}

     def create(self, payload: DocumentPayload) -> Document:
          self.require(
               (payload.document_type, payload.content, payload.metadata.title),
               "Document type, content, and metadata title are required",
          )

          if self.db.get(Property, payload.property_id) is None:
               raise NotFound("Property not found")

          with self._lock:
               document = Document(
                    id=new_id(),
                    **payload.model_dump(exclude=self.ignored_fields),
               )
               return self._insert(document)
