# errors.py
"""
Error taxonomy for the records backend.

Services raise RecordError subclasses; register_error_handlers() turns them
into tagged values on the way out, so every failed request answers with

     {"Err": {"<Kind>": "<human readable message>"}}
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RecordError(Exception):
     """Base class for every error a record operation can return."""
     kind = "Error"
     status_code = status.HTTP_400_BAD_REQUEST

     def __init__(self, message: str):
          super().__init__(message)
          self.message = message

     def to_dict(self) -> dict:
          return {"Err": {self.kind: self.message}}


class NotFound(RecordError):
     kind = "NotFound"
     status_code = status.HTTP_404_NOT_FOUND


class InvalidPayload(RecordError):
     kind = "InvalidPayload"


class InvalidDate(RecordError):
     kind = "InvalidDate"


class PaymentFailed(RecordError):
     kind = "PaymentFailed"


class PaymentCompleted(RecordError):
     kind = "PaymentCompleted"
     status_code = status.HTTP_409_CONFLICT


def _format_validation_errors(exc: RequestValidationError) -> str:
     parts = []
     for error in exc.errors():
          location = ".".join(str(loc) for loc in error.get("loc", ()) if loc != "body")
          parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
     return "; ".join(parts) or "Invalid payload"


def register_error_handlers(app: FastAPI) -> None:
     @app.exception_handler(RecordError)
     async def record_error(request: Request, exc: RecordError):
          return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

     @app.exception_handler(RequestValidationError)
     async def validation_error(request: Request, exc: RequestValidationError):
          error = InvalidPayload(_format_validation_errors(exc))
          return JSONResponse(status_code=error.status_code, content=error.to_dict())

     @app.exception_handler(404)
     async def route_not_found(request: Request, exc: Exception):
          error = NotFound("Route not found")
          return JSONResponse(status_code=error.status_code, content=error.to_dict())
