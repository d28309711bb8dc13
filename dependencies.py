# dependencies.py
"""
FastAPI dependencies shared by the routers.

- get_caller: identity string of the caller, recorded on created rows
- get_*_service: one service per request, bound to the request's session
"""
import os

from fastapi import Depends, HTTPException, Request, status
from jose import JWTError, jwt
from sqlalchemy.orm import Session
from dotenv import load_dotenv

from database import get_session
from services import (
     DocumentService,
     FinancialTransactionService,
     LeaseService,
     MaintenanceService,
     PropertyService,
     TenantService,
)

load_dotenv()
SECRET_KEY = os.getenv("JWT_SECRET")
ALGORITHM = "HS256"

ANONYMOUS_CALLER = "anonymous"
CALLER_HEADER = "X-Caller-Id"


def get_caller(request: Request) -> str:
     """
     Resolve the caller identity.

     A bearer token wins (its "sub" claim, else "id"), then the X-Caller-Id
     header, then the anonymous identity. The identity is recorded only,
     never checked against anything.
     """
     auth = request.headers.get("Authorization")
     if auth and auth.startswith("Bearer "):
          token = auth.split(" ", 1)[1]
          if not SECRET_KEY:
               raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")
          try:
               payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
          except JWTError:
               raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")
          caller = payload.get("sub") or payload.get("id")
          if caller is None:
               raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")
          return str(caller)

     return request.headers.get(CALLER_HEADER) or ANONYMOUS_CALLER


def get_property_service(db: Session = Depends(get_session)) -> PropertyService:
     return PropertyService(db)


def get_tenant_service(db: Session = Depends(get_session)) -> TenantService:
     return TenantService(db)


def get_lease_service(db: Session = Depends(get_session)) -> LeaseService:
     return LeaseService(db)


def get_transaction_service(db: Session = Depends(get_session)) -> FinancialTransactionService:
     return FinancialTransactionService(db)


def get_maintenance_service(db: Session = Depends(get_session)) -> MaintenanceService:
     return MaintenanceService(db)


def get_document_service(db: Session = Depends(get_session)) -> DocumentService:
     return DocumentService(db)
