# models/__init__.py
from .base import Base
from .property import Property, PROPERTY_TYPES
from .tenant import Tenant
from .lease_agreement import LeaseAgreement, RENEWAL_COMPLETED
from .financial_transaction import FinancialTransaction
from .maintenance_request import MaintenanceRequest
from .document import Document

__all__ = [
     "Base",
     "Property",
     "PROPERTY_TYPES",
     "Tenant",
     "LeaseAgreement",
     "RENEWAL_COMPLETED",
     "FinancialTransaction",
     "MaintenanceRequest",
     "Document",
]
