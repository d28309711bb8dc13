# services/__init__.py
from .base import RecordService
from .property_service import PropertyService
from .tenant_service import TenantService
from .lease_service import LeaseService
from .financial_transaction_service import FinancialTransactionService
from .maintenance_service import MaintenanceService
from .document_service import DocumentService

__all__ = [
     "RecordService",
     "PropertyService",
     "TenantService",
     "LeaseService",
     "FinancialTransactionService",
     "MaintenanceService",
     "DocumentService",
]
