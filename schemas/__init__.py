# schemas/__init__.py
from .property import TaxDetails, PropertyPayload, PropertyResponse
from .tenant import RentalHistoryEntry, TenantPayload, TenantResponse
from .lease_agreement import (
     RentPaymentRecord,
     LeaseViolation,
     LeaseAgreementPayload,
     LeaseAgreementUpdate,
     RentPaymentPayload,
     LeaseAgreementResponse,
)
from .financial_transaction import FinancialTransactionPayload, FinancialTransactionResponse
from .maintenance_request import (
     WorkOrder,
     MaintenanceRequestPayload,
     MaintenanceRequestUpdate,
     MaintenanceRequestResponse,
)
from .document import DocumentMetadata, DocumentPayload, DocumentResponse

__all__ = [
     "TaxDetails",
     "PropertyPayload",
     "PropertyResponse",
     "RentalHistoryEntry",
     "TenantPayload",
     "TenantResponse",
     "RentPaymentRecord",
     "LeaseViolation",
     "LeaseAgreementPayload",
     "LeaseAgreementUpdate",
     "RentPaymentPayload",
     "LeaseAgreementResponse",
     "FinancialTransactionPayload",
     "FinancialTransactionResponse",
     "WorkOrder",
     "MaintenanceRequestPayload",
     "MaintenanceRequestUpdate",
     "MaintenanceRequestResponse",
     "DocumentMetadata",
     "DocumentPayload",
     "DocumentResponse",
]
