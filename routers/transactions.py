# routers/transactions.py
from typing import List
from fastapi import APIRouter, Depends, status

from dependencies import get_caller, get_transaction_service
from schemas.financial_transaction import FinancialTransactionPayload, FinancialTransactionResponse
from services import FinancialTransactionService

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


@router.post(
     "",
     response_model=FinancialTransactionResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a financial transaction"
)
def create_financial_transaction(
     payload: FinancialTransactionPayload,
     service: FinancialTransactionService = Depends(get_transaction_service),
     caller: str = Depends(get_caller),
):
     return service.create(payload, recorded_by=caller)


@router.get("", response_model=List[FinancialTransactionResponse], summary="List all transactions")
def get_all_financial_transactions(
     service: FinancialTransactionService = Depends(get_transaction_service),
):
     return service.get_all()


@router.get(
     "/property/{property_id}",
     response_model=List[FinancialTransactionResponse],
     summary="List transactions for a property"
)
def get_transactions_by_property_id(
     property_id: str,
     service: FinancialTransactionService = Depends(get_transaction_service),
):
     return service.get_by_property_id(property_id)


@router.get(
     "/{transaction_id}",
     response_model=FinancialTransactionResponse,
     summary="Get a transaction"
)
def get_financial_transaction_by_id(
     transaction_id: str,
     service: FinancialTransactionService = Depends(get_transaction_service),
):
     return service.get_by_id(transaction_id)
