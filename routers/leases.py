# routers/leases.py
"""
Lease agreement API routes.

POST /api/leases/payments records a rent payment: the amount must equal the
lease rent and the lease must not be marked completed.
"""
from typing import List
from fastapi import APIRouter, Depends, status

from dependencies import get_lease_service
from schemas.lease_agreement import (
     LeaseAgreementPayload,
     LeaseAgreementUpdate,
     LeaseAgreementResponse,
     RentPaymentPayload,
)
from services import LeaseService

router = APIRouter(prefix="/api/leases", tags=["leases"])


@router.post(
     "",
     response_model=LeaseAgreementResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new lease agreement"
)
def create_lease_agreement(
     payload: LeaseAgreementPayload,
     service: LeaseService = Depends(get_lease_service),
):
     """
     Create a lease between an existing tenant and property.

     - **tenant** / **property_id**: must exist (404 otherwise)
     - **start_date**: must sort strictly before **end_date** (InvalidDate otherwise)
     """
     return service.create(payload)


@router.get("", response_model=List[LeaseAgreementResponse], summary="List all lease agreements")
def get_all_lease_agreements(service: LeaseService = Depends(get_lease_service)):
     return service.get_all()


@router.post(
     "/payments",
     response_model=LeaseAgreementResponse,
     summary="Record a rent payment"
)
def record_rent_payment(
     payload: RentPaymentPayload,
     service: LeaseService = Depends(get_lease_service),
):
     """
     Append a completed payment to the lease's payment history.

     Answers PaymentCompleted (409) when renewal_status is `completed`, and
     PaymentFailed (400) when the amount differs from the rent.
     """
     return service.record_rent_payment(payload)


@router.get("/{lease_id}", response_model=LeaseAgreementResponse, summary="Get a lease agreement")
def get_lease_agreement_by_id(lease_id: str, service: LeaseService = Depends(get_lease_service)):
     return service.get_by_id(lease_id)


@router.put("/{lease_id}", response_model=LeaseAgreementResponse, summary="Update a lease agreement")
def update_lease_agreement(
     lease_id: str,
     payload: LeaseAgreementUpdate,
     service: LeaseService = Depends(get_lease_service),
):
     """
     Replace the fields present in the body. Payment history and violations
     are kept unless sent explicitly.
     """
     return service.update(lease_id, payload)


@router.delete("/{lease_id}", response_model=None, summary="Delete a lease agreement")
def delete_lease_agreement(lease_id: str, service: LeaseService = Depends(get_lease_service)):
     service.delete(lease_id)
     return None
