# routers/maintenance.py
from typing import List
from fastapi import APIRouter, Depends, status

from dependencies import get_maintenance_service
from schemas.maintenance_request import (
     MaintenanceRequestPayload,
     MaintenanceRequestUpdate,
     MaintenanceRequestResponse,
)
from services import MaintenanceService

router = APIRouter(prefix="/api/maintenance-requests", tags=["maintenance"])


@router.post(
     "",
     response_model=MaintenanceRequestResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Submit a maintenance request"
)
def create_maintenance_request(
     payload: MaintenanceRequestPayload,
     service: MaintenanceService = Depends(get_maintenance_service),
):
     return service.create(payload)


@router.get("", response_model=List[MaintenanceRequestResponse], summary="List maintenance requests")
def get_all_maintenance_requests(service: MaintenanceService = Depends(get_maintenance_service)):
     return service.get_all()


@router.get(
     "/{request_id}",
     response_model=MaintenanceRequestResponse,
     summary="Get a maintenance request"
)
def get_maintenance_request_by_id(
     request_id: str,
     service: MaintenanceService = Depends(get_maintenance_service),
):
     return service.get_by_id(request_id)


@router.put(
     "/{request_id}",
     response_model=MaintenanceRequestResponse,
     summary="Update a maintenance request"
)
def update_maintenance_request(
     request_id: str,
     payload: MaintenanceRequestUpdate,
     service: MaintenanceService = Depends(get_maintenance_service),
):
     """Progress a request: status, assignment, costs, completion and feedback."""
     return service.update(request_id, payload)
