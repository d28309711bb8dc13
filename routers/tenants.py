# routers/tenants.py
from typing import List
from fastapi import APIRouter, Depends, status

from dependencies import get_tenant_service
from schemas.tenant import TenantPayload, TenantResponse
from services import TenantService

router = APIRouter(prefix="/api/tenants", tags=["tenants"])


@router.post(
     "",
     response_model=TenantResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new tenant"
)
def create_tenant(payload: TenantPayload, service: TenantService = Depends(get_tenant_service)):
     return service.create(payload)


@router.get("", response_model=List[TenantResponse], summary="List all tenants")
def get_all_tenants(service: TenantService = Depends(get_tenant_service)):
     return service.get_all()


@router.get("/{tenant_id}", response_model=TenantResponse, summary="Get a tenant")
def get_tenant_by_id(tenant_id: str, service: TenantService = Depends(get_tenant_service)):
     return service.get_by_id(tenant_id)
