# routers/tenants.py
"""
Tenant API routes.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import verify_token
from schemas.tenant import TenantCreate, TenantUpdate, TenantResponse
from services.demo_data import DEMO_TENANTS, or_demo
from services.repository import tenants

router = APIRouter(prefix="/api/tenants", tags=["tenants"], dependencies=[Depends(verify_token)])


@router.get("", response_model=List[TenantResponse], summary="List tenants")
def list_tenants(db: Session = Depends(get_session)):
     return or_demo(tenants.list(db), DEMO_TENANTS)


@router.get("/{tenant_id}", response_model=TenantResponse, summary="Get tenant by ID")
def get_tenant(tenant_id: str, db: Session = Depends(get_session)):
     return tenants.require(db, tenant_id)


@router.post(
     "",
     response_model=TenantResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new tenant"
)
def create_tenant(tenant_data: TenantCreate, db: Session = Depends(get_session)):
     """Email must not belong to another tenant."""
     return tenants.create(db, tenant_data)


@router.put("/{tenant_id}", response_model=TenantResponse, summary="Update tenant")
def update_tenant(tenant_id: str, tenant_data: TenantUpdate, db: Session = Depends(get_session)):
     return tenants.update(db, tenant_id, tenant_data)


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete tenant")
def delete_tenant(tenant_id: str, db: Session = Depends(get_session)):
     tenants.delete(db, tenant_id)
     return None
