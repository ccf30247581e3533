# routers/leases.py
"""
Lease API routes.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import verify_token
from schemas.lease import LeaseCreate, LeaseUpdate, LeaseResponse
from services.demo_data import DEMO_LEASES, or_demo
from services.repository import leases

router = APIRouter(prefix="/api/leases", tags=["leases"], dependencies=[Depends(verify_token)])


@router.get("", response_model=List[LeaseResponse], summary="List leases")
def list_leases(db: Session = Depends(get_session)):
     return or_demo(leases.list(db), DEMO_LEASES)


@router.get("/{lease_id}", response_model=LeaseResponse, summary="Get lease by ID")
def get_lease(lease_id: str, db: Session = Depends(get_session)):
     return leases.require(db, lease_id)


@router.post(
     "",
     response_model=LeaseResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new lease"
)
def create_lease(lease_data: LeaseCreate, db: Session = Depends(get_session)):
     """
     Create a lease between a tenant and a property.

     - **propertyId** / **tenantId**: must exist
     - **startDate** must not be after **endDate**
     - **status**: defaults to UPCOMING
     """
     return leases.create(db, lease_data)


@router.put("/{lease_id}", response_model=LeaseResponse, summary="Update lease")
def update_lease(lease_id: str, lease_data: LeaseUpdate, db: Session = Depends(get_session)):
     """
     Update an existing lease. Only provided fields are updated; the merged
     lease is validated again (e.g. the period must stay valid).
     """
     return leases.update(db, lease_id, lease_data)


@router.delete("/{lease_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete lease")
def delete_lease(lease_id: str, db: Session = Depends(get_session)):
     leases.delete(db, lease_id)
     return None
