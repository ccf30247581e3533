# routers/maintenance.py
"""
Maintenance request API routes.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import verify_token
from schemas.maintenance import (
     MaintenanceRequestCreate,
     MaintenanceRequestUpdate,
     MaintenanceRequestResponse,
)
from services.demo_data import DEMO_MAINTENANCE_REQUESTS, demo_high_priority_requests, or_demo
from services.maintenance_service import MaintenanceService
from services.repository import maintenance_requests

router = APIRouter(
     prefix="/api/maintenance-requests",
     tags=["maintenance"],
     dependencies=[Depends(verify_token)],
)


@router.get("", response_model=List[MaintenanceRequestResponse], summary="List maintenance requests")
def list_requests(db: Session = Depends(get_session)):
     return or_demo(maintenance_requests.list(db), DEMO_MAINTENANCE_REQUESTS)


@router.get(
     "/high-priority",
     response_model=List[MaintenanceRequestResponse],
     summary="List open high-priority requests"
)
def list_high_priority_requests(db: Session = Depends(get_session)):
     """HIGH priority requests still PENDING or IN_PROGRESS, newest first."""
     return or_demo(MaintenanceService.high_priority_requests(db), demo_high_priority_requests())


@router.get("/{request_id}", response_model=MaintenanceRequestResponse, summary="Get request by ID")
def get_request(request_id: str, db: Session = Depends(get_session)):
     return maintenance_requests.require(db, request_id)


@router.post(
     "",
     response_model=MaintenanceRequestResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Report a maintenance issue"
)
def create_request(request_data: MaintenanceRequestCreate, db: Session = Depends(get_session)):
     """
     - **propertyId** / **tenantId**: must exist
     - **priority**: LOW, MEDIUM (default) or HIGH
     - **reportedDate** is set by the server
     """
     return maintenance_requests.create(db, request_data)


@router.put("/{request_id}", response_model=MaintenanceRequestResponse, summary="Update request")
def update_request(request_id: str, request_data: MaintenanceRequestUpdate, db: Session = Depends(get_session)):
     """Setting status COMPLETED requires completedDate (or use /complete)."""
     return maintenance_requests.update(db, request_id, request_data)


@router.patch("/{request_id}/complete", response_model=MaintenanceRequestResponse, summary="Complete request")
def complete_request(request_id: str, db: Session = Depends(get_session)):
     return MaintenanceService.complete_request(db, request_id)


@router.delete("/{request_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete request")
def delete_request(request_id: str, db: Session = Depends(get_session)):
     maintenance_requests.delete(db, request_id)
     return None
