# routers/properties.py
"""
Property API routes.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import verify_token
from schemas.property import PropertyCreate, PropertyUpdate, PropertyResponse
from services.demo_data import DEMO_PROPERTIES, or_demo
from services.repository import properties

router = APIRouter(prefix="/api/properties", tags=["properties"], dependencies=[Depends(verify_token)])


@router.get("", response_model=List[PropertyResponse], summary="List properties")
def list_properties(db: Session = Depends(get_session)):
     """All properties, newest first. Demo rows are shown while none exist."""
     return or_demo(properties.list(db), DEMO_PROPERTIES)


@router.get("/{property_id}", response_model=PropertyResponse, summary="Get property by ID")
def get_property(property_id: str, db: Session = Depends(get_session)):
     return properties.require(db, property_id)


@router.post(
     "",
     response_model=PropertyResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new property"
)
def create_property(property_data: PropertyCreate, db: Session = Depends(get_session)):
     """
     Create a property.

     - **bathrooms**: half steps allowed (2.5)
     - **rentAmount**: asking monthly rent, must be positive
     """
     return properties.create(db, property_data)


@router.put("/{property_id}", response_model=PropertyResponse, summary="Update property")
def update_property(property_id: str, property_data: PropertyUpdate, db: Session = Depends(get_session)):
     """Only provided fields are updated."""
     return properties.update(db, property_id, property_data)


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete property")
def delete_property(property_id: str, db: Session = Depends(get_session)):
     properties.delete(db, property_id)
     return None
