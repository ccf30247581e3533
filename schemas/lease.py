# schemas/lease.py
"""
Pydantic schemas for Lease API request/response validation.
"""
from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import Field, ConfigDict, model_validator

from models.lease import LeaseStatus
from .common import CamelModel, RecordResponse


class LeaseCreate(CamelModel):
     """Schema for creating a new lease."""
     property_id: str = Field(..., min_length=1, description="Property ID (must exist)")
     tenant_id: str = Field(..., min_length=1, description="Tenant ID (must exist)")
     start_date: date
     end_date: date
     monthly_rent: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
     status: LeaseStatus = Field(default=LeaseStatus.UPCOMING)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "propertyId": "prop-1",
                    "tenantId": "tenant-1",
                    "startDate": "2024-02-01",
                    "endDate": "2025-01-31",
                    "monthlyRent": 2800.00,
                    "status": "ACTIVE"
               }
          }
     )

     @model_validator(mode="after")
     def check_period(self) -> "LeaseCreate":
          if self.start_date > self.end_date:
               raise ValueError("startDate must be on or before endDate")
          return self


class LeaseUpdate(CamelModel):
     """Schema for updating a lease. Only provided fields change."""
     property_id: Optional[str] = Field(None, min_length=1)
     tenant_id: Optional[str] = Field(None, min_length=1)
     start_date: Optional[date] = None
     end_date: Optional[date] = None
     monthly_rent: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
     status: Optional[LeaseStatus] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "status": "ACTIVE"
               }
          }
     )


class LeaseResponse(RecordResponse):
     property_id: str
     tenant_id: str
     start_date: date
     end_date: date
     monthly_rent: Decimal
     status: LeaseStatus
