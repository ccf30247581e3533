# schemas/maintenance.py
"""
Pydantic schemas for maintenance request validation.
"""
from datetime import datetime
from typing import Optional
from pydantic import Field, ConfigDict, model_validator

from models.maintenance_request import MaintenanceStatus, MaintenancePriority
from .common import CamelModel, RecordResponse


class MaintenanceRequestCreate(CamelModel):
     """Schema for reporting a maintenance issue. reportedDate is set by the server."""
     property_id: str = Field(..., min_length=1)
     tenant_id: str = Field(..., min_length=1)
     description: str = Field(..., min_length=1)
     status: MaintenanceStatus = Field(default=MaintenanceStatus.PENDING)
     priority: MaintenancePriority = Field(default=MaintenancePriority.MEDIUM)
     completed_date: Optional[datetime] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "propertyId": "prop-2",
                    "tenantId": "tenant-2",
                    "description": "Heating system not working properly.",
                    "priority": "HIGH"
               }
          }
     )

     @model_validator(mode="after")
     def completed_needs_date(self) -> "MaintenanceRequestCreate":
          if self.status == MaintenanceStatus.COMPLETED and self.completed_date is None:
               raise ValueError("completedDate is required when status is COMPLETED")
          return self


class MaintenanceRequestUpdate(CamelModel):
     property_id: Optional[str] = Field(None, min_length=1)
     tenant_id: Optional[str] = Field(None, min_length=1)
     description: Optional[str] = Field(None, min_length=1)
     status: Optional[MaintenanceStatus] = None
     priority: Optional[MaintenancePriority] = None
     completed_date: Optional[datetime] = None


class MaintenanceRequestResponse(RecordResponse):
     property_id: str
     tenant_id: str
     description: str
     status: MaintenanceStatus
     priority: MaintenancePriority
     reported_date: Optional[datetime] = None
     completed_date: Optional[datetime] = None
