# schemas/tenant.py
"""
Pydantic schemas for Tenant API request/response validation.
"""
from typing import Optional
from pydantic import Field, ConfigDict

from .common import CamelModel, RecordResponse

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class TenantCreate(CamelModel):
     """Schema for creating a new tenant."""
     name: str = Field(..., min_length=1, max_length=200)
     email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN, description="Must be unique")
     phone: Optional[str] = Field(None, max_length=50)
     user_id: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Sarah Johnson",
                    "email": "sarah.johnson@email.com",
                    "phone": "(512) 555-0123"
               }
          }
     )


class TenantUpdate(CamelModel):
     name: Optional[str] = Field(None, min_length=1, max_length=200)
     email: Optional[str] = Field(None, max_length=255, pattern=EMAIL_PATTERN)
     phone: Optional[str] = Field(None, max_length=50)
     user_id: Optional[str] = None


class TenantResponse(RecordResponse):
     name: str
     email: str
     phone: Optional[str] = None
     user_id: Optional[str] = None
