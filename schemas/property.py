# schemas/property.py
"""
Pydantic schemas for Property API request/response validation.
"""
from decimal import Decimal
from typing import Optional
from pydantic import Field, ConfigDict, field_validator

from .common import CamelModel, RecordResponse, is_half_step


class PropertyCreate(CamelModel):
     """Schema for creating a new property."""
     address: str = Field(..., min_length=1, description="Street address")
     city: str = Field(..., min_length=1, max_length=100)
     state: str = Field(..., min_length=1, max_length=50)
     zip_code: str = Field(..., min_length=1, max_length=20)
     bedrooms: int = Field(..., ge=0)
     bathrooms: Decimal = Field(..., ge=0, max_digits=3, decimal_places=1, description="Half baths allowed")
     rent_amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2, description="Asking monthly rent")
     description: Optional[str] = None
     image_url: Optional[str] = Field(None, max_length=500)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "address": "2847 Maple Grove Avenue",
                    "city": "Austin",
                    "state": "TX",
                    "zipCode": "78704",
                    "bedrooms": 3,
                    "bathrooms": 2.5,
                    "rentAmount": 2800.00
               }
          }
     )

     @field_validator("bathrooms")
     @classmethod
     def bathrooms_in_half_steps(cls, value: Decimal) -> Decimal:
          if not is_half_step(value):
               raise ValueError("bathrooms must be a multiple of 0.5")
          return value


class PropertyUpdate(CamelModel):
     """Schema for updating a property. Only provided fields change."""
     address: Optional[str] = Field(None, min_length=1)
     city: Optional[str] = Field(None, min_length=1, max_length=100)
     state: Optional[str] = Field(None, min_length=1, max_length=50)
     zip_code: Optional[str] = Field(None, min_length=1, max_length=20)
     bedrooms: Optional[int] = Field(None, ge=0)
     bathrooms: Optional[Decimal] = Field(None, ge=0, max_digits=3, decimal_places=1)
     rent_amount: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
     description: Optional[str] = None
     image_url: Optional[str] = Field(None, max_length=500)


class PropertyResponse(RecordResponse):
     """Schema for property response."""
     address: str
     city: str
     state: str
     zip_code: str
     bedrooms: int
     bathrooms: Decimal
     rent_amount: Decimal
     description: Optional[str] = None
     image_url: Optional[str] = None
