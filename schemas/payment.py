# schemas/payment.py
"""
Pydantic schemas for Payment API request/response validation.
"""
from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import Field, ConfigDict, model_validator

from models.payment import PaymentStatus
from .common import CamelModel, RecordResponse


class PaymentCreate(CamelModel):
     """Schema for recording a rent installment."""
     lease_id: str = Field(..., min_length=1, description="Lease ID (must exist)")
     amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
     due_date: date
     payment_date: Optional[date] = None
     status: PaymentStatus = Field(default=PaymentStatus.DUE)
     stripe_payment_id: Optional[str] = Field(None, max_length=255, description="Gateway reference, stored as is")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "leaseId": "lease-1",
                    "amount": 2800.00,
                    "dueDate": "2025-01-01",
                    "status": "DUE"
               }
          }
     )

     @model_validator(mode="after")
     def paid_needs_date(self) -> "PaymentCreate":
          if self.status == PaymentStatus.PAID and self.payment_date is None:
               raise ValueError("paymentDate is required when status is PAID")
          return self


class PaymentUpdate(CamelModel):
     lease_id: Optional[str] = Field(None, min_length=1)
     amount: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
     due_date: Optional[date] = None
     payment_date: Optional[date] = None
     status: Optional[PaymentStatus] = None
     stripe_payment_id: Optional[str] = Field(None, max_length=255)


class PaymentMarkPaid(CamelModel):
     """Body for PATCH /api/payments/{id}/mark-paid (optional)."""
     payment_date: Optional[date] = None
     stripe_payment_id: Optional[str] = Field(None, max_length=255)


class PaymentResponse(RecordResponse):
     lease_id: str
     amount: Decimal
     due_date: date
     payment_date: Optional[date] = None
     status: PaymentStatus
     stripe_payment_id: Optional[str] = None
