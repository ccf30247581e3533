# models/payment.py
import enum
from datetime import date
from typing import Optional
from sqlalchemy import Column, String, Numeric, Date, ForeignKey, Enum
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin


class PaymentStatus(str, enum.Enum):
     """Enumeration for rent payment status."""
     PAID = "PAID"
     DUE = "DUE"
     LATE = "LATE"


class Payment(RecordMixin, Base):
     """
     Payment model - one rent installment owed on a lease.

     `stripe_payment_id` is the gateway reference; no gateway is called from
     this service.
     """

     lease_id = Column(String(36), ForeignKey("leases.id"), nullable=False, index=True)

     amount = Column(Numeric(10, 2), nullable=False)
     due_date = Column(Date, nullable=False, index=True)
     payment_date = Column(Date, nullable=True)
     status = Column(
          Enum(PaymentStatus, name="payment_status", create_constraint=True),
          default=PaymentStatus.DUE,
          nullable=False,
          index=True
     )
     stripe_payment_id = Column(String(255), nullable=True)

     # Relationships
     lease = relationship("Lease", back_populates="payments")

     def __repr__(self):
          return f"<Payment(id={self.id}, amount={self.amount}, status='{self.status.value}', due_date={self.due_date})>"

     def mark_as_paid(self, paid_on: Optional[date] = None) -> None:
          """Mark the payment as paid, stamping the payment date."""
          self.status = PaymentStatus.PAID
          self.payment_date = paid_on or self.payment_date or date.today()

     def mark_as_late(self) -> None:
          self.status = PaymentStatus.LATE
