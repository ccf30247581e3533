# services/payment_service.py
"""
Payment Service - payment-specific queries and status shortcuts.

Plain CRUD goes through `repository.payments`; this module holds the rest.
"""
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from database import store_guard
from models import Payment, PaymentStatus
from .repository import payments

logger = logging.getLogger(__name__)


class PaymentService:
     """Service class for payment-related business logic."""

     @staticmethod
     def overdue_payments(db: Session, today: Optional[date] = None) -> List[Payment]:
          """
          LATE payments whose due date has passed, most recent due date first.
          """
          today = today or date.today()
          with store_guard("overdue payments"):
               return (
                    db.query(Payment)
                    .filter(Payment.status == PaymentStatus.LATE, Payment.due_date < today)
                    .order_by(Payment.due_date.desc())
                    .all()
               )

     @staticmethod
     def mark_paid(
          db: Session,
          payment_id: str,
          paid_on: Optional[date] = None,
          stripe_payment_id: Optional[str] = None,
     ) -> Payment:
          """
          Mark a payment PAID. The payment date defaults to today unless one is
          already recorded.

          Raises:
               NotFound: no payment with this id
          """
          payment = payments.require(db, payment_id)
          payment.mark_as_paid(paid_on)
          if stripe_payment_id:
               payment.stripe_payment_id = stripe_payment_id

          with store_guard("mark payment paid"):
               db.commit()
               db.refresh(payment)
          logger.info("Payment %s marked PAID on %s", payment.id, payment.payment_date)
          return payment

     @staticmethod
     def mark_late(db: Session, payment_id: str) -> Payment:
          """
          Mark a payment LATE.

          Raises:
               NotFound: no payment with this id
          """
          payment = payments.require(db, payment_id)
          payment.mark_as_late()
          with store_guard("mark payment late"):
               db.commit()
               db.refresh(payment)
          logger.info("Payment %s marked LATE", payment.id)
          return payment
