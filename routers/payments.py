# routers/payments.py
"""
Payment API routes.

Payments record rent installments. No gateway is called from here: a gateway
reference (`stripePaymentId`) is stored as given.
"""
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import verify_token
from schemas.payment import PaymentCreate, PaymentUpdate, PaymentMarkPaid, PaymentResponse
from services.demo_data import DEMO_PAYMENTS, demo_overdue_payments, or_demo
from services.payment_service import PaymentService
from services.repository import payments

router = APIRouter(prefix="/api/payments", tags=["payments"], dependencies=[Depends(verify_token)])


@router.get("", response_model=List[PaymentResponse], summary="List payments")
def list_payments(db: Session = Depends(get_session)):
     return or_demo(payments.list(db), DEMO_PAYMENTS)


@router.get("/overdue", response_model=List[PaymentResponse], summary="List overdue payments")
def list_overdue_payments(db: Session = Depends(get_session)):
     """LATE payments past their due date, most recent due date first."""
     return or_demo(PaymentService.overdue_payments(db), demo_overdue_payments())


@router.get("/{payment_id}", response_model=PaymentResponse, summary="Get payment by ID")
def get_payment(payment_id: str, db: Session = Depends(get_session)):
     return payments.require(db, payment_id)


@router.post(
     "",
     response_model=PaymentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a payment"
)
def create_payment(payment_data: PaymentCreate, db: Session = Depends(get_session)):
     """
     - **leaseId**: must exist
     - **status**: defaults to DUE; PAID requires **paymentDate**
     """
     return payments.create(db, payment_data)


@router.put("/{payment_id}", response_model=PaymentResponse, summary="Update payment")
def update_payment(payment_id: str, payment_data: PaymentUpdate, db: Session = Depends(get_session)):
     return payments.update(db, payment_id, payment_data)


@router.patch("/{payment_id}/mark-paid", response_model=PaymentResponse, summary="Mark payment as paid")
def mark_payment_paid(
     payment_id: str,
     body: Optional[PaymentMarkPaid] = Body(None),
     db: Session = Depends(get_session),
):
     """
     Convenience endpoint to mark a payment as PAID. The payment date
     defaults to today.
     """
     body = body or PaymentMarkPaid()
     return PaymentService.mark_paid(db, payment_id, body.payment_date, body.stripe_payment_id)


@router.patch("/{payment_id}/mark-late", response_model=PaymentResponse, summary="Mark payment as late")
def mark_payment_late(payment_id: str, db: Session = Depends(get_session)):
     return PaymentService.mark_late(db, payment_id)


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete payment")
def delete_payment(payment_id: str, db: Session = Depends(get_session)):
     payments.delete(db, payment_id)
     return None
