# routers/dashboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_session
from dependencies import verify_token
from schemas.dashboard import DashboardMetrics
from services.metrics_service import compute_dashboard_metrics

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"], dependencies=[Depends(verify_token)])


@router.get("/metrics", response_model=DashboardMetrics, summary="Dashboard metrics")
def get_dashboard_metrics(db: Session = Depends(get_session)):
     """
     Portfolio snapshot: property counts, monthly revenue from ACTIVE leases,
     LATE payment total and open maintenance requests.

     With no properties stored the figures come from the demo dataset and
     `isDemo` is true.
     """
     return compute_dashboard_metrics(db)
