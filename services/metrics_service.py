# services/metrics_service.py
"""
Dashboard metrics.

Six numbers summarize the portfolio: total / occupied / vacant properties,
monthly revenue from ACTIVE leases, the LATE payment total and the count of
open maintenance requests.

The live figures come from aggregate queries. When the store holds no
properties the same figures are computed over the seeded demo dataset
instead, so a fresh deployment shows a populated dashboard. The choice is
made again on every call; nothing is cached.

An unreachable store raises StoreUnavailable. The demo data is only for an
empty store, never a substitute for a failing one.
"""
import logging
from decimal import Decimal
from typing import Iterable, NamedTuple, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from database import store_guard
from models import Property, Lease, LeaseStatus, Payment, PaymentStatus, MaintenanceRequest
from models.maintenance_request import OPEN_STATUSES
from schemas.common import CENT
from schemas.dashboard import DashboardMetrics
from .demo_data import DEMO_DATA, DemoDataset

logger = logging.getLogger(__name__)


class MetricsInputs(NamedTuple):
     """Raw aggregates the dashboard figures are derived from."""
     total_properties: int
     active_leases: int
     monthly_revenue: Decimal
     overdue_payments: Decimal
     open_requests: int


EMPTY_INPUTS = MetricsInputs(0, 0, Decimal("0.00"), Decimal("0.00"), 0)


def _to_money(value) -> Decimal:
     """Normalize a driver SUM result to a 2-place Decimal (NULL -> 0.00)."""
     if value is None:
          return Decimal("0.00")
     if not isinstance(value, Decimal):
          value = Decimal(str(value))
     return value.quantize(CENT)


def _sum_money(amounts: Iterable[Decimal]) -> Decimal:
     return sum(amounts, Decimal("0")).quantize(CENT)


def live_inputs(db: Session) -> MetricsInputs:
     """
     Aggregate the current store state.

     The queries are independent reads; a snapshot mixing slightly different
     moments is acceptable for a dashboard.

     Raises:
          StoreUnavailable: the store could not be reached
     """
     with store_guard("dashboard metrics"):
          total_properties = db.query(func.count(Property.id)).scalar() or 0
          if total_properties == 0:
               return EMPTY_INPUTS

          active_leases, monthly_revenue = (
               db.query(func.count(Lease.id), func.coalesce(func.sum(Lease.monthly_rent), 0))
               .filter(Lease.status == LeaseStatus.ACTIVE)
               .one()
          )
          overdue_total = (
               db.query(func.coalesce(func.sum(Payment.amount), 0))
               .filter(Payment.status == PaymentStatus.LATE)
               .scalar()
          )
          open_requests = (
               db.query(func.count(MaintenanceRequest.id))
               .filter(MaintenanceRequest.status.in_(OPEN_STATUSES))
               .scalar()
          )

     return MetricsInputs(
          total_properties=int(total_properties),
          active_leases=int(active_leases or 0),
          monthly_revenue=_to_money(monthly_revenue),
          overdue_payments=_to_money(overdue_total),
          open_requests=int(open_requests or 0),
     )


def demo_inputs(dataset: DemoDataset = DEMO_DATA) -> MetricsInputs:
     """The same aggregates, computed over the demo dataset."""
     active = [lease for lease in dataset.leases if lease.status == LeaseStatus.ACTIVE]
     return MetricsInputs(
          total_properties=len(dataset.properties),
          active_leases=len(active),
          monthly_revenue=_sum_money(lease.monthly_rent for lease in active),
          overdue_payments=_sum_money(
               p.amount for p in dataset.payments if p.status == PaymentStatus.LATE
          ),
          open_requests=sum(1 for m in dataset.maintenance_requests if m.status in OPEN_STATUSES),
     )


def build_metrics(inputs: MetricsInputs, is_demo: bool = False) -> DashboardMetrics:
     """
     Derive the dashboard figures from raw aggregates.

     More ACTIVE leases than properties means the data is inconsistent;
     vacancy is clamped to zero and the condition reported in
     `data_quality_warnings`.
     """
     warnings = []
     vacant = inputs.total_properties - inputs.active_leases
     if vacant < 0:
          message = (
               f"{inputs.active_leases} active leases exceed {inputs.total_properties} properties; "
               "vacant properties clamped to 0"
          )
          logger.warning("Data quality: %s", message)
          warnings.append(message)
          vacant = 0

     return DashboardMetrics(
          total_properties=inputs.total_properties,
          occupied_properties=inputs.active_leases,
          vacant_properties=vacant,
          monthly_revenue=inputs.monthly_revenue,
          overdue_payments=inputs.overdue_payments,
          open_requests=inputs.open_requests,
          is_demo=is_demo,
          data_quality_warnings=warnings,
     )


def select_metrics(
     store_is_empty: bool,
     live: MetricsInputs,
     dataset: Optional[DemoDataset] = None,
) -> DashboardMetrics:
     """Pure choice between live figures and the demo figures."""
     if store_is_empty:
          return build_metrics(demo_inputs(dataset or DEMO_DATA), is_demo=True)
     return build_metrics(live)


def compute_dashboard_metrics(db: Session, dataset: Optional[DemoDataset] = None) -> DashboardMetrics:
     """
     Build the dashboard snapshot from the current store state.

     Raises:
          StoreUnavailable: the store could not be reached (no demo substitute)
     """
     live = live_inputs(db)
     store_is_empty = live.total_properties == 0
     if store_is_empty:
          logger.debug("No properties stored, serving demo dashboard metrics")
     return select_metrics(store_is_empty, live, dataset)
