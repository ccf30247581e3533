# services/__init__.py
from .repository import (
     Repository,
     properties,
     tenants,
     leases,
     payments,
     maintenance_requests,
     documents,
)
from .payment_service import PaymentService
from .maintenance_service import MaintenanceService
from .metrics_service import compute_dashboard_metrics

__all__ = [
     "Repository",
     "properties",
     "tenants",
     "leases",
     "payments",
     "maintenance_requests",
     "documents",
     "PaymentService",
     "MaintenanceService",
     "compute_dashboard_metrics",
]
