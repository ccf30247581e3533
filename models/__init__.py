# models/__init__.py
from .base import Base
from .user import User, UserRole
from .property import Property
from .tenant import Tenant
from .lease import Lease, LeaseStatus
from .payment import Payment, PaymentStatus
from .maintenance_request import MaintenanceRequest, MaintenanceStatus, MaintenancePriority
from .document import Document

__all__ = [
     "Base",
     "User",
     "UserRole",
     "Property",
     "Tenant",
     "Lease",
     "LeaseStatus",
     "Payment",
     "PaymentStatus",
     "MaintenanceRequest",
     "MaintenanceStatus",
     "MaintenancePriority",
     "Document",
]
