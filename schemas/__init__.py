# schemas/__init__.py
from .property import PropertyCreate, PropertyUpdate, PropertyResponse
from .tenant import TenantCreate, TenantUpdate, TenantResponse
from .lease import LeaseCreate, LeaseUpdate, LeaseResponse
from .payment import PaymentCreate, PaymentUpdate, PaymentMarkPaid, PaymentResponse
from .maintenance import (
     MaintenanceRequestCreate,
     MaintenanceRequestUpdate,
     MaintenanceRequestResponse,
)
from .document import DocumentCreate, DocumentUpdate, DocumentResponse
from .dashboard import DashboardMetrics
from .user import UserResponse, DemoLoginResponse

__all__ = [
     "PropertyCreate",
     "PropertyUpdate",
     "PropertyResponse",
     "TenantCreate",
     "TenantUpdate",
     "TenantResponse",
     "LeaseCreate",
     "LeaseUpdate",
     "LeaseResponse",
     "PaymentCreate",
     "PaymentUpdate",
     "PaymentMarkPaid",
     "PaymentResponse",
     "MaintenanceRequestCreate",
     "MaintenanceRequestUpdate",
     "MaintenanceRequestResponse",
     "DocumentCreate",
     "DocumentUpdate",
     "DocumentResponse",
     "DashboardMetrics",
     "UserResponse",
     "DemoLoginResponse",
]
