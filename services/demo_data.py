# services/demo_data.py
"""
Seeded demo data shown while the store holds no properties.

The table is immutable: module-level tuples of frozen response schemas.
Nothing here is ever written to the database.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import NamedTuple, Optional, Sequence, Tuple, TypeVar

import config
from models import LeaseStatus, PaymentStatus, MaintenanceStatus, MaintenancePriority, UserRole
from schemas import (
     PropertyResponse,
     TenantResponse,
     LeaseResponse,
     PaymentResponse,
     MaintenanceRequestResponse,
     UserResponse,
)

T = TypeVar("T")


class DemoDataset(NamedTuple):
     properties: Tuple[PropertyResponse, ...]
     tenants: Tuple[TenantResponse, ...]
     leases: Tuple[LeaseResponse, ...]
     payments: Tuple[PaymentResponse, ...]
     maintenance_requests: Tuple[MaintenanceRequestResponse, ...]


DEMO_USER = UserResponse(
     id="demo-user",
     email="demo@rentdesk.app",
     first_name="Demo",
     last_name="Manager",
     role=UserRole.ADMIN,
)


DEMO_PROPERTIES = (
     PropertyResponse(
          id="prop-1",
          address="2847 Maple Grove Avenue",
          city="Austin",
          state="TX",
          zip_code="78704",
          bedrooms=3,
          bathrooms=Decimal("2.5"),
          rent_amount=Decimal("2800.00"),
          description="Modern townhouse with updated kitchen, hardwood floors, and private patio. Near downtown district.",
          created_at=datetime(2024, 1, 15),
          updated_at=datetime(2024, 1, 15),
     ),
     PropertyResponse(
          id="prop-2",
          address="1534 Pine Street Unit 4B",
          city="Austin",
          state="TX",
          zip_code="78701",
          bedrooms=2,
          bathrooms=Decimal("2.0"),
          rent_amount=Decimal("2200.00"),
          description="Downtown loft with city views, exposed brick, and in-unit laundry. Walking distance to restaurants.",
          created_at=datetime(2024, 2, 1),
          updated_at=datetime(2024, 2, 1),
     ),
     PropertyResponse(
          id="prop-3",
          address="8921 Cedar Hills Drive",
          city="Austin",
          state="TX",
          zip_code="78759",
          bedrooms=4,
          bathrooms=Decimal("3.0"),
          rent_amount=Decimal("3200.00"),
          description="Spacious family home with large backyard, two-car garage, and excellent school district.",
          created_at=datetime(2024, 3, 10),
          updated_at=datetime(2024, 3, 10),
     ),
     PropertyResponse(
          id="prop-4",
          address="456 Oak Boulevard",
          city="Austin",
          state="TX",
          zip_code="78702",
          bedrooms=1,
          bathrooms=Decimal("1.0"),
          rent_amount=Decimal("1650.00"),
          description="Cozy studio apartment with modern amenities, perfect for professionals. Close to tech district.",
          created_at=datetime(2024, 4, 5),
          updated_at=datetime(2024, 4, 5),
     ),
)

DEMO_TENANTS = (
     TenantResponse(
          id="tenant-1",
          name="Sarah Johnson",
          email="sarah.johnson@email.com",
          phone="(512) 555-0123",
          created_at=datetime(2024, 1, 20),
          updated_at=datetime(2024, 1, 20),
     ),
     TenantResponse(
          id="tenant-2",
          name="Michael Chen",
          email="michael.chen@email.com",
          phone="(512) 555-0456",
          created_at=datetime(2024, 2, 5),
          updated_at=datetime(2024, 2, 5),
     ),
     TenantResponse(
          id="tenant-3",
          name="Emily Rodriguez",
          email="emily.rodriguez@email.com",
          phone="(512) 555-0789",
          created_at=datetime(2024, 3, 15),
          updated_at=datetime(2024, 3, 15),
     ),
)

DEMO_LEASES = (
     LeaseResponse(
          id="lease-1",
          property_id="prop-1",
          tenant_id="tenant-1",
          start_date=date(2024, 2, 1),
          end_date=date(2025, 1, 31),
          monthly_rent=Decimal("2800.00"),
          status=LeaseStatus.ACTIVE,
          created_at=datetime(2024, 1, 25),
          updated_at=datetime(2024, 1, 25),
     ),
     LeaseResponse(
          id="lease-2",
          property_id="prop-2",
          tenant_id="tenant-2",
          start_date=date(2024, 3, 1),
          end_date=date(2025, 2, 28),
          monthly_rent=Decimal("2200.00"),
          status=LeaseStatus.ACTIVE,
          created_at=datetime(2024, 2, 10),
          updated_at=datetime(2024, 2, 10),
     ),
     LeaseResponse(
          id="lease-3",
          property_id="prop-3",
          tenant_id="tenant-3",
          start_date=date(2024, 4, 1),
          end_date=date(2025, 3, 31),
          monthly_rent=Decimal("3200.00"),
          status=LeaseStatus.ACTIVE,
          created_at=datetime(2024, 3, 20),
          updated_at=datetime(2024, 3, 20),
     ),
)

DEMO_PAYMENTS = (
     PaymentResponse(
          id="payment-1",
          lease_id="lease-1",
          amount=Decimal("2800.00"),
          due_date=date(2024, 12, 1),
          payment_date=date(2024, 12, 1),
          status=PaymentStatus.PAID,
          stripe_payment_id="pi_demo_001",
          created_at=datetime(2024, 12, 1),
          updated_at=datetime(2024, 12, 1),
     ),
     PaymentResponse(
          id="payment-2",
          lease_id="lease-2",
          amount=Decimal("2200.00"),
          due_date=date(2024, 12, 1),
          status=PaymentStatus.LATE,
          created_at=datetime(2024, 11, 25),
          updated_at=datetime(2024, 12, 15),
     ),
     PaymentResponse(
          id="payment-3",
          lease_id="lease-3",
          amount=Decimal("3200.00"),
          due_date=date(2024, 12, 1),
          payment_date=date(2024, 12, 3),
          status=PaymentStatus.PAID,
          stripe_payment_id="pi_demo_002",
          created_at=datetime(2024, 12, 3),
          updated_at=datetime(2024, 12, 3),
     ),
     PaymentResponse(
          id="payment-4",
          lease_id="lease-1",
          amount=Decimal("2800.00"),
          due_date=date(2025, 1, 1),
          status=PaymentStatus.DUE,
          created_at=datetime(2024, 12, 20),
          updated_at=datetime(2024, 12, 20),
     ),
)

DEMO_MAINTENANCE_REQUESTS = (
     MaintenanceRequestResponse(
          id="maint-1",
          property_id="prop-1",
          tenant_id="tenant-1",
          description="Kitchen faucet is dripping constantly. Needs repair or replacement.",
          status=MaintenanceStatus.IN_PROGRESS,
          priority=MaintenancePriority.MEDIUM,
          reported_date=datetime(2024, 12, 10),
          created_at=datetime(2024, 12, 10),
          updated_at=datetime(2024, 12, 12),
     ),
     MaintenanceRequestResponse(
          id="maint-2",
          property_id="prop-2",
          tenant_id="tenant-2",
          description="Heating system not working properly. Temperature inconsistent throughout apartment.",
          status=MaintenanceStatus.PENDING,
          priority=MaintenancePriority.HIGH,
          reported_date=datetime(2024, 12, 15),
          created_at=datetime(2024, 12, 15),
          updated_at=datetime(2024, 12, 15),
     ),
     MaintenanceRequestResponse(
          id="maint-3",
          property_id="prop-3",
          tenant_id="tenant-3",
          description="Washing machine making loud noise during spin cycle.",
          status=MaintenanceStatus.COMPLETED,
          priority=MaintenancePriority.LOW,
          reported_date=datetime(2024, 11, 20),
          completed_date=datetime(2024, 11, 25),
          created_at=datetime(2024, 11, 20),
          updated_at=datetime(2024, 11, 25),
     ),
     MaintenanceRequestResponse(
          id="maint-4",
          property_id="prop-1",
          tenant_id="tenant-1",
          description="Front door lock sticking, difficult to open/close.",
          status=MaintenanceStatus.PENDING,
          priority=MaintenancePriority.HIGH,
          reported_date=datetime(2024, 12, 18),
          created_at=datetime(2024, 12, 18),
          updated_at=datetime(2024, 12, 18),
     ),
)

DEMO_DATA = DemoDataset(
     properties=DEMO_PROPERTIES,
     tenants=DEMO_TENANTS,
     leases=DEMO_LEASES,
     payments=DEMO_PAYMENTS,
     maintenance_requests=DEMO_MAINTENANCE_REQUESTS,
)


def demo_overdue_payments(dataset: DemoDataset = DEMO_DATA) -> Tuple[PaymentResponse, ...]:
     return tuple(p for p in dataset.payments if p.status == PaymentStatus.LATE)


def demo_high_priority_requests(dataset: DemoDataset = DEMO_DATA) -> Tuple[MaintenanceRequestResponse, ...]:
     return tuple(
          m for m in dataset.maintenance_requests
          if m.priority == MaintenancePriority.HIGH
          and m.status in (MaintenanceStatus.PENDING, MaintenanceStatus.IN_PROGRESS)
     )


def or_demo(rows: Sequence[T], demo_rows: Sequence[T], enabled: Optional[bool] = None) -> Sequence[T]:
     """
     Live rows when there are any, otherwise the demo rows (when the
     DEMO_FALLBACK setting is on).
     """
     if enabled is None:
          enabled = config.DEMO_FALLBACK
     if rows or not enabled:
          return rows
     return list(demo_rows)
