"""
Tests for services.metrics_service.
"""
from datetime import date
from decimal import Decimal

import pydantic
import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from errors import StoreUnavailable
from models import LeaseStatus, PaymentStatus, MaintenanceStatus, MaintenancePriority
from services import repository
from services.demo_data import DEMO_DATA, or_demo
from services.metrics_service import (
    MetricsInputs,
    build_metrics,
    compute_dashboard_metrics,
    demo_inputs,
    live_inputs,
    select_metrics,
)


def add_property(db, rent="2000.00"):
    return repository.properties.create(db, {
        "address": "1 Test Lane",
        "city": "Austin",
        "state": "TX",
        "zip_code": "78701",
        "bedrooms": 2,
        "bathrooms": Decimal("1.0"),
        "rent_amount": Decimal(rent),
    })


def add_tenant(db, email):
    return repository.tenants.create(db, {"name": "Test Tenant", "email": email})


def add_lease(db, prop, tenant, rent, status=LeaseStatus.ACTIVE):
    return repository.leases.create(db, {
        "property_id": prop.id,
        "tenant_id": tenant.id,
        "start_date": date(2024, 1, 1),
        "end_date": date(2024, 12, 31),
        "monthly_rent": Decimal(rent),
        "status": status,
    })


@pytest.fixture
def portfolio(db):
    """Three properties, each with an ACTIVE lease: 2800 + 2200 + 3200."""
    leases = []
    for i, rent in enumerate(["2800.00", "2200.00", "3200.00"]):
        prop = add_property(db, rent)
        tenant = add_tenant(db, f"tenant{i}@example.com")
        leases.append(add_lease(db, prop, tenant, rent))
    return leases


# ---------------------------------------------------------------------------
# Demo fallback
# ---------------------------------------------------------------------------

class TestDemoFallback:
    def test_empty_store_uses_demo_dataset(self, db):
        metrics = compute_dashboard_metrics(db)
        assert metrics.is_demo is True
        assert metrics.total_properties == 4
        assert metrics.occupied_properties == 3
        assert metrics.vacant_properties == 1
        assert metrics.monthly_revenue == Decimal("8200.00")
        assert metrics.overdue_payments == Decimal("2200.00")
        assert metrics.open_requests == 3
        assert metrics.data_quality_warnings == []

    def test_demo_inputs_match_fixture(self):
        inputs = demo_inputs(DEMO_DATA)
        assert inputs == MetricsInputs(4, 3, Decimal("8200.00"), Decimal("2200.00"), 3)

    def test_fallback_reevaluated_each_call(self, db):
        assert compute_dashboard_metrics(db).is_demo is True
        add_property(db)
        metrics = compute_dashboard_metrics(db)
        assert metrics.is_demo is False
        assert metrics.total_properties == 1
        assert metrics.monthly_revenue == Decimal("0.00")

    def test_select_metrics_ignores_live_when_empty(self):
        live = MetricsInputs(7, 2, Decimal("10.00"), Decimal("5.00"), 1)
        assert select_metrics(True, live).total_properties == 4
        assert select_metrics(False, live).total_properties == 7

    def test_demo_rows_are_immutable(self):
        with pytest.raises(pydantic.ValidationError):
            DEMO_DATA.properties[0].city = "Dallas"
        assert DEMO_DATA.properties[0].city == "Austin"


# ---------------------------------------------------------------------------
# Live aggregates
# ---------------------------------------------------------------------------

class TestLiveMetrics:
    def test_revenue_is_exact_decimal_sum(self, db, portfolio):
        metrics = compute_dashboard_metrics(db)
        assert metrics.is_demo is False
        assert metrics.monthly_revenue == Decimal("8200.00")
        assert isinstance(metrics.monthly_revenue, Decimal)

    def test_counts_add_up(self, db, portfolio):
        add_property(db)
        metrics = compute_dashboard_metrics(db)
        assert metrics.total_properties == 4
        assert metrics.occupied_properties == 3
        assert metrics.vacant_properties + metrics.occupied_properties == metrics.total_properties

    def test_only_active_leases_count(self, db, portfolio):
        prop = add_property(db)
        tenant = add_tenant(db, "upcoming@example.com")
        add_lease(db, prop, tenant, "9999.00", status=LeaseStatus.UPCOMING)
        add_lease(db, prop, tenant, "1111.00", status=LeaseStatus.ENDED)
        metrics = compute_dashboard_metrics(db)
        assert metrics.occupied_properties == 3
        assert metrics.monthly_revenue == Decimal("8200.00")

    def test_overdue_sums_only_late_payments(self, db, portfolio):
        lease = portfolio[0]
        repository.payments.create(db, {
            "lease_id": lease.id, "amount": Decimal("2200.00"),
            "due_date": date(2024, 12, 1), "status": PaymentStatus.LATE,
        })
        repository.payments.create(db, {
            "lease_id": lease.id, "amount": Decimal("2800.00"), "due_date": date(2024, 12, 1),
            "payment_date": date(2024, 12, 1), "status": PaymentStatus.PAID,
        })
        repository.payments.create(db, {
            "lease_id": lease.id, "amount": Decimal("3200.00"),
            "due_date": date(2025, 1, 1), "status": PaymentStatus.DUE,
        })
        assert compute_dashboard_metrics(db).overdue_payments == Decimal("2200.00")

    def test_open_requests_count_pending_and_in_progress(self, db, portfolio):
        lease = portfolio[0]
        statuses = [
            MaintenanceStatus.PENDING,
            MaintenanceStatus.PENDING,
            MaintenanceStatus.IN_PROGRESS,
            MaintenanceStatus.COMPLETED,
        ]
        for status in statuses:
            fields = {
                "property_id": lease.property_id,
                "tenant_id": lease.tenant_id,
                "description": "Leaky faucet",
                "status": status,
                "priority": MaintenancePriority.LOW,
            }
            if status == MaintenanceStatus.COMPLETED:
                fields["completed_date"] = "2024-12-01T10:00:00"
            repository.maintenance_requests.create(db, fields)
        assert compute_dashboard_metrics(db).open_requests == 3

    def test_lease_activation_updates_occupancy_and_revenue(self, db, portfolio):
        prop = add_property(db)
        tenant = add_tenant(db, "next@example.com")
        lease = add_lease(db, prop, tenant, "1650.00", status=LeaseStatus.UPCOMING)
        before = compute_dashboard_metrics(db)

        repository.leases.update(db, lease.id, {"status": "ACTIVE"})
        after = compute_dashboard_metrics(db)

        assert after.occupied_properties == before.occupied_properties + 1
        assert after.monthly_revenue == Decimal("9850.00")


# ---------------------------------------------------------------------------
# Data quality
# ---------------------------------------------------------------------------

class TestVacancyClamp:
    def test_more_active_leases_than_properties(self, db):
        prop = add_property(db)
        tenant = add_tenant(db, "double@example.com")
        add_lease(db, prop, tenant, "1000.00")
        add_lease(db, prop, tenant, "1000.00")

        metrics = compute_dashboard_metrics(db)
        assert metrics.total_properties == 1
        assert metrics.occupied_properties == 2
        assert metrics.vacant_properties == 0
        assert len(metrics.data_quality_warnings) == 1

    def test_build_metrics_without_inconsistency_has_no_warnings(self):
        metrics = build_metrics(MetricsInputs(5, 2, Decimal("1.00"), Decimal("0.00"), 0))
        assert metrics.vacant_properties == 3
        assert metrics.data_quality_warnings == []


# ---------------------------------------------------------------------------
# Store failures
# ---------------------------------------------------------------------------

class TestStoreUnavailable:
    @pytest.fixture
    def broken_session(self, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path}/missing-dir/store.db")
        session = Session(bind=engine)
        yield session
        session.close()
        engine.dispose()

    def test_unreachable_store_raises(self, broken_session):
        with pytest.raises(StoreUnavailable):
            compute_dashboard_metrics(broken_session)

    def test_no_demo_substitute(self, broken_session):
        with pytest.raises(StoreUnavailable):
            live_inputs(broken_session)

    def test_schema_errors_are_not_reported_as_unreachable(self):
        # Reachable store without the tables: the driver error propagates as is
        engine = create_engine("sqlite://")
        session = Session(bind=engine)
        try:
            with pytest.raises(OperationalError) as excinfo:
                compute_dashboard_metrics(session)
            assert not isinstance(excinfo.value, StoreUnavailable)
            assert "no such table" in str(excinfo.value)
        finally:
            session.close()
            engine.dispose()


class TestOrDemo:
    def test_live_rows_win(self):
        assert or_demo(["live"], ["demo"], enabled=True) == ["live"]

    def test_disabled_keeps_empty_result(self):
        assert or_demo([], ["demo"], enabled=False) == []

    def test_follows_setting_when_not_given(self, monkeypatch):
        monkeypatch.setattr("config.DEMO_FALLBACK", True)
        assert or_demo([], ("demo",)) == ["demo"]
        monkeypatch.setattr("config.DEMO_FALLBACK", False)
        assert or_demo([], ("demo",)) == []
