"""
Tests for services.repository.Repository.
"""
from datetime import date
from decimal import Decimal

import pytest

from errors import Conflict, NotFound, ValidationError
from models import Lease, LeaseStatus, PaymentStatus
from services import repository


@pytest.fixture
def prop(db):
    return repository.properties.create(db, {
        "address": "2847 Maple Grove Avenue",
        "city": "Austin",
        "state": "TX",
        "zipCode": "78704",
        "bedrooms": 3,
        "bathrooms": "2.5",
        "rentAmount": "2800.00",
    })


@pytest.fixture
def tenant(db):
    return repository.tenants.create(db, {"name": "Sarah Johnson", "email": "sarah@example.com"})


@pytest.fixture
def lease(db, prop, tenant):
    return repository.leases.create(db, {
        "property_id": prop.id,
        "tenant_id": tenant.id,
        "start_date": date(2024, 2, 1),
        "end_date": date(2025, 1, 31),
        "monthly_rent": Decimal("2800.00"),
    })


class TestCreate:
    def test_accepts_camel_case_fields(self, prop):
        assert prop.zip_code == "78704"
        assert prop.bathrooms == Decimal("2.5")
        assert prop.id

    def test_defaults(self, lease):
        assert lease.status == LeaseStatus.UPCOMING
        assert lease.created_at is not None

    def test_invalid_fields_write_nothing(self, db):
        with pytest.raises(ValidationError) as exc:
            repository.properties.create(db, {
                "address": "1 Nowhere",
                "city": "Austin",
                "state": "TX",
                "zipCode": "78701",
                "bedrooms": -1,
                "bathrooms": "1.0",
                "rentAmount": "0",
            })
        fields = {error["field"] for error in exc.value.errors}
        assert {"bedrooms", "rentAmount"} <= fields
        assert repository.properties.list(db) == []

    def test_bathrooms_in_half_steps(self, db):
        with pytest.raises(ValidationError):
            repository.properties.create(db, {
                "address": "1 Nowhere", "city": "Austin", "state": "TX", "zip_code": "78701",
                "bedrooms": 1, "bathrooms": "1.3", "rent_amount": "900.00",
            })

    def test_unresolved_reference(self, db, tenant):
        with pytest.raises(ValidationError) as exc:
            repository.leases.create(db, {
                "property_id": "missing",
                "tenant_id": tenant.id,
                "start_date": date(2024, 1, 1),
                "end_date": date(2024, 12, 31),
                "monthly_rent": Decimal("1000.00"),
            })
        assert exc.value.errors[0]["field"] == "propertyId"
        assert db.query(Lease).count() == 0

    def test_lease_period_must_be_ordered(self, db, prop, tenant):
        with pytest.raises(ValidationError):
            repository.leases.create(db, {
                "property_id": prop.id,
                "tenant_id": tenant.id,
                "start_date": date(2025, 1, 1),
                "end_date": date(2024, 1, 1),
                "monthly_rent": Decimal("1000.00"),
            })

    def test_single_day_lease_allowed(self, db, prop, tenant):
        lease = repository.leases.create(db, {
            "property_id": prop.id,
            "tenant_id": tenant.id,
            "start_date": date(2024, 6, 1),
            "end_date": date(2024, 6, 1),
            "monthly_rent": Decimal("1000.00"),
        })
        assert lease.start_date == lease.end_date

    def test_duplicate_tenant_email(self, db, tenant):
        with pytest.raises(ValidationError) as exc:
            repository.tenants.create(db, {"name": "Someone Else", "email": "sarah@example.com"})
        assert exc.value.errors[0]["field"] == "email"

    def test_paid_payment_needs_payment_date(self, db, lease):
        with pytest.raises(ValidationError):
            repository.payments.create(db, {
                "lease_id": lease.id,
                "amount": Decimal("2800.00"),
                "due_date": date(2024, 12, 1),
                "status": PaymentStatus.PAID,
            })


class TestUpdate:
    def test_partial_update_keeps_other_fields(self, db, prop):
        updated = repository.properties.update(db, prop.id, {"rentAmount": "2950.00"})
        assert updated.rent_amount == Decimal("2950.00")
        assert updated.address == "2847 Maple Grove Avenue"

    def test_missing_id(self, db):
        with pytest.raises(NotFound):
            repository.properties.update(db, "missing", {"city": "Dallas"})

    def test_merged_record_is_revalidated(self, db, lease):
        with pytest.raises(ValidationError):
            repository.leases.update(db, lease.id, {"end_date": date(2023, 1, 1)})
        assert repository.leases.get(db, lease.id).end_date == date(2025, 1, 31)

    def test_marking_paid_without_date_rejected(self, db, lease):
        payment = repository.payments.create(db, {
            "lease_id": lease.id, "amount": Decimal("2800.00"), "due_date": date(2024, 12, 1),
        })
        with pytest.raises(ValidationError):
            repository.payments.update(db, payment.id, {"status": "PAID"})
        updated = repository.payments.update(
            db, payment.id, {"status": "PAID", "payment_date": date(2024, 12, 2)}
        )
        assert updated.status == PaymentStatus.PAID

    def test_email_can_be_kept_on_update(self, db, tenant):
        updated = repository.tenants.update(db, tenant.id, {"email": "sarah@example.com", "phone": "555"})
        assert updated.phone == "555"

    def test_email_taken_by_other_tenant(self, db, tenant):
        other = repository.tenants.create(db, {"name": "Michael Chen", "email": "michael@example.com"})
        with pytest.raises(ValidationError):
            repository.tenants.update(db, other.id, {"email": "sarah@example.com"})


class TestDelete:
    def test_delete(self, db, prop):
        repository.properties.delete(db, prop.id)
        assert repository.properties.get(db, prop.id) is None

    def test_missing_id(self, db):
        with pytest.raises(NotFound):
            repository.tenants.delete(db, "missing")

    def test_referenced_property_is_kept(self, db, lease):
        with pytest.raises(Conflict):
            repository.properties.delete(db, lease.property_id)
        assert repository.properties.get(db, lease.property_id) is not None
        assert repository.leases.get(db, lease.id).property_id == lease.property_id

    def test_referenced_tenant_is_kept(self, db, lease):
        with pytest.raises(Conflict):
            repository.tenants.delete(db, lease.tenant_id)
        assert repository.tenants.get(db, lease.tenant_id) is not None

    def test_delete_after_children_removed(self, db, lease):
        repository.leases.delete(db, lease.id)
        repository.properties.delete(db, lease.property_id)
        assert repository.properties.get(db, lease.property_id) is None


class TestValidateNew:
    def test_returns_values_without_writing(self, db, tenant):
        values = repository.tenants.validate_new(db, {"name": "New", "email": "new@example.com"})
        assert values["email"] == "new@example.com"
        assert len(repository.tenants.list(db)) == 1

    def test_rejects_duplicate(self, db, tenant):
        with pytest.raises(ValidationError):
            repository.tenants.validate_new(db, {"name": "Dup", "email": "sarah@example.com"})
