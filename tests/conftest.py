"""
Shared fixtures: an in-memory SQLite store and an API client carrying a
signed bearer token.
"""
import os

# Settings are read once at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["DEMO_FALLBACK"] = "true"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import get_session
from dependencies import issue_token
from main import app
from models import Base


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_session():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_session] = override_get_session
    with TestClient(app) as test_client:
        test_client.headers.update({"Authorization": f"Bearer {issue_token('manager-1')}"})
        yield test_client
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# API factories
# ---------------------------------------------------------------------------

@pytest.fixture
def create_property(client):
    counter = {"n": 0}

    def _create(**overrides):
        counter["n"] += 1
        body = {
            "address": f"{100 + counter['n']} Main Street",
            "city": "Austin",
            "state": "TX",
            "zipCode": "78701",
            "bedrooms": 2,
            "bathrooms": 1.5,
            "rentAmount": 2000.00,
        }
        body.update(overrides)
        response = client.post("/api/properties", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_tenant(client):
    counter = {"n": 0}

    def _create(**overrides):
        counter["n"] += 1
        body = {
            "name": f"Tenant {counter['n']}",
            "email": f"tenant{counter['n']}@example.com",
            "phone": "(512) 555-0100",
        }
        body.update(overrides)
        response = client.post("/api/tenants", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_lease(client, create_property, create_tenant):
    def _create(property_id=None, tenant_id=None, **overrides):
        body = {
            "propertyId": property_id or create_property()["id"],
            "tenantId": tenant_id or create_tenant()["id"],
            "startDate": "2024-02-01",
            "endDate": "2025-01-31",
            "monthlyRent": 2800.00,
            "status": "ACTIVE",
        }
        body.update(overrides)
        response = client.post("/api/leases", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
