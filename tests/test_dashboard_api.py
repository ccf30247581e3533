"""
Tests for GET /api/dashboard/metrics.
"""
from database import get_session
from main import app


class TestDashboardMetrics:
    def test_demo_metrics_on_empty_store(self, client):
        response = client.get("/api/dashboard/metrics")
        assert response.status_code == 200
        assert response.json() == {
            "totalProperties": 4,
            "occupiedProperties": 3,
            "vacantProperties": 1,
            "monthlyRevenue": 8200.0,
            "overduePayments": 2200.0,
            "openRequests": 3,
            "isDemo": True,
            "dataQualityWarnings": [],
        }

    def test_live_metrics(self, client, create_property, create_lease):
        create_property()
        create_lease(monthlyRent=2800)
        create_lease(monthlyRent=2200)
        create_lease(monthlyRent=3200)

        body = client.get("/api/dashboard/metrics").json()
        assert body["isDemo"] is False
        assert body["totalProperties"] == 4
        assert body["occupiedProperties"] == 3
        assert body["vacantProperties"] == 1
        assert body["monthlyRevenue"] == 8200.0
        assert body["overduePayments"] == 0.0
        assert body["openRequests"] == 0

    def test_requires_token(self, client):
        response = client.get("/api/dashboard/metrics", headers={"Authorization": ""})
        assert response.status_code == 401

    def test_unreachable_store(self, client, tmp_path):
        from sqlalchemy import create_engine
        from sqlalchemy.orm import Session

        broken = create_engine(f"sqlite:///{tmp_path}/missing-dir/store.db")

        def broken_session():
            session = Session(bind=broken)
            try:
                yield session
            finally:
                session.close()

        app.dependency_overrides[get_session] = broken_session
        response = client.get("/api/dashboard/metrics")
        assert response.status_code == 502
        assert response.json() == {"message": "Data store unavailable"}
        broken.dispose()
