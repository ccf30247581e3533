"""
Tests for the /api/maintenance-requests routes.
"""
import pytest


@pytest.fixture
def lease(create_lease):
    return create_lease()


@pytest.fixture
def create_request(client, lease):
    def _create(**overrides):
        body = {
            "propertyId": lease["propertyId"],
            "tenantId": lease["tenantId"],
            "description": "Front door lock sticking",
        }
        body.update(overrides)
        response = client.post("/api/maintenance-requests", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


class TestMaintenanceRequests:
    def test_defaults(self, create_request):
        request = create_request()
        assert request["status"] == "PENDING"
        assert request["priority"] == "MEDIUM"
        assert request["reportedDate"] is not None
        assert request["completedDate"] is None

    def test_completed_requires_date(self, client, create_request):
        request = create_request()
        response = client.put(
            f"/api/maintenance-requests/{request['id']}", json={"status": "COMPLETED"}
        )
        assert response.status_code == 400

    def test_complete_endpoint(self, client, create_request):
        request = create_request()
        response = client.patch(f"/api/maintenance-requests/{request['id']}/complete")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "COMPLETED"
        assert body["completedDate"] is not None

    def test_unknown_tenant(self, client, lease):
        response = client.post("/api/maintenance-requests", json={
            "propertyId": lease["propertyId"], "tenantId": "missing", "description": "Leak",
        })
        assert response.status_code == 400

    def test_open_requests_on_dashboard(self, client, create_request):
        create_request()
        create_request()
        create_request(status="IN_PROGRESS")
        done = create_request()
        client.patch(f"/api/maintenance-requests/{done['id']}/complete")

        assert client.get("/api/dashboard/metrics").json()["openRequests"] == 3


class TestHighPriority:
    def test_only_open_high_priority(self, client, create_request):
        pending = create_request(priority="HIGH")
        in_progress = create_request(priority="HIGH", status="IN_PROGRESS")
        create_request(priority="LOW")
        finished = create_request(priority="HIGH")
        client.patch(f"/api/maintenance-requests/{finished['id']}/complete")

        ids = {row["id"] for row in client.get("/api/maintenance-requests/high-priority").json()}
        assert ids == {pending["id"], in_progress["id"]}

    def test_empty_store_shows_demo_requests(self, client):
        rows = client.get("/api/maintenance-requests/high-priority").json()
        assert {row["id"] for row in rows} == {"maint-2", "maint-4"}
