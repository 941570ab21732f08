"""
HTTP tests for clients, the dashboard and the service endpoints.
"""

from datetime import date

import pytest

from tracker.infrastructure.web.routers import dashboard as dashboard_router


class TestClientsApi:

    def test_create_list_get_delete(self, client):
        created = client.post("/api/clients", json={"name": "Acme", "email": "ops@acme.io"})

        assert created.status_code == 201
        body = created.json()
        assert body["name"] == "Acme"
        assert client.get("/api/clients").json() == [body]
        assert client.get(f"/api/clients/{body['_id']}").json() == body

        deleted = client.delete(f"/api/clients/{body['_id']}")
        assert deleted.json() == {"message": "Client deleted successfully"}
        assert client.get(f"/api/clients/{body['_id']}").status_code == 404

    def test_name_required(self, client):
        response = client.post("/api/clients", json={"email": "ops@acme.io"})

        assert response.status_code == 400
        assert response.json() == {"error": "name is required"}

    def test_deleting_client_keeps_entries(self, client, entry_payload):
        acme = client.post("/api/clients", json={"name": "Acme"}).json()
        client.post("/api/time-entries", json=entry_payload)

        client.delete(f"/api/clients/{acme['_id']}")

        assert len(client.get("/api/time-entries").json()) == 1


class TestDashboardApi:

    @pytest.fixture(autouse=True)
    def fixed_today(self, monkeypatch):
        monkeypatch.setattr(dashboard_router, "local_today", lambda: date(2024, 1, 1))

    def test_empty_dashboard(self, client):
        response = client.get("/api/dashboard")

        assert response.status_code == 200
        assert response.json() == {
            "todayHours": 0.0,
            "weekHours": 0.0,
            "pendingInvoices": 0.0,
            "activeClients": 0,
            "recentActivity": [],
            "topClients": [],
        }

    def test_summary(self, client, entry_payload):
        client.post("/api/time-entries", json=entry_payload)
        client.post("/api/invoices", json={
            "freelancerId": "f1",
            "clientName": "Acme",
            "totalHours": 2.5,
            "totalAmount": 250,
        })
        client.post("/api/invoices", json={
            "freelancerId": "f1",
            "clientName": "Beta",
            "totalHours": 1,
            "totalAmount": 80,
            "status": "paid",
        })
        client.post("/api/clients", json={"name": "Acme"})

        body = client.get("/api/dashboard").json()

        assert body["todayHours"] == 2.5
        assert body["weekHours"] == 2.5
        assert body["pendingInvoices"] == 250.0
        assert body["activeClients"] == 1
        assert len(body["recentActivity"]) == 3
        assert body["recentActivity"][-1] == {
            "type": "Time Entry",
            "detail": "2.5 hrs for Acme",
            "date": "2024-01-01",
            "timestamp": 1704067200000,
        }
        assert {item["detail"] for item in body["recentActivity"][:2]} == {
            "USD 250 for Acme (pending)",
            "USD 80 for Beta (paid)",
        }
        assert [c["name"] for c in body["topClients"]] == ["Acme", "Beta"]


class TestServiceEndpoints:

    def test_root(self, client):
        body = client.get("/").json()

        assert body["health"] == "/api/health"

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_database_status(self, client):
        response = client.get("/api/test-db")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["tables"] == ["clients", "invoices", "time_entries"]
        assert "state" in body

    def test_unknown_path(self, client):
        response = client.get("/api/nowhere")

        assert response.status_code == 404
        assert response.json()["error"] == "Not Found"
