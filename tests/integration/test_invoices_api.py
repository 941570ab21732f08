"""
HTTP tests for the invoice endpoints.
"""

import pytest


@pytest.fixture
def invoice_payload():
    return {
        "freelancerId": "f1",
        "freelancerName": "Ada",
        "clientName": "Acme",
        "project": "Website",
        "totalHours": 10,
        "totalAmount": 1000,
        "ratePerHour": 100,
    }


class TestCreateInvoice:

    def test_create_defaults_to_pending(self, client, invoice_payload):
        response = client.post("/api/invoices", json=invoice_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["_id"]
        assert body["status"] == "pending"
        assert body["client"] == "Acme"
        assert body["amount"] == 1000.0
        assert body["generatedAt"].endswith("Z")
        assert body["date"] == body["generatedAt"][:10]
        assert body["timeEntries"] == []

    def test_totals_rounded_on_write(self, client, invoice_payload):
        invoice_payload.update(totalHours=10.005, totalAmount=1000.005)

        created = client.post("/api/invoices", json=invoice_payload).json()
        fetched = client.get(f"/api/invoices/{created['_id']}").json()

        assert fetched["totalHours"] == 10.01
        assert fetched["totalAmount"] == 1000.01

    @pytest.mark.parametrize("field,message", [
        ("clientName", "clientName is required"),
        ("totalHours", "totalHours and totalAmount are required"),
        ("totalAmount", "totalHours and totalAmount are required"),
    ])
    def test_missing_field_rejected_without_writing(self, client, invoice_payload, field, message):
        del invoice_payload[field]

        response = client.post("/api/invoices", json=invoice_payload)

        assert response.status_code == 400
        assert response.json() == {"error": message}
        assert client.get("/api/invoices").json() == []

    def test_sub_cent_totals_are_stored_as_zero(self, client, invoice_payload):
        invoice_payload.update(totalHours=0.004, totalAmount=0.004)

        response = client.post("/api/invoices", json=invoice_payload)

        assert response.status_code == 201
        fetched = client.get(f"/api/invoices/{response.json()['_id']}").json()
        assert fetched["totalHours"] == 0.0
        assert fetched["totalAmount"] == 0.0

    def test_zero_totals_are_rejected(self, client, invoice_payload):
        invoice_payload["totalAmount"] = 0

        response = client.post("/api/invoices", json=invoice_payload)

        assert response.status_code == 400
        assert response.json() == {"error": "totalHours and totalAmount are required"}

    def test_invalid_status(self, client, invoice_payload):
        invoice_payload["status"] = "lost"

        response = client.post("/api/invoices", json=invoice_payload)

        assert response.status_code == 400

    def test_referenced_entries_are_resolved(self, client, invoice_payload, entry_payload):
        entry = client.post("/api/time-entries", json=entry_payload).json()
        invoice_payload["timeEntryIds"] = [entry["_id"], "gone"]

        body = client.post("/api/invoices", json=invoice_payload).json()

        assert body["timeEntryIds"] == [entry["_id"], "gone"]
        assert [e["_id"] for e in body["timeEntries"]] == [entry["_id"]]


class TestInvoiceFromTimeEntries:

    def test_totals_from_entries(self, client, entry_payload):
        first = client.post("/api/time-entries", json=entry_payload).json()
        entry_payload.update(startTime="2024-01-02T09:00:00Z", endTime="2024-01-02T10:00:00Z", billableRate=50)
        second = client.post("/api/time-entries", json=entry_payload).json()

        response = client.post("/api/invoices/from-time-entries", json={
            "freelancerId": "f1",
            "clientName": "Acme",
            "timeEntryIds": [first["_id"], second["_id"]],
        })

        assert response.status_code == 201
        body = response.json()
        assert body["totalHours"] == 3.5
        assert body["totalAmount"] == 300.0
        assert body["ratePerHour"] == 85.71

    def test_unknown_entry(self, client):
        response = client.post("/api/invoices/from-time-entries", json={
            "freelancerId": "f1",
            "clientName": "Acme",
            "timeEntryIds": ["nope"],
        })

        assert response.status_code == 400
        assert response.json() == {"error": "Time entry nope does not exist"}


class TestInvoiceQueries:

    def test_get_missing(self, client):
        response = client.get("/api/invoices/doesnotexist")

        assert response.status_code == 404
        assert response.json() == {"error": "Invoice not found"}

    def test_delete(self, client, invoice_payload):
        created = client.post("/api/invoices", json=invoice_payload).json()

        response = client.delete(f"/api/invoices/{created['_id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Invoice deleted successfully"}
        assert client.delete(f"/api/invoices/{created['_id']}").status_code == 404

    def test_list_newest_first(self, client, invoice_payload):
        first = client.post("/api/invoices", json=invoice_payload).json()
        second = client.post("/api/invoices", json=invoice_payload).json()

        ids = [invoice["_id"] for invoice in client.get("/api/invoices").json()]

        assert ids == [second["_id"], first["_id"]]

    def test_top_clients(self, client, invoice_payload):
        for name, count in (("Acme", 3), ("Beta", 5)):
            for _ in range(count):
                client.post("/api/invoices", json={**invoice_payload, "clientName": name})

        response = client.get("/api/invoices/top-clients")

        assert response.status_code == 200
        assert response.json() == [
            {"name": "Beta", "totalInvoices": 5, "totalAmount": 5000.0},
            {"name": "Acme", "totalInvoices": 3, "totalAmount": 3000.0},
        ]

    def test_top_clients_limit(self, client, invoice_payload):
        for name in ("Acme", "Beta", "Gamma"):
            client.post("/api/invoices", json={**invoice_payload, "clientName": name})

        response = client.get("/api/invoices/top-clients", params={"limit": 1})

        assert len(response.json()) == 1

    def test_top_clients_when_empty(self, client):
        assert client.get("/api/invoices/top-clients").json() == []
