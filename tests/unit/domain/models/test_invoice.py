"""
Unit tests for Invoice domain model.
"""

import pytest

from tracker.domain.models.base import ValidationError
from tracker.domain.models.invoice import Invoice, InvoiceStatus


def make_invoice(**overrides):
    data = dict(freelancer_id="f1", client_name="Acme", total_hours=10.0, total_amount=1000.0)
    data.update(overrides)
    return Invoice(**data)


class TestInvoiceStatus:

    @pytest.mark.parametrize("raw", [None, ""])
    def test_defaults_to_pending(self, raw):
        assert InvoiceStatus.parse(raw) == InvoiceStatus.PENDING

    def test_parse_known_value(self):
        assert InvoiceStatus.parse("paid") == InvoiceStatus.PAID

    def test_parse_unknown_value(self):
        with pytest.raises(ValidationError, match="Invalid status 'lost'"):
            InvoiceStatus.parse("lost")


class TestInvoice:

    def test_defaults(self):
        invoice = make_invoice()
        invoice.validate()

        assert invoice.status == InvoiceStatus.PENDING
        assert invoice.is_pending
        assert invoice.time_entry_ids == []
        assert invoice.generated_at is None

    @pytest.mark.parametrize("overrides,message", [
        ({"freelancer_id": ""}, "freelancerId is required"),
        ({"client_name": None}, "clientName is required"),
        ({"total_hours": None}, "totalHours and totalAmount are required"),
        ({"total_amount": -5.0}, "totalAmount cannot be negative"),
    ])
    def test_validation(self, overrides, message):
        with pytest.raises(ValidationError, match=message):
            make_invoice(**overrides).validate()

    def test_totals_rounded_to_zero_are_valid(self):
        make_invoice(total_hours=0.0, total_amount=0.0).validate()

    def test_client_label(self):
        assert make_invoice().client_label == "Acme"
        assert make_invoice(client_name="").client_label == "Unknown Client"
