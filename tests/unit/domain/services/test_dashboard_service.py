"""
Unit tests for DashboardService.
"""

from datetime import date, datetime, timezone

from tracker.domain.models.invoice import Invoice, InvoiceStatus
from tracker.domain.models.time_entry import TimeEntry
from tracker.domain.services.dashboard_service import DashboardService, week_start


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def make_entry(start, end, client, rate=100.0):
    return TimeEntry(
        freelancer_id="f1",
        client_name=client,
        start_time=start,
        end_time=end,
        billable_rate=rate,
    )


def make_invoice(client, amount, status, generated_at):
    return Invoice(
        freelancer_id="f1",
        client_name=client,
        total_hours=1.0,
        total_amount=amount,
        status=status,
        generated_at=generated_at,
    )


# Wednesday
TODAY = date(2024, 1, 10)


class TestWeekStart:

    def test_midweek(self):
        assert week_start(TODAY) == date(2024, 1, 8)

    def test_monday_is_its_own_week_start(self):
        assert week_start(date(2024, 1, 8)) == date(2024, 1, 8)

    def test_sunday_belongs_to_previous_monday(self):
        assert week_start(date(2024, 1, 14)) == date(2024, 1, 8)


class TestDashboardService:

    def setup_method(self):
        self.service = DashboardService()
        self.entries = [
            make_entry(utc(2024, 1, 10, 9), utc(2024, 1, 10, 11, 30), "Acme"),
            make_entry(utc(2024, 1, 8, 10), utc(2024, 1, 8, 11), "Beta"),
            make_entry(utc(2024, 1, 5, 10), utc(2024, 1, 5, 11), "Gamma"),
        ]
        self.invoices = [
            make_invoice("Acme", 500.0, InvoiceStatus.PENDING, utc(2024, 1, 9, 15)),
            make_invoice("Beta", 200.0, InvoiceStatus.PAID, utc(2024, 1, 10, 8)),
        ]

    def test_headline_numbers(self):
        summary = self.service.summarize(self.entries, self.invoices, client_count=3, today=TODAY)

        assert summary.today_hours == 2.5
        assert summary.week_hours == 3.5
        assert summary.pending_invoices == 500.0
        assert summary.active_clients == 3

    def test_recent_activity_newest_first(self):
        summary = self.service.summarize(self.entries, self.invoices, client_count=3, today=TODAY)

        assert [(item.type, item.detail) for item in summary.recent_activity] == [
            ("Time Entry", "2.5 hrs for Acme"),
            ("Invoice", "USD 200 for Beta (paid)"),
            ("Invoice", "USD 500 for Acme (pending)"),
            ("Time Entry", "1 hrs for Beta"),
            ("Time Entry", "1 hrs for Gamma"),
        ]
        assert summary.recent_activity[0].date == TODAY
        assert summary.recent_activity[0].timestamp == 1704844800000

    def test_activity_limit(self):
        summary = self.service.summarize(
            self.entries, self.invoices, client_count=0, today=TODAY, activity_limit=2
        )

        assert len(summary.recent_activity) == 2

    def test_currency_label(self):
        summary = self.service.summarize([], self.invoices[:1], client_count=0, today=TODAY, currency="EUR")

        assert summary.recent_activity[0].detail == "EUR 500 for Acme (pending)"

    def test_empty(self):
        summary = self.service.summarize([], [], client_count=0, today=TODAY)

        assert summary.today_hours == 0.0
        assert summary.week_hours == 0.0
        assert summary.pending_invoices == 0.0
        assert summary.recent_activity == []
