"""
Unit tests for BillingService domain service.
"""

import math
from datetime import datetime, timezone

import pytest

from tracker.domain.models.time_entry import TimeEntry
from tracker.domain.services.billing_service import (
    BillingService,
    elapsed_hours,
    format_duration,
    round_currency,
)


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def make_entry(start, end, rate=100.0, client="Acme"):
    return TimeEntry(
        freelancer_id="f1",
        client_name=client,
        start_time=start,
        end_time=end,
        billable_rate=rate,
    )


class TestRoundCurrency:
    """Test cases for two-decimal rounding."""

    @pytest.mark.parametrize("value,expected", [
        (10.005, 10.01),
        (1000.005, 1000.01),
        (2.675, 2.68),
        (2.5, 2.5),
        (0.333333, 0.33),
        (-1.005, -1.01),
    ])
    def test_rounds_half_up(self, value, expected):
        assert round_currency(value) == expected

    def test_none_becomes_zero(self):
        assert round_currency(None) == 0.0

    def test_nan_passes_through(self):
        assert math.isnan(round_currency(math.nan))


class TestDurationHelpers:

    def test_elapsed_hours(self):
        assert elapsed_hours(utc(2024, 1, 1, 9), utc(2024, 1, 1, 11, 30)) == 2.5

    def test_elapsed_hours_missing_bound_is_nan(self):
        assert math.isnan(elapsed_hours(None, utc(2024, 1, 1, 9)))

    def test_naive_values_are_treated_as_utc(self):
        assert elapsed_hours(datetime(2024, 1, 1, 9), utc(2024, 1, 1, 10)) == 1.0

    @pytest.mark.parametrize("hours,expected", [
        (2.5, "2h 30m"),
        (1 / 3, "0h 20m"),
        (0.0, "0h 0m"),
        (8.25, "8h 15m"),
    ])
    def test_format_duration(self, hours, expected):
        assert format_duration(hours) == expected


class TestBillingService:
    """Test cases for BillingService domain service."""

    def setup_method(self):
        """Set up test fixtures."""
        self.billing_service = BillingService()

    def test_figures_for_standard_entry(self):
        """09:00 to 11:30 at 100/h."""
        entry = make_entry(utc(2024, 1, 1, 9), utc(2024, 1, 1, 11, 30))

        figures = self.billing_service.figures_for(entry)

        assert figures.hours == 2.5
        assert figures.total_amount == 250.0
        assert figures.duration == "2h 30m"
        assert figures.date.isoformat() == "2024-01-01"

    def test_amount_uses_rounded_hours(self):
        """20 minutes rounds to 0.33h, so 100/h bills 33.00 rather than 33.33."""
        entry = make_entry(utc(2024, 1, 1, 9), utc(2024, 1, 1, 9, 20))

        figures = self.billing_service.figures_for(entry)

        assert figures.hours == 0.33
        assert figures.total_amount == 33.0
        assert figures.duration == "0h 20m"

    def test_zero_rate(self):
        assert self.billing_service.calculate_amount(2.5, 0) == 0.0

    def test_missing_rate_is_nan(self):
        assert math.isnan(self.billing_service.calculate_amount(2.5, None))

    def test_date_comes_from_utc_start(self):
        entry = make_entry(utc(2024, 1, 1, 23, 30), utc(2024, 1, 2, 0, 30))

        figures = self.billing_service.figures_for(entry)

        assert figures.date.isoformat() == "2024-01-01"
        assert figures.hours == 1.0

    def test_summarize_entries(self):
        entries = [
            make_entry(utc(2024, 1, 1, 9), utc(2024, 1, 1, 11, 30), rate=100),
            make_entry(utc(2024, 1, 2, 9), utc(2024, 1, 2, 10), rate=50),
        ]

        totals = self.billing_service.summarize_entries(entries)

        assert totals == {
            "total_hours": 3.5,
            "total_amount": 300.0,
            "rate_per_hour": 85.71,
            "entry_count": 2,
        }

    def test_summarize_no_entries(self):
        totals = self.billing_service.summarize_entries([])

        assert totals["total_hours"] == 0.0
        assert totals["total_amount"] == 0.0
        assert totals["rate_per_hour"] is None
        assert totals["entry_count"] == 0
