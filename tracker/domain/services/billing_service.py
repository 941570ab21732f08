"""Billing service for turning tracked time into billable figures.
Handles hour, amount and duration calculations and the rounding rules.
"""

import math
from dataclasses import dataclass
from datetime import datetime, date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from tracker.domain.models.base import ensure_utc
from tracker.domain.models.time_entry import TimeEntry


MILLISECONDS_PER_HOUR = 3_600_000
CENTS = Decimal("0.01")


def round_currency(value: Optional[float]) -> float:
    """
    Round to two decimals, half away from zero.

    Works on the shortest decimal representation of the float, so 10.005
    rounds to 10.01 even though its binary value sits just below the midpoint.
    NaN and infinities are returned unchanged.
    """
    if value is None:
        return 0.0
    if not math.isfinite(value):
        return value
    return float(Decimal(repr(float(value))).quantize(CENTS, rounding=ROUND_HALF_UP))


def elapsed_hours(start: Optional[datetime], end: Optional[datetime]) -> float:
    """Unrounded hours between two instants; NaN when either is missing."""
    if start is None or end is None:
        return math.nan
    milliseconds = (ensure_utc(end) - ensure_utc(start)) / timedelta(milliseconds=1)
    return milliseconds / MILLISECONDS_PER_HOUR


def format_duration(hours: float) -> str:
    """Human readable duration such as '2h 30m'."""
    if not math.isfinite(hours):
        return "NaNh NaNm"
    whole = math.floor(hours)
    minutes = Decimal(repr((hours % 1) * 60)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{whole}h {int(minutes)}m"


@dataclass(frozen=True)
class EntryFigures:
    """Derived, never persisted, values of a time entry."""

    hours: float
    total_amount: float
    duration: str
    date: Optional[date]


class BillingService:
    """
    Domain service for billing calculations.
    Hours are rounded first, then multiplied by the rate, then rounded again.
    """

    def calculate_hours(self, start: datetime, end: datetime) -> float:
        return round_currency(elapsed_hours(start, end))

    def calculate_amount(self, hours: float, rate: Optional[float]) -> float:
        """Amount for already rounded hours."""
        if rate is None:
            return math.nan
        return round_currency(hours * rate)

    def figures_for(self, entry: TimeEntry) -> EntryFigures:
        """Compute every derived field of a time entry."""
        raw_hours = elapsed_hours(entry.start_time, entry.end_time)
        hours = round_currency(raw_hours)
        start = ensure_utc(entry.start_time)
        return EntryFigures(
            hours=hours,
            total_amount=self.calculate_amount(hours, entry.billable_rate),
            duration=format_duration(raw_hours),
            date=start.date() if start else None,
        )

    def summarize_entries(self, entries: Iterable[TimeEntry]) -> dict:
        """
        Totals for invoicing a set of entries.
        Each entry contributes its own rounded hours and amount.
        """
        total_hours = 0.0
        total_amount = 0.0
        count = 0
        for entry in entries:
            figures = self.figures_for(entry)
            total_hours += figures.hours
            total_amount += figures.total_amount
            count += 1

        total_hours = round_currency(total_hours)
        total_amount = round_currency(total_amount)
        rate = round_currency(total_amount / total_hours) if total_hours else None
        return {
            "total_hours": total_hours,
            "total_amount": total_amount,
            "rate_per_hour": rate,
            "entry_count": count,
        }
