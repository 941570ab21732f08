"""Dashboard statistics computed from entries, invoices and clients.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterable, List, Optional

from tracker.domain.models.invoice import Invoice, InvoiceStatus, UNKNOWN_CLIENT_LABEL
from tracker.domain.models.time_entry import TimeEntry
from tracker.domain.services.billing_service import BillingService, round_currency


DEFAULT_RECENT_ACTIVITY = 5


@dataclass
class ActivityItem:
    type: str
    detail: str
    date: Optional[date]
    timestamp: int


@dataclass
class DashboardSummary:
    today_hours: float = 0.0
    week_hours: float = 0.0
    pending_invoices: float = 0.0
    active_clients: int = 0
    recent_activity: List[ActivityItem] = field(default_factory=list)


def week_start(today: date) -> date:
    """Most recent Monday on or before ``today``."""
    return today - timedelta(days=today.weekday())


def _format_number(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return str(value)


def _date_timestamp(day: Optional[date]) -> int:
    """Milliseconds since the epoch of midnight UTC on ``day``."""
    if day is None:
        return 0
    midnight = datetime.combine(day, time.min, tzinfo=timezone.utc)
    return int(midnight.timestamp() * 1000)


class DashboardService:
    """
    Summarizes tracked time and invoicing for the dashboard.
    "Active clients" counts every client record, with no activity filter.
    """

    def __init__(self, billing_service: Optional[BillingService] = None):
        self.billing_service = billing_service or BillingService()

    def summarize(
        self,
        entries: Iterable[TimeEntry],
        invoices: Iterable[Invoice],
        client_count: int,
        today: date,
        currency: str = "USD",
        activity_limit: int = DEFAULT_RECENT_ACTIVITY,
    ) -> DashboardSummary:
        entries = list(entries)
        invoices = list(invoices)
        monday = week_start(today)

        today_hours = 0.0
        week_hours = 0.0
        activity: List[ActivityItem] = []

        for entry in entries:
            figures = self.billing_service.figures_for(entry)
            if figures.date == today:
                today_hours += figures.hours
            if figures.date is not None and figures.date >= monday:
                week_hours += figures.hours
            activity.append(ActivityItem(
                type="Time Entry",
                detail=f"{_format_number(figures.hours)} hrs for {entry.client_name or UNKNOWN_CLIENT_LABEL}",
                date=figures.date,
                timestamp=_date_timestamp(figures.date),
            ))

        pending_total = 0.0
        for invoice in invoices:
            amount = invoice.total_amount or 0
            if invoice.status == InvoiceStatus.PENDING:
                pending_total += amount
            issued = invoice.generated_at.date() if invoice.generated_at else None
            activity.append(ActivityItem(
                type="Invoice",
                detail=(
                    f"{currency} {_format_number(amount)} for {invoice.client_label} "
                    f"({InvoiceStatus.parse(invoice.status).value})"
                ),
                date=issued,
                timestamp=_date_timestamp(issued),
            ))

        # Stable sort keeps entries ahead of invoices on the same day.
        activity.sort(key=lambda item: item.timestamp, reverse=True)

        return DashboardSummary(
            today_hours=round_currency(today_hours),
            week_hours=round_currency(week_hours),
            pending_invoices=round_currency(pending_total),
            active_clients=client_count,
            recent_activity=activity[:max(activity_limit, 0)],
        )
