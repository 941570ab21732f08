"""
Domain services.
Stateless business logic that does not belong to a single entity.
"""

from .billing_service import BillingService, EntryFigures, round_currency
from .entry_validator import EntryValidator
from .aggregation_service import AggregationService, ClientTotals
from .dashboard_service import DashboardService, DashboardSummary, ActivityItem

__all__ = [
    "BillingService",
    "EntryFigures",
    "round_currency",
    "EntryValidator",
    "AggregationService",
    "ClientTotals",
    "DashboardService",
    "DashboardSummary",
    "ActivityItem",
]
