"""
Dashboard DTOs.
"""

from typing import List, Optional

from pydantic import Field

from tracker.domain.services.dashboard_service import ActivityItem, DashboardSummary
from .base_dto import BaseDTO
from .invoice_dto import TopClientResponseDTO


class ActivityItemDTO(BaseDTO):
    type: str
    detail: str
    date: Optional[str] = None
    timestamp: int

    @classmethod
    def from_domain(cls, item: ActivityItem) -> "ActivityItemDTO":
        return cls(
            type=item.type,
            detail=item.detail,
            date=item.date.isoformat() if item.date else None,
            timestamp=item.timestamp,
        )


class DashboardResponseDTO(BaseDTO):
    """Headline numbers, recent activity and top clients."""

    today_hours: float
    week_hours: float
    pending_invoices: float
    active_clients: int
    recent_activity: List[ActivityItemDTO] = Field(default_factory=list)
    top_clients: List[TopClientResponseDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(
        cls,
        summary: DashboardSummary,
        top_clients: List[TopClientResponseDTO],
    ) -> "DashboardResponseDTO":
        return cls(
            today_hours=summary.today_hours,
            week_hours=summary.week_hours,
            pending_invoices=summary.pending_invoices,
            active_clients=summary.active_clients,
            recent_activity=[ActivityItemDTO.from_domain(item) for item in summary.recent_activity],
            top_clients=top_clients,
        )
