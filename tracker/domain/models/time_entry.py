"""
TimeEntry domain model.
Represents a block of tracked work for a client.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from tracker.domain.models.base import BaseEntity, ValidationError, ensure_utc


@dataclass(eq=False)
class TimeEntry(BaseEntity):
    """
    TimeEntry entity.
    Hours, amount and duration are never stored; see BillingService.
    """

    freelancer_id: str
    client_name: str
    start_time: datetime
    end_time: datetime
    billable_rate: float
    project: Optional[str] = None
    description: Optional[str] = None

    def validate(self) -> None:
        """Validate time entry state before it is persisted."""
        if not self.freelancer_id:
            raise ValidationError("freelancerId is required", "freelancer_id")
        if not self.client_name:
            raise ValidationError("clientName is required", "client_name")
        if self.start_time is None:
            raise ValidationError("startTime is required", "start_time")
        if self.end_time is None:
            raise ValidationError("endTime is required", "end_time")
        if self.billable_rate is None:
            raise ValidationError("billableRate is required", "billable_rate")
        if self.billable_rate < 0:
            raise ValidationError("billableRate cannot be negative", "billable_rate")
        if ensure_utc(self.end_time) <= ensure_utc(self.start_time):
            raise ValidationError("End time must be after start time", "end_time")

    def apply_changes(self, changes: dict) -> None:
        """Overwrite the given attributes and bump updated_at."""
        for name, value in changes.items():
            if not hasattr(self, name):
                raise ValidationError(f"Unknown time entry field: {name}", name)
            setattr(self, name, value)
        self.mark_as_updated()
