"""
Time Entry DTOs for the application layer.
Data Transfer Objects for time tracking operations.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tracker.domain.models.time_entry import TimeEntry
from tracker.domain.services.billing_service import EntryFigures
from .base_dto import BaseDTO, RequestDTO, ResponseDTO


class CreateTimeEntryRequestDTO(RequestDTO):
    """
    DTO for time entry creation.
    Presence is checked by EntryValidator, not here.
    """

    freelancer_id: Optional[str] = Field(default=None, description="Freelancer identifier")
    project: Optional[str] = Field(default=None, max_length=255, description="Project name")
    client_name: Optional[str] = Field(default=None, max_length=255, description="Client name")
    start_time: Optional[datetime] = Field(default=None, description="Start timestamp (ISO 8601)")
    end_time: Optional[datetime] = Field(default=None, description="End timestamp (ISO 8601)")
    description: Optional[str] = Field(default=None, description="Work description")
    billable_rate: Optional[float] = Field(default=None, description="Hourly rate")


class UpdateTimeEntryRequestDTO(CreateTimeEntryRequestDTO):
    """DTO for partial time entry updates; unset fields are left untouched."""


class TimeEntryResponseDTO(ResponseDTO):
    """Time entry with its derived fields attached."""

    freelancer_id: str
    project: Optional[str] = None
    client_name: str
    start_time: datetime
    end_time: datetime
    description: Optional[str] = None
    billable_rate: float

    # Derived
    hours: float
    date: Optional[str] = None
    client: Optional[str] = None
    total_amount: float
    duration: str

    @classmethod
    def from_domain(cls, entry: TimeEntry, figures: EntryFigures) -> "TimeEntryResponseDTO":
        return cls(
            id=entry.id,
            freelancer_id=entry.freelancer_id,
            project=entry.project,
            client_name=entry.client_name,
            start_time=entry.start_time,
            end_time=entry.end_time,
            description=entry.description,
            billable_rate=entry.billable_rate,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
            hours=figures.hours,
            date=figures.date.isoformat() if figures.date else None,
            client=entry.client_name,
            total_amount=figures.total_amount,
            duration=figures.duration,
        )


class TimeEntryDeletedResponseDTO(BaseDTO):
    """Confirmation of a deletion, echoing the removed entry."""

    message: str
    deleted_entry: TimeEntryResponseDTO
