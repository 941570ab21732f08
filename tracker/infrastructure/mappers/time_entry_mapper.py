"""
Time entry mapper for converting between domain entities and database models.
"""

from tracker.domain.models.base import ensure_utc
from tracker.domain.models.time_entry import TimeEntry
from tracker.infrastructure.db.models import TimeEntryModel
from tracker.infrastructure.mappers.utils import to_storage_datetime


class TimeEntryMapper:
    """Maps between TimeEntry domain entity and TimeEntryModel database model."""

    def domain_to_model(self, time_entry: TimeEntry) -> TimeEntryModel:
        """Convert TimeEntry domain entity to a new TimeEntryModel."""
        model = TimeEntryModel(id=time_entry.id)
        self.update_model(model, time_entry)
        model.created_at = to_storage_datetime(time_entry.created_at)
        return model

    def update_model(self, model: TimeEntryModel, time_entry: TimeEntry) -> None:
        """Copy mutable fields of the entity onto an existing row."""
        model.freelancer_id = time_entry.freelancer_id
        model.project = time_entry.project
        model.client_name = time_entry.client_name
        model.start_time = to_storage_datetime(time_entry.start_time)
        model.end_time = to_storage_datetime(time_entry.end_time)
        model.description = time_entry.description
        model.billable_rate = float(time_entry.billable_rate)
        model.updated_at = to_storage_datetime(time_entry.updated_at)

    def model_to_domain(self, model: TimeEntryModel) -> TimeEntry:
        """Convert TimeEntryModel to TimeEntry domain entity."""
        return TimeEntry(
            id=model.id,
            freelancer_id=model.freelancer_id,
            project=model.project,
            client_name=model.client_name,
            start_time=ensure_utc(model.start_time),
            end_time=ensure_utc(model.end_time),
            description=model.description,
            billable_rate=model.billable_rate,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )
