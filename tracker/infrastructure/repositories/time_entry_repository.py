"""
Time entry repository implementation using SQLAlchemy.
"""

from typing import Callable, Iterable, List, Optional
from datetime import datetime

from sqlalchemy import desc
from sqlalchemy.orm import Session

from tracker.domain.models.base import EntityNotFoundError, utcnow
from tracker.domain.models.time_entry import TimeEntry
from tracker.domain.repositories.time_entry_repository import TimeEntryRepository as TimeEntryRepositoryInterface
from tracker.infrastructure.db.models import TimeEntryModel, generate_id
from tracker.infrastructure.mappers.time_entry_mapper import TimeEntryMapper


class SQLAlchemyTimeEntryRepository(TimeEntryRepositoryInterface):
    """SQLAlchemy implementation of time entry repository."""

    def __init__(self, session: Session, clock: Callable[[], datetime] = utcnow):
        self.session = session
        self.clock = clock
        self.mapper = TimeEntryMapper()
        self.model = TimeEntryModel

    def save(self, time_entry: TimeEntry) -> TimeEntry:
        """Save a time entry entity."""
        # Last-line check; nothing invalid reaches the table.
        time_entry.validate()
        now = self.clock()

        if time_entry.is_new:
            time_entry.id = generate_id()
            time_entry.created_at = now
            time_entry.updated_at = now
            model = self.mapper.domain_to_model(time_entry)
            self.session.add(model)
        else:
            model = self.session.get(TimeEntryModel, time_entry.id)
            if model is None:
                raise EntityNotFoundError("Time entry", time_entry.id)
            time_entry.updated_at = now
            self.mapper.update_model(model, time_entry)

        self.session.commit()
        return self.mapper.model_to_domain(model)

    def get_by_id(self, entry_id: str) -> Optional[TimeEntry]:
        """Get time entry by ID."""
        model = self.session.get(TimeEntryModel, entry_id)
        if model is None:
            return None
        return self.mapper.model_to_domain(model)

    def get_many(self, entry_ids: Iterable[str]) -> List[TimeEntry]:
        """Get the existing entries among the given IDs, keeping their order."""
        wanted = [entry_id for entry_id in entry_ids if entry_id]
        if not wanted:
            return []
        models = self.session.query(TimeEntryModel).filter(TimeEntryModel.id.in_(wanted)).all()
        by_id = {model.id: model for model in models}
        return [self.mapper.model_to_domain(by_id[entry_id]) for entry_id in wanted if entry_id in by_id]

    def list_all(self) -> List[TimeEntry]:
        """Get all time entries, newest created first."""
        models = self.session.query(TimeEntryModel).order_by(desc(TimeEntryModel.created_at)).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def delete(self, entry_id: str) -> Optional[TimeEntry]:
        """Delete time entry by ID, returning what was removed."""
        model = self.session.get(TimeEntryModel, entry_id)
        if model is None:
            return None

        deleted = self.mapper.model_to_domain(model)
        self.session.delete(model)
        self.session.commit()
        return deleted
