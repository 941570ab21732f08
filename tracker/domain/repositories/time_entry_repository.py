"""Time Entry repository interface.
Defines the contract for time entry persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from tracker.domain.models.time_entry import TimeEntry


class TimeEntryRepository(ABC):
    """
    Repository interface for TimeEntry entity.
    """

    @abstractmethod
    def save(self, time_entry: TimeEntry) -> TimeEntry:
        """
        Insert or update a time entry.
        Returns the entry with id and timestamps assigned by storage.
        """

    @abstractmethod
    def get_by_id(self, entry_id: str) -> Optional[TimeEntry]:
        """Return the entry, or None if not found."""

    @abstractmethod
    def get_many(self, entry_ids: Iterable[str]) -> List[TimeEntry]:
        """Return the entries that exist among ``entry_ids``, in the given order."""

    @abstractmethod
    def list_all(self) -> List[TimeEntry]:
        """All entries, newest created first."""

    @abstractmethod
    def delete(self, entry_id: str) -> Optional[TimeEntry]:
        """Remove an entry and return it, or None if it did not exist."""
