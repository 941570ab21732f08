"""Helpers shared by the mappers."""

from datetime import datetime
from typing import Optional

from tracker.domain.models.base import ensure_utc


def to_storage_datetime(value: Optional[datetime]) -> Optional[datetime]:
    """Instants are stored as naive UTC so every backend compares them alike."""
    if value is None:
        return None
    return ensure_utc(value).replace(tzinfo=None)
