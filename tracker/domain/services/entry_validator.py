"""Validation rules for time entry payloads.
Runs before anything is written; the entity re-checks ordering on save.
"""

from datetime import datetime
from typing import Any, Mapping, Optional, Tuple

from tracker.domain.models.base import ValidationError, ensure_utc


# Checked in this order; the first missing one is reported.
REQUIRED_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("freelancer_id", "freelancerId"),
    ("client_name", "clientName"),
    ("start_time", "startTime"),
    ("end_time", "endTime"),
    ("billable_rate", "billableRate"),
)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


class EntryValidator:
    """Validates create and partial update payloads for time entries."""

    def validate_create(self, payload: Mapping[str, Any]) -> None:
        for field, label in REQUIRED_FIELDS:
            if _is_missing(payload.get(field)):
                raise ValidationError(f"{label} is required", field)

        self._check_rate(payload["billable_rate"])
        self.check_ordering(payload["start_time"], payload["end_time"])

    def validate_update(
        self,
        changes: Mapping[str, Any],
        current_start: Optional[datetime] = None,
        current_end: Optional[datetime] = None,
    ) -> None:
        """
        Validate only the fields present in ``changes``.
        Required fields may be changed but not blanked out.
        """
        for field, label in REQUIRED_FIELDS:
            if field in changes and _is_missing(changes[field]):
                raise ValidationError(f"{label} is required", field)

        if "billable_rate" in changes:
            self._check_rate(changes["billable_rate"])

        if "start_time" in changes or "end_time" in changes:
            start = changes.get("start_time", current_start)
            end = changes.get("end_time", current_end)
            if start is not None and end is not None:
                self.check_ordering(start, end)

    def check_ordering(self, start: datetime, end: datetime) -> None:
        if ensure_utc(end) <= ensure_utc(start):
            raise ValidationError("End time must be after start time", "end_time")

    def _check_rate(self, rate: Any) -> None:
        try:
            value = float(rate)
        except (TypeError, ValueError):
            raise ValidationError("billableRate must be a number", "billable_rate")
        # A rate of 0 is accepted, unlike the truthy check on invoice totals.
        if value < 0:
            raise ValidationError("billableRate cannot be negative", "billable_rate")
