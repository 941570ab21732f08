"""
Invoice domain model.
Represents invoices generated from tracked work.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from tracker.domain.models.base import BaseEntity, ValidationError


UNKNOWN_CLIENT_LABEL = "Unknown Client"


class InvoiceStatus(str, Enum):
    """Invoice status."""
    DRAFT = "draft"
    PENDING = "pending"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: Optional[str]) -> "InvoiceStatus":
        """Resolve a raw status, defaulting to pending when it is not given."""
        if value is None or value == "":
            return cls.PENDING
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(status.value for status in cls)
            raise ValidationError(f"Invalid status '{value}'. Allowed: {allowed}", "status")


@dataclass(eq=False)
class Invoice(BaseEntity):
    """
    Invoice aggregate.
    Totals are always stored rounded to two decimals.
    """

    freelancer_id: str
    client_name: str
    total_hours: float
    total_amount: float
    freelancer_name: Optional[str] = None
    project: Optional[str] = None
    rate_per_hour: Optional[float] = None
    status: InvoiceStatus = InvoiceStatus.PENDING
    generated_at: Optional[datetime] = None
    # Weak references; the entries may be deleted independently.
    time_entry_ids: List[str] = field(default_factory=list)

    def validate(self) -> None:
        """Validate invoice state."""
        if not self.freelancer_id:
            raise ValidationError("freelancerId is required", "freelancer_id")
        if not self.client_name:
            raise ValidationError("clientName is required", "client_name")
        if self.total_hours is None or self.total_amount is None:
            raise ValidationError("totalHours and totalAmount are required", "total_hours")
        if self.total_hours < 0:
            raise ValidationError("totalHours cannot be negative", "total_hours")
        if self.total_amount < 0:
            raise ValidationError("totalAmount cannot be negative", "total_amount")
        if self.rate_per_hour is not None and self.rate_per_hour < 0:
            raise ValidationError("ratePerHour cannot be negative", "rate_per_hour")

    @property
    def client_label(self) -> str:
        return self.client_name or UNKNOWN_CLIENT_LABEL

    @property
    def is_pending(self) -> bool:
        return self.status == InvoiceStatus.PENDING
