"""
Client domain model.
Time entries and invoices refer to clients by name only.
"""

from dataclasses import dataclass
from typing import Optional

from tracker.domain.models.base import BaseEntity, ValidationError


@dataclass(eq=False)
class Client(BaseEntity):
    """A customer the freelancer bills."""

    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    def validate(self) -> None:
        """Validate client state."""
        if not self.name or not self.name.strip():
            raise ValidationError("name is required", "name")

        if len(self.name) > 255:
            raise ValidationError("Client name too long (max 255 characters)", "name")

        if self.email and ("@" not in self.email or "." not in self.email.split("@")[-1]):
            raise ValidationError(f"Invalid email format: {self.email}", "email")
