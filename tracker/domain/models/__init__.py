"""
Domain models for the time tracker.
"""

from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    BusinessRuleViolation,
    EntityNotFoundError,
)
from .client import Client
from .invoice import Invoice, InvoiceStatus
from .time_entry import TimeEntry

__all__ = [
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "Client",
    "Invoice",
    "InvoiceStatus",
    "TimeEntry",
]
