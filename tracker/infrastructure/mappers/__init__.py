"""
Mappers between domain entities and SQLAlchemy models.
"""

from .client_mapper import ClientMapper
from .invoice_mapper import InvoiceMapper
from .time_entry_mapper import TimeEntryMapper

__all__ = ["ClientMapper", "InvoiceMapper", "TimeEntryMapper"]
