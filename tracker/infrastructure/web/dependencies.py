"""
Shared FastAPI dependencies: repositories bound to the request session
and the server's notion of "today".
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from fastapi import Depends
from sqlalchemy.orm import Session

from tracker.config import settings
from tracker.infrastructure.db.database import get_db
from tracker.infrastructure.repositories import (
    SQLAlchemyClientRepository,
    SQLAlchemyInvoiceRepository,
    SQLAlchemyTimeEntryRepository,
)


def local_today() -> date:
    """Current date in the configured timezone."""
    return datetime.now(ZoneInfo(settings.timezone)).date()


def get_time_entry_repository(session: Session = Depends(get_db)) -> SQLAlchemyTimeEntryRepository:
    """Dependency to get time entry repository."""
    return SQLAlchemyTimeEntryRepository(session)


def get_invoice_repository(session: Session = Depends(get_db)) -> SQLAlchemyInvoiceRepository:
    """Dependency to get invoice repository."""
    return SQLAlchemyInvoiceRepository(session)


def get_client_repository(session: Session = Depends(get_db)) -> SQLAlchemyClientRepository:
    """Dependency to get client repository."""
    return SQLAlchemyClientRepository(session)
