"""
SQLAlchemy models for the database.
Each table stores one record type; client names are plain strings, not foreign keys.
"""

import uuid

from sqlalchemy import Column, String, DateTime, Text, Float, JSON, Index
from sqlalchemy.sql import func

from tracker.infrastructure.db.database import Base


def generate_id() -> str:
    return uuid.uuid4().hex


class TimeEntryModel(Base):
    """Time entry table."""

    __tablename__ = "time_entries"

    id = Column(String(32), primary_key=True, default=generate_id)
    freelancer_id = Column(String(255), nullable=False)
    project = Column(String(255))
    client_name = Column(String(255), nullable=False)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    description = Column(Text)
    billable_rate = Column(Float, nullable=False)

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        Index("idx_time_entries_created_at", "created_at"),
        Index("idx_time_entries_client_name", "client_name"),
    )


class InvoiceModel(Base):
    """Invoice table."""

    __tablename__ = "invoices"

    id = Column(String(32), primary_key=True, default=generate_id)
    freelancer_id = Column(String(255), nullable=False)
    freelancer_name = Column(String(255))
    client_name = Column(String(255), nullable=False)
    project = Column(String(255))
    total_hours = Column(Float, nullable=False)
    total_amount = Column(Float, nullable=False)
    rate_per_hour = Column(Float)
    status = Column(String(20), nullable=False, default="pending")
    generated_at = Column(DateTime, nullable=False)
    time_entry_ids = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        Index("idx_invoices_generated_at", "generated_at"),
        Index("idx_invoices_client_name", "client_name"),
    )


class ClientModel(Base):
    """Client table."""

    __tablename__ = "clients"

    id = Column(String(32), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255))
    phone = Column(String(50))
    address = Column(Text)

    created_at = Column(DateTime, nullable=False, server_default=func.now())
