"""
Database configuration, session management and the startup connection loop.
"""

import asyncio
import logging
from typing import Any, Dict, Generator, Optional

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from tracker.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine; SQLite connections may be shared across request threads."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


# Create SQLAlchemy engine
engine = build_engine(settings.database_url, echo=settings.debug)

# Create SessionLocal class
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)

# Create declarative base
Base = declarative_base()


class ConnectionState:
    """Connection status reported by the health endpoints."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"

    def __init__(self) -> None:
        self.state = self.DISCONNECTED
        self.attempts = 0
        self.last_error: Optional[str] = None


connection_state = ConnectionState()


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function to get database session.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Optional[Engine] = None) -> None:
    """Ping the database and create any missing tables."""
    # Register the mapped tables on Base.metadata
    from tracker.infrastructure.db import models  # noqa: F401

    bind = bind or engine
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))
    Base.metadata.create_all(bind=bind)


def describe_database(bind: Optional[Engine] = None) -> Dict[str, Any]:
    """Database name and tables, for the status endpoint."""
    bind = bind or engine
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))
    return {
        "database": bind.url.database,
        "tables": sorted(inspect(bind).get_table_names()),
    }


async def connect_with_retry(
    delay_seconds: Optional[float] = None,
    bind: Optional[Engine] = None,
) -> None:
    """
    Keep trying to reach the database until it answers.
    Fixed delay, unbounded attempts; every failure is logged.
    """
    delay = settings.db_retry_delay_seconds if delay_seconds is None else delay_seconds
    connection_state.state = ConnectionState.CONNECTING

    while True:
        connection_state.attempts += 1
        try:
            await asyncio.to_thread(init_db, bind)
        except SQLAlchemyError as exc:
            connection_state.last_error = str(exc)
            logger.error(
                f"Database connection attempt {connection_state.attempts} failed: {exc}. "
                f"Retrying in {delay} seconds"
            )
            await asyncio.sleep(delay)
            continue

        connection_state.state = ConnectionState.CONNECTED
        connection_state.last_error = None
        logger.info(f"Database connected: {(bind or engine).url.render_as_string(hide_password=True)}")
        return
