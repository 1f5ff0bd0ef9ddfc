"""SQLAlchemy engine for the fleet back-office database.

The engine is created lazily from ``FLEET_DB_URL`` and shared by every
repository in the process until :func:`dispose_fleet_engine` releases it.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from fleetledger.application.ports.database import DatabaseEnginePort

FLEET_DB_URL_VAR = "FLEET_DB_URL"
POOL_SIZE = 5
MAX_OVERFLOW = 5

_fleet_engine: Optional[Engine] = None


def _get_env_var(name: str) -> str:
    """Return a required environment variable, loading ``.env`` first.

    Raises:
        RuntimeError: If the variable is unset or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build a pooled engine that checks connections before use."""
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=POOL_SIZE,
        max_overflow=MAX_OVERFLOW,
        pool_pre_ping=True,
    )


def get_fleet_engine() -> Engine:
    """Return the shared back-office engine, creating it on first use.

    Returns:
        Engine: Engine bound to ``FLEET_DB_URL``.

    Raises:
        RuntimeError: If ``FLEET_DB_URL`` is not configured.
    """
    global _fleet_engine
    if _fleet_engine is None:
        _fleet_engine = _create_engine(_get_env_var(FLEET_DB_URL_VAR))
    return _fleet_engine


def dispose_fleet_engine() -> None:
    """Close pooled connections and forget the shared engine."""
    global _fleet_engine
    if _fleet_engine is not None:
        _fleet_engine.dispose()
        _fleet_engine = None


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort backed by the module-level engine."""

    def get_fleet_engine(self) -> Engine:
        return get_fleet_engine()


__all__ = [
    "FLEET_DB_URL_VAR",
    "dispose_fleet_engine",
    "get_fleet_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
