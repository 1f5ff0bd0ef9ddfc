"""Database ports for the fleet back office.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations provide concrete adapters
that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the back-office database engine."""

    def get_fleet_engine(self) -> Engine:
        """Get the engine for the back-office database.

        Returns:
            Engine: SQLAlchemy engine connected to the fleet database.
        """


__all__ = ["DatabaseEnginePort"]
