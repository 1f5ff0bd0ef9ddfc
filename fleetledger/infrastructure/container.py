"""Composition root for wiring infrastructure adapters."""

from fleetledger.application.ports.database import DatabaseEnginePort
from fleetledger.application.ports.fleet_repository import FleetRepositoryPort
from fleetledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from fleetledger.infrastructure.fleet_repository import (
    SqlAlchemyFleetRepository,
)
from fleetledger.infrastructure.logging.logger import get_app_logger


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_fleet_repository(
    db_port: DatabaseEnginePort | None = None,
) -> FleetRepositoryPort:
    """Return the repository reading back-office finance data."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyFleetRepository(resolved_db, logger=get_app_logger())


__all__ = ["build_database_adapter", "build_fleet_repository"]
