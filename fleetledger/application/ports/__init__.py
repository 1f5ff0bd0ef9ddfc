"""Application ports package."""

from .database import DatabaseEnginePort
from .fleet_repository import FleetRepositoryPort

__all__ = ["DatabaseEnginePort", "FleetRepositoryPort"]
