"""SQLAlchemy-backed repository for fleet finance data."""

from collections.abc import Sequence
from datetime import date
import json

from sqlalchemy import bindparam, text

from fleetledger.application.ports.database import DatabaseEnginePort
from fleetledger.application.ports.fleet_repository import FleetRepositoryPort
from fleetledger.domain.models import (
    InvestorProfile,
    LedgerRecord,
    RoiSettings,
    VehicleFinancialConfig,
)
from fleetledger.infrastructure.logging.logger import get_app_logger

ROI_SETTINGS_ID = "roi_settings"


class SqlAlchemyFleetRepository(FleetRepositoryPort):
    """Repository backed by SQLAlchemy for the back-office tables.

    Values are handed over as stored; the domain layer validates ledger
    records and applies configuration defaults.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the fleet engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_investors(
        self,
        investor_id: str | None = None,
    ) -> list[InvestorProfile]:
        sql = """
            SELECT id, full_name, email
            FROM profiles
            WHERE role = 'investor'
            """
        params: dict[str, str] = {}
        if investor_id:
            sql += " AND id = :investor_id"
            params["investor_id"] = investor_id
        sql += " ORDER BY full_name, id"
        engine = self._db_port.get_fleet_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(sql), params).all()
        return [
            InvestorProfile(
                investor_id=str(row.id),
                name=row.full_name,
                email=row.email or "",
            )
            for row in rows
        ]

    def fetch_vehicle_ids(self, investor_id: str) -> list[str]:
        query = text(
            """
            SELECT id
            FROM vehicles
            WHERE assigned_investor_id = :investor_id
            ORDER BY created_at DESC, id
            """
        )
        engine = self._db_port.get_fleet_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"investor_id": investor_id}).all()
        return [str(row.id) for row in rows]

    def fetch_ledger_records(
        self,
        vehicle_ids: Sequence[str],
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[LedgerRecord]:
        if not vehicle_ids:
            return []
        sql = """
            SELECT id, vehicle_id, type, category, amount, date, description
            FROM financial_records
            WHERE vehicle_id IN :vehicle_ids
            """
        params: dict[str, object] = {"vehicle_ids": list(vehicle_ids)}
        if start_date:
            sql += " AND date >= :start_date"
            params["start_date"] = start_date
        if end_date:
            sql += " AND date <= :end_date"
            params["end_date"] = end_date
        sql += " ORDER BY date DESC, id"
        query = text(sql).bindparams(
            bindparam("vehicle_ids", expanding=True)
        )
        engine = self._db_port.get_fleet_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        self._logger.info(
            f"Fetched {len(rows)} ledger records "
            f"for {len(vehicle_ids)} vehicles"
        )
        return [
            LedgerRecord(
                id=str(row.id),
                vehicle_id=str(row.vehicle_id),
                kind=row.type,
                category=row.category,
                amount=row.amount,
                date=row.date,
                description=row.description,
            )
            for row in rows
        ]

    def fetch_vehicle_configs(
        self,
        vehicle_ids: Sequence[str],
    ) -> dict[str, VehicleFinancialConfig]:
        if not vehicle_ids:
            return {}
        query = text(
            """
            SELECT id,
                   purchase_price,
                   daily_rental_price,
                   expected_occupancy_days,
                   apply_management_fee,
                   management_fee_type,
                   management_fee_percent,
                   management_fee_fixed_amount
            FROM vehicles
            WHERE id IN :vehicle_ids
            """
        ).bindparams(bindparam("vehicle_ids", expanding=True))
        engine = self._db_port.get_fleet_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                query,
                {"vehicle_ids": list(vehicle_ids)},
            ).all()
        by_id = {
            str(row.id): VehicleFinancialConfig(
                vehicle_id=str(row.id),
                purchase_price=row.purchase_price,
                daily_rental_price=row.daily_rental_price,
                expected_occupancy_days=row.expected_occupancy_days,
                apply_management_fee=row.apply_management_fee,
                management_fee_type=row.management_fee_type,
                management_fee_percent=row.management_fee_percent,
                management_fee_fixed_amount=row.management_fee_fixed_amount,
            )
            for row in rows
        }
        return {
            vehicle_id: by_id[vehicle_id]
            for vehicle_id in vehicle_ids
            if vehicle_id in by_id
        }

    def fetch_vehicle_statuses(
        self,
        vehicle_ids: Sequence[str],
    ) -> dict[str, str | None]:
        if not vehicle_ids:
            return {}
        query = text(
            """
            SELECT id, status
            FROM vehicles
            WHERE id IN :vehicle_ids
            """
        ).bindparams(bindparam("vehicle_ids", expanding=True))
        engine = self._db_port.get_fleet_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                query,
                {"vehicle_ids": list(vehicle_ids)},
            ).all()
        return {str(row.id): row.status for row in rows}

    def fetch_roi_settings(self) -> RoiSettings:
        query = text(
            """
            SELECT value
            FROM system_settings
            WHERE id = :settings_id
            LIMIT 1
            """
        )
        engine = self._db_port.get_fleet_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"settings_id": ROI_SETTINGS_ID}).first()
        if row is None or row.value is None:
            return RoiSettings()
        raw = row.value
        try:
            if isinstance(raw, (str, bytes)):
                raw = json.loads(raw)
            return RoiSettings.from_mapping(raw, logger=self._logger)
        except (ValueError, TypeError, AttributeError) as exc:
            self._logger.warning(
                f"Unreadable ROI settings ({exc}); using defaults"
            )
            return RoiSettings()


__all__ = ["ROI_SETTINGS_ID", "SqlAlchemyFleetRepository"]
