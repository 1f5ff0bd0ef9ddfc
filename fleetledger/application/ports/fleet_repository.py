"""Port for reading investors, vehicles and ledger records."""

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from fleetledger.domain.models import (
    InvestorProfile,
    LedgerRecord,
    RoiSettings,
    VehicleFinancialConfig,
)


class FleetRepositoryPort(Protocol):
    """Port exposing the data the finance engine consumes."""

    def fetch_investors(
        self,
        investor_id: str | None = None,
    ) -> list[InvestorProfile]:
        """Return investors, or the single requested one."""

    def fetch_vehicle_ids(self, investor_id: str) -> list[str]:
        """Return ids of vehicles assigned to an investor."""

    def fetch_ledger_records(
        self,
        vehicle_ids: Sequence[str],
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[LedgerRecord]:
        """Return ledger records of the given vehicles."""

    def fetch_vehicle_configs(
        self,
        vehicle_ids: Sequence[str],
    ) -> dict[str, VehicleFinancialConfig]:
        """Return pricing configuration keyed by vehicle id."""

    def fetch_vehicle_statuses(
        self,
        vehicle_ids: Sequence[str],
    ) -> dict[str, str | None]:
        """Return the operational status keyed by vehicle id."""

    def fetch_roi_settings(self) -> RoiSettings:
        """Return the system-wide ROI defaults."""


__all__ = ["FleetRepositoryPort"]
