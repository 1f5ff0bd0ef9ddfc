"""Use case to assemble the finance dashboard of one investor."""

from datetime import date

from fleetledger.application.ports.fleet_repository import FleetRepositoryPort
from fleetledger.application.use_cases.investor_lookup import require_investor
from fleetledger.domain.constants import DEFAULT_RECENT_MONTHS
from fleetledger.domain.errors import DataError
from fleetledger.domain.models import InvestorDashboard
from fleetledger.domain.services.aggregation import (
    month_to_date,
    summarize_categories,
)
from fleetledger.domain.services.bucketing import bucketize_recent
from fleetledger.domain.services.investors import build_investor_summary
from fleetledger.domain.services.occupancy import fleet_occupancy
from fleetledger.infrastructure.logging.logger import get_app_logger


class GetInvestorDashboardUseCase:
    """Compute the ledger views and fleet occupancy of one investor."""

    def __init__(
        self,
        repository: FleetRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing investors, vehicles and records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        investor_id: str,
        reference_date: date,
        months: int = DEFAULT_RECENT_MONTHS,
    ) -> InvestorDashboard:
        """Return the dashboard views for an investor.

        Args:
            investor_id: Investor to report on.
            reference_date: Day treated as "today" for the month-to-date and
                monthly windows.
            months: Number of months in the monthly breakdown.

        Returns:
            InvestorDashboard: Lifetime summary, windowed views and occupancy.

        Raises:
            RuntimeError: If the investor does not exist.
            DataError: If a ledger record is malformed.
        """
        investor = require_investor(self._repository, investor_id)
        vehicle_ids = self._repository.fetch_vehicle_ids(investor_id)
        records = self._repository.fetch_ledger_records(vehicle_ids)
        statuses = self._repository.fetch_vehicle_statuses(vehicle_ids)

        try:
            dashboard = InvestorDashboard(
                summary=build_investor_summary(investor, vehicle_ids, records),
                month_to_date=month_to_date(records, reference_date),
                categories=summarize_categories(records),
                monthly=bucketize_recent(records, reference_date, months),
                occupancy=fleet_occupancy(
                    statuses.get(vehicle_id) for vehicle_id in vehicle_ids
                ),
            )
        except DataError as exc:
            self._logger.error(
                f"Rejected ledger record {exc.record_id} "
                f"(field={exc.field}): {exc.reason}"
            )
            raise

        self._logger.info(
            f"Dashboard for investor {investor_id} as of {reference_date}: "
            f"net={dashboard.summary.net_balance}, "
            f"months={len(dashboard.monthly)}"
        )
        return dashboard


__all__ = ["GetInvestorDashboardUseCase", "InvestorDashboard"]
