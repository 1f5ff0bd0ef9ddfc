"""Use case to build historical financial summaries per investor."""

from fleetledger.application.ports.fleet_repository import FleetRepositoryPort
from fleetledger.domain.errors import DataError
from fleetledger.domain.models import InvestorFinancialSummary
from fleetledger.domain.services.investors import (
    build_investor_summaries,
    rank_by_net_balance,
)
from fleetledger.infrastructure.logging.logger import get_app_logger


class GetInvestorFinancialsUseCase:
    """Summarize ledger totals for every investor, or a single one."""

    def __init__(
        self,
        repository: FleetRepositoryPort,
        logger=None,
        max_workers: int | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing investors, vehicles and records.
            logger: Optional logger compatible with logging.Logger-like API.
            max_workers: Thread count used to build investor summaries.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._max_workers = max_workers

    def execute(
        self,
        investor_id: str | None = None,
    ) -> list[InvestorFinancialSummary]:
        """Return investor summaries ranked by net balance.

        Args:
            investor_id: Optional investor to restrict the report to.

        Returns:
            list[InvestorFinancialSummary]: Summaries, highest net first.

        Raises:
            DataError: If a ledger record is malformed.
        """
        investors = self._repository.fetch_investors(investor_id)
        fetch_vehicle_ids = self._repository.fetch_vehicle_ids
        assignments = [
            (investor, fetch_vehicle_ids(investor.investor_id))
            for investor in investors
        ]
        vehicle_ids = list(
            dict.fromkeys(
                vehicle_id
                for _, investor_vehicles in assignments
                for vehicle_id in investor_vehicles
            )
        )
        records = self._repository.fetch_ledger_records(vehicle_ids)

        try:
            summaries = build_investor_summaries(
                assignments,
                records,
                max_workers=self._max_workers,
            )
        except DataError as exc:
            self._logger.error(
                f"Rejected ledger record {exc.record_id} "
                f"(field={exc.field}): {exc.reason}"
            )
            raise

        self._logger.info(
            f"Built financial summaries for {len(summaries)} investors "
            f"from {len(records)} ledger records"
        )
        return rank_by_net_balance(summaries)


__all__ = ["GetInvestorFinancialsUseCase", "InvestorFinancialSummary"]
