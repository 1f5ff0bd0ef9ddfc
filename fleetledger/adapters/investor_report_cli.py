"""CLI adapter printing investor financial reports.

Environment:
    REPORT_INVESTOR_ID: Optional investor to detail with a dashboard and
        ROI projection.
    REPORT_REFERENCE_DATE: Optional YYYY-MM-DD day used as "today".
"""

from datetime import date
import os

from fleetledger.application.use_cases.get_investor_dashboard import (
    GetInvestorDashboardUseCase,
)
from fleetledger.application.use_cases.get_investor_financials import (
    GetInvestorFinancialsUseCase,
)
from fleetledger.application.use_cases.project_investor_roi import (
    ProjectInvestorRoiUseCase,
)
from fleetledger.domain.errors import DataError
from fleetledger.infrastructure.container import build_fleet_repository
from fleetledger.infrastructure.db import dispose_fleet_engine
from fleetledger.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from fleetledger.infrastructure.settings import FleetSettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _print_report() -> None:
    logger = get_app_logger()
    settings = FleetSettings.from_env()
    investor_id = os.getenv("REPORT_INVESTOR_ID") or None
    reference_date = (
        _parse_date(os.getenv("REPORT_REFERENCE_DATE"), logger)
        or date.today()
    )

    repository = build_fleet_repository()
    try:
        summaries = GetInvestorFinancialsUseCase(
            repository,
            logger=logger,
            max_workers=settings.max_workers,
        ).execute(investor_id)
    except DataError as exc:
        logger.error(str(exc))
        return

    print(f"Investor financial summary (as of {reference_date})")
    for summary in summaries:
        print(
            f"{summary.investor_name or summary.investor_email}: "
            f"vehicles={summary.vehicle_count}, "
            f"income={summary.total_income}, "
            f"expenses={summary.total_expenses}, "
            f"net={summary.net_balance}, "
            f"last={summary.last_transaction_date or 'N/A'}"
        )
    get_usage_logger().info(
        f"investor_report summaries={len(summaries)} "
        f"investor={investor_id or 'all'}"
    )

    if investor_id is None:
        return

    try:
        dashboard = GetInvestorDashboardUseCase(
            repository,
            logger=logger,
        ).execute(investor_id, reference_date, settings.report_months)
        projection = ProjectInvestorRoiUseCase(
            repository,
            logger=logger,
        ).execute(investor_id)
    except (DataError, RuntimeError) as exc:
        logger.error(str(exc))
        return

    month = dashboard.month_to_date
    print(
        f"Month to date: income={month.income}, "
        f"expenses={month.expenses}, net={month.net}"
    )
    occupancy = dashboard.occupancy
    if occupancy is not None:
        print(
            f"Occupancy: {occupancy.rented_vehicles}/"
            f"{occupancy.total_vehicles} vehicles rented "
            f"({occupancy.occupancy_percent:.1f}%)"
        )
    for bucket in dashboard.monthly:
        print(
            f"{bucket.month_key}: income={bucket.income}, "
            f"expenses={bucket.expenses}, net={bucket.net}"
        )
    roi = (
        f"{projection.roi_percent:.2f}%"
        if projection.basis_defined
        else "N/A"
    )
    print(
        f"Projection: gross={projection.gross_income}, "
        f"fee={projection.fee_amount}, net={projection.net_income}, "
        f"roi={roi}"
    )


def main() -> None:
    """Print ranked investor summaries and optionally one investor in detail."""
    try:
        _print_report()
    finally:
        dispose_fleet_engine()


if __name__ == "__main__":  # pragma: no cover
    main()
