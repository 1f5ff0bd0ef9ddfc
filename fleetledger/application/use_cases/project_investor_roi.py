"""Use case to project yearly returns across an investor's vehicles."""

from fleetledger.application.ports.fleet_repository import FleetRepositoryPort
from fleetledger.application.use_cases.investor_lookup import require_investor
from fleetledger.domain.models import InvestorProjection
from fleetledger.domain.services.investors import build_investor_projection
from fleetledger.infrastructure.logging.logger import get_app_logger


class ProjectInvestorRoiUseCase:
    """Project ROI from vehicle pricing, using stored ROI defaults."""

    def __init__(
        self,
        repository: FleetRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing vehicle configuration and settings.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, investor_id: str) -> InvestorProjection:
        """Return the portfolio projection for an investor.

        Args:
            investor_id: Investor to project.

        Returns:
            InvestorProjection: Per-vehicle and portfolio projections.

        Raises:
            RuntimeError: If the investor does not exist.
        """
        investor = require_investor(self._repository, investor_id)
        vehicle_ids = self._repository.fetch_vehicle_ids(investor_id)
        configs = self._repository.fetch_vehicle_configs(vehicle_ids)
        missing = [vid for vid in vehicle_ids if vid not in configs]
        if missing:
            self._logger.warning(
                f"No pricing configuration for vehicles: {', '.join(missing)}"
            )
        settings = self._repository.fetch_roi_settings()
        projection = build_investor_projection(
            investor,
            configs,
            settings,
            logger=self._logger,
        )
        self._logger.info(
            f"ROI projection for investor {investor_id}: "
            f"net={projection.net_income}, roi={projection.roi_percent}"
        )
        return projection


__all__ = ["ProjectInvestorRoiUseCase", "InvestorProjection"]
