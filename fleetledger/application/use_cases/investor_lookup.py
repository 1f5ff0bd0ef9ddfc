"""Shared investor lookup for application use cases."""

from fleetledger.application.ports.fleet_repository import FleetRepositoryPort
from fleetledger.domain.models import InvestorProfile


def require_investor(
    repository: FleetRepositoryPort,
    investor_id: str,
) -> InvestorProfile:
    """Return the investor profile or raise when it does not exist.

    Args:
        repository: Port providing investor data.
        investor_id: Identifier of the investor.

    Returns:
        InvestorProfile: The matching investor.

    Raises:
        RuntimeError: If no investor has this id.
    """
    investors = repository.fetch_investors(investor_id)
    if not investors:
        raise RuntimeError(f"Unknown investor: {investor_id}")
    return investors[0]


__all__ = ["require_investor"]
