"""Fleet occupancy from vehicle operational status."""

from collections.abc import Iterable
from decimal import Decimal

from fleetledger.domain.models import FleetOccupancy

RENTED_STATUS = "rented"


def fleet_occupancy(statuses: Iterable[str | None]) -> FleetOccupancy:
    """Share of vehicles whose status is ``rented``.

    Args:
        statuses: One status per vehicle; unknown or missing statuses count
            as not rented.

    Returns:
        FleetOccupancy: Counts and percentage, 0 for an empty fleet.
    """
    total = 0
    rented = 0
    for status in statuses:
        total += 1
        if status and status.strip().lower() == RENTED_STATUS:
            rented += 1
    percent = (
        Decimal(rented) / Decimal(total) * Decimal("100")
        if total
        else Decimal("0")
    )
    return FleetOccupancy(
        total_vehicles=total,
        rented_vehicles=rented,
        occupancy_percent=percent,
    )


__all__ = ["RENTED_STATUS", "fleet_occupancy"]
