"""Tests for fleet occupancy."""

from decimal import Decimal

from fleetledger.domain.services.occupancy import fleet_occupancy


def test_occupancy_counts_rented_vehicles() -> None:
    """Only vehicles marked rented count, in any case."""
    occupancy = fleet_occupancy(
        ["rented", " RENTED ", "available", None, "maintenance"],
    )

    assert occupancy.total_vehicles == 5
    assert occupancy.rented_vehicles == 2
    assert occupancy.occupancy_percent == Decimal("40")


def test_empty_fleet_has_zero_occupancy() -> None:
    """No vehicles gives 0 rather than a division error."""
    occupancy = fleet_occupancy([])

    assert occupancy.total_vehicles == 0
    assert occupancy.occupancy_percent == Decimal("0")
