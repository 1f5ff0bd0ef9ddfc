"""Domain constants for fleet finance reporting."""

from decimal import Decimal

DEFAULT_OCCUPANCY_DAYS = 240
DEFAULT_MANAGEMENT_FEE_PERCENT = Decimal("20")
DEFAULT_MANAGEMENT_FEE_FIXED_AMOUNT = Decimal("0")
DEFAULT_APPLY_MANAGEMENT_FEE = True

MAX_OCCUPANCY_DAYS = 365
MAX_FEE_PERCENT = Decimal("100")

DEFAULT_RECENT_MONTHS = 6


__all__ = [
    "DEFAULT_OCCUPANCY_DAYS",
    "DEFAULT_MANAGEMENT_FEE_PERCENT",
    "DEFAULT_MANAGEMENT_FEE_FIXED_AMOUNT",
    "DEFAULT_APPLY_MANAGEMENT_FEE",
    "MAX_OCCUPANCY_DAYS",
    "MAX_FEE_PERCENT",
    "DEFAULT_RECENT_MONTHS",
]
