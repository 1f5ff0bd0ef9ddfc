"""Domain models for forward-looking ROI projections."""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from logging import Logger, getLogger

from fleetledger.domain.constants import (
    DEFAULT_APPLY_MANAGEMENT_FEE,
    DEFAULT_MANAGEMENT_FEE_FIXED_AMOUNT,
    DEFAULT_MANAGEMENT_FEE_PERCENT,
    DEFAULT_OCCUPANCY_DAYS,
)
from fleetledger.utils.bool_utils import coerce_bool
from fleetledger.utils.decimal_utils import coerce_decimal

_LOGGER = getLogger(__name__)


class FeeType(str, Enum):
    """How the management fee is charged."""

    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass(frozen=True)
class RoiSettings:
    """System-wide defaults applied when a vehicle leaves a field unset."""

    default_occupancy_days: int = DEFAULT_OCCUPANCY_DAYS
    default_management_fee: Decimal = DEFAULT_MANAGEMENT_FEE_PERCENT
    apply_default_fee: bool = DEFAULT_APPLY_MANAGEMENT_FEE
    default_fee_type: FeeType = FeeType.PERCENTAGE
    default_fixed_amount: Decimal = DEFAULT_MANAGEMENT_FEE_FIXED_AMOUNT

    @classmethod
    def from_mapping(
        cls,
        raw: Mapping | None,
        logger: Logger | None = None,
    ) -> "RoiSettings":
        """Build settings from a stored mapping, defaulting key by key.

        A missing or unreadable key keeps its built-in default; the other
        keys are still read.

        Args:
            raw: Loosely typed mapping, e.g. a JSON settings row.
            logger: Logger used for warnings on unreadable keys.

        Returns:
            RoiSettings: Settings with missing or bad keys defaulted.
        """
        defaults = cls()
        if not raw:
            return defaults
        log = logger or _LOGGER

        def _read(key: str, parse):
            default = getattr(defaults, key)
            value = raw.get(key)
            if value is None:
                return default
            try:
                return parse(value)
            except ValueError:
                log.warning(
                    f"Invalid ROI setting {key}={value!r}; using {default}"
                )
                return default

        return cls(
            default_occupancy_days=_read(
                "default_occupancy_days",
                lambda value: int(coerce_decimal(value)),
            ),
            default_management_fee=_read(
                "default_management_fee",
                coerce_decimal,
            ),
            apply_default_fee=_read("apply_default_fee", coerce_bool),
            default_fee_type=_read(
                "default_fee_type",
                lambda value: FeeType(str(value).strip().lower()),
            ),
            default_fixed_amount=_read("default_fixed_amount", coerce_decimal),
        )


@dataclass(frozen=True)
class VehicleFinancialConfig:
    """Pricing and fee inputs for a vehicle projection.

    Any field may be ``None``; the projector applies documented defaults.
    """

    purchase_price: Decimal | None = None
    daily_rental_price: Decimal | None = None
    expected_occupancy_days: int | None = None
    apply_management_fee: bool | str | None = None
    management_fee_type: FeeType | str | None = None
    management_fee_percent: Decimal | None = None
    management_fee_fixed_amount: Decimal | None = None
    vehicle_id: str | None = None


@dataclass(frozen=True)
class ROIProjection:
    """Projected yearly figures for a vehicle.

    Attributes:
        gross_income: Daily price times occupancy days.
        fee_amount: Management fee deducted from gross income.
        net_income: Gross income minus the fee.
        roi_percent: Net income over purchase price, as a percentage.
        basis_defined: False when the purchase price was unknown, in which
            case ``roi_percent`` is 0.
    """

    gross_income: Decimal
    fee_amount: Decimal
    net_income: Decimal
    roi_percent: Decimal
    basis_defined: bool = True


__all__ = [
    "FeeType",
    "RoiSettings",
    "VehicleFinancialConfig",
    "ROIProjection",
]
