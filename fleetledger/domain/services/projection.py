"""Forward-looking ROI projection from vehicle pricing configuration."""

from dataclasses import dataclass
from decimal import Decimal
from logging import Logger, getLogger

from fleetledger.domain.constants import MAX_FEE_PERCENT, MAX_OCCUPANCY_DAYS
from fleetledger.domain.models import (
    FeeType,
    ROIProjection,
    RoiSettings,
    VehicleFinancialConfig,
)
from fleetledger.utils.bool_utils import coerce_bool
from fleetledger.utils.decimal_utils import coerce_decimal

_LOGGER = getLogger(__name__)
_HUNDRED = Decimal("100")
_ZERO = Decimal("0")


@dataclass(frozen=True)
class ResolvedConfig:
    """Vehicle configuration with defaults applied and values in domain."""

    purchase_price: Decimal | None
    daily_rental_price: Decimal
    occupancy_days: int
    apply_fee: bool
    fee_type: FeeType
    fee_percent: Decimal
    fee_fixed_amount: Decimal


def project_roi(
    config: VehicleFinancialConfig,
    settings: RoiSettings | None = None,
    *,
    logger: Logger | None = None,
) -> ROIProjection:
    """Project yearly income and ROI for a vehicle.

    Historical ledger data plays no part: the result depends on the
    configuration and settings only.

    Args:
        config: Vehicle pricing and fee configuration; unset fields take
            defaults from ``settings``.
        settings: System-wide defaults; built-in defaults when None.
        logger: Logger used for warnings on out-of-range values.

    Returns:
        ROIProjection: Gross income, fee, net income and ROI percentage.
    """
    resolved = resolve_config(config, settings, logger=logger)
    return project_resolved(resolved)


def project_resolved(resolved: ResolvedConfig) -> ROIProjection:
    """Project yearly figures from an already resolved configuration."""
    gross_income = resolved.daily_rental_price * Decimal(
        resolved.occupancy_days
    )
    fee_amount = _compute_fee(resolved, gross_income)
    net_income = gross_income - fee_amount

    if resolved.purchase_price is None:
        return ROIProjection(
            gross_income=gross_income,
            fee_amount=fee_amount,
            net_income=net_income,
            roi_percent=_ZERO,
            basis_defined=False,
        )
    return ROIProjection(
        gross_income=gross_income,
        fee_amount=fee_amount,
        net_income=net_income,
        roi_percent=net_income / resolved.purchase_price * _HUNDRED,
    )


def resolve_config(
    config: VehicleFinancialConfig,
    settings: RoiSettings | None = None,
    *,
    logger: Logger | None = None,
) -> ResolvedConfig:
    """Apply defaults and clamp a vehicle configuration into its domain.

    Args:
        config: Raw vehicle configuration.
        settings: System-wide defaults; built-in defaults when None.
        logger: Logger used for warnings.

    Returns:
        ResolvedConfig: Configuration ready for projection. A purchase price
        that is missing or not positive resolves to None.
    """
    settings = settings or RoiSettings()
    log = logger or _LOGGER
    label = config.vehicle_id or "<unassigned>"

    purchase_price = _read_decimal(
        config.purchase_price, _ZERO, "purchase_price", label, log
    )
    daily_price = _read_decimal(
        config.daily_rental_price, _ZERO, "daily_rental_price", label, log
    )
    if daily_price < 0:
        log.warning(
            f"Negative daily_rental_price for vehicle {label}: "
            f"{daily_price}; using 0"
        )
        daily_price = _ZERO

    fee_percent = _clamp(
        _read_decimal(
            config.management_fee_percent,
            settings.default_management_fee,
            "management_fee_percent",
            label,
            log,
        ),
        _ZERO,
        MAX_FEE_PERCENT,
        "management_fee_percent",
        label,
        log,
    )
    fixed_amount = _read_decimal(
        config.management_fee_fixed_amount,
        settings.default_fixed_amount,
        "management_fee_fixed_amount",
        label,
        log,
    )
    if fixed_amount < 0:
        log.warning(
            f"Negative management_fee_fixed_amount for vehicle {label}: "
            f"{fixed_amount}; using 0"
        )
        fixed_amount = _ZERO

    return ResolvedConfig(
        purchase_price=purchase_price if purchase_price > 0 else None,
        daily_rental_price=daily_price,
        occupancy_days=_read_occupancy(config, settings, label, log),
        apply_fee=_read_fee_toggle(config, settings, label, log),
        fee_type=_read_fee_type(config, settings, label, log),
        fee_percent=fee_percent,
        fee_fixed_amount=fixed_amount,
    )


def _compute_fee(resolved: ResolvedConfig, gross_income: Decimal) -> Decimal:
    if not resolved.apply_fee:
        return _ZERO
    if resolved.fee_type is FeeType.FIXED:
        return resolved.fee_fixed_amount
    return gross_income * resolved.fee_percent / _HUNDRED


def _read_decimal(
    value,
    default: Decimal,
    field: str,
    label: str,
    logger: Logger,
) -> Decimal:
    if value is None:
        return default
    try:
        return coerce_decimal(value)
    except ValueError:
        logger.warning(
            f"Invalid {field} for vehicle {label}: {value!r}; "
            f"using {default}"
        )
        return default


def _read_occupancy(
    config: VehicleFinancialConfig,
    settings: RoiSettings,
    label: str,
    logger: Logger,
) -> int:
    raw = config.expected_occupancy_days
    if raw is None:
        days = settings.default_occupancy_days
    else:
        try:
            days = int(coerce_decimal(raw))
        except ValueError:
            logger.warning(
                f"Invalid expected_occupancy_days for vehicle {label}: "
                f"{raw!r}; using {settings.default_occupancy_days}"
            )
            days = settings.default_occupancy_days
    return int(
        _clamp(
            Decimal(days),
            _ZERO,
            Decimal(MAX_OCCUPANCY_DAYS),
            "expected_occupancy_days",
            label,
            logger,
        )
    )


def _read_fee_toggle(
    config: VehicleFinancialConfig,
    settings: RoiSettings,
    label: str,
    logger: Logger,
) -> bool:
    raw = config.apply_management_fee
    if raw is None:
        return settings.apply_default_fee
    try:
        return coerce_bool(raw)
    except ValueError:
        logger.warning(
            f"Invalid apply_management_fee for vehicle {label}: {raw!r}; "
            f"using {settings.apply_default_fee}"
        )
        return settings.apply_default_fee


def _read_fee_type(
    config: VehicleFinancialConfig,
    settings: RoiSettings,
    label: str,
    logger: Logger,
) -> FeeType:
    raw = config.management_fee_type
    if raw is None:
        return settings.default_fee_type
    if isinstance(raw, FeeType):
        return raw
    try:
        return FeeType(str(raw).strip().lower())
    except ValueError:
        logger.warning(
            f"Unknown management_fee_type for vehicle {label}: {raw!r}; "
            f"using {settings.default_fee_type.value}"
        )
        return settings.default_fee_type


def _clamp(
    value: Decimal,
    lower: Decimal,
    upper: Decimal,
    field: str,
    label: str,
    logger: Logger,
) -> Decimal:
    if lower <= value <= upper:
        return value
    clamped = min(max(value, lower), upper)
    logger.warning(
        f"{field} out of range for vehicle {label}: {value}; "
        f"using {clamped}"
    )
    return clamped


__all__ = [
    "ResolvedConfig",
    "project_resolved",
    "project_roi",
    "resolve_config",
]
