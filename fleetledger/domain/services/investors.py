"""Investor-level composition of vehicle summaries and projections."""

from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from decimal import Decimal
from logging import Logger

from fleetledger.domain.models import (
    InvestorFinancialSummary,
    InvestorProfile,
    InvestorProjection,
    LedgerRecord,
    ROIProjection,
    RoiSettings,
    VehicleFinancialConfig,
)
from fleetledger.domain.services.aggregation import aggregate_vehicle
from fleetledger.domain.services.projection import (
    project_resolved,
    resolve_config,
)
from fleetledger.domain.services.validation import validate_records
from fleetledger.utils.decimal_utils import sum_decimals

InvestorAssignment = tuple[InvestorProfile, Sequence[str]]


def build_investor_summary(
    investor: InvestorProfile,
    vehicle_ids: Sequence[str],
    records: Iterable[LedgerRecord],
) -> InvestorFinancialSummary:
    """Compose an investor summary from per-vehicle aggregates.

    Investor totals are sums of the vehicle summaries, never recomputed from
    the raw records.

    Args:
        investor: Investor identity.
        vehicle_ids: Vehicles assigned to the investor, in display order.
        records: Ledger records; records of other vehicles are ignored.

    Returns:
        InvestorFinancialSummary: Summary with one entry per vehicle id.

    Raises:
        DataError: If a record of one of the vehicles is malformed.
    """
    by_vehicle: dict[str, list[LedgerRecord]] = {
        vehicle_id: [] for vehicle_id in vehicle_ids
    }
    for record in records:
        if record.vehicle_id in by_vehicle:
            by_vehicle[record.vehicle_id].append(record)

    vehicles = [
        aggregate_vehicle(vehicle_id, by_vehicle[vehicle_id])
        for vehicle_id in vehicle_ids
    ]
    return InvestorFinancialSummary(
        investor_id=investor.investor_id,
        investor_name=investor.name,
        investor_email=investor.email,
        vehicles=vehicles,
        vehicle_count=len(vehicle_ids),
        total_income=sum_decimals(v.total_income for v in vehicles),
        total_expenses=sum_decimals(v.total_expenses for v in vehicles),
        net_balance=sum_decimals(v.net_balance for v in vehicles),
        last_transaction_date=_latest_date(by_vehicle.values()),
    )


def build_investor_summaries(
    assignments: Sequence[InvestorAssignment],
    records: Iterable[LedgerRecord],
    max_workers: int | None = None,
) -> list[InvestorFinancialSummary]:
    """Build summaries for several investors independently.

    Args:
        assignments: Pairs of investor and assigned vehicle ids.
        records: Ledger records shared by every investor.
        max_workers: Thread count; investors are built sequentially when
            None or 1.

    Returns:
        list[InvestorFinancialSummary]: Summaries in ``assignments`` order.
    """
    snapshot = list(records)

    def _build(assignment: InvestorAssignment) -> InvestorFinancialSummary:
        investor, vehicle_ids = assignment
        return build_investor_summary(investor, vehicle_ids, snapshot)

    if not max_workers or max_workers <= 1 or len(assignments) <= 1:
        return [_build(assignment) for assignment in assignments]
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(_build, assignments))


def rank_by_net_balance(
    summaries: Iterable[InvestorFinancialSummary],
) -> list[InvestorFinancialSummary]:
    """Return summaries sorted by net balance, highest first."""
    return sorted(summaries, key=lambda summary: -summary.net_balance)


def build_investor_projection(
    investor: InvestorProfile,
    configs: Mapping[str, VehicleFinancialConfig],
    settings: RoiSettings | None = None,
    *,
    logger: Logger | None = None,
) -> InvestorProjection:
    """Combine vehicle ROI projections into a portfolio view.

    The portfolio ROI only counts vehicles with a known purchase price; it is
    0 with ``basis_defined`` False when none has one.

    Args:
        investor: Investor identity.
        configs: Vehicle configurations keyed by vehicle id.
        settings: System-wide ROI defaults.
        logger: Logger used for configuration warnings.

    Returns:
        InvestorProjection: Per-vehicle projections and portfolio totals.
    """
    projections: dict[str, ROIProjection] = {}
    purchase_total = Decimal("0")
    based_net = Decimal("0")
    for vehicle_id, config in configs.items():
        resolved = resolve_config(config, settings, logger=logger)
        projection = project_resolved(resolved)
        projections[vehicle_id] = projection
        if resolved.purchase_price is None:
            continue
        purchase_total += resolved.purchase_price
        based_net += projection.net_income

    basis_defined = purchase_total > 0
    return InvestorProjection(
        investor_id=investor.investor_id,
        vehicles=projections,
        gross_income=sum_decimals(p.gross_income for p in projections.values()),
        fee_amount=sum_decimals(p.fee_amount for p in projections.values()),
        net_income=sum_decimals(p.net_income for p in projections.values()),
        purchase_total=purchase_total,
        roi_percent=(
            based_net / purchase_total * Decimal("100")
            if basis_defined
            else Decimal("0")
        ),
        basis_defined=basis_defined,
    )


def _latest_date(groups: Iterable[list[LedgerRecord]]) -> date | None:
    dates = [
        record.date
        for group in groups
        for record in validate_records(group)
    ]
    return max(dates) if dates else None


__all__ = [
    "InvestorAssignment",
    "build_investor_summary",
    "build_investor_summaries",
    "rank_by_net_balance",
    "build_investor_projection",
]
