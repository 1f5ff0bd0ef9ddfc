"""Aggregation of ledger records into historical totals."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from fleetledger.domain.models import (
    CategoryAmount,
    CategoryBreakdown,
    LedgerRecord,
    PeriodSummary,
    RecordKind,
    ValidRecord,
    VehicleFinancialSummary,
)
from fleetledger.domain.services.validation import validate_records
from fleetledger.utils.date_utils import start_of_month


def aggregate_vehicle(
    vehicle_id: str,
    records: Iterable[LedgerRecord],
) -> VehicleFinancialSummary:
    """Compute historical totals for one vehicle.

    Records of other vehicles are ignored, so callers may pass either the
    full ledger or a pre-filtered subset.

    Args:
        vehicle_id: Vehicle to summarize.
        records: Ledger records.

    Returns:
        VehicleFinancialSummary: Totals for the vehicle; all zeros when it has
        no records.

    Raises:
        DataError: If a record of the vehicle is malformed.
    """
    owned = validate_records(
        record for record in records if record.vehicle_id == vehicle_id
    )
    total_income, total_expenses = _split_totals(owned)
    return VehicleFinancialSummary(
        vehicle_id=vehicle_id,
        total_income=total_income,
        total_expenses=total_expenses,
        net_balance=total_income - total_expenses,
        transaction_count=len(owned),
    )


def summarize_period(
    records: Iterable[LedgerRecord],
    start_date: date,
    end_date: date | None = None,
) -> PeriodSummary:
    """Compute totals for records dated inside a window.

    Args:
        records: Ledger records.
        start_date: First day of the window, inclusive.
        end_date: Last day of the window, inclusive; open-ended when None.

    Returns:
        PeriodSummary: Income, expense and net totals for the window.

    Raises:
        DataError: If any record is malformed.
    """
    in_window = [
        record
        for record in validate_records(records)
        if record.date >= start_date
        and (end_date is None or record.date <= end_date)
    ]
    income, expenses = _split_totals(in_window)
    return PeriodSummary(
        start_date=start_date,
        end_date=end_date,
        income=income,
        expenses=expenses,
        net=income - expenses,
        transaction_count=len(in_window),
    )


def month_to_date(
    records: Iterable[LedgerRecord],
    reference_date: date,
) -> PeriodSummary:
    """Totals from the first day of the reference month to the reference day."""
    return summarize_period(
        records,
        start_of_month(reference_date),
        reference_date,
    )


def summarize_categories(
    records: Iterable[LedgerRecord],
) -> CategoryBreakdown:
    """Group income and expense totals by category.

    Args:
        records: Ledger records.

    Returns:
        CategoryBreakdown: Per-kind category totals, largest amount first.

    Raises:
        DataError: If any record is malformed.
    """
    totals: dict[RecordKind, dict[str, Decimal]] = {
        RecordKind.INCOME: {},
        RecordKind.EXPENSE: {},
    }
    for record in validate_records(records):
        bucket = totals[record.kind]
        bucket[record.category] = (
            bucket.get(record.category, Decimal("0")) + record.amount
        )
    return CategoryBreakdown(
        income=_sorted_categories(totals[RecordKind.INCOME]),
        expenses=_sorted_categories(totals[RecordKind.EXPENSE]),
    )


def _split_totals(records: list[ValidRecord]) -> tuple[Decimal, Decimal]:
    income = Decimal("0")
    expenses = Decimal("0")
    for record in records:
        if record.kind is RecordKind.INCOME:
            income += record.amount
        else:
            expenses += record.amount
    return income, expenses


def _sorted_categories(totals: dict[str, Decimal]) -> list[CategoryAmount]:
    return [
        CategoryAmount(category=category, amount=amount)
        for category, amount in sorted(
            totals.items(),
            key=lambda item: (-item[1], item[0]),
        )
    ]


__all__ = [
    "aggregate_vehicle",
    "summarize_period",
    "month_to_date",
    "summarize_categories",
]
