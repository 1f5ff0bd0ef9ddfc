"""Month bucketing of ledger records."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from fleetledger.domain.constants import DEFAULT_RECENT_MONTHS
from fleetledger.domain.models import (
    LedgerRecord,
    MonthlyBucket,
    RecordKind,
    ValidRecord,
)
from fleetledger.domain.services.validation import validate_records
from fleetledger.utils.date_utils import month_key, shift_months


def bucketize(records: Iterable[LedgerRecord]) -> list[MonthlyBucket]:
    """Group records by calendar month.

    Only months holding at least one record get a bucket.

    Args:
        records: Ledger records of any vehicles.

    Returns:
        list[MonthlyBucket]: Buckets sorted by month, most recent first.

    Raises:
        DataError: If any record is malformed.
    """
    return _bucketize_valid(validate_records(records))


def bucketize_recent(
    records: Iterable[LedgerRecord],
    reference_date: date,
    months: int = DEFAULT_RECENT_MONTHS,
) -> list[MonthlyBucket]:
    """Bucket the records dated within the last ``months`` months.

    The window runs from ``reference_date`` moved back ``months`` calendar
    months up to ``reference_date``, both inclusive.

    Args:
        records: Ledger records of any vehicles.
        reference_date: End of the window.
        months: Number of calendar months to look back.

    Returns:
        list[MonthlyBucket]: Buckets for the window, most recent first.

    Raises:
        DataError: If any record is malformed.
        ValueError: If ``months`` is negative.
    """
    if months < 0:
        raise ValueError(f"months must be non-negative, got {months}")
    window_start = shift_months(reference_date, -months)
    return _bucketize_valid(
        record
        for record in validate_records(records)
        if window_start <= record.date <= reference_date
    )


def _bucketize_valid(records: Iterable[ValidRecord]) -> list[MonthlyBucket]:
    income_totals: dict[str, Decimal] = {}
    expense_totals: dict[str, Decimal] = {}
    for record in records:
        key = month_key(record.date)
        income_totals.setdefault(key, Decimal("0"))
        expense_totals.setdefault(key, Decimal("0"))
        if record.kind is RecordKind.INCOME:
            income_totals[key] += record.amount
        else:
            expense_totals[key] += record.amount

    return [
        MonthlyBucket(
            month_key=key,
            income=income_totals[key],
            expenses=expense_totals[key],
            net=income_totals[key] - expense_totals[key],
        )
        for key in sorted(income_totals, reverse=True)
    ]


__all__ = ["bucketize", "bucketize_recent"]
