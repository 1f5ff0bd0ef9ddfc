"""Boundary validation for ledger records."""

from collections.abc import Iterable
from decimal import Decimal

from fleetledger.domain.errors import DataError
from fleetledger.domain.models import LedgerRecord, RecordKind, ValidRecord
from fleetledger.utils.date_utils import parse_date
from fleetledger.utils.decimal_utils import coerce_decimal


def validate_record(record: LedgerRecord) -> ValidRecord:
    """Check a ledger record and normalize its fields.

    Args:
        record: Record as supplied by the ledger store.

    Returns:
        ValidRecord: Record with a parsed date, Decimal amount and enum kind.

    Raises:
        DataError: If the vehicle, kind, amount or date is unusable.
    """
    if not record.vehicle_id:
        raise DataError(
            record.id, "vehicle_id", record.vehicle_id, "missing vehicle"
        )
    return ValidRecord(
        id=record.id,
        vehicle_id=record.vehicle_id,
        kind=_parse_kind(record),
        category=record.category or "",
        amount=_parse_amount(record),
        date=_parse_record_date(record),
    )


def validate_records(records: Iterable[LedgerRecord]) -> list[ValidRecord]:
    """Validate every record, failing on the first malformed one."""
    return [validate_record(record) for record in records]


def _parse_kind(record: LedgerRecord) -> RecordKind:
    if isinstance(record.kind, RecordKind):
        return record.kind
    try:
        return RecordKind(str(record.kind).strip().lower())
    except ValueError as exc:
        raise DataError(
            record.id, "kind", record.kind, "unknown record kind"
        ) from exc


def _parse_amount(record: LedgerRecord) -> Decimal:
    if record.amount is None:
        raise DataError(record.id, "amount", record.amount, "missing amount")
    try:
        amount = coerce_decimal(record.amount)
    except ValueError as exc:
        raise DataError(
            record.id, "amount", record.amount, "not a number"
        ) from exc
    if amount < 0:
        raise DataError(
            record.id, "amount", record.amount, "negative amount"
        )
    return amount


def _parse_record_date(record: LedgerRecord):
    try:
        return parse_date(record.date)
    except ValueError as exc:
        raise DataError(
            record.id, "date", record.date, "unparseable date"
        ) from exc


__all__ = ["validate_record", "validate_records"]
