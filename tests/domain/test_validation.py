"""Tests for ledger record validation."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from fleetledger.domain.errors import DataError
from fleetledger.domain.models import LedgerRecord, RecordKind
from fleetledger.domain.services.validation import (
    validate_record,
    validate_records,
)


def _record(**overrides) -> LedgerRecord:
    values = {
        "id": "rec-1",
        "vehicle_id": "veh-1",
        "kind": RecordKind.INCOME,
        "category": "Rent",
        "amount": Decimal("100.00"),
        "date": date(2024, 1, 10),
    }
    values.update(overrides)
    return LedgerRecord(**values)


def test_validate_record_normalizes_raw_values() -> None:
    """Raw strings from the store should become typed values."""
    record = _record(
        kind="Expense",
        amount="12.50",
        date="2024-03-05T10:30:00+00:00",
    )

    checked = validate_record(record)

    assert checked.kind is RecordKind.EXPENSE
    assert checked.amount == Decimal("12.50")
    assert checked.date == date(2024, 3, 5)


def test_validate_record_accepts_datetime_and_float() -> None:
    """Datetimes lose their time part and floats become Decimals."""
    checked = validate_record(
        _record(amount=500.0, date=datetime(2024, 2, 29, 23, 59))
    )

    assert checked.date == date(2024, 2, 29)
    assert checked.amount == Decimal("500")


def test_negative_amount_is_rejected() -> None:
    """A negative magnitude is malformed data."""
    with pytest.raises(DataError) as excinfo:
        validate_record(_record(id="bad", amount=Decimal("-50")))

    assert excinfo.value.record_id == "bad"
    assert excinfo.value.field == "amount"
    assert excinfo.value.value == Decimal("-50")


@pytest.mark.parametrize("amount", [None, "abc", "NaN", "Infinity"])
def test_unusable_amount_is_rejected(amount) -> None:
    """Missing or non-finite amounts raise DataError."""
    with pytest.raises(DataError) as excinfo:
        validate_record(_record(amount=amount))

    assert excinfo.value.field == "amount"


@pytest.mark.parametrize("raw_date", ["", "2024-13-01", "yesterday", None])
def test_unparseable_date_is_rejected(raw_date) -> None:
    """Dates that cannot be read raise DataError."""
    with pytest.raises(DataError) as excinfo:
        validate_record(_record(date=raw_date))

    assert excinfo.value.field == "date"


def test_unknown_kind_is_rejected() -> None:
    """Only income and expense kinds are accepted."""
    with pytest.raises(DataError) as excinfo:
        validate_record(_record(kind="transfer"))

    assert excinfo.value.field == "kind"


def test_missing_vehicle_is_rejected() -> None:
    """Every record must belong to a vehicle."""
    with pytest.raises(DataError) as excinfo:
        validate_record(_record(vehicle_id=""))

    assert excinfo.value.field == "vehicle_id"


def test_validate_records_stops_on_first_bad_record() -> None:
    """The first malformed record aborts the batch."""
    records = [
        _record(id="ok"),
        _record(id="broken", date="not-a-date"),
        _record(id="negative", amount=Decimal("-1")),
    ]

    with pytest.raises(DataError) as excinfo:
        validate_records(records)

    assert excinfo.value.record_id == "broken"
    assert "broken" in str(excinfo.value)
