"""Domain models for ledger records."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class RecordKind(str, Enum):
    """Direction of a ledger record."""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class LedgerRecord:
    """One dated income or expense event tied to a vehicle.

    Attributes:
        id: Opaque unique identifier.
        vehicle_id: Owning vehicle reference.
        kind: Income or expense; raw strings are accepted.
        category: Free-text label used for grouping.
        amount: Non-negative magnitude; the sign lives in ``kind``.
        date: Calendar date, or the raw date value from a repository.
        description: Optional free text.
    """

    id: str
    vehicle_id: str
    kind: RecordKind | str
    category: str
    amount: Decimal
    date: date | datetime | str
    description: str | None = None


@dataclass(frozen=True)
class ValidRecord:
    """Ledger record after boundary validation."""

    id: str
    vehicle_id: str
    kind: RecordKind
    category: str
    amount: Decimal
    date: date


__all__ = ["RecordKind", "LedgerRecord", "ValidRecord"]
