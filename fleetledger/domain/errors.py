"""Domain errors raised on malformed ledger data."""


class DataError(ValueError):
    """A ledger record carries a value the engine refuses to aggregate.

    Attributes:
        record_id: Identifier of the offending record.
        field: Name of the offending field.
        value: Raw value that was rejected.
    """

    def __init__(self, record_id, field: str, value, reason: str) -> None:
        super().__init__(
            f"Invalid {field} on ledger record {record_id!r}: "
            f"{value!r} ({reason})"
        )
        self.record_id = record_id
        self.field = field
        self.value = value
        self.reason = reason


__all__ = ["DataError"]
