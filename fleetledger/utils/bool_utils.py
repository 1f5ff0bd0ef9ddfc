"""Helpers for reading stored on/off flags."""

_TRUE_TEXT = {"true", "1"}
_FALSE_TEXT = {"false", "0"}


def coerce_bool(value) -> bool:
    """Normalize a stored flag to bool.

    Args:
        value: ``bool``, the integers 0 and 1, or the text ``true``,
            ``false``, ``1`` or ``0`` in any case.

    Returns:
        bool: The flag value.

    Raises:
        ValueError: If the value is not a recognised flag.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        cleaned = value.strip().lower()
        if cleaned in _TRUE_TEXT:
            return True
        if cleaned in _FALSE_TEXT:
            return False
    raise ValueError(f"Not a boolean flag: {value!r}")


__all__ = ["coerce_bool"]
