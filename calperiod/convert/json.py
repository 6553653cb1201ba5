"""JSON serialization and deserialization for Period objects.

This module provides functions for converting periods to and from
JSON-serializable dictionaries.

Functions:
    to_json: Convert a Period to a JSON-serializable dict.
    from_json: Create a Period from a JSON dict.

The JSON format uses the canonical ISO 8601 string with a type tag:

    {"_type": "Period", "value": "P1Y2M3D"}

Examples:
    >>> from calperiod import Period
    >>> from calperiod.convert import to_json, from_json

    >>> data = to_json(Period(years=1, months=2, days=3))
    >>> data
    {'_type': 'Period', 'value': 'P1Y2M3D'}

    >>> from_json(data) == Period(years=1, months=2, days=3)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from calperiod.errors import ParseError

if TYPE_CHECKING:
    from calperiod.core.period import Period

_TYPE_NAME = "Period"


def to_json(value: Period) -> dict[str, Any]:
    """Convert a Period to a JSON-serializable dictionary.

    Args:
        value: The Period to convert.

    Returns:
        A dictionary with `_type` and `value` fields.

    Raises:
        TypeError: If value is not a Period.
    """
    # Import here to avoid circular imports
    from calperiod.core.period import Period

    if not isinstance(value, Period):
        raise TypeError(f"expected Period, got {type(value).__name__}")

    return {
        "_type": _TYPE_NAME,
        "value": value.to_string(),
    }


def from_json(data: dict[str, Any]) -> Period:
    """Create a Period from a JSON dictionary.

    Args:
        data: A dictionary with `_type` and `value` fields.

    Returns:
        The decoded Period.

    Raises:
        ParseError: If the data is not a dict, is missing required fields,
            or holds an invalid period string.
        TypeError: If `_type` is not "Period".

    Examples:
        >>> from_json({'_type': 'Period', 'value': 'P-1Y'})
        Period(years=-1, months=0, days=0)
    """
    # Import here to avoid circular imports
    from calperiod.core.period import Period

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data")
    if type_name != _TYPE_NAME:
        raise TypeError(f"unknown type: {type_name!r}")

    value = data.get("value")
    if not value:
        raise ParseError("missing 'value' field for Period")
    if not isinstance(value, str):
        raise ParseError(f"expected string 'value', got {type(value).__name__}")

    return Period.from_string(value, strict=True)


__all__ = ["to_json", "from_json"]
