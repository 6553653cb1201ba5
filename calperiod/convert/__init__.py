"""Period conversion utilities.

This module provides JSON serialization and deserialization of Period
objects.

Examples:
    >>> from calperiod import Period
    >>> from calperiod.convert import to_json, from_json

    >>> data = to_json(Period(months=6))
    >>> from_json(data) == Period(months=6)
    True
"""

from __future__ import annotations

from calperiod.convert.json import from_json, to_json

__all__ = [
    "to_json",
    "from_json",
]
