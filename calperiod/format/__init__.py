"""Period formatting and parsing.

Functions:
    parse_period: Parse an ISO 8601 period string ("P1Y2M3D").
    format_period: Format a Period as its canonical ISO 8601 string.

Examples:
    >>> from calperiod.format import parse_period, format_period

    >>> p = parse_period("P1Y2M")
    >>> p.months
    2

    >>> format_period(p)
    'P1Y2M'
"""

from __future__ import annotations

from calperiod.format.iso8601 import format_period, parse_period

__all__: list[str] = [
    "parse_period",
    "format_period",
]
