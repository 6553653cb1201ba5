"""Calperiod exception hierarchy.

All Calperiod-specific exceptions inherit from CalperiodError.
"""

from __future__ import annotations


class CalperiodError(Exception):
    """Base exception for all Calperiod errors."""

    pass


class ParseError(CalperiodError):
    """Failed to parse an ISO 8601 period string.

    Raised when a string does not match the ``P[n]Y[n]M[n]D`` grammar.

    Examples:
        - Missing leading 'P'
        - Unrecognized unit letter (e.g. 'X', 'W', 'T')
        - Malformed number such as a lone '-'
        - Number outside the 32-bit signed range
    """

    pass


class OverflowError(CalperiodError):
    """Checked arithmetic exceeded the representable integer range.

    Raised instead of wrapping or clamping when a period component
    would leave the 32-bit signed range.

    Examples:
        - Period(years=INT_MAX).add_years(1)
        - Negating a period whose component equals INT_MIN
    """

    pass


__all__ = [
    "CalperiodError",
    "ParseError",
    "OverflowError",
]
