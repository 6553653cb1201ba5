"""ISO 8601 period formatting and parsing.

This module provides functions for converting Period objects to and from
ISO 8601 period strings restricted to the date portion:

    P[n]Y[n]M[n]D

Each component is optional and consists of an optional leading '-' sign,
one or more decimal digits, and its unit letter. There is no week
designator ('W') and no time section ('T...H...M...S').

Functions:
    parse_period: Parse an ISO 8601 period string into a Period.
    format_period: Format a Period as its canonical ISO 8601 string.

Examples:
    >>> from calperiod.format import parse_period, format_period

    >>> parse_period("P1Y2M3D")
    Period(years=1, months=2, days=3)

    >>> format_period(parse_period("P0Y0M0D"))
    'P0D'
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from calperiod._internal.checked import in_range
from calperiod._internal.constants import (
    DAYS_DESIGNATOR,
    INT_MAX,
    INT_MIN,
    MONTHS_DESIGNATOR,
    NUMBER_CHARS,
    PERIOD_DESIGNATOR,
    YEARS_DESIGNATOR,
    ZERO_PERIOD_TEXT,
)
from calperiod.errors import ParseError

if TYPE_CHECKING:
    from calperiod.core.period import Period

logger = logging.getLogger(__name__)


def _parse_error(message: str) -> ParseError:
    logger.debug("period parse failed: %s", message)
    return ParseError(message)


def _parse_number(token: str, unit: str, s: str) -> int:
    """Convert a numeric token preceding a unit letter to an int.

    The token holds only digits and '-' characters, so int() rejects
    exactly the malformed cases: empty, a lone '-', or a misplaced sign.
    """
    try:
        value = int(token)
    except ValueError:
        raise _parse_error(
            f"invalid number {token!r} before {unit!r} in period {s!r}"
        ) from None

    if not in_range(value):
        raise _parse_error(
            f"number {token} before {unit!r} in period {s!r} is outside "
            f"[{INT_MIN}, {INT_MAX}]"
        )
    return value


def parse_period(s: str, *, strict: bool = False) -> Period:
    """Parse an ISO 8601 period string into a Period.

    The string is scanned once from left to right. Digits and '-' signs
    accumulate into a numeric token; a unit letter ('Y', 'M' or 'D')
    converts the token and assigns it to the matching component. Scanning
    stops at 'D'. Components whose unit letter never appears are zero, so
    "P" alone is the zero period.

    Args:
        s: The ISO 8601 period string to parse.
        strict: If True, reject any characters following the 'D' unit.
            By default they are ignored.

    Returns:
        The parsed Period.

    Raises:
        ParseError: If the string is empty, does not start with 'P',
            contains an unrecognized character, has a malformed or
            out-of-range number, or ends with a number that has no unit.

    Examples:
        >>> parse_period("P-1Y")
        Period(years=-1, months=0, days=0)

        >>> parse_period("P")
        Period(years=0, months=0, days=0)

        >>> parse_period("P3DX")
        Period(years=0, months=0, days=3)

        >>> parse_period("P3DX", strict=True)  # Raises ParseError
    """
    # Import here to avoid circular imports
    from calperiod.core.period import Period

    if not s:
        raise _parse_error("empty string")
    if s[0] != PERIOD_DESIGNATOR:
        raise _parse_error(f"ISO 8601 period must start with 'P': {s!r}")

    years = 0
    months = 0
    days = 0
    token_start = 1

    for index in range(1, len(s)):
        ch = s[index]
        if ch in NUMBER_CHARS:
            continue

        token = s[token_start:index]
        if ch == YEARS_DESIGNATOR:
            years = _parse_number(token, ch, s)
        elif ch == MONTHS_DESIGNATOR:
            months = _parse_number(token, ch, s)
        elif ch == DAYS_DESIGNATOR:
            days = _parse_number(token, ch, s)
            trailing = s[index + 1 :]
            if strict and trailing:
                raise _parse_error(
                    f"unexpected trailing characters {trailing!r} after 'D' "
                    f"in period {s!r}"
                )
            return Period(years=years, months=months, days=days)
        else:
            raise _parse_error(
                f"unexpected character {ch!r} at position {index} in period {s!r}"
            )
        token_start = index + 1

    if token_start < len(s):
        raise _parse_error(
            f"number {s[token_start:]!r} has no unit designator in period {s!r}"
        )

    return Period(years=years, months=months, days=days)


def format_period(period: Period) -> str:
    """Format a Period as its canonical ISO 8601 string.

    Zero components are omitted. The zero period is rendered as "P0D",
    never as a bare "P".

    Args:
        period: The Period to format.

    Returns:
        ISO 8601 period string.

    Raises:
        TypeError: If period is not a Period.

    Examples:
        >>> from calperiod import Period
        >>> format_period(Period(years=1, months=-2))
        'P1Y-2M'

        >>> format_period(Period.zero())
        'P0D'
    """
    # Import here to avoid circular imports
    from calperiod.core.period import Period

    if not isinstance(period, Period):
        raise TypeError(f"expected Period, got {type(period).__name__}")

    if period.is_zero:
        return ZERO_PERIOD_TEXT

    parts = [PERIOD_DESIGNATOR]
    if period.years != 0:
        parts.append(f"{period.years}{YEARS_DESIGNATOR}")
    if period.months != 0:
        parts.append(f"{period.months}{MONTHS_DESIGNATOR}")
    if period.days != 0:
        parts.append(f"{period.days}{DAYS_DESIGNATOR}")

    return "".join(parts)


__all__ = ["parse_period", "format_period"]
