"""Internal constants for Calperiod.

These constants define the integer limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Period components are 32-bit signed integers
INT_BITS: int = 32
INT_MIN: int = -(2 ** (INT_BITS - 1))  # -2_147_483_648
INT_MAX: int = 2 ** (INT_BITS - 1) - 1  # 2_147_483_647

# Calendar unit conversions
MONTHS_PER_YEAR: int = 12
DAYS_PER_WEEK: int = 7

# ISO 8601 period designators
PERIOD_DESIGNATOR: str = "P"
YEARS_DESIGNATOR: str = "Y"
MONTHS_DESIGNATOR: str = "M"
DAYS_DESIGNATOR: str = "D"
NUMBER_CHARS: frozenset[str] = frozenset("0123456789-")

# Canonical text of the zero period
ZERO_PERIOD_TEXT: str = "P0D"


__all__ = [
    "INT_BITS",
    "INT_MIN",
    "INT_MAX",
    "MONTHS_PER_YEAR",
    "DAYS_PER_WEEK",
    "PERIOD_DESIGNATOR",
    "YEARS_DESIGNATOR",
    "MONTHS_DESIGNATOR",
    "DAYS_DESIGNATOR",
    "NUMBER_CHARS",
    "ZERO_PERIOD_TEXT",
]
