"""Calperiod: ISO 8601 calendar periods for Python.

Calperiod provides an immutable Period value type: an un-normalized count
of years, months and days that is independent of any start date, with
overflow-checked arithmetic on 32-bit components.

Core Types:
    Period: Calendar-based span (years, months, days)

Format Functions:
    parse_period: Parse an ISO 8601 period string ("P1Y2M3D")
    format_period: Format a Period as its canonical string

Exceptions:
    CalperiodError: Base exception
    ParseError: Failed to parse string
    OverflowError: Arithmetic overflow

Example:
    >>> from calperiod import Period
    >>> p = Period.from_string("P1Y2M3D")
    >>> str(p.add_weeks(1))
    'P1Y2M10D'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from calperiod.core.period import Period

# Exceptions
from calperiod.errors import (
    CalperiodError,
    OverflowError,
    ParseError,
)

# Format functions
from calperiod.format import format_period, parse_period

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Period",
    # Exceptions
    "CalperiodError",
    "ParseError",
    "OverflowError",
    # Format functions
    "parse_period",
    "format_period",
]
