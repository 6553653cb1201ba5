"""Core period type.

This module provides:
    - Period: Calendar-based span (years, months, days)
"""

from __future__ import annotations

from calperiod.core.period import Period

__all__: list[str] = [
    "Period",
]
