"""Internal utilities for Calperiod.

This module contains private implementation details:
    - Integer limits and unit constants
    - Overflow-checked arithmetic

Note: This module is not part of the public API.
"""

from __future__ import annotations

from calperiod._internal.checked import (
    checked_add,
    checked_mul,
    checked_neg,
    in_range,
)

__all__: list[str] = [
    "checked_add",
    "checked_mul",
    "checked_neg",
    "in_range",
]
