"""Overflow-checked integer arithmetic for Calperiod.

Python integers never overflow, so these helpers enforce the fixed
32-bit signed width of period components explicitly. Each function
returns the exact result when it fits in [INT_MIN, INT_MAX] and raises
OverflowError otherwise.

This module is not part of the public API.
"""

from __future__ import annotations

import logging

from calperiod._internal.constants import INT_MAX, INT_MIN
from calperiod.errors import OverflowError

logger = logging.getLogger(__name__)


def in_range(value: int) -> bool:
    """Return True if value fits in a 32-bit signed integer."""
    return INT_MIN <= value <= INT_MAX


def _check(result: int, op: str, *operands: int) -> int:
    if not in_range(result):
        if len(operands) == 1:
            expr = f"{op}{operands[0]}"
        else:
            expr = f" {op} ".join(str(x) for x in operands)
        logger.debug("checked arithmetic overflow: %s", expr)
        raise OverflowError(
            f"integer overflow: {expr} is outside [{INT_MIN}, {INT_MAX}]"
        )
    return result


def checked_add(a: int, b: int) -> int:
    """Add two integers, raising on 32-bit overflow.

    Args:
        a: Left operand.
        b: Right operand.

    Returns:
        a + b.

    Raises:
        OverflowError: If the sum is outside the 32-bit signed range.

    Examples:
        >>> checked_add(2, 3)
        5
        >>> checked_add(2147483647, 1)  # Raises OverflowError
    """
    return _check(a + b, "+", a, b)


def checked_mul(a: int, b: int) -> int:
    """Multiply two integers, raising on 32-bit overflow.

    Args:
        a: Left operand.
        b: Right operand.

    Returns:
        a * b.

    Raises:
        OverflowError: If the product is outside the 32-bit signed range.
    """
    return _check(a * b, "*", a, b)


def checked_neg(a: int) -> int:
    """Negate an integer, raising when a is INT_MIN."""
    return _check(-a, "-", a)


__all__ = [
    "in_range",
    "checked_add",
    "checked_mul",
    "checked_neg",
]
