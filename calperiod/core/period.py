"""Period class representing calendar-based spans of time.

This module provides the Period class: an un-normalized count of years,
months and days in the ISO 8601 calendar model, independent of any start
date.
"""

from __future__ import annotations

from calperiod._internal.checked import checked_add, checked_mul
from calperiod._internal.constants import DAYS_PER_WEEK, MONTHS_PER_YEAR


class Period:
    """A calendar-based span with year, month, and day components.

    The components are independent, stored as-is and never normalized.
    Period(months=14) remains 14 months rather than 1 year and 2 months,
    and Period(years=1, months=-2) means "1 year minus 2 months".

    Components are 32-bit signed integers. They are not validated on
    construction; arithmetic is overflow-checked and raises
    OverflowError instead of wrapping.

    Periods are immutable. Every operation that "changes" a period returns
    a new Period, or the same instance when the operation is a no-op.

    Attributes:
        years: Number of years (can be negative).
        months: Number of months (can be negative).
        days: Number of days (can be negative).

    Examples:
        >>> p = Period(years=1, months=2, days=3)
        >>> str(p)
        'P1Y2M3D'

        >>> Period.from_string("P-1Y") == Period(years=-1)
        True

        >>> Period(days=2).add_weeks(3)
        Period(years=0, months=0, days=23)
    """

    __slots__ = ("_years", "_months", "_days")

    def __init__(self, years: int = 0, months: int = 0, days: int = 0) -> None:
        """Create a Period from component parts.

        All parameters can be positive, negative, or zero.

        Args:
            years: Number of years.
            months: Number of months.
            days: Number of days.

        Examples:
            >>> Period(years=1, months=6)
            Period(years=1, months=6, days=0)

            >>> Period(months=-3)
            Period(years=0, months=-3, days=0)
        """
        self._years = years
        self._months = months
        self._days = days

    @classmethod
    def of(cls, years: int = 0, months: int = 0, days: int = 0) -> Period:
        """Create a Period from named components, each defaulting to 0."""
        return cls(years=years, months=months, days=days)

    @classmethod
    def of_years(cls, years: int) -> Period:
        """Create a Period of a given number of years.

        Examples:
            >>> Period.of_years(2)
            Period(years=2, months=0, days=0)
        """
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int) -> Period:
        """Create a Period of a given number of months."""
        return cls(months=months)

    @classmethod
    def of_weeks(cls, weeks: int) -> Period:
        """Create a Period of a given number of weeks, stored as days.

        Args:
            weeks: Number of weeks (can be negative).

        Returns:
            A Period with days = weeks * 7.

        Raises:
            OverflowError: If weeks * 7 is outside the 32-bit range.

        Examples:
            >>> Period.of_weeks(2)
            Period(years=0, months=0, days=14)
        """
        return cls(days=checked_mul(weeks, DAYS_PER_WEEK))

    @classmethod
    def of_days(cls, days: int) -> Period:
        """Create a Period of a given number of days."""
        return cls(days=days)

    @classmethod
    def zero(cls) -> Period:
        """Create a zero-length period.

        Examples:
            >>> Period.zero()
            Period(years=0, months=0, days=0)
        """
        return cls()

    @classmethod
    def from_string(cls, s: str, *, strict: bool = False) -> Period:
        """Parse an ISO 8601 period string such as "P1Y2M3D".

        See calperiod.format.iso8601.parse_period for the grammar.

        Args:
            s: The string to parse.
            strict: If True, reject characters following the 'D' unit.

        Returns:
            The parsed Period.

        Raises:
            ParseError: If the string is not a valid period.
        """
        from calperiod.format.iso8601 import parse_period

        return parse_period(s, strict=strict)

    def to_string(self) -> str:
        """Return the canonical ISO 8601 representation.

        Examples:
            >>> Period(years=1, days=5).to_string()
            'P1Y5D'
            >>> Period.zero().to_string()
            'P0D'
        """
        from calperiod.format.iso8601 import format_period

        return format_period(self)

    @property
    def years(self) -> int:
        """Return the years component."""
        return self._years

    @property
    def months(self) -> int:
        """Return the months component."""
        return self._months

    @property
    def days(self) -> int:
        """Return the days component."""
        return self._days

    @property
    def total_months(self) -> int:
        """Return the total months (years * 12 + months).

        Days are not included. The result is an unbounded Python int, so
        the multiplication itself cannot overflow.

        Examples:
            >>> Period(years=2, months=3).total_months
            27
            >>> Period(years=-1, months=3).total_months
            -9
        """
        return self._years * MONTHS_PER_YEAR + self._months

    @property
    def is_zero(self) -> bool:
        """Return True if all three components are zero."""
        return self._years == 0 and self._months == 0 and self._days == 0

    @property
    def is_negative(self) -> bool:
        """Return True if any component is strictly negative.

        This is a field-wise check, not the sign of a net total: a
        mixed-sign period such as Period(years=1, months=-1) is negative.

        Examples:
            >>> Period(years=1, months=-1).is_negative
            True
            >>> Period(years=1).is_negative
            False
        """
        return self._years < 0 or self._months < 0 or self._days < 0

    def to_tuple(self) -> tuple[int, int, int]:
        """Return the components as (years, months, days)."""
        return (self._years, self._months, self._days)

    # -------------------------------------------------------------------------
    # Field replacement
    # -------------------------------------------------------------------------

    def with_years(self, years: int) -> Period:
        """Return a copy with the years component replaced.

        Returns self when the value is unchanged.
        """
        if years == self._years:
            return self
        return Period(years=years, months=self._months, days=self._days)

    def with_months(self, months: int) -> Period:
        """Return a copy with the months component replaced."""
        if months == self._months:
            return self
        return Period(years=self._years, months=months, days=self._days)

    def with_days(self, days: int) -> Period:
        """Return a copy with the days component replaced."""
        if days == self._days:
            return self
        return Period(years=self._years, months=self._months, days=days)

    # -------------------------------------------------------------------------
    # Checked arithmetic
    # -------------------------------------------------------------------------

    def add_years(self, years: int) -> Period:
        """Return a copy with years added to the years component.

        Args:
            years: Years to add (can be negative).

        Returns:
            A new Period, or self if years is zero.

        Raises:
            OverflowError: If the result is outside the 32-bit range.

        Examples:
            >>> Period(years=5).add_years(3)
            Period(years=8, months=0, days=0)
        """
        if years == 0:
            return self
        return self.with_years(checked_add(self._years, years))

    def add_months(self, months: int) -> Period:
        """Return a copy with months added to the months component."""
        if months == 0:
            return self
        return self.with_months(checked_add(self._months, months))

    def add_days(self, days: int) -> Period:
        """Return a copy with days added to the days component."""
        if days == 0:
            return self
        return self.with_days(checked_add(self._days, days))

    def add_weeks(self, weeks: int) -> Period:
        """Return a copy with weeks * 7 added to the days component.

        Both the multiplication and the addition are checked.

        Raises:
            OverflowError: If weeks * 7 or the new days value is outside
                the 32-bit range.
        """
        if weeks == 0:
            return self
        return self.add_days(checked_mul(weeks, DAYS_PER_WEEK))

    def add_period(self, other: Period) -> Period:
        """Add another Period component by component.

        Years are added first, then months, then days; the first overflow
        aborts the operation.

        Args:
            other: The Period to add.

        Returns:
            A new Period, or self if other is the zero period.

        Raises:
            OverflowError: If any component sum is outside the 32-bit range.

        Examples:
            >>> Period(years=1, months=3).add_period(Period(months=6))
            Period(years=1, months=9, days=0)
        """
        if other.is_zero:
            return self
        return (
            self.add_years(other._years)
            .add_months(other._months)
            .add_days(other._days)
        )

    def multiply(self, scalar: int) -> Period:
        """Multiply each component by an integer scalar.

        Args:
            scalar: The multiplier.

        Returns:
            The zero period if scalar is 0; self if this period is zero or
            scalar is 1; otherwise a new scaled Period.

        Raises:
            OverflowError: If any product is outside the 32-bit range.

        Examples:
            >>> Period(months=3, days=10).multiply(2)
            Period(years=0, months=6, days=20)
        """
        if scalar == 0:
            return Period.zero()
        if self.is_zero or scalar == 1:
            return self
        return Period(
            years=checked_mul(self._years, scalar),
            months=checked_mul(self._months, scalar),
            days=checked_mul(self._days, scalar),
        )

    def negated(self) -> Period:
        """Return the period with every component negated.

        Raises:
            OverflowError: If any component equals the 32-bit minimum.

        Examples:
            >>> Period(years=1, months=-2).negated()
            Period(years=-1, months=2, days=0)
        """
        return self.multiply(-1)

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> Period:
        """Add two Periods together (see add_period)."""
        if not isinstance(other, Period):
            return NotImplemented
        return self.add_period(other)

    def __radd__(self, other: object) -> Period:
        """Support sum() by handling 0 + Period."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Period:
        """Subtract one Period from another.

        The right operand is negated first, which can itself overflow.

        Examples:
            >>> Period(years=2) - Period(months=6)
            Period(years=2, months=-6, days=0)
        """
        if not isinstance(other, Period):
            return NotImplemented
        return self.add_period(other.negated())

    def __mul__(self, other: object) -> Period:
        """Multiply a period by an integer scalar (see multiply)."""
        if not isinstance(other, int):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: object) -> Period:
        """Support scalar * Period."""
        return self.__mul__(other)

    def __neg__(self) -> Period:
        """Return the negation of this period (see negated)."""
        return self.negated()

    def __pos__(self) -> Period:
        """Return this period unchanged (unary +)."""
        return self

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Check structural equality with another period.

        Period(months=12) != Period(years=1) because components are
        compared directly.
        """
        if not isinstance(other, Period):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __ne__(self, other: object) -> bool:
        """Check inequality with another period."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Compare by years, then months, then days.

        This is a structural ordering, not a comparison of lengths:
        Period(years=1) > Period(months=13).
        """
        if not isinstance(other, Period):
            return NotImplemented
        return self.to_tuple() < other.to_tuple()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.to_tuple() <= other.to_tuple()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.to_tuple() > other.to_tuple()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.to_tuple() >= other.to_tuple()

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    # -------------------------------------------------------------------------
    # String representation
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"Period(years={self._years}, months={self._months}, "
            f"days={self._days})"
        )

    def __str__(self) -> str:
        """Return the canonical ISO 8601 string, e.g. "P1Y2M3D"."""
        return self.to_string()

    def __bool__(self) -> bool:
        """Return True if this is a non-zero period."""
        return not self.is_zero


__all__ = ["Period"]
