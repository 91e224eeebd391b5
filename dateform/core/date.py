"""LocalDate class and the calendar date protocol.

This module provides the CalendarDate protocol, the read-only surface a
date must expose to be rendered by a DateFormat, and LocalDate, a
concrete proleptic Gregorian date that satisfies it.
"""

from __future__ import annotations

import datetime
from typing import Protocol, runtime_checkable

from dateform._internal.calendar import (
    days_to_ymd,
    weekday_from_days,
    ymd_to_days,
)
from dateform._internal.validation import (
    validate_day,
    validate_month,
    validate_year,
)
from dateform.units.month import Month
from dateform.units.weekday import Weekday


@runtime_checkable
class CalendarDate(Protocol):
    """Anything that can be rendered by a DateFormat.

    Attributes:
        year: The full year.
        year_of_century: The year modulo 100 (0-99).
        month: The month of the year.
        day: The day of the month (1-31).
        weekday: The day of the week.
    """

    @property
    def year(self) -> int: ...

    @property
    def year_of_century(self) -> int: ...

    @property
    def month(self) -> Month: ...

    @property
    def day(self) -> int: ...

    @property
    def weekday(self) -> Weekday: ...


class LocalDate:
    """A calendar date in the proleptic Gregorian calendar.

    LocalDate stores the number of days since 1970-01-01, and derives
    its components on demand. Year 0 exists (astronomical numbering) and
    negative years are BCE.

    Attributes:
        year: The year (can be negative for BCE dates).
        month: The month as a Month.
        day: The day of the month (1-31).
        weekday: The day of the week as a Weekday.

    Examples:
        >>> d = LocalDate(2024, 3, 15)
        >>> d.month
        <Month.MARCH: 3>
        >>> d.weekday
        <Weekday.FRIDAY: 4>

        >>> LocalDate(2024, 2, 29)  # Valid leap year date
        LocalDate(2024, 2, 29)
    """

    __slots__ = ("_days",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a LocalDate from year, month, and day.

        Args:
            year: The year (can be 0 or negative for BCE dates).
            month: The month number (1-12).
            day: The day of the month.

        Raises:
            ValidationError: If any component is out of range.
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._days = ymd_to_days(year, month, day)

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "_days"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __reduce__(self) -> tuple[type[LocalDate], tuple[int, int, int]]:
        return (type(self), days_to_ymd(self._days))

    @classmethod
    def from_days_since_epoch(cls, days: int) -> LocalDate:
        """Create a LocalDate from a day count since 1970-01-01.

        Args:
            days: Signed number of days; 0 is 1970-01-01.

        Returns:
            The corresponding LocalDate.

        Raises:
            ValidationError: If the resulting date is out of range.

        Examples:
            >>> LocalDate.from_days_since_epoch(0)
            LocalDate(1970, 1, 1)
        """
        year, month, day = days_to_ymd(days)
        return cls(year, month, day)

    @classmethod
    def from_date(cls, value: datetime.date) -> LocalDate:
        """Create a LocalDate from a standard library date or datetime.

        Only the calendar date is used; any time of day or timezone on a
        datetime is ignored.

        Examples:
            >>> LocalDate.from_date(datetime.date(2024, 1, 15))
            LocalDate(2024, 1, 15)
        """
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls) -> LocalDate:
        """Return today's date in the local timezone."""
        return cls.from_date(datetime.date.today())

    @property
    def days_since_epoch(self) -> int:
        """Return the day count since 1970-01-01."""
        return self._days

    @property
    def year(self) -> int:
        """Return the year (can be negative for BCE dates)."""
        year, _, _ = days_to_ymd(self._days)
        return year

    @property
    def year_of_century(self) -> int:
        """Return the year modulo 100.

        Always in 0-99, including for negative years.

        Examples:
            >>> LocalDate(2024, 1, 15).year_of_century
            24
            >>> LocalDate(-44, 3, 15).year_of_century
            56
        """
        return self.year % 100

    @property
    def month(self) -> Month:
        """Return the month."""
        _, month, _ = days_to_ymd(self._days)
        return Month(month)

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        _, _, day = days_to_ymd(self._days)
        return day

    @property
    def weekday(self) -> Weekday:
        """Return the day of the week.

        Examples:
            >>> LocalDate(2024, 1, 15).weekday
            <Weekday.MONDAY: 0>
        """
        return Weekday(weekday_from_days(self._days))

    def add_days(self, days: int) -> LocalDate:
        """Return a new LocalDate offset by the given number of days.

        Args:
            days: Number of days to add (can be negative).

        Raises:
            ValidationError: If the result is out of range.

        Examples:
            >>> LocalDate(2024, 2, 28).add_days(1)
            LocalDate(2024, 2, 29)
        """
        return type(self).from_days_since_epoch(self._days + days)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days == other._days

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        """Return a string like 'LocalDate(2024, 1, 15)'."""
        year, month, day = days_to_ymd(self._days)
        return f"LocalDate({year}, {month}, {day})"


__all__ = ["CalendarDate", "LocalDate"]
