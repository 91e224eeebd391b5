"""Weekday enumeration.

This module provides the Weekday enum, numbered Monday=0 through
Sunday=6 to match Python's ``datetime.date.weekday()``.
"""

from __future__ import annotations

from enum import Enum

from dateform._internal.validation import validate_weekday


class Weekday(Enum):
    """Day of the week.

    Examples:
        >>> Weekday.MONDAY.value
        0

        >>> Weekday.from_number(6)
        <Weekday.SUNDAY: 6>
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_number(cls, number: int) -> Weekday:
        """Return the weekday for a 0-based number (Monday=0).

        Raises:
            ValidationError: If number is outside 0-6.
        """
        validate_weekday(number)
        return cls(number)


__all__ = ["Weekday"]
