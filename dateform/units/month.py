"""Month enumeration.

This module provides the Month enum for the twelve months of the
Gregorian calendar, numbered 1-12.
"""

from __future__ import annotations

from enum import Enum

from dateform._internal.validation import validate_month


class Month(Enum):
    """Month of the year.

    Values follow the usual 1-based numbering, so ``Month(3)`` is
    March.

    Examples:
        >>> Month.MARCH.value
        3

        >>> Month.from_number(12)
        <Month.DECEMBER: 12>
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_number(cls, number: int) -> Month:
        """Return the month for a 1-based month number.

        Args:
            number: The month number (1-12).

        Returns:
            The matching Month.

        Raises:
            ValidationError: If number is outside 1-12.
        """
        validate_month(number)
        return cls(number)


__all__ = ["Month"]
