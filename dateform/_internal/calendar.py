"""Calendar utilities for Dateform.

This module provides internal functions for proleptic Gregorian
calendar calculations. Dates are counted as days since the Unix epoch
(1970-01-01 is day 0), which keeps weekday lookup to a single modulo.

The conversions work on 400-year eras shifted to start on March 1st,
so the leap day is always the last day of the shifted year.

This module is not part of the public API.
"""

from __future__ import annotations

from dateform._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_ERA,
    EPOCH_SHIFT,
    EPOCH_WEEKDAY,
    YEARS_PER_ERA,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def ymd_to_days(year: int, month: int, day: int) -> int:
    """Convert year, month, day to days since 1970-01-01.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The signed day count; 0 for 1970-01-01.

    Examples:
        >>> ymd_to_days(1970, 1, 1)
        0
        >>> ymd_to_days(2000, 3, 1)
        11017
    """
    # Shifted year starts in March
    y = year - 1 if month <= 2 else year
    era = y // YEARS_PER_ERA
    year_of_era = y - era * YEARS_PER_ERA
    shifted_month = (month + 9) % 12
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    return era * DAYS_PER_ERA + day_of_era - EPOCH_SHIFT


def days_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to year, month, day.

    Args:
        days: The signed day count.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> days_to_ymd(0)
        (1970, 1, 1)
        >>> days_to_ymd(-1)
        (1969, 12, 31)
    """
    shifted = days + EPOCH_SHIFT
    era = shifted // DAYS_PER_ERA
    day_of_era = shifted - era * DAYS_PER_ERA
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // (DAYS_PER_ERA - 1)
    ) // 365
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * YEARS_PER_ERA
    if month <= 2:
        year += 1
    return (year, month, day)


def weekday_from_days(days: int) -> int:
    """Return the day of week for a day count (Monday=0, Sunday=6)."""
    return (days + EPOCH_WEEKDAY) % 7


__all__ = [
    "is_leap_year",
    "days_in_month",
    "ymd_to_days",
    "days_to_ymd",
    "weekday_from_days",
]
