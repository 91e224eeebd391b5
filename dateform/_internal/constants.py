"""Internal constants for Dateform.

These constants define the calendar limits and fixed tables used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Year limits (practical limits for the library)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# 1970-01-01 was a Thursday (Monday=0)
EPOCH_WEEKDAY: int = 3

# Gregorian 400-year cycle
DAYS_PER_ERA: int = 146_097
YEARS_PER_ERA: int = 400

# Days from 0000-03-01 to 1970-01-01
EPOCH_SHIFT: int = 719_468


__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "EPOCH_WEEKDAY",
    "DAYS_PER_ERA",
    "YEARS_PER_ERA",
    "EPOCH_SHIFT",
]
