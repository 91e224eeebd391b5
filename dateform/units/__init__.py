"""Calendar units and enumerations.

This module provides:
    - Month: The twelve months, numbered 1-12
    - Weekday: The seven days of the week, Monday=0
"""

from __future__ import annotations

from dateform.units.month import Month
from dateform.units.weekday import Weekday

__all__: list[str] = [
    "Month",
    "Weekday",
]
