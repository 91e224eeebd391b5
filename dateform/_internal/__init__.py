"""Internal utilities for Dateform.

This module contains private implementation details:
    - Constants and calendar limits
    - Day-count calendar arithmetic
    - Range validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from dateform._internal.validation import (
    validate_day,
    validate_month,
    validate_weekday,
    validate_year,
)

__all__: list[str] = [
    "validate_day",
    "validate_month",
    "validate_weekday",
    "validate_year",
]
