"""Core calendar types for Dateform.

This module provides:
    - CalendarDate: Protocol for anything a DateFormat can render
    - LocalDate: Proleptic Gregorian calendar date
"""

from __future__ import annotations

from dateform.core.date import CalendarDate, LocalDate

__all__: list[str] = [
    "CalendarDate",
    "LocalDate",
]
