"""Dateform: compile brace-style date templates and render them.

A template such as ``"{:Y}-{:M}-{:D}"`` is parsed once into an
immutable DateFormat, which can then render any number of dates.

Directives:
    {:Y} - full year (2024)
    {:y} - year of century (24)
    {:M} - month name (March)
    {:D} - day of month (15)
    {:E} - weekday name (Friday)

Core Types:
    DateFormat: A compiled template
    LocalDate: Proleptic Gregorian calendar date
    CalendarDate: Protocol for renderable dates

Units:
    Month: Month of the year, numbered 1-12
    Weekday: Day of the week, Monday=0

Exceptions:
    DateformError: Base exception
    ValidationError: Invalid calendar values
    FormatError: Malformed template (base of the four below)
    InvalidChar, OpenCurlyBrace, CloseCurlyBrace, MissingField

Example:
    >>> from dateform import DateFormat, LocalDate
    >>> fmt = DateFormat.parse("{:E} {:D} {:M} {:Y}")
    >>> fmt.format(LocalDate(2024, 3, 15))
    'Friday 15 March 2024'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from dateform.core.date import CalendarDate, LocalDate

# Units
from dateform.units.month import Month
from dateform.units.weekday import Weekday

# Exceptions
from dateform.errors import (
    CloseCurlyBrace,
    DateformError,
    FormatError,
    InvalidChar,
    MissingField,
    OpenCurlyBrace,
    ValidationError,
)

# Templates
from dateform.format import DateFormat, format_date

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    "DateFormat",
    "LocalDate",
    # Units
    "Month",
    "Weekday",
    # Exceptions
    "DateformError",
    "ValidationError",
    "FormatError",
    "InvalidChar",
    "OpenCurlyBrace",
    "CloseCurlyBrace",
    "MissingField",
    # Functions
    "format_date",
]
