"""Date template parsing and rendering.

This module compiles brace-style templates into DateFormat objects and
renders them against calendar dates:
    - Field types for parsed templates
    - The single-pass template parser
    - Rendering of fields with English month and weekday names

Classes:
    DateFormat: A compiled, immutable template.
    FormatParser: The template scanner.

Functions:
    format_date: Parse a template and render it in one call.
    parse_fields: Parse a template into a tuple of fields.
    format_fields: Render fields against a date.

Examples:
    >>> from dateform import LocalDate
    >>> from dateform.format import DateFormat

    >>> DateFormat.parse("{:Y}-{:M}-{:D}").format(LocalDate(2024, 3, 15))
    '2024-March-15'
"""

from __future__ import annotations

from dateform.format.date_format import DateFormat, format_date
from dateform.format.fields import (
    Day,
    Field,
    Literal,
    MonthName,
    WeekdayName,
    Year,
    YearOfCentury,
)
from dateform.format.parser import FormatParser, parse_fields
from dateform.format.render import format_field, format_fields

__all__: list[str] = [
    # Compiled templates
    "DateFormat",
    "format_date",
    # Fields
    "Field",
    "Literal",
    "Year",
    "YearOfCentury",
    "MonthName",
    "Day",
    "WeekdayName",
    # Parsing and rendering
    "FormatParser",
    "parse_fields",
    "format_field",
    "format_fields",
]
