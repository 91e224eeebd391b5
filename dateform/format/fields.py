"""Field types for parsed date templates.

A parsed template is an ordered sequence of fields. Each field is one
of a closed set of frozen dataclasses:

    Literal(text)       - text emitted verbatim
    Year()              - full year ({:Y})
    YearOfCentury()     - year modulo 100 ({:y})
    MonthName(long)     - month name, long or short ({:M} is long)
    Day()               - day of the month ({:D})
    WeekdayName(long)   - weekday name, long or short ({:E} is long)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Literal:
    """Text copied verbatim into the output.

    Attributes:
        text: The literal text. Never empty.

    Raises:
        ValueError: If text is empty.
    """

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Literal text must not be empty")


@dataclass(frozen=True)
class Year:
    """The full year, e.g. ``2024``."""


@dataclass(frozen=True)
class YearOfCentury:
    """The year modulo 100, e.g. ``24`` for 2024."""


@dataclass(frozen=True)
class MonthName:
    """The month name.

    Attributes:
        long: True for "January", False for "Jan".
    """

    long: bool = True


@dataclass(frozen=True)
class Day:
    """The day of the month, e.g. ``15``."""


@dataclass(frozen=True)
class WeekdayName:
    """The weekday name.

    Attributes:
        long: True for "Monday", False for "Mon".
    """

    long: bool = True


# Type alias for any field
Field = Union[Literal, Year, YearOfCentury, MonthName, Day, WeekdayName]

FIELD_TYPES: tuple[type, ...] = (
    Literal,
    Year,
    YearOfCentury,
    MonthName,
    Day,
    WeekdayName,
)


__all__ = [
    "Field",
    "FIELD_TYPES",
    "Literal",
    "Year",
    "YearOfCentury",
    "MonthName",
    "Day",
    "WeekdayName",
]
