"""Rendering of parsed fields against a calendar date.

Month and weekday names are English only and come from fixed tables
keyed by the Month and Weekday enums. Numeric fields are rendered in
plain decimal with no padding.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from dateform.format.fields import (
    Day,
    Field,
    Literal,
    MonthName,
    WeekdayName,
    Year,
    YearOfCentury,
)
from dateform.units.month import Month
from dateform.units.weekday import Weekday

if TYPE_CHECKING:
    from dateform.core.date import CalendarDate


LONG_MONTH_NAMES: dict[Month, str] = {
    Month.JANUARY: "January",
    Month.FEBRUARY: "February",
    Month.MARCH: "March",
    Month.APRIL: "April",
    Month.MAY: "May",
    Month.JUNE: "June",
    Month.JULY: "July",
    Month.AUGUST: "August",
    Month.SEPTEMBER: "September",
    Month.OCTOBER: "October",
    Month.NOVEMBER: "November",
    Month.DECEMBER: "December",
}

SHORT_MONTH_NAMES: dict[Month, str] = {
    Month.JANUARY: "Jan",
    Month.FEBRUARY: "Feb",
    Month.MARCH: "Mar",
    Month.APRIL: "Apr",
    Month.MAY: "May",
    Month.JUNE: "Jun",
    Month.JULY: "Jul",
    Month.AUGUST: "Aug",
    Month.SEPTEMBER: "Sep",
    Month.OCTOBER: "Oct",
    Month.NOVEMBER: "Nov",
    Month.DECEMBER: "Dec",
}

LONG_WEEKDAY_NAMES: dict[Weekday, str] = {
    Weekday.MONDAY: "Monday",
    Weekday.TUESDAY: "Tuesday",
    Weekday.WEDNESDAY: "Wednesday",
    Weekday.THURSDAY: "Thursday",
    Weekday.FRIDAY: "Friday",
    Weekday.SATURDAY: "Saturday",
    Weekday.SUNDAY: "Sunday",
}

SHORT_WEEKDAY_NAMES: dict[Weekday, str] = {
    Weekday.MONDAY: "Mon",
    Weekday.TUESDAY: "Tue",
    Weekday.WEDNESDAY: "Wed",
    Weekday.THURSDAY: "Thu",
    Weekday.FRIDAY: "Fri",
    Weekday.SATURDAY: "Sat",
    Weekday.SUNDAY: "Sun",
}


def format_field(field: Field, when: CalendarDate) -> str:
    """Render a single field.

    Args:
        field: The field to render.
        when: The date supplying the values.

    Returns:
        The text for this field.

    Raises:
        TypeError: If field is not one of the field types.

    Examples:
        >>> from dateform.core.date import LocalDate
        >>> format_field(MonthName(long=False), LocalDate(2024, 3, 15))
        'Mar'
    """
    if isinstance(field, Literal):
        return field.text

    elif isinstance(field, Year):
        return str(when.year)

    elif isinstance(field, YearOfCentury):
        return str(when.year_of_century)

    elif isinstance(field, MonthName):
        if field.long:
            return LONG_MONTH_NAMES[when.month]
        return SHORT_MONTH_NAMES[when.month]

    elif isinstance(field, Day):
        return str(when.day)

    elif isinstance(field, WeekdayName):
        if field.long:
            return LONG_WEEKDAY_NAMES[when.weekday]
        return SHORT_WEEKDAY_NAMES[when.weekday]

    else:
        raise TypeError(f"expected a date format field, got {type(field).__name__}")


def format_fields(fields: Iterable[Field], when: CalendarDate) -> str:
    """Render fields left to right and concatenate the results.

    Args:
        fields: The fields to render, in output order.
        when: The date supplying the values.

    Returns:
        The rendered text; empty when there are no fields.
    """
    return "".join(format_field(field, when) for field in fields)


__all__ = [
    "LONG_MONTH_NAMES",
    "SHORT_MONTH_NAMES",
    "LONG_WEEKDAY_NAMES",
    "SHORT_WEEKDAY_NAMES",
    "format_field",
    "format_fields",
]
