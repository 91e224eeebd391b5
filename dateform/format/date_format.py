"""Compiled date templates.

A DateFormat is parsed once and rendered any number of times. It holds
no calendar data and is never mutated after construction, so one
instance can be shared across threads.

Examples:
    >>> from dateform import DateFormat, LocalDate
    >>> fmt = DateFormat.parse("{:E}, {:D} {:M} {:Y}")
    >>> fmt.format(LocalDate(2024, 3, 15))
    'Friday, 15 March 2024'
    >>> fmt.format(LocalDate(1999, 12, 31))
    'Friday, 31 December 1999'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator

from dateform.format.fields import FIELD_TYPES, Field
from dateform.format.parser import parse_fields
from dateform.format.render import format_fields

if TYPE_CHECKING:
    from dateform.core.date import CalendarDate


class DateFormat:
    """An immutable, ordered sequence of template fields.

    Create one with DateFormat.parse(), or directly from fields to use
    forms the template grammar does not produce (such as short month
    names).

    Attributes:
        fields: The fields in output order.

    Examples:
        >>> DateFormat.parse("{:Y}-{:D}")
        DateFormat([Year(), Literal(text='-'), Day()])

        >>> from dateform.format.fields import MonthName
        >>> DateFormat([MonthName(long=False)]).fields
        (MonthName(long=False),)
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Iterable[Field] = ()) -> None:
        """Create a DateFormat from fields.

        Args:
            fields: The fields in output order.

        Raises:
            TypeError: If any item is not a field.
        """
        fields = tuple(fields)
        for field in fields:
            if not isinstance(field, FIELD_TYPES):
                raise TypeError(
                    f"expected a date format field, got {type(field).__name__}"
                )
        object.__setattr__(self, "_fields", fields)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[DateFormat], tuple[tuple[Field, ...]]]:
        return (type(self), (self._fields,))

    @classmethod
    def parse(cls, template: str) -> DateFormat:
        """Compile a template.

        Args:
            template: Template text such as ``"{:Y}-{:M}-{:D}"``.

        Returns:
            The compiled DateFormat.

        Raises:
            FormatError: If the template is malformed.

        Examples:
            >>> DateFormat.parse("")
            DateFormat([])

            >>> DateFormat.parse("{}")
            Traceback (most recent call last):
            ...
            dateform.errors.MissingField: directive at byte 0 has no field
        """
        return cls(parse_fields(template))

    @property
    def fields(self) -> tuple[Field, ...]:
        """Return the fields in output order."""
        return self._fields

    def format(self, when: CalendarDate) -> str:
        """Render this format against a date.

        Args:
            when: Any object providing the CalendarDate attributes.

        Returns:
            The rendered text.
        """
        return format_fields(self._fields, when)

    def __iter__(self) -> Iterator[Field]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateFormat):
            return NotImplemented
        return self._fields == other._fields

    def __hash__(self) -> int:
        return hash(self._fields)

    def __repr__(self) -> str:
        return f"DateFormat({list(self._fields)!r})"


def format_date(template: str, when: CalendarDate) -> str:
    """Parse a template and render it in one call.

    Use DateFormat.parse() instead when rendering the same template
    more than once.

    Raises:
        FormatError: If the template is malformed.

    Examples:
        >>> from dateform import LocalDate
        >>> format_date("{:D} {:M}", LocalDate(2024, 3, 15))
        '15 March'
    """
    return DateFormat.parse(template).format(when)


__all__ = ["DateFormat", "format_date"]
