"""Template parser for brace-style date formats.

This module turns a template such as ``"{:Y}-{:M}-{:D}"`` into a tuple
of fields in a single left-to-right pass.

Grammar:
    Plain text is copied verbatim. A directive is ``{:X}`` where X is
    one of:
        Y - full year
        y - year of century
        M - long month name
        D - day of month
        E - long weekday name

    There is no escape for literal braces. A ``}`` outside a directive
    is always an error.

Errors report the 0-based UTF-8 byte offset of the offending character,
so positions after non-ASCII text differ from Python string indices.
"""

from __future__ import annotations

import logging
from typing import Iterator

from dateform.errors import (
    CloseCurlyBrace,
    FormatError,
    InvalidChar,
    MissingField,
    OpenCurlyBrace,
)
from dateform.format.fields import (
    Day,
    Field,
    Literal,
    MonthName,
    WeekdayName,
    Year,
    YearOfCentury,
)

logger = logging.getLogger(__name__)

# Field letters accepted after ':' in a directive
_DIRECTIVES: dict[str, Field] = {
    "Y": Year(),
    "y": YearOfCentury(),
    "M": MonthName(long=True),
    "D": Day(),
    "E": WeekdayName(long=True),
}


def _char_positions(template: str) -> Iterator[tuple[int, int, str]]:
    """Yield (string index, byte offset, character) for each character."""
    offset = 0
    for index, char in enumerate(template):
        yield index, offset, char
        offset += len(char.encode("utf-8"))


class FormatParser:
    """Single-pass scanner producing fields from a template.

    A parser is used once: construct it with the template and call
    parse().

    Examples:
        >>> FormatParser("({:D})").parse()
        (Literal(text='('), Day(), Literal(text=')'))
    """

    def __init__(self, template: str) -> None:
        self._template = template
        self._chars = _char_positions(template)
        self._fields: list[Field] = []

    def _next(self) -> tuple[int, int, str] | None:
        return next(self._chars, None)

    def parse(self) -> tuple[Field, ...]:
        """Parse the whole template.

        Returns:
            The fields in template order.

        Raises:
            FormatError: The first syntax error found.
        """
        anchor: int | None = None

        while True:
            item = self._next()
            if item is None:
                break

            index, offset, char = item
            if char == "{":
                if anchor is not None:
                    self._fields.append(Literal(self._template[anchor:index]))
                    anchor = None
                self._fields.append(self._parse_directive(offset))
            elif char == "}":
                raise CloseCurlyBrace(offset)
            elif anchor is None:
                anchor = index

        if anchor is not None:
            self._fields.append(Literal(self._template[anchor:]))

        return tuple(self._fields)

    def _parse_directive(self, open_brace_position: int) -> Field:
        """Parse one directive; the opening brace is already consumed."""
        item = self._next()
        if item is None:
            raise OpenCurlyBrace(open_brace_position)
        _, offset, char = item
        if char == "}":
            raise MissingField(open_brace_position)
        if char != ":":
            raise InvalidChar(char, False, offset)

        item = self._next()
        if item is None:
            raise OpenCurlyBrace(open_brace_position)
        _, offset, char = item
        field = _DIRECTIVES.get(char)
        if field is None:
            raise InvalidChar(char, True, offset)

        item = self._next()
        if item is None:
            raise OpenCurlyBrace(open_brace_position)
        _, offset, char = item
        if char != "}":
            raise InvalidChar(char, False, offset)

        return field


def parse_fields(template: str) -> tuple[Field, ...]:
    """Parse a template into fields.

    Args:
        template: The template text. May be empty.

    Returns:
        The fields in template order; empty for an empty template.

    Raises:
        FormatError: If the template is malformed. See dateform.errors
            for the possible subclasses.

    Examples:
        >>> parse_fields("{:Y}-{:D}")
        (Year(), Literal(text='-'), Day())

        >>> parse_fields("{:7}")
        Traceback (most recent call last):
        ...
        dateform.errors.InvalidChar: unexpected character '7' at byte 2 (expected a field letter after ':')
    """
    try:
        fields = FormatParser(template).parse()
    except FormatError as exc:
        logger.debug("Rejected template %r: %r", template, exc)
        raise
    logger.debug("Parsed template %r into %d fields", template, len(fields))
    return fields


__all__ = ["FormatParser", "parse_fields"]
