"""Dateform exception hierarchy.

All Dateform-specific exceptions inherit from DateformError. Template
errors share the FormatError base and carry the byte offset of the
offending character.
"""

from __future__ import annotations


class DateformError(Exception):
    """Base exception for all Dateform errors."""

    pass


class ValidationError(DateformError):
    """Invalid input values.

    Raised when a calendar value is out of range or invalid.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Year outside -9999 to 9999
    """

    pass


class FormatError(DateformError):
    """A date template could not be parsed.

    Every FormatError carries ``position``, the 0-based UTF-8 byte offset
    into the template of the character that caused the failure. Two
    errors are equal when they have the same type and payload.

    Subclasses:
        InvalidChar: Unexpected character inside a directive.
        OpenCurlyBrace: A ``{`` was never closed.
        CloseCurlyBrace: A ``}`` appeared outside any directive.
        MissingField: A directive was closed without a field letter.
    """

    def __init__(self, position: int, message: str) -> None:
        super().__init__(message)
        self.position = position

    def _payload(self) -> tuple[object, ...]:
        return (self.position,)

    def diagnostic(self, template: str) -> str:
        """Render a caret diagnostic pointing at the error position.

        The byte offset is converted back to a character column so the
        caret lines up under multi-byte text. For a multi-line template
        only the line holding the error is shown, and tabs before the
        error are repeated in the caret line.

        Args:
            template: The template that failed to parse.

        Returns:
            The offending line, a newline, then a caret under the bad
            character.

        Examples:
            >>> err = CloseCurlyBrace(5)
            >>> print(err.diagnostic("Date }"))
            Date }
                 ^
        """
        prefix = template.encode("utf-8")[: self.position].decode(
            "utf-8", errors="ignore"
        )
        line_start = prefix.rfind("\n") + 1
        line_end = template.find("\n", len(prefix))
        if line_end == -1:
            line_end = len(template)
        padding = "".join(
            "\t" if char == "\t" else " " for char in prefix[line_start:]
        )
        return f"{template[line_start:line_end]}\n{padding}^"

    def __reduce__(self) -> tuple[type[FormatError], tuple[object, ...]]:
        return (type(self), self._payload())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormatError):
            return NotImplemented
        return type(self) is type(other) and self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._payload()))

    def __repr__(self) -> str:
        args = ", ".join(repr(value) for value in self._payload())
        return f"{type(self).__name__}({args})"


class InvalidChar(FormatError):
    """Unexpected character inside a directive.

    ``after_colon`` is True when the character sat where a field letter
    was expected (right after ``:``), and False when a ``:`` or ``}`` was
    expected instead.

    Examples:
        - ``"{7}"`` gives InvalidChar('7', False, 1)
        - ``"{:7}"`` gives InvalidChar('7', True, 2)
    """

    def __init__(self, char: str, after_colon: bool, position: int) -> None:
        if after_colon:
            expected = "a field letter after ':'"
        else:
            expected = "':' or '}'"
        super().__init__(
            position,
            f"unexpected character {char!r} at byte {position} (expected {expected})",
        )
        self.char = char
        self.after_colon = after_colon

    def _payload(self) -> tuple[object, ...]:
        return (self.char, self.after_colon, self.position)


class OpenCurlyBrace(FormatError):
    """An opening brace was never matched by a closing brace.

    The position is that of the opening brace.

    Examples:
        - ``"{"`` gives OpenCurlyBrace(0)
        - ``"{:Y"`` gives OpenCurlyBrace(0)
    """

    def __init__(self, position: int) -> None:
        super().__init__(position, f"unclosed '{{' at byte {position}")


class CloseCurlyBrace(FormatError):
    """A closing brace appeared with no directive open.

    Examples:
        - ``"}"`` gives CloseCurlyBrace(0)
        - ``"This is a test: }"`` gives CloseCurlyBrace(16)
    """

    def __init__(self, position: int) -> None:
        super().__init__(position, f"unmatched '}}' at byte {position}")


class MissingField(FormatError):
    """A directive was closed without naming a field.

    The position is that of the opening brace.

    Examples:
        - ``"{}"`` gives MissingField(0)
    """

    def __init__(self, position: int) -> None:
        super().__init__(position, f"directive at byte {position} has no field")


__all__ = [
    "DateformError",
    "ValidationError",
    "FormatError",
    "InvalidChar",
    "OpenCurlyBrace",
    "CloseCurlyBrace",
    "MissingField",
]
