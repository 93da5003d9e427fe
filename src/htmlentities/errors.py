"""Diagnostics for malformed character references.

Codes follow the names the HTML parsing algorithm uses for the same
conditions. Diagnostics are only ever collected, never raised.
"""

UNKNOWN_NAMED_REFERENCE = "unknown-named-character-reference"
OUTSIDE_UNICODE_RANGE = "character-reference-outside-unicode-range"
SURROGATE_REFERENCE = "surrogate-character-reference"
MISSING_SEMICOLON = "missing-semicolon-after-character-reference"
ABSENCE_OF_DIGITS = "absence-of-digits-in-numeric-character-reference"


class ParseError:
    """A malformed reference, located by the position of its ``&``."""

    __slots__ = ("code", "column", "line", "message", "offset")

    def __init__(self, code, line=None, column=None, message=None, offset=None):
        self.code = code
        self.line = line
        self.column = column
        self.message = message or code
        self.offset = offset

    @classmethod
    def at(cls, code, text, offset):
        """Build an error for ``text[offset]`` with 1-based line and column."""
        line = text.count("\n", 0, offset) + 1
        column = offset - text.rfind("\n", 0, offset)
        return cls(code, line=line, column=column, offset=offset)

    def __repr__(self):
        if self.line is not None and self.column is not None:
            return f"ParseError({self.code!r}, line={self.line}, column={self.column})"
        return f"ParseError({self.code!r})"

    def __str__(self):
        location = f"({self.line},{self.column}): " if self.line is not None and self.column is not None else ""
        if self.message != self.code:
            return f"{location}{self.code} - {self.message}"
        return f"{location}{self.code}"

    def __eq__(self, other):
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.code == other.code and self.line == other.line and self.column == other.column

    __hash__ = None  # Unhashable since we define __eq__
