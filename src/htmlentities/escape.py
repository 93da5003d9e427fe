"""Escape raw text into HTML-safe text using character references."""

from __future__ import annotations

from .chars import needs_numeric_reference
from .entities import encode_named


class EscapeOpts:
    __slots__ = ("decimal", "use_named_references")

    def __init__(self, decimal=False, use_named_references=True):
        self.decimal = bool(decimal)
        self.use_named_references = bool(use_named_references)


def numeric_reference(codepoint: int, decimal: bool = False) -> str:
    """Format ``&#233;`` (decimal) or ``&#xE9;`` (uppercase hex)."""
    if decimal:
        return f"&#{codepoint};"
    return f"&#x{codepoint:X};"


class Escaper:
    __slots__ = ("debug_enabled", "opts")

    def __init__(self, opts=None, debug=False):
        self.opts = opts or EscapeOpts()
        self.debug_enabled = bool(debug)

    def debug(self, message, indent=4):
        print(f"{' ' * indent}{self.__class__.__name__}: {message}")

    def run(self, text: str) -> str:
        """Escape ``text``.

        Returns ``text`` itself (same object) when no character needed
        replacing, so callers can detect the no-op case with ``is``.
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")

        use_named = self.opts.use_named_references
        decimal = self.opts.decimal
        debug = self.debug_enabled

        parts: list[str] = []
        left = 0
        for pos, c in enumerate(text):
            codepoint = ord(c)
            reference = encode_named(codepoint) if use_named else None
            if reference is None and needs_numeric_reference(c):
                reference = numeric_reference(codepoint, decimal)
            if reference is None:
                continue

            if debug:
                self.debug(f"{c!r} at {pos} -> {reference}")
            if left < pos:
                parts.append(text[left:pos])
            parts.append(reference)
            left = pos + 1

        if not parts:
            return text

        parts.append(text[left:])
        return "".join(parts)


def escape(text: str, decimal: bool = False, use_named_references: bool = True) -> str:
    """Return ``text`` with unsafe and non-ASCII characters replaced by references.

    Named references (``&lt;``) are preferred when ``use_named_references`` is
    set and the character has one; everything else that is non-ASCII or one of
    ``< > " ' &`` becomes a numeric reference, hex (``&#xE9;``) by default or
    decimal (``&#233;``) with ``decimal=True``.
    """
    return Escaper(EscapeOpts(decimal=decimal, use_named_references=use_named_references)).run(text)
