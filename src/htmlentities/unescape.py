"""Character reference decoding.

Single pass over the input with one character of lookahead. Named
(``&amp;``), decimal (``&#38;``) and hexadecimal (``&#x26;``) references are
replaced by the character they denote; anything that does not form a
resolvable reference (unknown names, out of range numbers, references cut
short) is left in the output exactly as written.
"""

from __future__ import annotations

from .chars import ALNUM, ALPHA, DIGITS, HEX_DIGITS
from .entities import decode_named, is_scalar_value
from .errors import (
    ABSENCE_OF_DIGITS,
    MISSING_SEMICOLON,
    OUTSIDE_UNICODE_RANGE,
    SURROGATE_REFERENCE,
    UNKNOWN_NAMED_REFERENCE,
    ParseError,
)

# Longest digit runs that can still denote U+10FFFF, leading zeros aside
_MAX_DEC_DIGITS = 7
_MAX_HEX_DIGITS = 6


class UnescapeOpts:
    __slots__ = ("collect_errors", "strict")

    def __init__(self, strict=True, collect_errors=False):
        self.strict = bool(strict)
        self.collect_errors = bool(collect_errors)


class Unescaper:
    INVALID = 0
    UNKNOWN = 1
    NUMBER = 2
    DEC = 3
    HEX = 4
    NAMED = 5

    STATE_NAMES = ("INVALID", "UNKNOWN", "NUMBER", "DEC", "HEX", "NAMED")

    # Characters that may continue a reference in each accumulating state
    CONTENT = {DEC: DIGITS, HEX: HEX_DIGITS, NAMED: ALNUM}

    __slots__ = (
        "amp",
        "buffer",
        "debug_enabled",
        "entity",
        "errors",
        "left",
        "length",
        "opts",
        "parts",
        "pos",
        "state",
    )

    def __init__(self, opts=None, debug=False):
        self.opts = opts or UnescapeOpts()
        self.debug_enabled = bool(debug)

        self.buffer = ""
        self.length = 0
        self.pos = 0
        self.left = 0
        self.amp = 0
        self.state = self.INVALID
        self.entity = []
        self.parts = []
        self.errors = []

    def debug(self, message, indent=4):
        print(f"{' ' * indent}{self.__class__.__name__}: {message}")

    def run(self, text: str) -> str:
        """Decode every resolvable reference in ``text``.

        Returns ``text`` itself (same object) when nothing was decoded.
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")

        self.buffer = text
        self.length = len(text)
        self.pos = 0
        self.left = 0
        self.parts = []
        self.errors = []
        self._reset()

        while self.pos < self.length:
            c = text[self.pos]
            state = self.state

            if state == self.INVALID:
                if c == "&":
                    self._switch(self.UNKNOWN)
                    self.amp = self.pos
                self.pos += 1
            elif state == self.UNKNOWN:
                if c == "#":
                    self._switch(self.NUMBER)
                elif ALPHA.contains(c):
                    self._switch(self.NAMED)
                    self.entity.append(c)
                else:
                    # Not a reference; the character is consumed with it
                    self._reset()
                self.pos += 1
            elif state == self.NUMBER:
                if c == "x" or c == "X":
                    self._switch(self.HEX)
                elif DIGITS.contains(c):
                    self._switch(self.DEC)
                    self.entity.append(c)
                else:
                    self._error(ABSENCE_OF_DIGITS)
                    self._reset()
                self.pos += 1
            else:
                self._consume_content(c)

        self._finish_at_eof()

        if not self.parts:
            return text

        self.parts.append(text[self.left :])
        return "".join(self.parts)

    def _consume_content(self, c):
        state = self.state
        content = self.CONTENT[state]

        if not content.contains(c):
            self._abandon()
            self.pos += 1
            return

        self.entity.append(c)
        next_pos = self.pos + 1
        lookahead = self.buffer[next_pos] if next_pos < self.length else None

        if lookahead == ";":
            self._resolve(next_pos + 1, terminated=True)
        elif not self.opts.strict and (lookahead is None or not content.contains(lookahead)):
            self._resolve(next_pos, terminated=False)
        else:
            self.pos = next_pos

    def _resolve(self, end, terminated):
        """End of reference: decode the buffered text and move past it."""
        self.pos = end
        codepoint = self._decode(terminated)
        if codepoint is not None:
            if self.debug_enabled:
                self.debug(f"resolved {self.buffer[self.amp:end]!r} -> U+{codepoint:04X}")
            if self.left < self.amp:
                self.parts.append(self.buffer[self.left : self.amp])
            self.parts.append(chr(codepoint))
            self.left = end
        elif self.debug_enabled:
            self.debug(f"left {self.buffer[self.amp:end]!r} as text")
        self._reset()

    def _decode(self, terminated):
        state = self.state
        text = "".join(self.entity)

        if state == self.NAMED:
            reference = f"&{text};" if terminated else f"&{text}"
            codepoint = decode_named(reference)
            if codepoint is None:
                self._error(UNKNOWN_NAMED_REFERENCE)
            return codepoint

        significant = text.lstrip("0")
        if state == self.DEC:
            if len(significant) > _MAX_DEC_DIGITS:
                self._error(OUTSIDE_UNICODE_RANGE)
                return None
            codepoint = int(text, 10)
        else:
            if len(significant) > _MAX_HEX_DIGITS:
                self._error(OUTSIDE_UNICODE_RANGE)
                return None
            codepoint = int(text, 16)

        if is_scalar_value(codepoint):
            return codepoint
        if 0xD800 <= codepoint <= 0xDFFF:
            self._error(SURROGATE_REFERENCE)
        else:
            self._error(OUTSIDE_UNICODE_RANGE)
        return None

    def _abandon(self):
        if self.state == self.HEX and not self.entity:
            self._error(ABSENCE_OF_DIGITS)
        else:
            self._error(MISSING_SEMICOLON)
        if self.debug_enabled:
            self.debug(f"abandoned {self.buffer[self.amp:self.pos]!r}")
        self._reset()

    def _finish_at_eof(self):
        state = self.state
        if state == self.NUMBER:
            self._error(ABSENCE_OF_DIGITS)
        elif state in self.CONTENT:
            self._abandon()
        self._reset()

    def _switch(self, state):
        if self.debug_enabled:
            self.debug(f"{self.STATE_NAMES[self.state]} -> {self.STATE_NAMES[state]} at {self.pos}")
        self.state = state

    def _reset(self):
        self.state = self.INVALID
        self.entity.clear()
        self.amp = self.length

    def _error(self, code):
        if not self.opts.collect_errors:
            return
        self.errors.append(ParseError.at(code, self.buffer, self.amp))


def unescape(text: str, strict: bool = True) -> str:
    """Return ``text`` with character references replaced by their characters.

    With ``strict=True`` (the default) every reference must end in ``;``.
    With ``strict=False`` a reference also ends where the next character can
    no longer continue it, or at the end of the input, so ``&amp`` and
    ``&#x41`` decode too. Unresolvable references are kept as written.
    """
    return Unescaper(UnescapeOpts(strict=strict)).run(text)
