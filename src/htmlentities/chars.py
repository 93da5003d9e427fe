"""Character classes used by the escaper and the unescaper.

All classes are ASCII-only: a non-ASCII digit or letter is never part of a
character reference, and is never safe to emit literally.
"""


class SmallCharSet:
    __slots__ = ("_mask",)

    def __init__(self, chars):
        mask = 0
        for c in chars:
            code = ord(c)
            if code >= 128:
                raise ValueError("SmallCharSet only supports ASCII")
            mask |= 1 << code
        self._mask = mask

    def contains(self, c):
        code = ord(c)
        if code >= 128:
            return False
        return (self._mask >> code) & 1 == 1

    __contains__ = contains

    def __or__(self, other):
        merged = SmallCharSet("")
        merged._mask = self._mask | other._mask
        return merged


DIGITS = SmallCharSet("0123456789")
HEX_DIGITS = SmallCharSet("0123456789abcdefABCDEF")
ALPHA = SmallCharSet("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
ALNUM = ALPHA | DIGITS

# Unsafe inside tag syntax
TAG_SYNTAX = SmallCharSet("<>")
# Unsafe inside quoted attribute values
ATTRIBUTE_SYNTAX = SmallCharSet("\"'&")
UNSAFE_ASCII = TAG_SYNTAX | ATTRIBUTE_SYNTAX


def is_ascii(c):
    return ord(c) < 128


def needs_numeric_reference(c):
    """True for characters that must never be emitted literally."""
    return not is_ascii(c) or UNSAFE_ASCII.contains(c)
