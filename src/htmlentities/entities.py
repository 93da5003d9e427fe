"""HTML 4 named character reference table.

Bidirectional mapping between named references (``&amp;``) and code points,
built once at import time from Python's HTML 4 entity list (252 entities).
Both directions are exposed as read-only views and are never mutated.
"""

import html.entities
from types import MappingProxyType

# code point -> "&name;"
_ENCODE = {}
# "&name;" and legacy "&name" -> code point
_DECODE = {}

for codepoint, name in html.entities.codepoint2name.items():
    _ENCODE[codepoint] = f"&{name};"

for name, codepoint in html.entities.name2codepoint.items():
    _DECODE[f"&{name};"] = codepoint
    # Unterminated form, only reachable from non-strict unescaping
    _DECODE[f"&{name}"] = codepoint

ENCODE_MAP = MappingProxyType(_ENCODE)
DECODE_MAP = MappingProxyType(_DECODE)

MAX_CODEPOINT = 0x10FFFF
SURROGATE_RANGE = range(0xD800, 0xE000)


def encode_named(codepoint):
    """Return the named reference for a code point (``"&lt;"``), or None."""
    return ENCODE_MAP.get(codepoint)


def decode_named(reference):
    """Return the code point for a reference like ``"&lt;"``, or None.

    The key includes the leading ``&``. Keys without the trailing ``;`` are
    accepted for every entity in the table.
    """
    return DECODE_MAP.get(reference)


def is_scalar_value(codepoint):
    """True if the code point can be turned into a character by decoding."""
    return 0 <= codepoint <= MAX_CODEPOINT and codepoint not in SURROGATE_RANGE
