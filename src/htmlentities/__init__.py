from .entities import DECODE_MAP, ENCODE_MAP
from .escape import EscapeOpts, Escaper, escape
from .errors import ParseError
from .unescape import UnescapeOpts, Unescaper, unescape

__all__ = [
    "DECODE_MAP",
    "ENCODE_MAP",
    "EscapeOpts",
    "Escaper",
    "ParseError",
    "UnescapeOpts",
    "Unescaper",
    "escape",
    "unescape",
]
