from __future__ import annotations

import unittest

from htmlentities.entities import DECODE_MAP, ENCODE_MAP, decode_named, encode_named, is_scalar_value


class TestEntityTable(unittest.TestCase):
    def test_encode_uses_full_reference_syntax(self) -> None:
        assert ENCODE_MAP[ord("&")] == "&amp;"
        assert ENCODE_MAP[ord("<")] == "&lt;"
        assert ENCODE_MAP[0xE9] == "&eacute;"
        assert encode_named(0x20AC) == "&euro;"

    def test_encode_covers_html4_set_only(self) -> None:
        assert len(ENCODE_MAP) == 252
        # &apos; is XML/HTML5, not HTML 4
        assert encode_named(ord("'")) is None
        assert encode_named(ord("a")) is None

    def test_every_encoding_has_terminated_decoding(self) -> None:
        for codepoint, reference in ENCODE_MAP.items():
            assert reference.startswith("&") and reference.endswith(";")
            assert DECODE_MAP[reference] == codepoint

    def test_decode_accepts_unterminated_keys(self) -> None:
        assert decode_named("&amp;") == 38
        assert decode_named("&amp") == 38
        assert decode_named("amp;") is None
        assert decode_named("&AMP;") is None

    def test_tables_are_read_only(self) -> None:
        with self.assertRaises(TypeError):
            ENCODE_MAP[0x41] = "&A;"  # type: ignore[index]
        with self.assertRaises(TypeError):
            DECODE_MAP["&A;"] = 0x41  # type: ignore[index]

    def test_scalar_value_bounds(self) -> None:
        assert is_scalar_value(0)
        assert is_scalar_value(0x10FFFF)
        assert not is_scalar_value(0x110000)
        assert not is_scalar_value(0xD800)
        assert not is_scalar_value(0xDFFF)
        assert is_scalar_value(0xE000)
        assert not is_scalar_value(-1)
