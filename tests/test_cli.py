from __future__ import annotations

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from htmlentities.__main__ import build_parser, main


def run_cli(argv, stdin=None):
    out = io.StringIO()
    err = io.StringIO()
    with mock.patch("sys.stdin", io.StringIO(stdin or "")), redirect_stdout(out), redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()


class TestCommandLine(unittest.TestCase):
    def test_escape_argument(self) -> None:
        code, out, _ = run_cli(["escape", "<b>café</b>"])
        assert code == 0
        assert out == "&lt;b&gt;caf&eacute;&lt;/b&gt;\n"

    def test_escape_numeric_options(self) -> None:
        _, out, _ = run_cli(["escape", "--no-named", "--decimal", "é<"])
        assert out == "&#233;&#60;\n"

    def test_escape_reads_stdin(self) -> None:
        _, out, _ = run_cli(["escape"], stdin="a & b\n")
        assert out == "a &amp; b\n"

    def test_unescape_strict_and_lenient(self) -> None:
        _, out, _ = run_cli(["unescape", "&lt;p&gt &amp"])
        assert out == "<p&gt &amp\n"
        _, out, _ = run_cli(["unescape", "--lenient", "&lt;p&gt &amp"])
        assert out == "<p> &\n"

    def test_unescape_reports_errors(self) -> None:
        _, out, err = run_cli(["unescape", "--errors"], stdin="&nope;")
        assert out == "&nope;"
        assert err == "(1,1): unknown-named-character-reference\n"

    def test_unescape_debug(self) -> None:
        _, out, _ = run_cli(["unescape", "--debug", "&lt;"])
        assert "Unescaper: INVALID -> UNKNOWN at 0" in out
        assert out.endswith("<\n")

    def test_command_is_required(self) -> None:
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            build_parser().parse_args([])
