"""Command line entry point: ``python -m htmlentities {escape,unescape} [TEXT]``."""

import argparse
import sys

from .escape import EscapeOpts, Escaper
from .unescape import UnescapeOpts, Unescaper


def build_parser():
    parser = argparse.ArgumentParser(
        prog="htmlentities",
        description="Convert text to and from HTML character references",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    escape_parser = subparsers.add_parser("escape", help="Replace unsafe characters with references")
    escape_parser.add_argument("text", nargs="?", help="Text to escape (default: read stdin)")
    escape_parser.add_argument(
        "--decimal",
        action="store_true",
        help="Use decimal numeric references instead of hex",
    )
    escape_parser.add_argument(
        "--no-named",
        action="store_true",
        help="Never emit named references",
    )
    escape_parser.add_argument("--debug", action="store_true", help="Trace substitutions")

    unescape_parser = subparsers.add_parser("unescape", help="Decode character references")
    unescape_parser.add_argument("text", nargs="?", help="Text to unescape (default: read stdin)")
    unescape_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Accept references without a trailing semicolon",
    )
    unescape_parser.add_argument(
        "--errors",
        action="store_true",
        help="Report malformed references on stderr",
    )
    unescape_parser.add_argument("--debug", action="store_true", help="Trace parser states")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    text = args.text if args.text is not None else sys.stdin.read()

    if args.command == "escape":
        opts = EscapeOpts(decimal=args.decimal, use_named_references=not args.no_named)
        result = Escaper(opts, debug=args.debug).run(text)
    else:
        opts = UnescapeOpts(strict=not args.lenient, collect_errors=args.errors)
        unescaper = Unescaper(opts, debug=args.debug)
        result = unescaper.run(text)
        for error in unescaper.errors:
            print(error, file=sys.stderr)

    sys.stdout.write(result)
    if args.text is not None:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
