#!/usr/bin/env python3
"""
Random fuzzer for htmlentities.
Generates malformed character references and mixed text to check that
escape/unescape never crash or hang, and that escaped text round-trips.
"""

import argparse
import random
import string
import sys
import time

from htmlentities import escape, unescape

SPECIAL_CHARS = [
    "\x00", "\x01", "\x0b", "\x0c", "\x7f",  # Control chars
    "\ufffd",  # Replacement character
    "\u00a0",  # Non-breaking space
    "\u2028", "\u2029",  # Line/paragraph separators
    "\u200b", "\u200d",  # Zero-width chars
    "\ufeff",  # BOM
    "\U0001f600",  # Astral plane
    "\u0663",  # Non-ASCII digit
    "\u00e9",  # Non-ASCII letter
]

ENTITIES = [
    "&amp;", "&lt;", "&gt;", "&quot;", "&apos;", "&nbsp;",
    "&", "&amp", "&ampamp;", "&am", "&#", "&#x", "&#123", "&#x1f;",
    "&#xdeadbeef;", "&#99999999;", "&#-1;", "&#x;", "&unknown;",
    "&AMP;", "&AMP", "&LT", "&GT",
    # Edge case entities
    "&#0;", "&#x0;", "&#x0D;", "&#13;",  # Null and CR
    "&#128;", "&#x80;",  # C1 control range start
    "&#xD800;", "&#xDFFF;",  # Surrogate range
    "&#x10FFFF;", "&#x110000;",  # Max and over max codepoint
    "&notin;", "&notinva;", "&eacute", "&frac12;",
    "&&", "&#&", "&;", "&#;", "&#X41;",
]


def random_string(min_len=0, max_len=20):
    """Generate random ASCII string."""
    length = random.randint(min_len, max_len)
    return "".join(random.choices(string.ascii_letters + string.digits, k=length))


def fuzz_reference():
    """Generate a plausible but possibly malformed reference."""
    kind = random.choice(["named", "dec", "hex", "known"])
    if kind == "known":
        return random.choice(ENTITIES)
    if kind == "named":
        body = random_string(0, 10)
    elif kind == "dec":
        body = "#" + "".join(random.choices(string.digits, k=random.randint(0, 12)))
    else:
        body = "#" + random.choice("xX") + "".join(random.choices(string.hexdigits, k=random.randint(0, 10)))
    terminator = random.choice([";", ";", "", " ", "&", random.choice(SPECIAL_CHARS)])
    return "&" + body + terminator


def fuzz_text():
    """Generate text runs with unsafe and non-ASCII characters."""
    parts = []
    for _ in range(random.randint(0, 8)):
        choice = random.random()
        if choice < 0.5:
            parts.append(random_string(1, 10))
        elif choice < 0.7:
            parts.append(random.choice("<>\"'&;#"))
        else:
            parts.append(random.choice(SPECIAL_CHARS))
    return "".join(parts)


def generate_fuzzed_text():
    """Generate a complete fuzzed document."""
    parts = []
    for _ in range(random.randint(1, 20)):
        parts.append(random.choice([fuzz_reference, fuzz_text])())
    return "".join(parts)


def _check(text):
    """Run every transform on text; return a failure description or None."""
    for strict in (True, False):
        result = unescape(text, strict=strict)
        if not isinstance(result, str):
            return f"unescape(strict={strict}) returned {type(result).__name__}"
    for decimal in (False, True):
        for named in (False, True):
            escaped = escape(text, decimal=decimal, use_named_references=named)
            if any(0xD800 <= ord(c) <= 0xDFFF for c in text):
                continue
            if unescape(escaped) != text:
                return f"round trip failed (decimal={decimal}, named={named})"
    return None


def run_fuzzer(num_tests, seed=None, verbose=False):
    """Check num_tests generated inputs; return the list of failures."""
    if seed is not None:
        random.seed(seed)

    failures = []
    print(f"Fuzzing htmlentities with {num_tests} test cases...")
    start_time = time.perf_counter()

    for i in range(num_tests):
        text = generate_fuzzed_text()
        started = time.perf_counter()
        try:
            problem = _check(text)
        except Exception as e:
            problem = f"crash: {e!r}"
        if problem is None and time.perf_counter() - started > 5.0:
            problem = "hang: took more than 5s"
        if problem is not None:
            failures.append((i, text, problem))
            if verbose:
                print(f"  Test {i}: {problem}")

    elapsed = time.perf_counter() - start_time
    print(f"{num_tests - len(failures)}/{num_tests} passed in {elapsed:.2f}s")
    for i, text, problem in failures[:10]:
        print(f"\nTest #{i}: {problem}\n  Text: {text[:200]!r}")
    if len(failures) > 10:
        print(f"\n... and {len(failures) - 10} more failures")
    return failures


def main():
    parser = argparse.ArgumentParser(description="Fuzz htmlentities with malformed references")
    parser.add_argument("--num-tests", "-n", type=int, default=1000, help="Number of generated inputs")
    parser.add_argument("--seed", "-s", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--verbose", "-v", action="store_true", help="Report each failure as it happens")
    parser.add_argument("--sample", type=int, metavar="N", help="Print N generated inputs and exit")
    args = parser.parse_args()

    if args.sample:
        random.seed(args.seed)
        for _ in range(args.sample):
            print(repr(generate_fuzzed_text()))
        return

    failures = run_fuzzer(args.num_tests, seed=args.seed, verbose=args.verbose)
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
