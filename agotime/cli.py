"""Command line: read seconds from standard input, print them as phrases."""

from __future__ import annotations

import argparse
import sys

from agotime.formatter import Formatter
from agotime.languages.registry import UnknownLanguageError, from_code
from agotime.units import U64_MAX, Duration

_DESCRIPTION = "Format numbers of seconds read from standard input, one per line."


def _parse_seconds(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"not an unsigned number: {text!r}")
    value = int(digits)
    if value > U64_MAX:
        raise ValueError(f"number too large: {text!r}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="agotime", description=_DESCRIPTION)
    parser.add_argument("language", help="ISO 639-1 two-letter language code")
    args = parser.parse_args(argv)

    try:
        language = from_code(args.language)
    except UnknownLanguageError as exc:
        print(f"agotime: {exc}", file=sys.stderr)
        return 1

    formatter = Formatter(language=language, num_items=3)
    for line in sys.stdin:
        text = line.rstrip("\n").removesuffix("\r")
        try:
            secs = _parse_seconds(text)
        except ValueError as exc:
            print(f"agotime: {exc}", file=sys.stderr)
            return 1
        print(formatter.convert(Duration.from_secs(secs)))
    return 0


if __name__ == "__main__":
    sys.exit(main())