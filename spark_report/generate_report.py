#!/usr/bin/env python3
"""Generate a self-contained Spark HTML report from Markdown."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .page import build_report
from .parser import convert_markdown


class ReportInputError(Exception):
    """Raised when no Markdown source can be read."""


def render_report(markdown: str) -> str:
    return build_report(convert_markdown(markdown))


def read_source(source: Optional[str], stdin: Optional[TextIO] = None) -> str:
    """Read Markdown from ``source`` if given, otherwise from standard input."""
    if source:
        path = Path(source)
        if not path.is_file():
            raise ReportInputError(f"Cannot locate markdown file '{source}'")
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise ReportInputError(f"Cannot read '{source}': {exc}") from exc

    stream = stdin if stdin is not None else sys.stdin
    if stream is None or stream.isatty():
        raise ReportInputError("No markdown file given and nothing piped on standard input")
    markdown = stream.read()
    if not markdown:
        raise ReportInputError("Standard input was empty")
    return markdown


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("source", nargs="?", help="Markdown file to convert (reads standard input when omitted)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        markdown = read_source(args.source)
    except ReportInputError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    sys.stdout.write(render_report(markdown))
    return 0


if __name__ == "__main__":
    sys.exit(main())
