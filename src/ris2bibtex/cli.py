"""Command line interface for converting RIS files to BibTeX."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from .app import RisConverterApp
from .parsers import RisFileError


class _ConverterArgumentParser(argparse.ArgumentParser):
    """Reports argument errors with the short usage line and status 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.exit(1, f"Usage: {self.prog} <file.ris>\n")


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    parser = _ConverterArgumentParser(
        prog=prog, description="Convert a RIS citation file to BibTeX entries"
    )
    parser.add_argument("input", help="Path to the .ris file to convert")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write BibTeX entries to this file instead of standard output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parsing details to standard error",
    )
    return parser


def run(filepath: str, output: Path | None = None) -> int:
    """Convert ``filepath`` and write every entry, or report a read failure."""
    converter = RisConverterApp()
    try:
        entries = converter.convert_file(filepath)
    except RisFileError as exc:
        print(f"Error: Could not read file {exc.path}", file=sys.stderr)
        return 1

    if output:
        try:
            output.write_text("".join(f"{entry}\n" for entry in entries), encoding="utf-8")
        except OSError:
            print(f"Error: Could not write file {output}", file=sys.stderr)
            return 1
        return 0

    for entry in entries:
        print(entry)
    return 0


def main(argv: List[str] | None = None, prog: str | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) == 1:
        # A lone argument is always the input path, even when it starts with "-".
        argv = ["--", *argv]
    parser = build_parser(prog)
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    return run(args.input, output=args.output)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
