from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from .api import EmptyInputError, load_table
from .clipboard import ClipboardError, copy_html_to_clipboard
from .model import ConvertOptions

EPILOG = """\
examples:
  pbpaste | tableclip
  cat data.csv | tableclip
  echo "A,B,C" | tableclip --no-header -o -
"""


def _package_version() -> str:
    try:
        return version("tableclip")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tableclip",
        description="Convert pasted table text (TSV, CSV, Markdown, space-separated, box-drawing) into an HTML table",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    format_group = parser.add_mutually_exclusive_group()
    format_group.add_argument(
        "--tsv",
        dest="format",
        action="store_const",
        const="tsv",
        help="TSV format (overrides auto-detection)",
    )
    format_group.add_argument(
        "--csv",
        dest="format",
        action="store_const",
        const="csv",
        help="CSV format (overrides auto-detection)",
    )
    format_group.add_argument(
        "--spaces",
        dest="format",
        action="store_const",
        const="spaces",
        help="Space-separated format (overrides auto-detection)",
    )
    format_group.add_argument(
        "--markdown",
        "--md",
        dest="format",
        action="store_const",
        const="markdown",
        help="Markdown table format (overrides auto-detection)",
    )
    format_group.add_argument(
        "--boxdraw",
        dest="format",
        action="store_const",
        const="boxdraw",
        help="Box-drawing table format (overrides auto-detection)",
    )
    parser.set_defaults(format="auto")
    parser.add_argument(
        "--no-header",
        action="store_true",
        help="Don't treat the first row as header",
    )
    parser.add_argument(
        "--no-unescape",
        action="store_true",
        help=r"Keep literal \t, \n and \r sequences as typed",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the HTML table to a file ('-' for stdout) instead of the clipboard",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    options = ConvertOptions(
        has_header=not args.no_header,
        format=args.format,
        unescape_literals=not args.no_unescape,
    )
    raw = sys.stdin.read()

    try:
        doc = load_table(raw, options=options)
    except EmptyInputError as exc:
        print(exc, file=sys.stderr)
        print("Usage: pbpaste | tableclip", file=sys.stderr)
        print("Run 'tableclip --help' for more options", file=sys.stderr)
        return 1

    origin = "auto-detected" if doc.auto_detected else "specified"
    print(f"Format: {doc.format.upper()} ({origin})", file=sys.stderr)

    if args.output is not None:
        if str(args.output) == "-":
            sys.stdout.write(doc.html + "\n")
        else:
            args.output.write_text(doc.html, encoding="utf-8")
        return 0

    try:
        copy_html_to_clipboard(doc.html, doc.source_text)
    except ClipboardError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print("Copied to clipboard!", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
