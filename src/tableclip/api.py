from __future__ import annotations

import logging

from .model import FORMATS, ConvertOptions, DetectedFormat, Format, Grid, TableDoc
from .parser.boxdraw import parse_box_draw_table
from .parser.delimited import parse_csv, parse_tsv
from .parser.detect import detect_format
from .parser.markdown import parse_markdown_table
from .parser.spaces import parse_space_separated
from .parser.utils import unescape_literals
from .render_html import render_rows_html

logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """Raised when there is nothing to convert."""


def resolve_format(data: str, fmt: Format = "auto") -> DetectedFormat:
    if fmt == "auto":
        return detect_format(data)
    if fmt not in FORMATS:
        raise ValueError(f"Unknown table format: {fmt!r}")
    return fmt


def parse_table(data: str, fmt: Format = "auto") -> Grid:
    actual = resolve_format(data, fmt)
    if actual == "csv":
        return parse_csv(data.strip())
    if actual == "spaces":
        return parse_space_separated(data)
    if actual == "markdown":
        return parse_markdown_table(data)
    if actual == "boxdraw":
        return parse_box_draw_table(data)
    return parse_tsv(data)


def render_html_table(data: str, has_header: bool = True, fmt: Format = "auto") -> str:
    return render_rows_html(parse_table(data, fmt), has_header)


def tsv_to_html_table(tsv: str, has_header: bool = True) -> str:
    return render_html_table(tsv, has_header, "tsv")


def load_table(text: str, *, options: ConvertOptions | None = None) -> TableDoc:
    opts = options or ConvertOptions()
    data = unescape_literals(text) if opts.unescape_literals else text
    if not data.strip():
        raise EmptyInputError("No data provided")

    actual = resolve_format(data, opts.format)
    rows = parse_table(data, actual)
    logger.debug(
        "Parsed %d rows as %s (%s)",
        len(rows),
        actual,
        "auto-detected" if opts.format == "auto" else "specified",
    )

    return TableDoc(
        source_text=data,
        options=opts,
        format=actual,
        auto_detected=opts.format == "auto",
        rows=rows,
        html=render_rows_html(rows, opts.has_header),
    )


def convert_text_to_html(text: str, *, options: ConvertOptions | None = None) -> str:
    return load_table(text, options=options).html
