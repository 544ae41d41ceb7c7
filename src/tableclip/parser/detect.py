from __future__ import annotations

from ..model import DetectedFormat
from .boxdraw import is_box_draw_table
from .markdown import looks_like_markdown_row
from .spaces import has_column_gap
from .utils import first_line


def detect_format(data: str) -> DetectedFormat:
    """Guess the dialect of a pasted table.

    Framed dialects win over delimiter counting: a Markdown or box-drawing
    table whose cells contain commas or tabs is still a framed table.
    Markdown is decided on the first line only, box drawing on the whole
    text since the top border comes before the header row. Text with no
    recognisable delimiter falls back to a single TSV column.
    """
    line = first_line(data)

    if looks_like_markdown_row(line):
        return "markdown"
    if is_box_draw_table(data):
        return "boxdraw"
    if "\t" in line:
        return "tsv"
    if "," in line:
        return "csv"
    if has_column_gap(line):
        return "spaces"
    return "tsv"
