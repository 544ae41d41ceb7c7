from __future__ import annotations

import re

from ..model import Grid
from .utils import split_framed_row, split_lines

SEPARATOR_ROW_RE = re.compile(r"^\|?[\s\-:|]+\|?$")
PIPE_ROW_RE = re.compile(r"\|.*\|")


def is_separator_row(line: str) -> bool:
    return bool(SEPARATOR_ROW_RE.match(line))


def looks_like_markdown_row(line: str) -> bool:
    stripped = line.strip()
    return stripped.startswith("|") or bool(PIPE_ROW_RE.search(stripped))


def parse_markdown_table(data: str) -> Grid:
    rows: Grid = []
    for line in split_lines(data.strip()):
        stripped = line.strip()
        if is_separator_row(stripped):
            continue
        cells = split_framed_row(stripped, "|")
        if cells:
            rows.append(cells)
    return rows
