from __future__ import annotations

import re

from ..model import Grid
from .utils import split_lines

MULTI_SPACE_RE = re.compile(r" {2,}")


def has_column_gap(line: str) -> bool:
    return bool(MULTI_SPACE_RE.search(line))


def parse_space_separated(data: str) -> Grid:
    rows: Grid = []
    for line in split_lines(data.strip()):
        stripped = line.strip()
        if not stripped:
            continue
        rows.append([cell.strip() for cell in MULTI_SPACE_RE.split(stripped)])
    return rows
