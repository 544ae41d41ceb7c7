"""Tables framed with Unicode box-drawing characters.

Covers the layouts printed by terminal table renderers, e.g.::

    ┌──────┬─────┐
    │ name │ age │
    ├──────┼─────┤
    │ Ann  │ 30  │
    └──────┴─────┘

Border lines are built entirely from glyphs of the Box Drawing block
(U+2500..U+257F). Content lines carry vertical bar glyphs between cells.
"""

from __future__ import annotations

import re

from ..model import Grid
from .utils import split_framed_row, split_lines

BOX_DRAWING_FIRST = 0x2500
BOX_DRAWING_LAST = 0x257F

# light, heavy, double, then the dashed variants
VERTICAL_BARS = "│┃║┆┇┊┋╎╏"
VERTICAL_BAR_RE = re.compile(f"[{VERTICAL_BARS}]")

MIN_BORDER_GLYPHS = 2


def is_box_drawing_char(char: str) -> bool:
    return BOX_DRAWING_FIRST <= ord(char) <= BOX_DRAWING_LAST


def is_border_line(line: str) -> bool:
    glyphs = [char for char in line if not char.isspace()]
    if len(glyphs) < MIN_BORDER_GLYPHS:
        return False
    if not all(is_box_drawing_char(char) for char in glyphs):
        return False
    return any(char not in VERTICAL_BARS for char in glyphs)


def is_framed_content_line(line: str) -> bool:
    stripped = line.strip()
    if len(stripped) < 2:
        return False
    return stripped[0] in VERTICAL_BARS and stripped[-1] in VERTICAL_BARS


def is_content_line(line: str) -> bool:
    return bool(VERTICAL_BAR_RE.search(line)) and not is_border_line(line)


def is_box_draw_table(data: str) -> bool:
    lines = [line for line in split_lines(data) if line.strip()]
    if not lines:
        return False
    if is_framed_content_line(lines[0]):
        return True
    # a rule line alone is an underline, not a frame
    has_border = any(is_border_line(line) for line in lines)
    return has_border and any(is_content_line(line) for line in lines)


def parse_box_draw_table(data: str) -> Grid:
    rows: Grid = []
    for line in split_lines(data.strip()):
        stripped = line.strip()
        if not stripped or is_border_line(stripped):
            continue
        if not VERTICAL_BAR_RE.search(stripped):
            continue
        cells = split_framed_row(stripped, VERTICAL_BAR_RE)
        if cells:
            rows.append(cells)
    return rows
