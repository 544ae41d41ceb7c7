from __future__ import annotations

import re

_LITERAL_ESCAPES = {
    "\\t": "\t",
    "\\n": "\n",
    "\\r": "\r",
}
_LITERAL_ESCAPE_RE = re.compile(r"\\[tnr]")
_LINE_BREAK_RE = re.compile(r"\r?\n")


def unescape_literals(text: str) -> str:
    return _LITERAL_ESCAPE_RE.sub(lambda match: _LITERAL_ESCAPES[match.group(0)], text)


def first_line(text: str) -> str:
    """Return the first line that is not blank, or ``""`` for blank text."""
    for line in split_lines(text):
        if line.strip():
            return line
    return ""


def split_lines(text: str) -> list[str]:
    return _LINE_BREAK_RE.split(text)


def split_framed_row(line: str, separator: str | re.Pattern[str]) -> list[str]:
    """Split a framed table row and drop the empty pieces left by the outer frame.

    Only one empty piece is removed from each end, so ``"| a |  |"`` still
    keeps its empty last cell.
    """
    if isinstance(separator, str):
        pieces = line.split(separator)
    else:
        pieces = separator.split(line)
    cells = [piece.strip() for piece in pieces]

    if cells and cells[0] == "":
        cells = cells[1:]
    if cells and cells[-1] == "":
        cells = cells[:-1]
    return cells
