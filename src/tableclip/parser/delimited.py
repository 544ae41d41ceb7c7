from __future__ import annotations

from ..model import Grid, Row
from .utils import split_lines

QUOTE = '"'
COMMA = ","


def parse_csv_line(line: str) -> Row:
    cells: Row = []
    current: list[str] = []
    in_quotes = False

    i = 0
    length = len(line)
    while i < length:
        char = line[i]
        if in_quotes:
            if char == QUOTE and i + 1 < length and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 1
            elif char == QUOTE:
                in_quotes = False
            else:
                current.append(char)
        elif char == QUOTE:
            in_quotes = True
        elif char == COMMA:
            cells.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    cells.append("".join(current))
    return cells


def parse_csv(data: str) -> Grid:
    """Parse comma-separated text, honouring quoted fields that span lines.

    An unterminated quote swallows the rest of the input into the current
    cell instead of failing.
    """
    rows: Grid = []
    row: Row = []
    cell: list[str] = []
    in_quotes = False

    i = 0
    length = len(data)
    while i < length:
        char = data[i]
        next_char = data[i + 1] if i + 1 < length else ""

        if in_quotes:
            if char == QUOTE and next_char == QUOTE:
                cell.append(QUOTE)
                i += 1
            elif char == QUOTE:
                in_quotes = False
            else:
                cell.append(char)
        elif char == QUOTE:
            in_quotes = True
        elif char == COMMA:
            row.append("".join(cell))
            cell = []
        elif char == "\n" or (char == "\r" and next_char == "\n"):
            row.append("".join(cell))
            rows.append(row)
            row = []
            cell = []
            if char == "\r":
                i += 1
        else:
            cell.append(char)
        i += 1

    # trailing newline leaves a single empty field behind
    row.append("".join(cell))
    if len(row) > 1 or row[0] != "":
        rows.append(row)

    return rows


def parse_tsv(data: str) -> Grid:
    # only blank lines are trimmed so a leading empty cell keeps its tab
    return [line.split("\t") for line in split_lines(data.strip("\r\n"))]
