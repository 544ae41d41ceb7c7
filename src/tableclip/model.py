from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Format = Literal["tsv", "csv", "spaces", "markdown", "boxdraw", "auto"]
DetectedFormat = Literal["tsv", "csv", "spaces", "markdown", "boxdraw"]

Row = list[str]
Grid = list[Row]

FORMATS: tuple[str, ...] = ("tsv", "csv", "spaces", "markdown", "boxdraw")


@dataclass(slots=True)
class ConvertOptions:
    has_header: bool = True
    format: Format = "auto"
    unescape_literals: bool = True


@dataclass(slots=True)
class TableDoc:
    source_text: str
    options: ConvertOptions
    format: DetectedFormat
    auto_detected: bool
    rows: Grid = field(default_factory=list)
    html: str = ""

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return max((len(row) for row in self.rows), default=0)
