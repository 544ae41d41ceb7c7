from __future__ import annotations

import re
from html import escape as html_escape

from .model import Grid

_NEWLINE_RE = re.compile(r"\r?\n")


def escape_html(text: str) -> str:
    # apostrophes stay unescaped
    return html_escape(text, quote=False).replace('"', "&quot;")


def render_cell_html(text: str) -> str:
    return _NEWLINE_RE.sub("<br>", escape_html(text))


def render_rows_html(rows: Grid, has_header: bool = True) -> str:
    parts: list[str] = ["<table>"]

    for index, cells in enumerate(rows):
        tag = "th" if has_header and index == 0 else "td"
        parts.append("<tr>")
        for cell in cells:
            parts.append(f"<{tag}>{render_cell_html(cell)}</{tag}>")
        parts.append("</tr>")

    parts.append("</table>")
    return "".join(parts)


def wrap_html_document(fragment: str) -> str:
    return (
        "<!DOCTYPE html>"
        "<html>"
        '<head><meta charset="utf-8"></head>'
        f"<body>{fragment}</body>"
        "</html>"
    )
