from .api import (
    EmptyInputError,
    convert_text_to_html,
    load_table,
    parse_table,
    render_html_table,
    tsv_to_html_table,
)
from .model import ConvertOptions, TableDoc
from .parser.boxdraw import parse_box_draw_table
from .parser.delimited import parse_csv, parse_csv_line
from .parser.detect import detect_format
from .parser.markdown import parse_markdown_table
from .parser.spaces import parse_space_separated
from .parser.utils import unescape_literals
from .render_html import escape_html

__all__ = [
    "ConvertOptions",
    "EmptyInputError",
    "TableDoc",
    "convert_text_to_html",
    "detect_format",
    "escape_html",
    "load_table",
    "parse_box_draw_table",
    "parse_csv",
    "parse_csv_line",
    "parse_markdown_table",
    "parse_space_separated",
    "parse_table",
    "render_html_table",
    "tsv_to_html_table",
    "unescape_literals",
]
