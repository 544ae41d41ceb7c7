from __future__ import annotations

import pytest

from tableclip.parser.detect import detect_format


def test_tab_means_tsv(load_testdata) -> None:
    assert detect_format(load_testdata("basic.tsv")) == "tsv"


def test_comma_means_csv(load_testdata) -> None:
    assert detect_format(load_testdata("basic.csv")) == "csv"


def test_tab_wins_over_comma() -> None:
    assert detect_format("A,B\tC\n1,2\t3") == "tsv"


def test_multiple_spaces_mean_spaces(load_testdata) -> None:
    assert detect_format(load_testdata("space-separated.txt")) == "spaces"
    assert detect_format("Hello World") == "tsv"


def test_markdown_detection(load_testdata) -> None:
    assert detect_format(load_testdata("basic.md")) == "markdown"
    assert detect_format(load_testdata("indented.md")) == "markdown"
    assert detect_format("| A | B | C |") == "markdown"
    assert detect_format("A | B | C\n--|--|--") == "markdown"
    assert detect_format("A | B") == "tsv"


@pytest.mark.parametrize(
    "text",
    [
        "|A\tB|C|",
        "| a,b | c |\n|---|---|",
        "|x  y|",
    ],
)
def test_markdown_wins_over_delimiters(text: str) -> None:
    assert detect_format(text) == "markdown"


@pytest.mark.parametrize(
    "name",
    ["boxdraw-basic.txt", "boxdraw-japanese.txt", "boxdraw-heavy.txt", "boxdraw-rounded.txt"],
)
def test_boxdraw_detection(load_testdata, name: str) -> None:
    assert detect_format(load_testdata(name)) == "boxdraw"


def test_boxdraw_without_top_border() -> None:
    assert detect_format("│ a,b │ c │\n├─────┼───┤\n│ 1   │ 2 │") == "boxdraw"


def test_no_delimiter_defaults_to_tsv() -> None:
    assert detect_format("ABC") == "tsv"
    assert detect_format("ABC\nDEF") == "tsv"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("A\tB\n──────\n1\t2", "tsv"),
        ("  Name   Age\n ─────────────\n  Ann    30\n", "spaces"),
        ("Report\n══════\na,b", "tsv"),
    ],
)
def test_rule_line_without_bars_keeps_delimiter_format(text: str, expected: str) -> None:
    assert detect_format(text) == expected


def test_leading_blank_lines_are_skipped() -> None:
    assert detect_format("\n| A | B |\n|---|---|") == "markdown"
    assert detect_format("\r\n  \nA,B\n1,2") == "csv"
    assert detect_format("\n\nA\tB") == "tsv"
