from __future__ import annotations

from tableclip.parser.delimited import parse_csv, parse_csv_line, parse_tsv


def test_parse_csv_line_basic() -> None:
    assert parse_csv_line("a,b,c") == ["a", "b", "c"]
    assert parse_csv_line("名前,年齢,職業") == ["名前", "年齢", "職業"]


def test_parse_csv_line_quoting() -> None:
    assert parse_csv_line('"hello","world"') == ["hello", "world"]
    assert parse_csv_line('"a,b",c') == ["a,b", "c"]
    assert parse_csv_line('"say ""hello""",test') == ['say "hello"', "test"]


def test_parse_csv_line_empty_fields() -> None:
    assert parse_csv_line("a,,c") == ["a", "", "c"]
    assert parse_csv_line("") == [""]
    assert parse_csv_line("a,") == ["a", ""]


def test_parse_csv_line_does_not_split_rows() -> None:
    assert parse_csv_line("a\nb,c") == ["a\nb", "c"]


def test_parse_csv_cell_with_newline(load_testdata) -> None:
    assert parse_csv(load_testdata("cell-newline.csv")) == [
        ["A", "B"],
        ["line1\nline2", "C"],
    ]


def test_parse_csv_multiple_multiline_cells(load_testdata) -> None:
    assert parse_csv(load_testdata("multi-multiline.csv")) == [["a\nb", "c\nd"]]


def test_parse_csv_doubled_quotes() -> None:
    assert parse_csv('"say ""hello""",test') == [['say "hello"', "test"]]


def test_parse_csv_crlf_line_endings(load_testdata) -> None:
    assert parse_csv(load_testdata("crlf.csv")) == [["A", "B"], ["1", "2"]]
    assert parse_csv('"x\r\ny",z\r\n') == [["x\r\ny", "z"]]


def test_parse_csv_trailing_newline_adds_no_row() -> None:
    assert parse_csv("a,b\n") == [["a", "b"]]
    assert parse_csv("a\n\n") == [["a"], [""]]
    assert parse_csv("a\n,") == [["a"], ["", ""]]
    assert parse_csv("") == []


def test_parse_csv_unterminated_quote_consumes_rest() -> None:
    assert parse_csv('a,"b\nc,d') == [["a", "b\nc,d"]]


def test_parse_csv_lone_carriage_return_is_content() -> None:
    assert parse_csv("a\rb,c") == [["a\rb", "c"]]


def test_parse_tsv_keeps_empty_cells(load_testdata) -> None:
    assert parse_tsv(load_testdata("empty-cells.tsv")) == [["A", "", "C"], ["1", "", "3"]]
    assert parse_tsv("\tB\n1\t2\r\n") == [["", "B"], ["1", "2"]]


def test_parse_tsv_single_column_fallback() -> None:
    assert parse_tsv("ABC\nDEF") == [["ABC"], ["DEF"]]
