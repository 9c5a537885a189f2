"""Unit tests for the CSV / JSON / markdown table renderers."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import json

from page_extract.export import UTF8_BOM, to_csv, to_json, to_markdown
from page_extract.parsing.schema import ParsedTable


def make_table() -> ParsedTable:
    return ParsedTable(headers=["name", "note"], rows=[["Ann", "plain"], ["Bob", 'said "hi", left']])


# ===========================================================================
# to_csv tests
# ===========================================================================


class TestToCsv:

    def test_plain_fields_unquoted(self):
        table = ParsedTable(headers=["a", "b"], rows=[["1", "2"]])
        assert to_csv(table) == "a,b\n1,2"

    def test_quotes_and_commas_escaped(self):
        assert to_csv(make_table()) == 'name,note\nAnn,plain\nBob,"said ""hi"", left"'

    def test_newline_field_quoted(self):
        table = ParsedTable(headers=["x"], rows=[["line1\nline2"]])
        assert to_csv(table) == 'x\n"line1\nline2"'

    def test_bom_prefix(self):
        table = ParsedTable(headers=["a"], rows=[["1"]])
        assert to_csv(table, bom=True) == UTF8_BOM + "a\n1"


# ===========================================================================
# to_json tests
# ===========================================================================


class TestToJson:

    def test_records_keyed_by_header(self):
        records = json.loads(to_json(make_table()))
        assert records == [
            {"name": "Ann", "note": "plain"},
            {"name": "Bob", "note": 'said "hi", left'},
        ]

    def test_short_rows_padded(self):
        table = ParsedTable(headers=["a", "b"], rows=[["1"]])
        assert json.loads(to_json(table)) == [{"a": "1", "b": ""}]

    def test_compact(self):
        table = ParsedTable(headers=["a"], rows=[["1"]])
        assert to_json(table, indent=None) == '[{"a": "1"}]'


# ===========================================================================
# to_markdown tests
# ===========================================================================


class TestToMarkdown:

    def test_basic_table(self):
        table = ParsedTable(headers=["a", "b"], rows=[["1", "2"]])
        assert to_markdown(table) == "| a | b |\n| --- | --- |\n| 1 | 2 |"

    def test_title_and_escaping(self):
        table = ParsedTable(headers=["expr"], rows=[["a|b"], ["x\ny"]])
        lines = to_markdown(table, title="Results").split("\n")
        assert lines[0] == "**Results**"
        assert lines[1] == ""
        assert lines[4] == "| a\\|b |"
        assert lines[5] == "| x y |"

    def test_ragged_rows_padded(self):
        table = ParsedTable(headers=["a", "b"], rows=[["1"]])
        assert to_markdown(table).split("\n")[-1] == "| 1 |  |"
