"""Unit tests for the parse + validate report and its command-line entry point."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import json

from page_extract.parsing.schema import ParsedTable, ParsedText
from page_extract.report import ExtractionReport, build_extraction_report, main
from page_extract.validation.schema import IssueKind

# ===========================================================================
# build_extraction_report tests
# ===========================================================================


class TestBuildExtractionReport:

    def test_row_objects(self, book_rows):
        report = build_extraction_report(book_rows, expected_columns=["title", "price"], expected_min_rows=2)
        assert isinstance(report.parsed, ParsedTable)
        assert report.validation.is_valid is True
        assert report.message == "✓ Extracted 2 rows successfully"

    def test_row_objects_validated_as_given(self):
        """Key differences between row dicts stay visible to the consistency check."""
        report = build_extraction_report([{"a": "1", "b": "2"}, {"a": "3"}])
        issue_kinds = [issue.kind for issue in report.validation.issues]
        assert IssueKind.INCONSISTENT_COLUMNS in issue_kinds

    def test_html_table_rows_validated(self):
        html = "<table><tr><th>Name</th><th>Price</th></tr><tr><td>X</td><td></td></tr></table>"
        report = build_extraction_report(html, expected_columns=["name"])
        assert report.parsed.headers == ["Name", "Price"]
        assert report.validation.total_rows == 1
        assert report.validation.issues[0].message == "Row 1 has empty fields: Price"
        assert report.message == "✓ Extracted 1 rows with 1 warning"

    def test_missing_column_fails(self):
        report = build_extraction_report("x,y\n1,2\n3,4", expected_columns=["rating"])
        assert report.validation.is_valid is False
        assert report.message == "⚠ Extracted 2 rows with 1 error"

    def test_text_payload_has_no_rows(self):
        report = build_extraction_report("Just a sentence.")
        assert report.parsed == ParsedText(text="Just a sentence.")
        assert report.validation.issues[0].message == "No data was extracted"
        assert report.validation.is_valid is False

    def test_report_serialises_to_json(self, book_rows):
        report = build_extraction_report(book_rows)
        dumped = json.loads(report.model_dump_json())
        assert dumped["parsed"]["type"] == "table"
        assert dumped["validation"]["is_valid"] is True
        assert ExtractionReport.model_validate(dumped).parsed == report.parsed


# ===========================================================================
# main (CLI) tests
# ===========================================================================


class TestMain:

    def test_prints_message_and_markdown(self, tmp_path, capsys):
        payload = tmp_path / "rows.csv"
        payload.write_text("title,price\nA,$1\nB,$2\n", encoding="utf-8")
        exit_code = main([str(payload), "--columns", "title, price", "--min-rows", "2"])
        out = capsys.readouterr().out
        assert exit_code == 0
        assert out.startswith("✓ Extracted 2 rows successfully")
        assert "| title | price |" in out

    def test_json_output_and_failure_exit_code(self, tmp_path, capsys):
        payload = tmp_path / "page.txt"
        payload.write_text("nothing tabular", encoding="utf-8")
        exit_code = main([str(payload), "--json"])
        dumped = json.loads(capsys.readouterr().out)
        assert exit_code == 1
        assert dumped["parsed"] == {"type": "text", "text": "nothing tabular"}
        assert dumped["message"] == "⚠ Extracted 0 rows with 1 error"

    def test_issues_listed(self, tmp_path, capsys):
        payload = tmp_path / "rows.json"
        payload.write_text(json.dumps([{"a": "1", "b": ""}]), encoding="utf-8")
        main([str(payload)])
        out = capsys.readouterr().out
        assert "  [warning] Row 1 has empty fields: b" in out
