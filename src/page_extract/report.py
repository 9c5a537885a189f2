"""One-call parse + validate + summarise, as used by the extract tool.

The extract tool hands back whatever the page produced.  This module turns
that payload into a table, validates its rows against the user's expected
columns / row count, and bundles everything into a JSON-serialisable
ExtractionReport for the chat UI and the LLM tool-output channel.

Usage:
    python -m page_extract.report page.html --columns title,price --min-rows 10
    cat rows.json | python -m page_extract.report --json
"""

import argparse
import logging
import sys

from pydantic import BaseModel, ConfigDict

from page_extract.export import to_markdown
from page_extract.parsing.pipeline import parse_extracted_data
from page_extract.parsing.schema import ParsedResult, ParsedTable
from page_extract.validation.schema import ValidationResult
from page_extract.validation.validator import format_validation_message, validate_extraction

logger = logging.getLogger(__name__)


class ExtractionReport(BaseModel):
    """Parsed payload, its validation verdict, and a one-line summary."""

    model_config = ConfigDict(frozen=True)

    parsed: ParsedResult
    validation: ValidationResult
    message: str


def _rows_for_validation(payload, parsed: ParsedResult) -> list[dict]:
    """Pick the row dicts to validate.

    Row objects supplied directly are validated as-is, so per-row key
    differences and None values stay visible.  Anything else is validated
    through the inferred table; a text fallback yields no rows.
    """
    if isinstance(payload, (list, tuple)) and payload and all(isinstance(row, dict) for row in payload):
        return list(payload)
    if isinstance(parsed, ParsedTable):
        return parsed.to_records()
    return []


def build_extraction_report(
    payload,
    expected_columns: list[str] | None = None,
    expected_min_rows: int | None = None,
) -> ExtractionReport:
    """Parse *payload*, validate the resulting rows, and summarise the verdict."""
    parsed = parse_extracted_data(payload)
    rows = _rows_for_validation(payload, parsed)
    validation = validate_extraction(rows, expected_columns=expected_columns, expected_min_rows=expected_min_rows)
    message = format_validation_message(validation)
    logger.info("Extraction report: %s", message)
    return ExtractionReport(parsed=parsed, validation=validation, message=message)


# ─── Command Line ────────────────────────────────────────────────────────────


def _split_columns(value: str) -> list[str]:
    """Parse a comma-separated --columns value, dropping blanks."""
    return [column.strip() for column in value.split(",") if column.strip()]


def main(argv: list[str] | None = None) -> int:
    """Print the summary for a payload file (or stdin); exit 1 if validation failed."""
    parser = argparse.ArgumentParser(description="Infer a table from scraped content and validate it.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r", encoding="utf-8"), default=sys.stdin)
    parser.add_argument("--columns", type=_split_columns, default=None, help="comma-separated expected columns")
    parser.add_argument("--min-rows", type=int, default=None, help="expected minimum row count")
    parser.add_argument("--json", action="store_true", help="print the full report as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    with args.input:
        raw = args.input.read()

    report = build_extraction_report(raw, expected_columns=args.columns, expected_min_rows=args.min_rows)

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print(report.message)
        for issue in report.validation.issues:
            print(f"  [{issue.severity.value}] {issue.message}")
        if isinstance(report.parsed, ParsedTable):
            print()
            print(to_markdown(report.parsed))

    return 0 if report.validation.is_valid else 1


if __name__ == "__main__":
    sys.exit(main())
