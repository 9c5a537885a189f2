"""Validate extracted rows against the user's expectations.

validate_extraction() runs a fixed sequence of independent checks, each
returning its own list of issues, and concatenates them in order:

    1. row count        -- fewer rows than requested        (warning)
    2. column presence  -- requested columns not found      (error)
    3. emptiness        -- completely empty rows            (error)
                           partially empty rows             (warning)
    4. consistency      -- rows whose keys differ from row 1 (warning)

Only errors make a result invalid.  The checks never raise on malformed
input; missing data takes the "No data was extracted" path instead.
"""

import logging

from page_extract.config import PARTIAL_EMPTY_LIMIT
from page_extract.validation.matching import find_missing_columns, suggest_columns
from page_extract.validation.schema import IssueDetails, IssueKind, Severity, ValidationIssue, ValidationResult

logger = logging.getLogger(__name__)


def _plural(count: int, noun: str) -> str:
    """'1 error', '2 errors'."""
    return f"{count} {noun}{'s' if count != 1 else ''}"


def _is_empty(value) -> bool:
    """A cell is empty when it is None or whitespace-only."""
    return value is None or str(value).strip() == ""


def _coerce_min_rows(value) -> int | None:
    """Read expected_min_rows as an int; unusable values mean 'no expectation'."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric expected_min_rows: %r", value)
        return None


def _coerce_columns(value) -> list[str]:
    """Read expected_columns as a list of names, dropping None entries."""
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        logger.warning("Ignoring expected_columns of type %s", type(value).__name__)
        return []
    return [str(column) for column in value if column is not None]


# ─── Individual Checks ───────────────────────────────────────────────────────


def _check_row_count(data: list[dict], expected_min_rows: int | None) -> list[ValidationIssue]:
    """Warn when fewer rows were extracted than requested."""
    if not expected_min_rows or len(data) >= expected_min_rows:
        return []
    return [
        ValidationIssue(
            kind=IssueKind.INSUFFICIENT_ROWS,
            message=f"Expected at least {expected_min_rows} rows, got {len(data)}",
            severity=Severity.WARNING,
            details=IssueDetails(expected=expected_min_rows, actual=len(data)),
        )
    ]


def _check_columns(data: list[dict], expected_columns: list[str] | None) -> list[ValidationIssue]:
    """Error listing every expected column that the first row does not (fuzzily) provide."""
    if not expected_columns:
        return []

    actual_columns = [str(key) for key in data[0]]
    missing = find_missing_columns(actual_columns, expected_columns)
    if not missing:
        return []

    suggestions = {name: suggest_columns(name, actual_columns) for name in missing}
    return [
        ValidationIssue(
            kind=IssueKind.MISSING_COLUMN,
            message=f"Missing expected columns: {', '.join(missing)}",
            severity=Severity.ERROR,
            details=IssueDetails(
                expected=", ".join(missing),
                actual=", ".join(actual_columns),
                fields=missing,
                suggestions={name: found for name, found in suggestions.items() if found} or None,
            ),
        )
    ]


def _check_empty_fields(data: list[dict]) -> tuple[int, list[ValidationIssue]]:
    """Count fully populated rows and report empty / partially empty rows.

    Returns (valid_rows, issues).  Row numbers in messages are 1-based.
    """
    valid_rows = 0
    empty_rows: list[int] = []
    partial_rows: list[tuple[int, list[str]]] = []

    for index, row in enumerate(data, start=1):
        empty_fields = [str(key) for key, value in row.items() if _is_empty(value)]
        if not empty_fields and row:
            valid_rows += 1
        elif len(empty_fields) == len(row):
            # Includes rows with no keys at all
            empty_rows.append(index)
        else:
            partial_rows.append((index, empty_fields))

    issues: list[ValidationIssue] = []

    if empty_rows:
        if len(empty_rows) == 1:
            message = f"Row {empty_rows[0]} is completely empty"
        else:
            message = f"Rows {', '.join(str(i) for i in empty_rows)} are completely empty"
        issues.append(
            ValidationIssue(
                kind=IssueKind.EMPTY_FIELD,
                message=message,
                severity=Severity.ERROR,
                details=IssueDetails(row_index=empty_rows[0], rows=empty_rows),
            )
        )

    if 0 < len(partial_rows) <= PARTIAL_EMPTY_LIMIT:
        for index, fields in partial_rows:
            issues.append(
                ValidationIssue(
                    kind=IssueKind.EMPTY_FIELD,
                    message=f"Row {index} has empty fields: {', '.join(fields)}",
                    severity=Severity.WARNING,
                    details=IssueDetails(row_index=index, fields=fields),
                )
            )
    elif len(partial_rows) > PARTIAL_EMPTY_LIMIT:
        issues.append(
            ValidationIssue(
                kind=IssueKind.EMPTY_FIELD,
                message=f"{len(partial_rows)} rows have some empty fields",
                severity=Severity.WARNING,
                details=IssueDetails(rows=[index for index, _ in partial_rows]),
            )
        )

    return valid_rows, issues


def _check_consistency(data: list[dict]) -> list[ValidationIssue]:
    """Warn about rows whose key set differs from the first row's."""
    if len(data) <= 1:
        return []

    reference = {str(key) for key in data[0]}
    inconsistent: list[int] = []
    for index, row in enumerate(data, start=1):
        keys = [str(key) for key in row]
        if len(keys) != len(reference) or any(key not in reference for key in keys):
            inconsistent.append(index)

    if not inconsistent:
        return []
    return [
        ValidationIssue(
            kind=IssueKind.INCONSISTENT_COLUMNS,
            message=f"{len(inconsistent)} rows have different columns than expected",
            severity=Severity.WARNING,
            details=IssueDetails(rows=inconsistent),
        )
    ]


# ─── Public Entry Points ─────────────────────────────────────────────────────


def validate_extraction(
    data: list[dict] | None,
    expected_columns: list[str] | None = None,
    expected_min_rows: int | None = None,
) -> ValidationResult:
    """Score extracted rows against the expected columns and minimum row count.

    *data* is a list of flat row dicts (field name -> string value); None
    values count as empty.  Returns a ValidationResult whose ``is_valid`` is
    False only when an error-severity issue was raised.  Malformed arguments
    never raise: non-sequence *data* counts as no data, and unusable
    expectations are ignored.
    """
    expected_columns = _coerce_columns(expected_columns)
    expected_min_rows = _coerce_min_rows(expected_min_rows)

    if not isinstance(data, (list, tuple)) or not data:
        logger.info("Validation: no data extracted")
        return ValidationResult(
            valid_rows=0,
            total_rows=0,
            issues=[
                ValidationIssue(
                    kind=IssueKind.INSUFFICIENT_ROWS,
                    message="No data was extracted",
                    severity=Severity.ERROR,
                    details=IssueDetails(expected=1 if expected_min_rows is None else expected_min_rows, actual=0),
                )
            ],
        )

    # Anything that is not a mapping is treated as a row with no fields
    rows = [row if isinstance(row, dict) else {} for row in data]

    issues: list[ValidationIssue] = []
    issues += _check_row_count(rows, expected_min_rows)
    issues += _check_columns(rows, expected_columns)
    valid_rows, empty_issues = _check_empty_fields(rows)
    issues += empty_issues
    issues += _check_consistency(rows)

    result = ValidationResult(valid_rows=valid_rows, total_rows=len(rows), issues=issues)
    logger.info(
        "Validation: %d/%d valid rows, %d errors, %d warnings",
        valid_rows,
        len(rows),
        len(result.errors),
        len(result.warnings),
    )
    return result


def format_validation_message(result: ValidationResult) -> str:
    """Summarise a ValidationResult in one line, e.g. '⚠ Extracted 5 rows with 1 error and 2 warnings'."""
    if result.is_valid and not result.issues:
        return f"✓ Extracted {result.total_rows} rows successfully"

    n_errors = len(result.errors)
    n_warnings = len(result.warnings)

    message = f"{'✓' if result.is_valid else '⚠'} Extracted {result.total_rows} rows"
    if n_errors:
        message += f" with {_plural(n_errors, 'error')}"
    if n_warnings:
        message += f" {'and' if n_errors else 'with'} {_plural(n_warnings, 'warning')}"
    return message
