"""Pydantic models for extraction validation results.

Issues are plain output values: created fresh per validation call and
never mutated.  ValidationResult derives ``is_valid`` from its issues, so
a result can never claim validity while carrying an error.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class IssueKind(str, Enum):
    """Category of a validation finding."""

    MISSING_COLUMN = "missing_column"
    EMPTY_FIELD = "empty_field"
    INSUFFICIENT_ROWS = "insufficient_rows"
    INCONSISTENT_COLUMNS = "inconsistent_columns"


class Severity(str, Enum):
    """ERROR blocks overall validity; WARNING is advisory only."""

    ERROR = "error"
    WARNING = "warning"


class IssueDetails(BaseModel):
    """Optional structured context attached to an issue."""

    model_config = ConfigDict(frozen=True)

    expected: str | int | None = None
    actual: str | int | None = None
    row_index: int | None = None
    fields: list[str] | None = None
    rows: list[int] | None = None
    suggestions: dict[str, list[str]] | None = None


class ValidationIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: IssueKind
    message: str
    severity: Severity
    details: IssueDetails | None = None


class ValidationResult(BaseModel):
    """Verdict for one validation call.

    ``valid_rows`` counts rows with no empty field; ``total_rows`` is the
    number of rows inspected.
    """

    model_config = ConfigDict(frozen=True)

    valid_rows: int
    total_rows: int
    issues: list[ValidationIssue] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        """True iff no issue has error severity."""
        return not any(issue.severity == Severity.ERROR for issue in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == Severity.WARNING]
