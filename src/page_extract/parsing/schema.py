"""Pydantic models for the result of structure inference.

A parse produces exactly one ParsedResult: either a ParsedTable (ordered
headers plus positionally aligned string rows) or a ParsedText fallback.
Both are frozen and serialise as-is for the UI / tool-output channel.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ParsedTable(BaseModel):
    """Tabular data inferred from an extraction payload.

    Unlike a hand-curated table, rows scraped from HTML can be ragged, so a
    row whose width differs from the header count is kept and reported by
    ``inconsistent_rows`` instead of being rejected at construction time.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["table"] = "table"
    headers: list[str]
    rows: list[list[str]]

    @property
    def inconsistent_rows(self) -> list[int]:
        """Return 0-based indices of rows whose cell count differs from the header count."""
        n_cols = len(self.headers)
        return [i for i, row in enumerate(self.rows) if len(row) != n_cols]

    def to_records(self) -> list[dict[str, str]]:
        """Return one dict per row keyed by header; short rows are padded with ''."""
        records = []
        for row in self.rows:
            records.append({header: row[i] if i < len(row) else "" for i, header in enumerate(self.headers)})
        return records


class ParsedText(BaseModel):
    """Opaque text fallback when no tabular structure was accepted."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


ParsedResult = Annotated[Union[ParsedTable, ParsedText], Field(discriminator="type")]
