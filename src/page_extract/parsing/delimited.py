"""Delimiter detection and quoted-field parsing for CSV / TSV-like text.

Candidate delimiters are tried in a fixed order (tab, comma, semicolon,
pipe); the winner is the one whose per-line count on the first line is
shared by the most lines.  Ties keep the earlier delimiter, so detection is
deterministic for a given input.
"""

import logging

from page_extract.config import DELIMITED_MIN_CONSISTENCY, DELIMITERS
from page_extract.parsing.patterns import LINE_BREAK_RE
from page_extract.parsing.schema import ParsedTable, ParsedText

logger = logging.getLogger(__name__)


# ─── Line Helpers ────────────────────────────────────────────────────────────


def count_delimiter(line: str, delimiter: str) -> int:
    """Count occurrences of *delimiter* in *line* outside double-quoted spans."""
    count = 0
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            count += 1
    return count


def parse_delimited_line(line: str, delimiter: str) -> list[str]:
    """Split *line* on *delimiter*, honouring quotes and ``""`` escapes; fields are trimmed."""
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            # Doubled quote inside a quoted field is a literal quote
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current).strip())
    return fields


def detect_delimiter(lines: list[str]) -> str | None:
    """Return the best delimiter for *lines*, or None if none occurs on the first line."""
    best: str | None = None
    best_score = 0
    for delimiter in DELIMITERS:
        counts = [count_delimiter(line, delimiter) for line in lines]
        first_count = counts[0]
        if first_count == 0:
            continue
        # Number of lines agreeing with the first line's count
        score = sum(1 for count in counts if count == first_count)
        if score > best_score:
            best, best_score = delimiter, score
    return best


# ─── Public Entry Point ──────────────────────────────────────────────────────


def parse_delimited_text(text: str) -> ParsedTable | ParsedText:
    """Parse delimited text into a table whose first row is the header row.

    Falls back to ParsedText when there are fewer than two non-blank lines,
    no delimiter appears on the first line, or fewer than the configured
    share of lines (80% by default) agree with the header's column count.
    """
    lines = [line for line in LINE_BREAK_RE.split(text) if line.strip()]
    if len(lines) < 2:
        return ParsedText(text=text)

    delimiter = detect_delimiter(lines)
    if delimiter is None:
        return ParsedText(text=text)

    parsed_rows = [parse_delimited_line(line, delimiter) for line in lines]
    column_count = len(parsed_rows[0])
    consistent = [row for row in parsed_rows if len(row) == column_count]
    if len(consistent) < len(lines) * DELIMITED_MIN_CONSISTENCY:
        logger.debug(
            "Delimited parse rejected: %d/%d lines have %d columns",
            len(consistent),
            len(lines),
            column_count,
        )
        return ParsedText(text=text)

    logger.debug("Delimited parse: delimiter=%r, %d columns, %d rows", delimiter, column_count, len(consistent) - 1)
    return ParsedTable(headers=consistent[0], rows=consistent[1:])
