"""String renderers for parsed tables: CSV, JSON records, and markdown.

These only build text; saving a file or triggering a browser download is
left to the caller.
"""

import csv
import io
import json

from page_extract.parsing.schema import ParsedTable

# Byte-order mark so spreadsheet apps detect UTF-8 in downloaded CSV files
UTF8_BOM = "\ufeff"


def to_csv(table: ParsedTable, bom: bool = False) -> str:
    """Render *table* as CSV, header row first.

    Fields containing a comma, double quote, or line break are quoted and
    embedded quotes are doubled.  Rows are joined with ``\\n``.
    """
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(table.headers)
    writer.writerows(table.rows)
    # No trailing newline after the last row
    text = output.getvalue().removesuffix("\n")
    return UTF8_BOM + text if bom else text


def to_json(table: ParsedTable, indent: int | None = 2) -> str:
    """Render *table* as a JSON array with one object per row keyed by header."""
    return json.dumps(table.to_records(), indent=indent, ensure_ascii=False)


def _markdown_cell(value: str) -> str:
    """Escape pipes and flatten line breaks so a cell stays on one markdown row."""
    return value.replace("|", "\\|").replace("\r\n", " ").replace("\n", " ")


def to_markdown(table: ParsedTable, title: str = "") -> str:
    """Render *table* as a markdown table, optionally preceded by a bold title."""
    lines: list[str] = []
    if title:
        lines += [f"**{title}**", ""]

    # Column header row + separator
    lines.append("| " + " | ".join(_markdown_cell(h) for h in table.headers) + " |")
    lines.append("| " + " | ".join(["---"] * len(table.headers)) + " |")

    # Data rows, padded so ragged rows still line up
    for row in table.rows:
        cells = [row[i] if i < len(row) else "" for i in range(len(table.headers))]
        lines.append("| " + " | ".join(_markdown_cell(c) for c in cells) + " |")

    return "\n".join(lines)
