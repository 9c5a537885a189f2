"""Main structure-inference entry point and cell formatting.

parse_extracted_data() takes whatever the extract tool returned (a list of
row dicts, a JSON string, raw HTML, delimited text, a single dict, ...) and
returns the best-fit ParsedResult.  Strategies are tried in strict priority
order and the first one that yields an acceptable table wins:

    1. list of dicts / list of primitives
    2. string: JSON array -> HTML table -> HTML product cards -> delimited text
    3. single dict -> Property / Value table
    4. anything else -> text
"""

import json
import logging
import sys
from collections.abc import Callable

from page_extract.parsing.delimited import parse_delimited_text
from page_extract.parsing.patterns import CARD_TAG_MARKERS, TABLE_TAG_RE
from page_extract.parsing.schema import ParsedResult, ParsedTable, ParsedText
from page_extract.parsing.scraping import parse_html_products, parse_html_table

logger = logging.getLogger(__name__)


# ─── Cell Formatting ─────────────────────────────────────────────────────────


def cell_text(value) -> str:
    """Render one cell value as a string.

    None becomes '', nested dicts / lists become compact JSON, JSON scalars
    (bool, int, float) use their JSON spelling so ``True`` reads ``true``,
    and everything else uses ``str()``.  Structures JSON cannot encode
    (non-scalar dict keys, circular references) also fall back to ``str()``.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, bool, int, float)):
        try:
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
        except (TypeError, ValueError) as exc:
            logger.debug("Cell value is not JSON-encodable (%s); using str()", exc)
    return str(value)


# ─── Structured Payloads ─────────────────────────────────────────────────────


def _parse_sequence(items: list) -> ParsedTable:
    """Convert a non-empty list into a table.

    A list whose first element is a dict is treated as row objects: headers
    are the union of keys across all rows in first-seen order.  Any other
    list becomes a single ``Value`` column.
    """
    if not isinstance(items[0], dict):
        return ParsedTable(headers=["Value"], rows=[[cell_text(item)] for item in items])

    headers: list[str] = []
    seen: set[str] = set()
    for item in items:
        # Non-dict entries mixed into a row list contribute no keys
        if not isinstance(item, dict):
            continue
        for key in item:
            if str(key) not in seen:
                seen.add(str(key))
                headers.append(str(key))

    rows = []
    for item in items:
        record = {str(key): value for key, value in item.items()} if isinstance(item, dict) else {}
        rows.append([cell_text(record.get(header)) for header in headers])
    return ParsedTable(headers=headers, rows=rows)


def _parse_mapping(data: dict) -> ParsedResult:
    """Convert a single dict into a two-column Property / Value table."""
    if not data:
        return ParsedText(text="{}")
    rows = [[str(key), cell_text(value)] for key, value in data.items()]
    return ParsedTable(headers=["Property", "Value"], rows=rows)


# ─── String Strategies ───────────────────────────────────────────────────────


def _try_json_array(text: str) -> ParsedResult | None:
    """Parse a stringified JSON array; None if it is not valid JSON or not a non-empty list."""
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Payload starts with '[' but is not JSON (%s); trying other parsers", exc)
        return None
    if isinstance(parsed, list) and parsed:
        return _parse_sequence(parsed)
    return None


def _accept_rows(result: ParsedResult, min_rows: int) -> ParsedResult | None:
    """Return *result* if it is a table with at least *min_rows* rows, else None."""
    if isinstance(result, ParsedTable) and len(result.rows) >= min_rows:
        return result
    return None


# Ordered (name, predicate, handler) strategies; first non-None handler result wins
_STRING_STRATEGIES: list[tuple[str, Callable[[str], bool], Callable[[str], ParsedResult | None]]] = [
    (
        "json-array",
        lambda text: text.startswith("["),
        _try_json_array,
    ),
    (
        "html-table",
        lambda text: bool(TABLE_TAG_RE.search(text)),
        lambda text: _accept_rows(parse_html_table(text), 1),
    ),
    (
        "html-products",
        lambda text: any(marker in text for marker in CARD_TAG_MARKERS),
        lambda text: _accept_rows(parse_html_products(text), 1),
    ),
    (
        "delimited",
        lambda text: True,
        # A header row plus at least one data row
        lambda text: _accept_rows(parse_delimited_text(text), 1),
    ),
]


def _parse_string(payload: str) -> ParsedResult:
    """Run the string strategies in priority order, falling back to trimmed text."""
    text = payload.strip()
    for name, applies, handler in _STRING_STRATEGIES:
        if not applies(text):
            continue
        result = handler(text)
        if result is not None:
            logger.debug("String payload parsed by %s strategy", name)
            return result
    return ParsedText(text=text)


# ─── Public Entry Point ──────────────────────────────────────────────────────


def _is_blank(payload) -> bool:
    """Absent or empty payloads (but not an empty dict, which renders as '{}')."""
    return payload is None or (not payload and not isinstance(payload, dict))


def parse_extracted_data(payload) -> ParsedResult:
    """Infer the best-fit table (or text fallback) for an extraction payload.

    Never raises for any input shape: every failed strategy falls through
    to the next, ending in a ParsedText.
    """
    if _is_blank(payload):
        return ParsedText(text="")

    if isinstance(payload, (list, tuple)):
        result = _parse_sequence(list(payload))
    elif isinstance(payload, str):
        result = _parse_string(payload)
    elif isinstance(payload, dict):
        result = _parse_mapping(payload)
    else:
        result = ParsedText(text=cell_text(payload))

    if isinstance(result, ParsedTable):
        logger.info("Parsed payload as table: %d columns x %d rows", len(result.headers), len(result.rows))
    else:
        logger.info("Parsed payload as text (%d chars)", len(result.text))
    return result


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")

    # Parse a file given on the command line (or stdin) and dump the result
    if len(sys.argv) > 1:
        with open(sys.argv[1], "r", encoding="utf-8") as fopen:
            raw = fopen.read()
    else:
        raw = sys.stdin.read()
    print(parse_extracted_data(raw).model_dump_json(indent=2))
