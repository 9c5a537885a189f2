"""Regex-based extraction of tables and product cards from raw HTML.

These are best-effort heuristics over tag text, not a DOM parser.  Both
public functions take the raw HTML string and return a ParsedTable when
they find data, or a ParsedText holding the original input otherwise, so a
real parser could replace this module without changing the contract.
"""

import html
import logging
import re

from page_extract.parsing.patterns import (
    ARTICLE_CARD_RE,
    IMG_SRC_RE,
    LISTING_CARD_RE,
    LISTING_PRICE_PATTERNS,
    LISTING_TITLE_PATTERNS,
    PRICE_PATTERNS,
    RATING_PATTERNS,
    STOCK_PATTERNS,
    TABLE_BLOCK_RE,
    TAG_RE,
    TD_CELL_RE,
    TH_CELL_RE,
    TITLE_PATTERNS,
    TR_BLOCK_RE,
)
from page_extract.parsing.schema import ParsedTable, ParsedText

logger = logging.getLogger(__name__)


# ─── Text Helpers ────────────────────────────────────────────────────────────


def strip_html(fragment: str) -> str:
    """Remove tags, decode entities, and trim surrounding whitespace."""
    text = TAG_RE.sub("", fragment)
    # Non-breaking spaces become plain spaces rather than U+00A0
    text = text.replace("&nbsp;", " ")
    return html.unescape(text).strip()


def _first_match(patterns: tuple[re.Pattern, ...], content: str) -> str | None:
    """Return the first non-blank text captured by *patterns*, tried in order, or None.

    Patterns with a capture group yield group 1; patterns without one (bare
    currency amounts) yield the whole match.  Whitespace-only captures are
    skipped, e.g. a ``class="product_price"`` wrapper whose text is just the
    indentation before its child element.
    """
    for pattern in patterns:
        for match in pattern.finditer(content):
            text = match.group(1) if pattern.groups else match.group(0)
            if text.strip():
                return text
    return None


def _rows_from_records(records: list[dict[str, str]]) -> ParsedTable:
    """Build a table whose headers are the union of record keys in first-seen order."""
    headers: list[str] = []
    for record in records:
        for key in record:
            if key not in headers:
                headers.append(key)
    rows = [[record.get(header, "") for header in headers] for record in records]
    return ParsedTable(headers=headers, rows=rows)


# ─── HTML Tables ─────────────────────────────────────────────────────────────


def parse_html_table(markup: str) -> ParsedTable | ParsedText:
    """Parse the first <table> in *markup* into headers and rows.

    <th> cells become headers in document order.  Each <tr> with at least one
    <td> becomes a row.  When the table has no <th> at all, the first row is
    promoted to headers.
    """
    table_match = TABLE_BLOCK_RE.search(markup)
    if not table_match:
        return ParsedText(text=markup)
    table_content = table_match.group(1)

    headers = [strip_html(cell) for cell in TH_CELL_RE.findall(table_content)]

    rows: list[list[str]] = []
    for row_content in TR_BLOCK_RE.findall(table_content):
        cells = [strip_html(cell) for cell in TD_CELL_RE.findall(row_content)]
        # Header-only rows (<th> cells) carry no <td>
        if cells:
            rows.append(cells)

    if not headers and rows:
        headers = rows.pop(0)

    if not rows:
        logger.debug("HTML table had no data rows after header detection")
        return ParsedText(text=markup)

    logger.debug("HTML table: %d headers, %d rows", len(headers), len(rows))
    return ParsedTable(headers=headers, rows=rows)


# ─── HTML Product Cards ──────────────────────────────────────────────────────


def _extract_article_card(content: str) -> dict[str, str]:
    """Pull Title / Price / Rating / Stock / Image out of one <article> card."""
    card: dict[str, str] = {}

    title = _first_match(TITLE_PATTERNS, content)
    if title:
        card["Title"] = strip_html(title)

    price = _first_match(PRICE_PATTERNS, content)
    if price:
        card["Price"] = strip_html(price)

    rating = _first_match(RATING_PATTERNS, content)
    if rating:
        card["Rating"] = rating.strip()

    stock = _first_match(STOCK_PATTERNS, content)
    if stock:
        card["Stock"] = strip_html(stock)

    image = IMG_SRC_RE.search(content)
    if image:
        card["Image"] = image.group(1).strip()

    return card


def _extract_listing_card(content: str) -> dict[str, str]:
    """Pull Title / Price out of one <div> or <li> product card."""
    card: dict[str, str] = {}

    title = _first_match(LISTING_TITLE_PATTERNS, content)
    if title:
        card["Title"] = strip_html(title)

    price = _first_match(LISTING_PRICE_PATTERNS, content)
    if price:
        card["Price"] = strip_html(price)

    return card


def _collect_cards(block_re: re.Pattern, extract, markup: str) -> list[dict[str, str]]:
    """Run *extract* over every block matched by *block_re*, keeping cards with a title or price."""
    cards = []
    for content in block_re.findall(markup):
        card = extract(content)
        if card.get("Title") or card.get("Price"):
            cards.append(card)
    return cards


def parse_html_products(markup: str) -> ParsedTable | ParsedText:
    """Extract e-commerce product cards from *markup* as a table.

    Pass 1 looks at ``<article class="...product...">`` elements (the
    books.toscrape.com ``product_pod`` layout).  Pass 2 runs only if pass 1
    kept nothing and looks at ``<div>`` / ``<li>`` elements whose class
    mentions "product".  A card is kept only if it yielded a title or price.
    """
    cards = _collect_cards(ARTICLE_CARD_RE, _extract_article_card, markup)
    if not cards:
        cards = _collect_cards(LISTING_CARD_RE, _extract_listing_card, markup)

    if not cards:
        return ParsedText(text=markup)

    logger.debug("HTML product cards: kept %d", len(cards))
    return _rows_from_records(cards)
