"""Compiled regex patterns for best-effort HTML scraping and line splitting.

None of these build a DOM: they pattern-match tag text, so nested elements
with the same tag name are not handled.  Used by scraping.py and delimited.py.
"""

import re

# ─── Generic Markup ──────────────────────────────────────────────────────────

# Any tag, opening or closing
TAG_RE = re.compile(r"<[^>]*>")

# Presence checks used by the dispatcher before attempting an HTML parse
TABLE_TAG_RE = re.compile(r"<table", re.IGNORECASE)
CARD_TAG_MARKERS = ("<article", "<div")


# ─── HTML Table Patterns ─────────────────────────────────────────────────────

# First <table>...</table> block (non-greedy)
TABLE_BLOCK_RE = re.compile(r"<table[^>]*>(.*?)</table>", re.IGNORECASE | re.DOTALL)

# Header cells, row blocks, and data cells inside the table block
TH_CELL_RE = re.compile(r"<th[^>]*>(.*?)</th>", re.IGNORECASE | re.DOTALL)
TR_BLOCK_RE = re.compile(r"<tr[^>]*>(.*?)</tr>", re.IGNORECASE | re.DOTALL)
TD_CELL_RE = re.compile(r"<td[^>]*>(.*?)</td>", re.IGNORECASE | re.DOTALL)


# ─── Product Card Patterns (pass 1: <article class="...product...">) ─────────

ARTICLE_CARD_RE = re.compile(
    r'<article[^>]*class="[^"]*product[^"]*"[^>]*>(.*?)</article>',
    re.IGNORECASE | re.DOTALL,
)

# Title: title="..." attribute, heading wrapping a link, or bare heading text
TITLE_PATTERNS = (
    re.compile(r'title="([^"]+)"', re.IGNORECASE),
    re.compile(r"<h[1-6][^>]*>.*?<a[^>]*>([^<]+)</a>", re.IGNORECASE | re.DOTALL),
    re.compile(r"<h[1-6][^>]*>([^<]+)</h[1-6]>", re.IGNORECASE),
)

# Price: text of an element whose class mentions "price", else a currency amount
PRICE_CLASS_RE = re.compile(r'class="[^"]*price[^"]*"[^>]*>([^<]+)<', re.IGNORECASE)
CURRENCY_RE = re.compile(r"\$[\d,.]+|£[\d,.]+|€[\d,.]+|[\d,.]+\s*(?:USD|EUR|GBP)", re.IGNORECASE)
PRICE_PATTERNS = (PRICE_CLASS_RE, CURRENCY_RE)

# Rating: "star-rating Three" class token, else text after a *rating* attribute
RATING_PATTERNS = (
    re.compile(r'class="[^"]*star-rating\s+(\w+)[^"]*"', re.IGNORECASE),
    re.compile(r"rating[^>]*>([^<]+)<", re.IGNORECASE),
)

# Stock: availability text after its icon, a *stock* element, or a bare phrase
STOCK_PATTERNS = (
    re.compile(r'class="[^"]*availability[^"]*"[^>]*>.*?<i[^>]*></i>\s*([^<]+)<', re.IGNORECASE | re.DOTALL),
    re.compile(r'class="[^"]*stock[^"]*"[^>]*>([^<]+)<', re.IGNORECASE),
    re.compile(r"(in stock|out of stock|available|unavailable)", re.IGNORECASE),
)

# First image source
IMG_SRC_RE = re.compile(r'<img[^>]*src="([^"]+)"', re.IGNORECASE)


# ─── Product Card Patterns (pass 2: <div>/<li> class="...product...") ────────

LISTING_CARD_RE = re.compile(
    r'<(?:div|li)[^>]*class="[^"]*product[^"]*"[^>]*>(.*?)</(?:div|li)>',
    re.IGNORECASE | re.DOTALL,
)

LISTING_TITLE_PATTERNS = (
    re.compile(r'<(?:h[1-6]|a|span)[^>]*class="[^"]*(?:title|name|product-name)[^"]*"[^>]*>([^<]+)<', re.IGNORECASE),
    re.compile(r"<a[^>]*>([^<]{5,})</a>", re.IGNORECASE),
)

# Listing cards only accept symbol-prefixed amounts
LISTING_PRICE_PATTERNS = (PRICE_CLASS_RE, re.compile(r"\$[\d,.]+|£[\d,.]+|€[\d,.]+"))


# ─── Delimited Text ──────────────────────────────────────────────────────────

# Line break, Unix or Windows
LINE_BREAK_RE = re.compile(r"\r?\n")
