"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def book_rows() -> list[dict[str, str]]:
    """Two fully populated rows, as the extract tool returns them."""
    return [
        {"title": "Book A", "price": "$10"},
        {"title": "Book B", "price": "$12"},
    ]
