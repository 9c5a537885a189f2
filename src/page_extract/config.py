"""Shared configuration for extraction parsing and validation.

Heuristic thresholds can be overridden from the environment (or a ``.env``
file at the project root) without touching code.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# ─── Structure Inference ─────────────────────────────────────────────────────

# Candidate delimiters, in tie-break priority order
DELIMITERS = ("\t", ",", ";", "|")

# Share of lines that must match the header's column count for a delimited parse
DELIMITED_MIN_CONSISTENCY = float(os.getenv("PAGE_EXTRACT_DELIMITED_MIN_CONSISTENCY", "0.8"))

# ─── Validation ──────────────────────────────────────────────────────────────

# Max edit distance at which an actual column still satisfies an expected one
MAX_EDIT_DISTANCE = int(os.getenv("PAGE_EXTRACT_MAX_EDIT_DISTANCE", "2"))

# Partially-empty rows above this count are reported as a single aggregate warning
PARTIAL_EMPTY_LIMIT = int(os.getenv("PAGE_EXTRACT_PARTIAL_EMPTY_LIMIT", "3"))
