"""Fuzzy column-name matching for expected-column checks.

An actual column satisfies an expected one when either name contains the
other, or when they are within a small edit distance.  Short names can
therefore match loosely ("id" vs "ad"); callers should treat a match as
"probably the same field", not as proof.
"""

from difflib import get_close_matches

from page_extract.config import MAX_EDIT_DISTANCE


def levenshtein_distance(a: str, b: str) -> int:
    """Return the edit distance between *a* and *b* (unit-cost insert / delete / substitute)."""
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Single rolling row of the DP matrix, indexed by position in *a*
    previous = list(range(len(a) + 1))
    for i, char_b in enumerate(b, start=1):
        current = [i]
        for j, char_a in enumerate(a, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def columns_match(actual: str, expected: str, max_distance: int = MAX_EDIT_DISTANCE) -> bool:
    """Return True if *actual* plausibly names the *expected* column (case-insensitive)."""
    actual = actual.lower()
    expected = expected.lower()
    if expected in actual or actual in expected:
        return True
    return levenshtein_distance(actual, expected) <= max_distance


def find_missing_columns(actual_columns: list[str], expected_columns: list[str]) -> list[str]:
    """Return the expected columns (original spelling) that no actual column satisfies."""
    return [expected for expected in expected_columns if not any(columns_match(actual, expected) for actual in actual_columns)]


def suggest_columns(missing: str, actual_columns: list[str], n: int = 3) -> list[str]:
    """Return up to *n* actual column names that look closest to a missing one."""
    lowered = {column.lower(): column for column in actual_columns}
    return [lowered[match] for match in get_close_matches(missing.lower(), list(lowered), n=n, cutoff=0.4)]
