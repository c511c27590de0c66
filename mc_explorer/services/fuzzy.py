"""Fuzzy matching over the search index.

Weighted multi-field approximate matching:
- Each field value is scored by the edit distance between the query and
  the closest substring of the value, divided by the query length
- Values scoring above THRESHOLD do not match
- Matching fields combine as a product of score ** (weight * norm),
  so heavier fields and shorter values pull the total towards 0
- A record whose name equals the query always ranks first

Scores run from 0 (perfect) to 1 (worst).
"""

from __future__ import annotations

import sys
from typing import Sequence

from ..models.command import CommandRecord, ScoredRecord
from .index import IndexEntry, SearchIndex

# Normalized distance above which a field value is not a match
THRESHOLD = 0.35

# Default cap on returned results
DEFAULT_LIMIT = 200

# Floors for zero-error matches: a whole-value match beats a substring
EXACT_EPSILON = sys.float_info.epsilon
PARTIAL_EPSILON = 0.001


def substring_distance(pattern: str, text: str, max_errors: int | None = None) -> int:
    """Edit distance between pattern and its best-aligned substring of text.

    Insertions, deletions, substitutions and adjacent transpositions
    cost 1 each. The match may start and end anywhere in text.

    Args:
        pattern: Query (already lower-cased)
        text: Field value (already lower-cased)
        max_errors: Stop early once the distance must exceed this

    Returns:
        Distance, or max_errors + 1 when the cutoff was hit
    """
    m = len(pattern)
    if m == 0 or pattern in text:
        return 0
    n = len(text)
    if max_errors is not None and m - n > max_errors:
        return max_errors + 1

    before_prev: list[int] = []
    prev = [0] * (n + 1)  # Free start anywhere in text
    for i in range(1, m + 1):
        pc = pattern[i - 1]
        cur = [i] + [0] * n
        for j in range(1, n + 1):
            tc = text[j - 1]
            best = min(
                prev[j] + 1,                       # Skip a pattern char
                cur[j - 1] + 1,                    # Skip a text char
                prev[j - 1] + (pc != tc),          # Match or substitute
            )
            if (
                i > 1 and j > 1 and pc != tc
                and pc == text[j - 2] and pattern[i - 2] == tc
            ):
                best = min(best, before_prev[j - 2] + 1)  # Transposition
            cur[j] = best

        if max_errors is not None and min(cur) > max_errors:
            return max_errors + 1
        before_prev, prev = prev, cur

    return min(prev)


def match_value(query: str, text: str) -> tuple[bool, float]:
    """Check if query approximately matches a field value.

    Returns:
        (matches, score) - Lower score = better match.
    """
    max_errors = int(THRESHOLD * len(query) + 1e-9)
    errors = substring_distance(query, text, max_errors)
    if errors > max_errors:
        return False, 1.0

    if errors == 0:
        return True, EXACT_EPSILON if text == query else PARTIAL_EPSILON
    return True, errors / len(query)


def score_entry(query: str, entry: IndexEntry) -> float | None:
    """Combined score for one record, or None if no field matches."""
    total = 1.0
    matched = False
    for indexed in entry.fields:
        best: float | None = None
        for value in indexed.values:
            matches, score = match_value(query, value.text)
            if not matches:
                continue
            factor = score ** (indexed.weight * value.norm)
            if best is None or factor < best:
                best = factor
        if best is not None:
            matched = True
            total *= best

    return total if matched else None


def _rank(
    index: SearchIndex,
    entries: Sequence[IndexEntry],
    query: str,
    limit: int,
) -> list[ScoredRecord]:
    needle = query.lower()
    # A case-sensitive name match wins over a case-folded one
    anchor = index.positions.get(query)
    if anchor is None:
        anchor = index.exact_names.get(needle)

    hits: list[ScoredRecord] = []
    for entry in entries:
        if entry.position == anchor:
            hits.append(ScoredRecord(entry.record, 0.0, entry.position))
            continue
        score = score_entry(needle, entry)
        if score is not None:
            hits.append(ScoredRecord(entry.record, score, entry.position))

    # Rank everything first, truncate last
    hits.sort(key=lambda h: (h.score, h.index))
    return hits[:limit]


def search(index: SearchIndex, query: str, limit: int = DEFAULT_LIMIT) -> list[ScoredRecord]:
    """Rank catalog records against a query.

    Args:
        index: Search index built from the catalog
        query: Raw user input; any text is valid
        limit: Maximum number of results

    Returns:
        Scored records, best first. An empty query returns every record
        in catalog order with a tied score of 0.
    """
    if limit <= 0:
        return []

    query = (query or "").strip()
    if not query:
        return [ScoredRecord(e.record, 0.0, e.position) for e in index.entries[:limit]]

    return _rank(index, index.entries, query, limit)


def search_pool(
    index: SearchIndex,
    pool: Sequence[CommandRecord],
    query: str,
    limit: int = DEFAULT_LIMIT,
) -> list[ScoredRecord]:
    """Rank only the records in pool, keeping catalog-order tie-breaks.

    Records unknown to the index are ignored.
    """
    if limit <= 0:
        return []

    entries = []
    for record in pool:
        position = index.position_of(record)
        if position is not None:
            entries.append(index.entries[position])

    query = (query or "").strip()
    if not query:
        return [ScoredRecord(e.record, 0.0, e.position) for e in entries[:limit]]

    return _rank(index, entries, query, limit)
