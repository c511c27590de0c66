"""Query orchestration: filter-then-search on every input change.

The orchestrator owns the session's FilterState. Each mutation replaces
the state and synchronously recomputes the visible results:

1. The filter pipeline narrows the catalog to the allowed pool
2. An empty query shows the pool in catalog order (no scoring)
3. Otherwise the fuzzy matcher ranks only the pool

Filtering first means filters are hard preconditions: a hidden admin-only
command can never resurface through a lucky fuzzy match.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from ..models.command import Category, CommandRecord
from ..models.filter_state import FilterState
from .filters import apply_filters
from .fuzzy import DEFAULT_LIMIT, search_pool
from .index import SearchIndex, build_index

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryResult:
    """Visible results for one FilterState."""

    results: tuple[CommandRecord, ...]
    total_count: int     # Size of the unfiltered catalog
    match_count: int     # Size of results

    def __iter__(self):
        # Allows: results, total, matches = orchestrator.get_results()
        return iter((self.results, self.total_count, self.match_count))


ResultListener = Callable[[QueryResult], None]


class QueryOrchestrator:
    """Composes the filter pipeline and fuzzy matcher for one session."""

    def __init__(
        self,
        catalog: Sequence[CommandRecord],
        state: FilterState | None = None,
        limit: int = DEFAULT_LIMIT,
    ) -> None:
        """Build the index and compute the initial results.

        Raises:
            DuplicateKeyError: If two catalog records share a name
        """
        self._catalog: tuple[CommandRecord, ...] = tuple(catalog)
        self._index: SearchIndex = build_index(self._catalog)
        self._state = state or FilterState()
        self._limit = limit
        self._listeners: list[ResultListener] = []
        self._result = self._compute(self._state)

    @property
    def catalog(self) -> tuple[CommandRecord, ...]:
        return self._catalog

    @property
    def index(self) -> SearchIndex:
        return self._index

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def limit(self) -> int:
        return self._limit

    # Query interface

    def set_query_text(self, text: str) -> QueryResult:
        """Replace the query text and recompute."""
        return self._transition(self._state.with_query_text(text))

    def toggle_category(self, label: Category | str) -> QueryResult:
        """Toggle one category filter and recompute.

        Raises:
            InvalidCategoryError: If the label is not a known category;
                state and results are left unchanged
        """
        return self._transition(self._state.with_category_toggled(label))

    def set_hide_admin_only(self, hide: bool) -> QueryResult:
        """Set the safety switch and recompute."""
        return self._transition(self._state.with_hide_admin_only(hide))

    def get_results(self) -> QueryResult:
        return self._result

    def subscribe(self, listener: ResultListener) -> Callable[[], None]:
        """Call listener with fresh results after every recompute.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def recompute(self) -> QueryResult:
        """Recompute results for the current state and notify listeners."""
        self._result = self._compute(self._state)
        for listener in list(self._listeners):
            try:
                listener(self._result)
            except Exception as e:
                logger.error(f"Result listener error: {e}")
        return self._result

    # Internals

    def _transition(self, new_state: FilterState) -> QueryResult:
        self._state = new_state
        return self.recompute()

    def _compute(self, state: FilterState) -> QueryResult:
        pool = apply_filters(self._catalog, state)
        query = state.trimmed_query
        if not query:
            results = tuple(pool)
        else:
            hits = search_pool(self._index, pool, query, self._limit)
            results = tuple(hit.record for hit in hits)

        logger.debug(
            f"Recomputed results: query={query!r} pool={len(pool)} matches={len(results)}"
        )
        return QueryResult(
            results=results,
            total_count=len(self._catalog),
            match_count=len(results),
        )
