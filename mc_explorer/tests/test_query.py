"""Tests for the query orchestrator."""

import logging

import pytest

from mc_explorer.models.command import Category, CommandRecord
from mc_explorer.models.exceptions import DuplicateKeyError, InvalidCategoryError
from mc_explorer.models.filter_state import FilterState
from mc_explorer.services import query as query_module
from mc_explorer.services.query import QueryOrchestrator, QueryResult


def _names(result: QueryResult) -> list[str]:
    return [r.name for r in result.results]


class TestConstruction:
    """Tests for building an orchestrator."""

    def test_duplicate_names_fail_fast(self):
        """A bad catalog fails before any query runs."""
        with pytest.raises(DuplicateKeyError):
            QueryOrchestrator([CommandRecord(name="tp"), CommandRecord(name="tp")])

    def test_empty_catalog(self):
        """An empty catalog yields empty results."""
        orchestrator = QueryOrchestrator([])
        assert orchestrator.get_results() == QueryResult(results=(), total_count=0, match_count=0)
        assert orchestrator.set_query_text("tp").match_count == 0

    def test_initial_results_computed(self, orchestrator, catalog):
        """Results are available right after construction."""
        result = orchestrator.get_results()
        assert result.total_count == len(catalog)
        assert "op" not in _names(result)

    def test_initial_state(self, catalog):
        """A provided state is used from the start."""
        orchestrator = QueryOrchestrator(catalog, state=FilterState.of(["World"]))
        assert _names(orchestrator.get_results()) == ["time", "weather"]


class TestEmptyQuery:
    """Tests for browsing without a query."""

    def test_full_catalog_in_order(self, catalog):
        """No query and no filters shows the whole catalog."""
        orchestrator = QueryOrchestrator(catalog, state=FilterState(hide_admin_only=False))
        result = orchestrator.get_results()
        assert list(result.results) == catalog
        assert result.match_count == result.total_count

    def test_blank_query_skips_search(self, orchestrator, monkeypatch):
        """Whitespace-only queries never reach the matcher."""
        def fail(*args, **kwargs):
            raise AssertionError("search should not run")

        monkeypatch.setattr(query_module, "search_pool", fail)
        result = orchestrator.set_query_text("   ")
        assert result.match_count == result.total_count - 2

    def test_empty_query_not_truncated(self):
        """Browsing shows the whole pool even beyond the search limit."""
        records = [CommandRecord(name=f"cmd{i}") for i in range(30)]
        orchestrator = QueryOrchestrator(records, limit=5)
        assert orchestrator.get_results().match_count == 30


class TestSearch:
    """Tests for query-driven results."""

    def test_alias_query(self, orchestrator):
        """'tp' puts teleport first."""
        result = orchestrator.set_query_text("tp")
        assert _names(result)[0] == "teleport"

    def test_misspelled_query(self, orchestrator):
        """'wether' still finds weather."""
        assert "weather" in _names(orchestrator.set_query_text("wether"))

    def test_filters_applied_before_search(self, orchestrator):
        """Hidden admin-only commands never resurface through search."""
        result = orchestrator.set_query_text("op")
        assert "op" not in _names(result)
        assert "deop" not in _names(result)

    def test_counts(self, orchestrator, catalog):
        """total_count is the catalog size, match_count the result size."""
        result = orchestrator.set_query_text("weather")
        assert result.total_count == len(catalog)
        assert result.match_count == len(result.results)

    def test_limit_respected(self):
        """Ranked results never exceed the limit."""
        records = [CommandRecord(name=f"cmd{i}", description="common") for i in range(50)]
        orchestrator = QueryOrchestrator(records, state=FilterState(hide_admin_only=False), limit=7)
        assert orchestrator.set_query_text("common").match_count == 7

    def test_get_results_unpacks(self, orchestrator):
        """get_results() unpacks as (results, total_count, match_count)."""
        orchestrator.set_query_text("time")
        results, total, matches = orchestrator.get_results()
        assert results[0].name == "time"
        assert total == 8
        assert matches == len(results)

    def test_query_text_kept_raw(self, orchestrator):
        """The state keeps the text as typed."""
        orchestrator.set_query_text(" tp ")
        assert orchestrator.state.query_text == " tp "


class TestFilterTransitions:
    """Tests for category and safety transitions."""

    def test_toggle_category(self, orchestrator):
        """Toggling a category narrows the results."""
        result = orchestrator.toggle_category("World")
        assert _names(result) == ["time", "weather"]
        assert orchestrator.state.selected_categories == {Category.WORLD}

    def test_toggle_twice_restores(self, orchestrator):
        """Toggling the same category twice restores the prior state."""
        before_state = orchestrator.state
        before_result = orchestrator.get_results()
        orchestrator.toggle_category("Entities")
        orchestrator.toggle_category("Entities")
        assert orchestrator.state == before_state
        assert orchestrator.get_results() == before_result

    def test_toggle_unknown_rejected(self, orchestrator):
        """Unknown labels raise and leave state and results unchanged."""
        before_state = orchestrator.state
        before_result = orchestrator.get_results()
        with pytest.raises(InvalidCategoryError):
            orchestrator.toggle_category("Redstone")
        assert orchestrator.state is before_state
        assert orchestrator.get_results() is before_result

    def test_safety_dominates_category(self, orchestrator):
        """Server/Admin selected with the switch on shows nothing."""
        result = orchestrator.toggle_category("Server/Admin")
        assert result.results == ()

    def test_disable_safety(self, orchestrator):
        """Turning the switch off reveals admin-only commands."""
        orchestrator.toggle_category("Server/Admin")
        result = orchestrator.set_hide_admin_only(False)
        assert _names(result) == ["op", "deop"]

    def test_set_hide_admin_only_idempotent(self, orchestrator):
        """Setting the switch on twice equals setting it once."""
        orchestrator.set_hide_admin_only(True)
        once = orchestrator.state
        orchestrator.set_hide_admin_only(True)
        assert orchestrator.state == once

    def test_filters_and_query_combine(self, orchestrator):
        """Search runs inside the filtered pool."""
        orchestrator.toggle_category("World")
        result = orchestrator.set_query_text("tp")
        assert "teleport" not in _names(result)


class TestListeners:
    """Tests for result subscriptions."""

    def test_listener_receives_results(self, orchestrator):
        """Listeners get every recomputed result."""
        received = []
        orchestrator.subscribe(received.append)
        orchestrator.set_query_text("tp")
        orchestrator.toggle_category("Player")
        assert len(received) == 2
        assert received[-1] is orchestrator.get_results()

    def test_unsubscribe(self, orchestrator):
        """Unsubscribed listeners stop receiving results."""
        received = []
        unsubscribe = orchestrator.subscribe(received.append)
        unsubscribe()
        unsubscribe()  # second call is harmless
        orchestrator.set_query_text("tp")
        assert received == []

    def test_listener_error_logged(self, orchestrator, caplog):
        """A failing listener does not abort recomputation."""
        received = []

        def broken(result):
            raise RuntimeError("boom")

        orchestrator.subscribe(broken)
        orchestrator.subscribe(received.append)
        with caplog.at_level(logging.ERROR, logger="mc_explorer.services.query"):
            result = orchestrator.set_query_text("weather")
        assert received == [result]
        assert "boom" in caplog.text

    def test_recompute_without_change(self, orchestrator):
        """recompute() publishes an equal result for an unchanged state."""
        before = orchestrator.get_results()
        assert orchestrator.recompute() == before
