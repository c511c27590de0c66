"""Explorer screen: search box, filters and the result list.

The screen owns no search logic. It forwards input events to the
QueryOrchestrator and re-renders whenever fresh results are published.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Checkbox, Footer, Input, Static

from ..models.exceptions import InvalidCategoryError
from ..services.query import QueryOrchestrator, QueryResult
from ..widgets.category_bar import CategoryBar
from ..widgets.command_card import CommandCard
from ..widgets.status import ResultCounter


class ExplorerScreen(Screen):
    """Main screen of the commands explorer."""

    BINDINGS = [
        Binding("escape", "clear_search", "Clear"),
        Binding("ctrl+f", "focus_search", "Search"),
        Binding("f2", "toggle_admin", "Server-only"),
    ]

    DEFAULT_CSS = """
    ExplorerScreen #search-panel {
        height: auto;
        padding: 1 2;
        background: $surface;
    }

    ExplorerScreen #filter-row {
        height: auto;
        margin-top: 1;
    }

    ExplorerScreen #hide-admin {
        margin-left: 1;
    }

    ExplorerScreen #results {
        padding: 1 2;
    }
    """

    def __init__(self, orchestrator: QueryOrchestrator, **kwargs) -> None:
        super().__init__(**kwargs)
        self._orchestrator = orchestrator
        self._unsubscribe = None

    @property
    def orchestrator(self) -> QueryOrchestrator:
        return self._orchestrator

    def compose(self) -> ComposeResult:
        state = self._orchestrator.state
        with Vertical(id="search-panel"):
            yield Static("Find commands fast with fuzzy search and filters", classes="section-title")
            yield Input(
                value=state.query_text,
                placeholder="Search commands (try: teleport, tp, weather, give)",
                id="search",
            )
            with Horizontal(id="filter-row"):
                yield CategoryBar(id="categories")
            yield Checkbox(
                "Hide server-only commands",
                value=state.hide_admin_only,
                id="hide-admin",
            )
        yield ResultCounter(id="counter")
        yield VerticalScroll(id="results")
        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribe = self._orchestrator.subscribe(self._show_results)
        self._show_results(self._orchestrator.get_results())
        self.query_one("#search", Input).focus()

    def on_unmount(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    # Input events

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search":
            self._orchestrator.set_query_text(event.value)

    def on_category_bar_toggled(self, event: CategoryBar.Toggled) -> None:
        try:
            self._orchestrator.toggle_category(event.category)
        except InvalidCategoryError as e:
            self.notify(str(e), severity="warning")

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        if event.checkbox.id == "hide-admin":
            self._orchestrator.set_hide_admin_only(event.value)

    # Actions

    def action_clear_search(self) -> None:
        self.query_one("#search", Input).value = ""

    def action_focus_search(self) -> None:
        self.query_one("#search", Input).focus()

    def action_toggle_admin(self) -> None:
        checkbox = self.query_one("#hide-admin", Checkbox)
        checkbox.value = not checkbox.value

    # Rendering

    def _show_results(self, result: QueryResult) -> None:
        """Rebuild the counter, chips and card list from a result."""
        counter = self.query_one("#counter", ResultCounter)
        counter.match_count = result.match_count
        counter.total_count = result.total_count

        self.query_one("#categories", CategoryBar).sync(
            self._orchestrator.state.selected_categories
        )

        results = self.query_one("#results", VerticalScroll)
        results.remove_children()
        if not result.results:
            results.mount(Static("no matching commands", classes="empty-list"))
            return
        results.mount(*(CommandCard(cmd) for cmd in result.results))
        results.scroll_home(animate=False)
