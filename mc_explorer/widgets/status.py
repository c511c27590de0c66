"""Result counter widget."""

from textual.reactive import reactive
from textual.widgets import Static


class ResultCounter(Static):
    """Shows how many commands match out of the whole catalog."""

    DEFAULT_CSS = """
    ResultCounter {
        height: 1;
        color: $text-muted;
        padding: 0 1;
    }
    """

    match_count = reactive(0)
    total_count = reactive(0)

    def render(self) -> str:
        return f"Showing {self.match_count} of {self.total_count} commands"
