"""Category filter chips."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button

from ..models.command import Category


class CategoryChip(Button):
    """Toggle chip for one category."""

    def __init__(self, category: Category, **kwargs) -> None:
        super().__init__(category.value, **kwargs)
        self.category = category

    def set_active(self, active: bool) -> None:
        self.set_class(active, "-active")


class CategoryBar(Horizontal):
    """Row of category chips.

    Messages:
        Toggled(category): Emitted when a chip is pressed
    """

    DEFAULT_CSS = """
    CategoryBar {
        height: auto;
        overflow-x: auto;
    }
    """

    class Toggled(Message):
        """Emitted when a category chip is pressed."""

        def __init__(self, category: Category) -> None:
            self.category = category
            super().__init__()

    def compose(self) -> ComposeResult:
        for category in Category:
            yield CategoryChip(category)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, CategoryChip):
            event.stop()
            self.post_message(self.Toggled(event.button.category))

    def sync(self, selected: frozenset[Category]) -> None:
        """Highlight chips for the selected categories."""
        for chip in self.query(CategoryChip):
            chip.set_active(chip.category in selected)
