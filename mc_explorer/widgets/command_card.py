"""CommandCard widget for displaying one catalog command."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from ..models.command import CommandRecord

# Tags shown next to the command name
MAX_CARD_TAGS = 4

# How long the "Copied!" label stays up
COPIED_FEEDBACK_SECONDS = 1.2


class CopyButton(Button):
    """Button that puts a fixed text on the clipboard."""

    DEFAULT_CSS = """
    CopyButton {
        min-width: 10;
        height: 1;
        border: none;
        margin-left: 1;
    }
    """

    def __init__(self, text: str, **kwargs) -> None:
        super().__init__("Copy", **kwargs)
        self.copy_text = text

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.app.copy_to_clipboard(self.copy_text)
        self.notify(f"Copied {self.copy_text}", timeout=COPIED_FEEDBACK_SECONDS)
        self.label = "Copied!"
        self.set_timer(COPIED_FEEDBACK_SECONDS, self._reset_label)

    def _reset_label(self) -> None:
        self.label = "Copy"


class CommandCard(Vertical):
    """Name, tags, description, usage with copy buttons, permission and aliases."""

    def __init__(self, command: CommandRecord, **kwargs) -> None:
        super().__init__(**kwargs)
        self.command = command

    def compose(self) -> ComposeResult:
        cmd = self.command

        with Horizontal(classes="card-header"):
            yield Static(f"/{cmd.name}", classes="card-title")
            for tag in cmd.tags[:MAX_CARD_TAGS]:
                yield Static(tag, classes="tag")

        if cmd.description:
            yield Static(cmd.description, classes="description")

        yield Static("How to use", classes="section-title")
        with Horizontal(classes="usage-row"):
            yield Static(cmd.slash_syntax, classes="usage")
            yield CopyButton(cmd.slash_syntax)

        if cmd.examples:
            yield Static("Examples", classes="section-title")
            for example in cmd.slash_examples:
                with Horizontal(classes="usage-row"):
                    yield Static(example, classes="usage")
                    yield CopyButton(example)

        if cmd.permission:
            yield Static(f"Requires: {cmd.permission}", classes="meta")
        if cmd.aliases:
            yield Static(f"Also: {', '.join(cmd.aliases)}", classes="meta")
