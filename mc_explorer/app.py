"""Minecraft Commands Explorer: fuzzy search and filters for game commands.

Main Textual application.
"""

import sys
from dataclasses import dataclass
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from mc_explorer.models.exceptions import ExplorerError
from mc_explorer.screens.explorer import ExplorerScreen
from mc_explorer.services.catalog import default_catalog, load_catalog
from mc_explorer.services.config import ConfigManager
from mc_explorer.services.query import QueryOrchestrator
from mc_explorer.styles import BASE_CSS


@dataclass
class Services:
    """Application service container for dependency injection."""

    config: ConfigManager
    orchestrator: QueryOrchestrator

    @classmethod
    def create(cls, config_dir: Path | None = None) -> "Services":
        """Load config and catalog, then build the orchestrator.

        Raises:
            ExplorerError: If the configured catalog cannot be loaded or is invalid
        """
        config = ConfigManager(config_dir=config_dir)
        settings = config.config

        if settings.catalog_path:
            catalog = load_catalog(settings.catalog_path)
        else:
            catalog = default_catalog()

        orchestrator = QueryOrchestrator(
            catalog,
            state=settings.initial_filter_state(),
            limit=settings.search_limit,
        )
        return cls(config=config, orchestrator=orchestrator)


class ExplorerApp(App):
    """The commands explorer application."""

    TITLE = "Minecraft Commands Explorer"
    CSS = BASE_CSS + """
    Screen {
        background: $background;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, services: Services | None = None, **kwargs):
        """Initialize the app with injected services.

        Args:
            services: Service container (created from user config if not provided)
            **kwargs: Additional Textual app arguments
        """
        super().__init__(**kwargs)
        self.services = services or Services.create()

    def on_mount(self) -> None:
        """Apply the configured theme and show the explorer."""
        theme = self.services.config.config.theme
        if theme and theme in self.available_themes:
            self.theme = theme
        self.push_screen(ExplorerScreen(self.services.orchestrator))

    @property
    def orchestrator(self) -> QueryOrchestrator:
        return self.services.orchestrator


def main():
    """Run the explorer."""
    try:
        services = Services.create()
    except ExplorerError as e:
        print(f"Error: {e}")
        sys.exit(1)

    ExplorerApp(services=services).run()


if __name__ == "__main__":
    main()
