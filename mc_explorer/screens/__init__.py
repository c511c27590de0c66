"""Screens for the commands explorer."""

from mc_explorer.screens.explorer import ExplorerScreen

__all__ = ["ExplorerScreen"]
