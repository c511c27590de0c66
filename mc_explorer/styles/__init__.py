"""Styles for the commands explorer."""

from mc_explorer.styles.base import BASE_CSS

__all__ = ["BASE_CSS"]
