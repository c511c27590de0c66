"""Widgets for the commands explorer."""

from mc_explorer.widgets.category_bar import CategoryBar, CategoryChip
from mc_explorer.widgets.command_card import CommandCard, CopyButton
from mc_explorer.widgets.status import ResultCounter

__all__ = [
    "CategoryBar",
    "CategoryChip",
    "CommandCard",
    "CopyButton",
    "ResultCounter",
]
