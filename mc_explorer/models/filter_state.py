"""Session filter state.

FilterState is immutable: every user interaction produces a new value,
which keeps result recomputation a pure function of (catalog, state).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from .command import Category


@dataclass(frozen=True)
class FilterState:
    """Current query text and filter toggles for one session."""

    selected_categories: frozenset[Category] = field(default_factory=frozenset)
    hide_admin_only: bool = True
    query_text: str = ""

    @classmethod
    def of(
        cls,
        categories: Iterable[Category | str] = (),
        hide_admin_only: bool = True,
        query_text: str = "",
    ) -> FilterState:
        """Create a state from category labels.

        Raises:
            InvalidCategoryError: If any label is not a known category
        """
        return cls(
            selected_categories=frozenset(Category.parse(c) for c in categories),
            hide_admin_only=hide_admin_only,
            query_text=query_text,
        )

    @property
    def has_active_filters(self) -> bool:
        """Whether any category restriction is active."""
        return bool(self.selected_categories)

    @property
    def trimmed_query(self) -> str:
        return self.query_text.strip()

    def with_category_toggled(self, label: Category | str) -> FilterState:
        """Add the category if absent, remove it if present.

        Raises:
            InvalidCategoryError: If the label is not a known category
        """
        category = Category.parse(label)
        if category in self.selected_categories:
            selected = self.selected_categories - {category}
        else:
            selected = self.selected_categories | {category}
        return replace(self, selected_categories=selected)

    def with_hide_admin_only(self, hide: bool) -> FilterState:
        return replace(self, hide_admin_only=bool(hide))

    def with_query_text(self, text: str) -> FilterState:
        return replace(self, query_text=text)
