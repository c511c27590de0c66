"""Filter pipeline: category and safety predicates.

Both predicates are AND-combined. Filtering only removes records and
never reorders them.
"""

from __future__ import annotations

from typing import Iterable

from ..models.command import CommandRecord
from ..models.filter_state import FilterState


def passes_category(record: CommandRecord, state: FilterState) -> bool:
    """No selection passes everything; otherwise the category must be selected."""
    if not state.has_active_filters:
        return True
    return record.category is not None and record.category in state.selected_categories


def passes_safety(record: CommandRecord, state: FilterState) -> bool:
    """Admin-only commands pass only when the safety switch is off."""
    return not (state.hide_admin_only and record.admin_only)


def matches_filters(record: CommandRecord, state: FilterState) -> bool:
    return passes_category(record, state) and passes_safety(record, state)


def apply_filters(pool: Iterable[CommandRecord], state: FilterState) -> list[CommandRecord]:
    """Return the records of pool allowed by state, in their original order."""
    return [record for record in pool if matches_filters(record, state)]
