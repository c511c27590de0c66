"""Search index over the command catalog.

Built once from the catalog. Holds lower-cased field values and a
field-length norm per value so the matcher never re-normalizes raw
strings per keystroke.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

from ..models.command import CommandRecord
from ..models.exceptions import DuplicateKeyError

logger = logging.getLogger(__name__)

# Relative influence of each field on the combined score.
# Name dominates so a near-exact name match beats incidental mentions.
FIELD_WEIGHTS: dict[str, float] = {
    "name": 0.4,
    "aliases": 0.2,
    "description": 0.2,
    "syntax": 0.2,
    "tags": 0.2,
    "examples": 0.1,
}


def field_norm(text: str) -> float:
    """Length norm of a field value: 1/sqrt(token count), 3 decimals.

    A match inside a long description counts for less than the same
    match in a one-word name.
    """
    tokens = max(1, len(text.split()))
    return round(1 / math.sqrt(tokens), 3)


def _field_values(record: CommandRecord, field_name: str) -> tuple[str, ...]:
    value = getattr(record, field_name)
    if isinstance(value, str):
        return (value,) if value else ()
    return tuple(value)


@dataclass(frozen=True)
class IndexedValue:
    """One searchable field value."""

    text: str    # Lower-cased value
    norm: float


@dataclass(frozen=True)
class IndexedField:
    """All values of one field of one record, with the field's weight."""

    name: str
    weight: float                       # Normalized so all weights sum to 1
    values: tuple[IndexedValue, ...]


@dataclass(frozen=True)
class IndexEntry:
    """Searchable representation of one record."""

    position: int                       # Catalog insertion order
    record: CommandRecord
    fields: tuple[IndexedField, ...]


@dataclass(frozen=True)
class SearchIndex:
    """Immutable lookup structures derived from the catalog."""

    entries: tuple[IndexEntry, ...] = ()
    positions: dict[str, int] = field(default_factory=dict)      # name -> position
    exact_names: dict[str, int] = field(default_factory=dict)    # lower name -> position

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def records(self) -> list[CommandRecord]:
        """Records in catalog order."""
        return [e.record for e in self.entries]

    def position_of(self, record: CommandRecord) -> int | None:
        """Catalog position of a record, by name."""
        return self.positions.get(record.name)


def check_unique_names(catalog: Sequence[CommandRecord]) -> None:
    """Raise DuplicateKeyError for the first repeated name."""
    seen: set[str] = set()
    for record in catalog:
        if record.name in seen:
            raise DuplicateKeyError(record.name)
        seen.add(record.name)


def build_index(catalog: Sequence[CommandRecord]) -> SearchIndex:
    """Build the search index for a catalog.

    Args:
        catalog: Records in display order

    Returns:
        SearchIndex (empty but queryable for an empty catalog)

    Raises:
        DuplicateKeyError: If two records share a name
    """
    check_unique_names(catalog)

    total_weight = sum(FIELD_WEIGHTS.values())
    weights = {name: w / total_weight for name, w in FIELD_WEIGHTS.items()}

    entries: list[IndexEntry] = []
    for position, record in enumerate(catalog):
        fields = []
        for field_name, weight in weights.items():
            values = tuple(
                IndexedValue(text=value.lower(), norm=field_norm(value))
                for value in _field_values(record, field_name)
                if value.strip()
            )
            if values:
                fields.append(IndexedField(name=field_name, weight=weight, values=values))
        entries.append(IndexEntry(position=position, record=record, fields=tuple(fields)))

    positions = {e.record.name: e.position for e in entries}
    exact_names: dict[str, int] = {}
    for entry in entries:
        # Case-folded fallback; names differing only by case keep the first
        exact_names.setdefault(entry.record.name.strip().lower(), entry.position)

    logger.debug(f"Built search index with {len(entries)} commands")
    return SearchIndex(entries=tuple(entries), positions=positions, exact_names=exact_names)
