"""Command records and categories.

A CommandRecord is one catalog entry. Optional fields are explicit and
sequence fields are always tuples, so matching and rendering code only
ever checks for emptiness.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from .exceptions import CatalogError, InvalidCategoryError


class Category(str, Enum):
    """Fixed set of command categories, in display order."""

    PLAYER = "Player"
    WORLD = "World"
    SERVER_ADMIN = "Server/Admin"
    COMMUNICATION = "Communication"
    ENTITIES = "Entities"
    ITEMS_BLOCKS = "Items/Blocks"
    SCOREBOARD_DATA = "Scoreboard/Data"
    UTILITY = "Utility"

    @classmethod
    def parse(cls, label: Category | str) -> Category:
        """Resolve a label to a Category.

        Raises:
            InvalidCategoryError: If the label is not a known category
        """
        if isinstance(label, Category):
            return label
        try:
            return cls(label)
        except ValueError:
            raise InvalidCategoryError(label) from None


def _strip_slash(text: str) -> str:
    return text[1:] if text.startswith("/") else text


def _as_tuple(values: Iterable[str] | str | None) -> tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        return (values,) if values else ()
    return tuple(str(v) for v in values if v)


def _list_field(data: dict[str, Any], key: str) -> tuple[str, ...]:
    """Read a string-list field from a catalog entry.

    Raises:
        CatalogError: If the value is neither a string nor a list
    """
    values = data.get(key)
    if values is not None and not isinstance(values, (str, list, tuple)):
        raise CatalogError(
            f"Field {key!r} of {data.get('name')!r} must be a list of strings, got {values!r}"
        )
    return _as_tuple(values)


def _unique(values: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicates, keeping first occurrence order."""
    return tuple(dict.fromkeys(values))


@dataclass(frozen=True)
class CommandRecord:
    """A single command in the catalog."""

    name: str                                    # Unique key (e.g., "teleport")
    aliases: tuple[str, ...] = ()                # Alternate names (e.g., ("tp",))
    description: str = ""
    syntax: str = ""                             # Usage without leading slash
    examples: tuple[str, ...] = ()               # Usages without leading slash
    tags: tuple[str, ...] = ()                   # Topical labels, no duplicates
    category: Category | None = None
    permission: str | None = None                # Human-readable requirement
    admin_only: bool = False                     # Server operators only

    def __post_init__(self) -> None:
        # Normalize here so hand-built records behave like parsed ones
        object.__setattr__(self, "aliases", _as_tuple(self.aliases))
        object.__setattr__(self, "examples", _as_tuple(self.examples))
        object.__setattr__(self, "tags", _unique(_as_tuple(self.tags)))
        if self.category is not None:
            object.__setattr__(self, "category", Category.parse(self.category))

    @property
    def slash_syntax(self) -> str:
        """Syntax as typed in chat, with the leading slash."""
        return f"/{self.syntax or self.name}"

    @property
    def slash_examples(self) -> tuple[str, ...]:
        return tuple(f"/{e}" for e in self.examples)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, omitting empty values."""
        result: dict[str, Any] = {"name": self.name}
        if self.aliases:
            result["aliases"] = list(self.aliases)
        if self.description:
            result["description"] = self.description
        if self.syntax:
            result["syntax"] = self.syntax
        if self.examples:
            result["examples"] = list(self.examples)
        if self.tags:
            result["tags"] = list(self.tags)
        if self.category is not None:
            result["category"] = self.category.value
        if self.permission:
            result["permission"] = self.permission
        if self.admin_only:
            result["adminOnly"] = True
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CommandRecord:
        """Create from a catalog entry.

        Accepts both ``adminOnly`` and ``admin_only``. A leading slash on
        syntax and examples is dropped.

        Raises:
            CatalogError: If the entry has no name or a field has the wrong type
            InvalidCategoryError: If the category is not a known label
        """
        name = str(data.get("name") or "").strip()
        if not name:
            raise CatalogError(
                f"Catalog entry without a name: {data!r}",
                suggestion="every command needs a non-empty 'name'",
            )

        category = data.get("category") or None
        admin_only = data.get("adminOnly", data.get("admin_only", False))
        if not isinstance(admin_only, bool):
            raise CatalogError(
                f"adminOnly of {name!r} must be true or false, got {admin_only!r}"
            )

        return cls(
            name=name,
            aliases=_list_field(data, "aliases"),
            description=str(data.get("description") or ""),
            syntax=_strip_slash(str(data.get("syntax") or "")),
            examples=tuple(_strip_slash(e) for e in _list_field(data, "examples")),
            tags=_list_field(data, "tags"),
            category=Category.parse(category) if category is not None else None,
            permission=data.get("permission") or None,
            admin_only=admin_only,
        )


@dataclass(frozen=True)
class ScoredRecord:
    """A search hit: the record, its score (0 = perfect) and catalog position."""

    record: CommandRecord
    score: float = 0.0
    index: int = field(default=0, compare=False)
