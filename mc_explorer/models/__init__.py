"""Data models for the commands explorer."""

from .command import Category, CommandRecord, ScoredRecord
from .filter_state import FilterState
from .exceptions import (
    ExplorerError,
    CatalogError,
    DuplicateKeyError,
    InvalidCategoryError,
    ConfigError,
    ConfigValidationError,
)

__all__ = [
    # Records
    "Category",
    "CommandRecord",
    "ScoredRecord",
    # State
    "FilterState",
    # Exceptions
    "ExplorerError",
    "CatalogError",
    "DuplicateKeyError",
    "InvalidCategoryError",
    "ConfigError",
    "ConfigValidationError",
]
