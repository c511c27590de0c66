"""Services for the commands explorer."""

from mc_explorer.services.catalog import default_catalog, load_catalog, parse_catalog
from mc_explorer.services.config import Config, ConfigManager
from mc_explorer.services.filters import apply_filters, matches_filters
from mc_explorer.services.fuzzy import DEFAULT_LIMIT, THRESHOLD, search, search_pool
from mc_explorer.services.index import FIELD_WEIGHTS, SearchIndex, build_index
from mc_explorer.services.query import QueryOrchestrator, QueryResult

__all__ = [
    "default_catalog",
    "load_catalog",
    "parse_catalog",
    "Config",
    "ConfigManager",
    "apply_filters",
    "matches_filters",
    "DEFAULT_LIMIT",
    "THRESHOLD",
    "search",
    "search_pool",
    "FIELD_WEIGHTS",
    "SearchIndex",
    "build_index",
    "QueryOrchestrator",
    "QueryResult",
]
