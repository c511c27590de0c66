"""Configuration management for the commands explorer.

Single JSON file at ~/.config/mc-explorer/config.json:
- search_limit: maximum ranked results per query
- hide_admin_only: initial state of the safety switch
- catalog_path: JSON catalog to load instead of the bundled one
- theme: Textual theme name

Unreadable or invalid files fall back to defaults with a warning.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..models.exceptions import ConfigValidationError
from ..models.filter_state import FilterState
from .fuzzy import DEFAULT_LIMIT

logger = logging.getLogger(__name__)


def _write_private_json(path: Path, data: dict) -> None:
    """Write JSON readable by the owner only (0600), replacing path atomically."""
    temp_path = path.with_suffix(".tmp")
    fd = os.open(temp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    os.replace(temp_path, path)


@dataclass
class Config:
    """Explorer configuration."""

    search_limit: int = DEFAULT_LIMIT
    hide_admin_only: bool = True
    catalog_path: Path | None = None
    theme: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.search_limit, bool) or not isinstance(self.search_limit, int):
            raise ConfigValidationError(
                f"search_limit must be an integer, got {self.search_limit!r}"
            )
        if self.search_limit < 1:
            raise ConfigValidationError(
                f"search_limit must be at least 1, got {self.search_limit}",
                suggestion=f"the default is {DEFAULT_LIMIT}",
            )

    def to_dict(self) -> dict:
        result: dict = {
            "search_limit": self.search_limit,
            "hide_admin_only": self.hide_admin_only,
        }
        if self.catalog_path:
            result["catalog_path"] = str(self.catalog_path)
        if self.theme:
            result["theme"] = self.theme
        return result

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create from dictionary.

        Raises:
            ConfigValidationError: If a value has the wrong type or range
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("Config file must contain a JSON object")

        hide_admin_only = data.get("hide_admin_only", True)
        if not isinstance(hide_admin_only, bool):
            raise ConfigValidationError(
                f"hide_admin_only must be true or false, got {hide_admin_only!r}"
            )

        catalog_path = data.get("catalog_path")
        theme = data.get("theme")
        for key, value in (("catalog_path", catalog_path), ("theme", theme)):
            if value is not None and not isinstance(value, str):
                raise ConfigValidationError(f"{key} must be a string, got {value!r}")

        return cls(
            search_limit=data.get("search_limit", DEFAULT_LIMIT),
            hide_admin_only=hide_admin_only,
            catalog_path=Path(catalog_path).expanduser() if catalog_path else None,
            theme=theme or None,
        )

    def initial_filter_state(self) -> FilterState:
        """First FilterState of a session: no categories, configured safety switch."""
        return FilterState(hide_admin_only=self.hide_admin_only)


class ConfigManager:
    """Loads and saves the explorer configuration."""

    def __init__(self, config_dir: Path | None = None):
        if config_dir is None:
            config_dir = Path.home() / ".config" / "mc-explorer"
        self._config_dir = config_dir
        self._config_file = config_dir / "config.json"
        self._config: Config | None = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    @property
    def config(self) -> Config:
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def _load_config(self) -> Config:
        """Load config from disk."""
        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text(encoding="utf-8"))
                return Config.from_dict(data)
            except (json.JSONDecodeError, UnicodeDecodeError, OSError,
                    ConfigValidationError) as e:
                logger.warning(f"Ignoring invalid config file {self._config_file}: {e}")
        return Config()

    def save_config(self, config: Config) -> None:
        """Save config to disk with secure permissions."""
        self._config_dir.mkdir(parents=True, exist_ok=True)
        _write_private_json(self._config_file, config.to_dict())
        self._config = config

