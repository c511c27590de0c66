"""Exception hierarchy for the commands explorer.

Construction-time problems (bad catalog, bad config) raise; queries never do.
"""


class ExplorerError(Exception):
    """Base exception for all explorer errors.

    Carries an optional suggestion shown next to the message so callers
    can surface a hint without parsing the text.
    """

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class CatalogError(ExplorerError):
    """Catalog data could not be loaded or a record is malformed."""

    pass


class DuplicateKeyError(CatalogError):
    """Two catalog records share the same name."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Duplicate command name in catalog: {name!r}",
            suggestion="command names must be unique",
        )
        self.name = name


class InvalidCategoryError(ExplorerError):
    """Category label is not one of the fixed categories."""

    def __init__(self, label: object) -> None:
        super().__init__(
            f"Unknown category: {label!r}",
            suggestion="use one of the built-in categories",
        )
        self.label = label


class ConfigError(ExplorerError):
    """Configuration is invalid or missing."""

    pass


class ConfigValidationError(ConfigError):
    """Configuration value failed validation."""

    pass
