"""Custom exception hierarchy for blockjump.

Only conditions that break the whole session are raised. Missing entry ids,
empty queries and unknown selections are absorbed into "empty" states by the
components that meet them.

Exception Hierarchy:
    BlockjumpError (base)
    ├── CatalogError - malformed raw entry data or catalog files
    ├── SearchIndexError - the search index cannot be built
    └── ConfigurationError - invalid settings in config.yaml

Usage:
    from blockjump.exceptions import CatalogError

    if not isinstance(record, Mapping):
        raise CatalogError("Entry record must be a mapping", index=3)
"""

from typing import Any, Optional


class BlockjumpError(Exception):
    """Base exception for all blockjump errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., ids, paths)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class CatalogError(BlockjumpError):
    """Raw catalog data could not be turned into entries."""

    def __init__(
        self,
        message: str = "Invalid catalog data",
        *,
        entry_id: Optional[str] = None,
        **context: Any,
    ) -> None:
        if entry_id is not None:
            context["entry_id"] = entry_id
        super().__init__(message, **context)


class SearchIndexError(BlockjumpError):
    """The fuzzy search index could not be built."""

    def __init__(self, message: str = "Search index could not be built", **context: Any) -> None:
        super().__init__(message, **context)


class ConfigurationError(BlockjumpError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
