"""Exception hierarchy shared across schemakit."""

from typing import Iterable, List


class SchemaKitError(Exception):
    """Base class for schemakit errors."""


class RecordError(SchemaKitError, ValueError):
    """Raised when a record is missing required fields."""

    def __init__(self, kind: str, missing: Iterable[str]) -> None:
        self.kind = kind
        self.missing: List[str] = list(missing)
        super().__init__(f"{kind} is missing required fields: {', '.join(self.missing)}")


class ConfigError(SchemaKitError, RuntimeError):
    """Raised when environment configuration cannot be parsed."""


class PageFetchError(SchemaKitError, RuntimeError):
    """Raised when a page cannot be fetched for inspection."""
