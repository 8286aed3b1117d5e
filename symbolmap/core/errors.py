from __future__ import annotations

from typing import Any, Optional


class MapperError(Exception):
    """Base error for symbolmap."""

    def __init__(self, message: str, *, context: Optional[dict[str, Any]] = None) -> None:  # noqa: D401
        super().__init__(message)
        self.context = context or {}


class ValidationError(MapperError):
    """Configuration or input validation failed."""


class HTTPError(MapperError):
    """HTTP call failed."""


class TimeoutError(HTTPError):
    """Network timeout."""


class CatalogFetchError(MapperError):
    """The provider symbol catalog could not be fetched."""


class CatalogParseError(MapperError):
    """The provider symbol catalog is not in the expected shape."""


class MalformedIdentifier(MapperError):
    """A provider symbol id does not follow EXCHANGE_CLASS_BASE_QUOTE."""


class UnsupportedInstrumentClass(MalformedIdentifier):
    """A provider symbol id names an instrument class other than SPOT."""


class UnknownExchange(MapperError):
    """The exchange id is not registered for any market."""


class SymbolNotFound(MapperError):
    """The canonical symbol is not present in the loaded symbol table."""
