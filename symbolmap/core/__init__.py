"""Core enums, schemas, errors and the symbol mapper interface."""

from .enums import Market, OptionRight, SecurityType
from .schemas import CanonicalSymbol, DecodedIdentifier, SymbolCacheEntry, SymbolTable
from .errors import (
    MapperError,
    ValidationError,
    HTTPError,
    TimeoutError,
    CatalogFetchError,
    CatalogParseError,
    MalformedIdentifier,
    UnsupportedInstrumentClass,
    UnknownExchange,
    SymbolNotFound,
)
from .interface import SymbolMapper

__all__ = [
    # Enums
    "Market",
    "OptionRight",
    "SecurityType",
    # Schemas
    "CanonicalSymbol",
    "DecodedIdentifier",
    "SymbolCacheEntry",
    "SymbolTable",
    # Errors
    "MapperError",
    "ValidationError",
    "HTTPError",
    "TimeoutError",
    "CatalogFetchError",
    "CatalogParseError",
    "MalformedIdentifier",
    "UnsupportedInstrumentClass",
    "UnknownExchange",
    "SymbolNotFound",
    # Interface
    "SymbolMapper",
]
