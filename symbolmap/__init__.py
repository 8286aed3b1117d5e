"""
symbolmap: canonical <-> provider symbol translation.

This package maps market-qualified canonical symbols (ticker, security type,
market) to a data provider's symbol ids and back:
- Core domain models, errors and the `SymbolMapper` interface in `symbolmap.core`
- Per-market currency alias tables in `symbolmap.mappings`
- The market/exchange registry, identifier codec and catalog loader in `symbolmap.symbols`
- Provider mappers in `symbolmap.integrations` (CoinAPI)
- A `MapperRegistry` to construct mappers by provider name

Environment variables are loaded from a .env file via python-dotenv.
"""

from __future__ import annotations

from dotenv import load_dotenv

load_dotenv()

from .config import MapperSettings  # noqa: E402
from .core.enums import Market, OptionRight, SecurityType  # noqa: E402
from .core.errors import (  # noqa: E402
    MapperError,
    CatalogFetchError,
    CatalogParseError,
    MalformedIdentifier,
    UnsupportedInstrumentClass,
    UnknownExchange,
    SymbolNotFound,
)
from .core.interface import SymbolMapper  # noqa: E402
from .core.schemas import CanonicalSymbol, SymbolTable  # noqa: E402
from .integrations.coinapi import CoinApiSymbolMapper  # noqa: E402
from .mappings import CurrencyAliasTable  # noqa: E402
from .registry import MapperRegistry  # noqa: E402
from .symbols import IdentifierCodec, MarketExchangeRegistry, SymbolCacheLoader  # noqa: E402

__all__ = [
    "CoinApiSymbolMapper",
    "MapperRegistry",
    "MapperSettings",
    "SymbolMapper",
    # Enums
    "Market",
    "OptionRight",
    "SecurityType",
    # Schemas
    "CanonicalSymbol",
    "SymbolTable",
    # Components
    "CurrencyAliasTable",
    "IdentifierCodec",
    "MarketExchangeRegistry",
    "SymbolCacheLoader",
    # Errors
    "MapperError",
    "CatalogFetchError",
    "CatalogParseError",
    "MalformedIdentifier",
    "UnsupportedInstrumentClass",
    "UnknownExchange",
    "SymbolNotFound",
]
