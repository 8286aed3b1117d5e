"""Market registry, provider identifier codec and symbol catalog loader."""

from .registry import COINAPI_EXCHANGES, MarketExchangeRegistry, coinapi_exchanges
from .codec import IdentifierCodec, split_symbol_id
from .loader import SymbolCacheLoader, build_symbol_table, fetch_symbol_catalog, parse_catalog

__all__ = [
    "COINAPI_EXCHANGES",
    "MarketExchangeRegistry",
    "coinapi_exchanges",
    "IdentifierCodec",
    "split_symbol_id",
    "SymbolCacheLoader",
    "build_symbol_table",
    "fetch_symbol_catalog",
    "parse_catalog",
]
