"""Per-market currency code alias tables."""

from .registry import COINAPI_CURRENCY_ALIASES, CurrencyAliasTable, coinapi_aliases

__all__ = ["COINAPI_CURRENCY_ALIASES", "CurrencyAliasTable", "coinapi_aliases"]
