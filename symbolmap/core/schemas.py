from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional

from .enums import SecurityType
from .errors import CatalogParseError


@dataclass(frozen=True)
class CanonicalSymbol:
    """Market-qualified instrument identity, e.g. ``GDAX:BTCUSD`` (crypto)."""

    ticker: str
    security_type: SecurityType
    market: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "ticker", self.ticker.strip().upper())
        object.__setattr__(self, "market", self.market.strip().lower())
        object.__setattr__(self, "security_type", SecurityType(self.security_type))

    def __str__(self) -> str:
        return f"{self.market.upper()}:{self.ticker}"


@dataclass(frozen=True)
class DecodedIdentifier:
    exchange_id: str
    base_asset: str
    quote_asset: str


_REQUIRED_ENTRY_FIELDS = ("symbol_id", "exchange_id", "symbol_type")
_ASSET_FIELDS = ("asset_id_base", "asset_id_quote")


@dataclass(frozen=True)
class SymbolCacheEntry:
    symbol_id: str
    exchange_id: str
    symbol_type: str
    asset_id_base: Optional[str] = None
    asset_id_quote: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "SymbolCacheEntry":
        missing = [k for k in _REQUIRED_ENTRY_FIELDS if not isinstance(raw.get(k), str) or not raw.get(k)]
        if missing:
            raise CatalogParseError(
                f"Catalog entry is missing {', '.join(missing)}",
                context={"entry": raw},
            )
        bad_assets = [k for k in _ASSET_FIELDS if raw.get(k) is not None and not isinstance(raw.get(k), str)]
        if bad_assets:
            raise CatalogParseError(
                f"Catalog entry {raw['symbol_id']} has non-string {', '.join(bad_assets)}",
                context={"entry": raw},
            )
        return cls(
            symbol_id=raw["symbol_id"],
            exchange_id=raw["exchange_id"],
            symbol_type=raw["symbol_type"],
            asset_id_base=raw.get("asset_id_base"),
            asset_id_quote=raw.get("asset_id_quote"),
        )


class SymbolTable(Mapping):
    """Read-only ``CanonicalSymbol -> provider symbol id`` table.

    The table takes a private copy of the items it is built from and only ever
    exposes a ``MappingProxyType`` over it, so it can be shared across threads.
    """

    __slots__ = ("_data",)

    def __init__(self, items: Optional[Mapping] = None) -> None:
        self._data = MappingProxyType(dict(items or {}))

    def __getitem__(self, key: CanonicalSymbol) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[CanonicalSymbol]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"SymbolTable({len(self._data)} symbols)"
