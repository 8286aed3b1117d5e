from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from ..core.enums import Market


# CoinAPI asset ids that differ from the canonical currency code, per market
COINAPI_CURRENCY_ALIASES: Dict[str, Dict[str, str]] = {
    Market.BITFINEX: {
        "ANIO": "NIO",
        "BCHSV": "BSV",
        "DASH": "DSH",
        "IOTA": "IOT",
        "MANA": "MNA",
        "PKGO": "GOT",
        "QTUM": "QTM",
        "USDT": "UST",
        "YOYOW": "YYW",
    },
}

_EMPTY: Mapping[str, str] = MappingProxyType({})


class CurrencyAliasTable:
    """Holds per-market provider -> canonical currency code overrides."""

    def __init__(self, aliases: Optional[Mapping[str, Mapping[str, str]]] = None) -> None:
        self._aliases: Mapping[str, Mapping[str, str]] = MappingProxyType(
            {market.lower(): MappingProxyType(dict(codes)) for market, codes in (aliases or {}).items()}
        )

    def resolve(self, code: str, market: str) -> str:
        return self._aliases.get(market.lower(), _EMPTY).get(code, code)

    def aliases_for(self, market: str) -> Mapping[str, str]:
        return self._aliases.get(market.lower(), _EMPTY)

    @property
    def markets(self) -> Tuple[str, ...]:
        return tuple(self._aliases)

    def __repr__(self) -> str:
        return f"CurrencyAliasTable(markets={list(self._aliases)})"


coinapi_aliases = CurrencyAliasTable(COINAPI_CURRENCY_ALIASES)
