from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Optional, Tuple

from ..core.enums import Market
from ..core.errors import UnknownExchange


COINAPI_EXCHANGES: Tuple[Tuple[str, str], ...] = (
    (Market.GDAX, "COINBASE"),
    (Market.BITFINEX, "BITFINEX"),
)


class MarketExchangeRegistry:
    """Bidirectional map between canonical markets and provider exchange ids.

    Built once from ``(market, exchange_id)`` pairs. Markets are case-insensitive
    (stored lower case); exchange ids are matched exactly, as the provider
    issues them.
    """

    def __init__(self, pairs: Iterable[Tuple[str, str]]) -> None:
        to_exchange: Dict[str, str] = {}
        to_market: Dict[str, str] = {}
        for market, exchange_id in pairs:
            market = market.lower()
            if market in to_exchange:
                raise ValueError(f"Duplicate market '{market}' in exchange registry")
            if exchange_id in to_market:
                raise ValueError(
                    f"Exchange id '{exchange_id}' registered for both '{to_market[exchange_id]}' and '{market}'"
                )
            to_exchange[market] = exchange_id
            to_market[exchange_id] = market
        self._to_exchange = MappingProxyType(to_exchange)
        self._to_market = MappingProxyType(to_market)

    def market_to_exchange(self, market: str) -> Optional[str]:
        return self._to_exchange.get(market.lower())

    def exchange_to_market(self, exchange_id: str) -> str:
        try:
            return self._to_market[exchange_id]
        except KeyError:
            raise UnknownExchange(
                f"Unsupported exchange id: {exchange_id}",
                context={"exchange_id": exchange_id, "known": list(self._to_market)},
            ) from None

    @property
    def exchange_ids(self) -> Tuple[str, ...]:
        return tuple(self._to_market)

    @property
    def markets(self) -> Tuple[str, ...]:
        return tuple(self._to_exchange)

    def __contains__(self, market: object) -> bool:
        return isinstance(market, str) and market.lower() in self._to_exchange

    def __len__(self) -> int:
        return len(self._to_exchange)

    def __repr__(self) -> str:
        return f"MarketExchangeRegistry({dict(self._to_exchange)})"


coinapi_exchanges = MarketExchangeRegistry(COINAPI_EXCHANGES)
