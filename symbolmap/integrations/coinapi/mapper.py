from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from ...config import MapperSettings
from ...core.enums import OptionRight, SecurityType
from ...core.errors import SymbolNotFound
from ...core.interface import SymbolMapper
from ...core.schemas import CanonicalSymbol, SymbolTable
from ...logging import get_logger
from ...mappings.registry import CurrencyAliasTable, coinapi_aliases
from ...symbols.codec import IdentifierCodec
from ...symbols.loader import Fetcher, SymbolCacheLoader
from ...symbols.registry import MarketExchangeRegistry, coinapi_exchanges


logger = get_logger(__name__)


class CoinApiSymbolMapper(SymbolMapper):
    """Maps canonical symbols to CoinAPI symbol ids and back.

    Only spot markets on Coinbase Pro (GDAX) and Bitfinex are supported by the
    default registry. The CoinAPI symbol catalog is loaded once at construction
    (or on ``reload``); lookups afterwards never touch the network or disk.

    Example:
        >>> mapper = CoinApiSymbolMapper()
        >>> mapper.to_provider_symbol(CanonicalSymbol("BTCUSD", SecurityType.CRYPTO, Market.GDAX))
        'COINBASE_SPOT_BTC_USD'
    """

    def __init__(
        self,
        settings: Optional[MapperSettings] = None,
        *,
        registry: Optional[MarketExchangeRegistry] = None,
        aliases: Optional[CurrencyAliasTable] = None,
        fetch: Optional[Fetcher] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.settings = settings or MapperSettings.from_env()
        self.registry = registry or coinapi_exchanges
        self.codec = IdentifierCodec(self.registry, aliases or coinapi_aliases)
        self._loader = SymbolCacheLoader(self.settings, self.codec, fetch=fetch, clock=clock)
        logger.debug("Initializing CoinAPI symbol mapper: %r", self.settings)
        self._table: SymbolTable = self._loader.load(self.registry.exchange_ids)

    def to_provider_symbol(self, symbol: CanonicalSymbol) -> str:
        try:
            return self._table[symbol]
        except KeyError:
            raise SymbolNotFound(f"Symbol not found: {symbol}", context={"symbol": symbol}) from None

    def to_canonical_symbol(
        self,
        provider_symbol: str,
        security_type: SecurityType,
        market: str,
        expiration: Optional[datetime] = None,
        strike: float = 0.0,
        option_right: OptionRight = OptionRight.CALL,
    ) -> CanonicalSymbol:
        # security_type/market are hints only; CoinAPI ids carry their own exchange
        return self.codec.to_canonical(provider_symbol)

    def exchange_id_for(self, market: str) -> Optional[str]:
        return self.registry.market_to_exchange(market)

    def reload(self) -> SymbolTable:
        """Re-read the catalog and swap in the new table."""

        table = self._loader.load(self.registry.exchange_ids)
        self._table = table
        logger.info("Reloaded CoinAPI symbol table (%d symbols)", len(table))
        return table

    @property
    def symbols(self) -> SymbolTable:
        return self._table

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._table

    def __len__(self) -> int:
        return len(self._table)
