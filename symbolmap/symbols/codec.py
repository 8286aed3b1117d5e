from __future__ import annotations

from ..core.enums import SecurityType
from ..core.errors import MalformedIdentifier, UnsupportedInstrumentClass
from ..core.schemas import CanonicalSymbol, DecodedIdentifier
from ..mappings.registry import CurrencyAliasTable
from .registry import MarketExchangeRegistry


SEPARATOR = "_"
SPOT = "SPOT"


def split_symbol_id(provider_symbol: str) -> DecodedIdentifier:
    """Split ``EXCHANGE_SPOT_BASE_QUOTE`` into its exchange, base and quote parts."""

    parts = provider_symbol.split(SEPARATOR)
    if len(parts) != 4 or not all(parts):
        raise MalformedIdentifier(
            f"Unsupported symbol id: {provider_symbol}",
            context={"symbol_id": provider_symbol, "segments": len(parts)},
        )
    exchange_id, instrument_class, base, quote = parts
    if instrument_class != SPOT:
        raise UnsupportedInstrumentClass(
            f"Unsupported instrument class '{instrument_class}' in symbol id: {provider_symbol}",
            context={"symbol_id": provider_symbol, "instrument_class": instrument_class},
        )
    return DecodedIdentifier(exchange_id=exchange_id, base_asset=base, quote_asset=quote)


class IdentifierCodec:
    """Decodes provider symbol ids and derives canonical tickers.

    Tickers are ``alias(base) + alias(quote)`` with no separator, so a ticker
    cannot be split back into base and quote; there is deliberately no encode.
    """

    def __init__(self, registry: MarketExchangeRegistry, aliases: CurrencyAliasTable) -> None:
        self.registry = registry
        self.aliases = aliases

    def decode(self, provider_symbol: str) -> DecodedIdentifier:
        return split_symbol_id(provider_symbol)

    def compose_ticker(self, base: str, quote: str, market: str) -> str:
        return self.aliases.resolve(base, market) + self.aliases.resolve(quote, market)

    def market_for(self, exchange_id: str) -> str:
        return self.registry.exchange_to_market(exchange_id)

    def to_canonical(self, provider_symbol: str) -> CanonicalSymbol:
        decoded = self.decode(provider_symbol)
        market = self.market_for(decoded.exchange_id)
        ticker = self.compose_ticker(decoded.base_asset, decoded.quote_asset, market)
        return CanonicalSymbol(ticker, SecurityType.CRYPTO, market)
