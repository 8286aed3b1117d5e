import inspect
import json

import pytest

from symbolmap import CoinApiSymbolMapper, SymbolMapper
from symbolmap.core.enums import Market, OptionRight, SecurityType
from symbolmap.core.errors import (
    CatalogFetchError,
    CatalogParseError,
    MalformedIdentifier,
    SymbolNotFound,
    UnknownExchange,
    UnsupportedInstrumentClass,
)
from symbolmap.core.schemas import CanonicalSymbol

from .conftest import RecordingFetcher


@pytest.fixture
def mapper(settings, fetcher):
    return CoinApiSymbolMapper(settings, fetch=fetcher)


def test_end_to_end_btcusd_on_gdax(settings):
    payload = json.dumps(
        [
            {
                "symbol_id": "COINBASE_SPOT_BTC_USD",
                "exchange_id": "COINBASE",
                "symbol_type": "SPOT",
                "asset_id_base": "BTC",
                "asset_id_quote": "USD",
            }
        ]
    )
    mapper = CoinApiSymbolMapper(settings, fetch=RecordingFetcher(payload))

    symbol = CanonicalSymbol("BTCUSD", SecurityType.CRYPTO, Market.GDAX)
    assert mapper.to_provider_symbol(symbol) == "COINBASE_SPOT_BTC_USD"
    assert isinstance(mapper, SymbolMapper)


def test_construction_loads_once_for_all_exchanges(mapper, fetcher):
    assert fetcher.calls == [["COINBASE", "BITFINEX"]]
    assert len(mapper) == 4


def test_lookup_uses_aliased_ticker(mapper):
    assert mapper.to_provider_symbol(CanonicalSymbol("BTCUST", SecurityType.CRYPTO, Market.BITFINEX)) == "BITFINEX_SPOT_BTC_USDT"
    assert mapper.to_provider_symbol(CanonicalSymbol("DSHUSD", SecurityType.CRYPTO, Market.BITFINEX)) == "BITFINEX_SPOT_DASH_USD"


def test_lookup_miss_raises_symbol_not_found(mapper, fetcher):
    with pytest.raises(SymbolNotFound):
        mapper.to_provider_symbol(CanonicalSymbol("XRPUSD", SecurityType.CRYPTO, Market.GDAX))
    # wrong market or security type is a miss too
    with pytest.raises(SymbolNotFound):
        mapper.to_provider_symbol(CanonicalSymbol("BTCUSD", SecurityType.CRYPTO, Market.BITFINEX))
    with pytest.raises(SymbolNotFound):
        mapper.to_provider_symbol(CanonicalSymbol("BTCUSD", SecurityType.FOREX, Market.GDAX))
    # a miss never triggers a live re-fetch
    assert len(fetcher.calls) == 1


def test_to_canonical_symbol_ignores_table(mapper):
    # not in the loaded catalog, still decodable
    symbol = mapper.to_canonical_symbol("COINBASE_SPOT_XRP_USD", SecurityType.CRYPTO, Market.GDAX)
    assert symbol == CanonicalSymbol("XRPUSD", SecurityType.CRYPTO, Market.GDAX)
    assert symbol not in mapper


def test_to_canonical_symbol_derives_market_from_identifier(mapper):
    symbol = mapper.to_canonical_symbol(
        "BITFINEX_SPOT_IOTA_USDT",
        SecurityType.OPTION,
        Market.GDAX,
        strike=100.0,
        option_right=OptionRight.PUT,
    )
    assert symbol == CanonicalSymbol("IOTUST", SecurityType.CRYPTO, Market.BITFINEX)


def test_to_canonical_symbol_errors(mapper):
    with pytest.raises(MalformedIdentifier):
        mapper.to_canonical_symbol("ABC_SPOT_X", SecurityType.CRYPTO, Market.GDAX)
    with pytest.raises(UnsupportedInstrumentClass):
        mapper.to_canonical_symbol("COINBASE_FUTURES_BTC_USD", SecurityType.CRYPTO, Market.GDAX)
    with pytest.raises(UnknownExchange):
        mapper.to_canonical_symbol("ZZZZ_SPOT_BTC_USD", SecurityType.CRYPTO, Market.GDAX)
    # failed lookups leave the table alone
    assert len(mapper) == 4


def test_round_trip_through_table(mapper):
    for symbol, symbol_id in mapper.symbols.items():
        assert mapper.to_canonical_symbol(symbol_id, SecurityType.CRYPTO, symbol.market) == symbol


def test_exchange_id_for(mapper):
    assert mapper.exchange_id_for(Market.GDAX) == "COINBASE"
    assert mapper.exchange_id_for("BITFINEX") == "BITFINEX"
    assert mapper.exchange_id_for("kraken") is None


def test_reload_swaps_table(settings):
    fetcher = RecordingFetcher("[]")
    mapper = CoinApiSymbolMapper(settings, fetch=fetcher)
    before = mapper.symbols
    assert len(mapper) == 0

    fetcher.payload = json.dumps(
        [
            {
                "symbol_id": "COINBASE_SPOT_ETH_USD",
                "exchange_id": "COINBASE",
                "symbol_type": "SPOT",
                "asset_id_base": "ETH",
                "asset_id_quote": "USD",
            }
        ]
    )
    table = mapper.reload()

    assert mapper.symbols is table
    assert len(before) == 0
    assert mapper.to_provider_symbol(CanonicalSymbol("ETHUSD", SecurityType.CRYPTO, Market.GDAX)) == "COINBASE_SPOT_ETH_USD"


def test_reload_unchanged_catalog_is_identical(mapper):
    before = mapper.symbols
    assert mapper.reload() == before


def test_failed_reload_keeps_previous_table(mapper, fetcher):
    before = mapper.symbols
    fetcher.payload = "not json"

    with pytest.raises(CatalogParseError):
        mapper.reload()
    assert mapper.symbols is before


@pytest.mark.parametrize(
    "payload, error",
    [
        ("{", CatalogParseError),
        (
            json.dumps([{"symbol_id": "KRAKEN_SPOT_BTC_USD", "exchange_id": "KRAKEN", "symbol_type": "SPOT", "asset_id_base": "BTC", "asset_id_quote": "USD"}]),
            UnknownExchange,
        ),
        (
            json.dumps([{"symbol_id": "COINBASE_SPOT_BTC_USD", "exchange_id": "COINBASE", "symbol_type": "SPOT", "asset_id_base": 1, "asset_id_quote": "USD"}]),
            CatalogParseError,
        ),
    ],
)
def test_construction_fails_outright(settings, payload, error):
    with pytest.raises(error):
        CoinApiSymbolMapper(settings, fetch=RecordingFetcher(payload))


def test_construction_fetch_failure(settings):
    def failing(settings, exchange_ids):
        raise CatalogFetchError("unreachable")

    with pytest.raises(CatalogFetchError):
        CoinApiSymbolMapper(settings, fetch=failing)


def test_settings_default_from_env(monkeypatch, tmp_path, fetcher):
    monkeypatch.setenv("COINAPI_API_KEY", "env-key")
    monkeypatch.setenv("COINAPI_SYMBOLS_FILE", str(tmp_path / "symbols.json"))
    monkeypatch.delenv("COINAPI_USE_LOCAL_SYMBOL_LIST", raising=False)

    mapper = CoinApiSymbolMapper(fetch=fetcher)

    assert mapper.settings.api_key == "env-key"
    assert mapper.settings.symbols_file == tmp_path / "symbols.json"


def test_to_canonical_symbol_signature_matches_interface():
    expected = inspect.signature(SymbolMapper.to_canonical_symbol)
    actual = inspect.signature(CoinApiSymbolMapper.to_canonical_symbol)

    assert list(actual.parameters.values()) == list(expected.parameters.values())
