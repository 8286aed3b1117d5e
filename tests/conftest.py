"""
Pytest configuration and shared fixtures for the symbol mapper tests.

Provides a stub CoinAPI catalog, settings pointing at a temporary cache
file, and a recording fetcher that stands in for the REST call.
"""

import json
from datetime import datetime, timedelta, timezone

import pytest

from symbolmap.config import MapperSettings
from symbolmap.mappings import coinapi_aliases
from symbolmap.symbols import IdentifierCodec, coinapi_exchanges


CATALOG = [
    {
        "symbol_id": "COINBASE_SPOT_BTC_USD",
        "exchange_id": "COINBASE",
        "symbol_type": "SPOT",
        "asset_id_base": "BTC",
        "asset_id_quote": "USD",
    },
    {
        "symbol_id": "COINBASE_SPOT_ETH_BTC",
        "exchange_id": "COINBASE",
        "symbol_type": "SPOT",
        "asset_id_base": "ETH",
        "asset_id_quote": "BTC",
    },
    {
        "symbol_id": "BITFINEX_SPOT_BTC_USDT",
        "exchange_id": "BITFINEX",
        "symbol_type": "SPOT",
        "asset_id_base": "BTC",
        "asset_id_quote": "USDT",
    },
    {
        "symbol_id": "BITFINEX_SPOT_DASH_USD",
        "exchange_id": "BITFINEX",
        "symbol_type": "SPOT",
        "asset_id_base": "DASH",
        "asset_id_quote": "USD",
    },
    {
        "symbol_id": "BITFINEX_PERP_BTC_USD",
        "exchange_id": "BITFINEX",
        "symbol_type": "PERPETUAL",
        "asset_id_base": "BTC",
        "asset_id_quote": "USD",
    },
    {
        "symbol_id": "BITMEX_FTS_XBT_USD_190628",
        "exchange_id": "BITMEX",
        "symbol_type": "FUTURES",
    },
]


class RecordingFetcher:
    """Stands in for fetch_symbol_catalog and remembers every call."""

    def __init__(self, payload: str) -> None:
        self.payload = payload
        self.calls = []

    def __call__(self, settings, exchange_ids):
        self.calls.append(list(exchange_ids))
        return self.payload


def days_from_now(days: int):
    moment = datetime.now(timezone.utc) + timedelta(days=days)
    return lambda: moment


@pytest.fixture
def catalog_payload():
    return json.dumps(CATALOG)


@pytest.fixture
def fetcher(catalog_payload):
    return RecordingFetcher(catalog_payload)


@pytest.fixture
def cache_file(tmp_path):
    return tmp_path / "cache" / "CoinApiSymbols.json"


@pytest.fixture
def settings(cache_file):
    return MapperSettings(api_key="test-key", use_local_symbol_list=False, symbols_file=cache_file)


@pytest.fixture
def cached_settings(cache_file):
    return MapperSettings(api_key="test-key", use_local_symbol_list=True, symbols_file=cache_file)


@pytest.fixture
def codec():
    return IdentifierCodec(coinapi_exchanges, coinapi_aliases)
