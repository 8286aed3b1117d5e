from __future__ import annotations

import json
import os
import time
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from ..config import MapperSettings
from ..core.enums import SecurityType
from ..core.errors import CatalogFetchError, CatalogParseError, HTTPError
from ..core.schemas import CanonicalSymbol, SymbolCacheEntry, SymbolTable
from ..logging import get_logger
from ..net.http import get_text
from ..net.ratelimiter import rate_limited_coinapi
from .codec import SPOT, IdentifierCodec


logger = get_logger(__name__)

SYMBOLS_PATH = "/v1/symbols"

Fetcher = Callable[[MapperSettings, List[str]], str]


@rate_limited_coinapi()
def fetch_symbol_catalog(settings: MapperSettings, exchange_ids: List[str]) -> str:
    """Download the raw CoinAPI symbol list for the given exchange ids."""

    url = f"{settings.rest_url}{SYMBOLS_PATH}"
    params = {"filter_symbol_id": ",".join(exchange_ids), "apiKey": settings.api_key}
    try:
        return get_text(url, params=params, timeout=settings.timeout)
    except HTTPError as e:
        raise CatalogFetchError(
            f"Could not fetch symbol catalog for {','.join(exchange_ids)}: {e}",
            context={**e.context, "exchange_ids": exchange_ids},
        ) from e


def parse_catalog(payload: str) -> List[SymbolCacheEntry]:
    try:
        document = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise CatalogParseError(f"Symbol catalog is not valid JSON: {e}") from e

    if isinstance(document, dict) and "error" in document:
        raise CatalogParseError(f"Symbol catalog request was rejected: {document['error']}", context={"body": document})
    if not isinstance(document, list):
        raise CatalogParseError(
            f"Symbol catalog must be a JSON array, got {type(document).__name__}",
        )

    entries: List[SymbolCacheEntry] = []
    for i, item in enumerate(document):
        if not isinstance(item, dict):
            raise CatalogParseError(f"Catalog entry #{i} is not an object", context={"entry": item})
        entries.append(SymbolCacheEntry.from_dict(item))
    return entries


def build_symbol_table(entries: Iterable[SymbolCacheEntry], codec: IdentifierCodec) -> SymbolTable:
    """Index SPOT entries by canonical symbol.

    Any entry on an unregistered exchange aborts the build (UnknownExchange).
    Duplicate canonical symbols keep the last entry.
    """

    table: Dict[CanonicalSymbol, str] = {}
    for entry in entries:
        if entry.symbol_type != SPOT:
            continue
        if not entry.asset_id_base or not entry.asset_id_quote:
            raise CatalogParseError(
                f"SPOT entry {entry.symbol_id} has no base or quote asset",
                context={"symbol_id": entry.symbol_id},
            )
        market = codec.market_for(entry.exchange_id)
        ticker = codec.compose_ticker(entry.asset_id_base, entry.asset_id_quote, market)
        key = CanonicalSymbol(ticker, SecurityType.CRYPTO, market)
        previous = table.get(key)
        if previous is not None and previous != entry.symbol_id:
            logger.warning("Duplicate symbol %s: %s replaces %s", key, entry.symbol_id, previous)
        table[key] = entry.symbol_id
    return SymbolTable(table)


def file_created_utc(path: Path) -> datetime:
    """Creation time of ``path``: ``st_birthtime`` where the OS has one, else ``st_mtime``.

    ``write_cache_file`` keeps ``st_mtime`` pinned to the first write, so both
    survive cache refreshes.
    """

    st = os.stat(path)
    created = getattr(st, "st_birthtime", None) or st.st_mtime
    return datetime.fromtimestamp(created, tz=timezone.utc)


def write_cache_file(path: Path, payload: str) -> None:
    """Overwrite the cache file, keeping the timestamp of its first write."""

    previous = os.stat(path) if path.exists() else None
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(payload, encoding="utf-8")
    if previous is not None:
        os.utime(path, (previous.st_atime, previous.st_mtime))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SymbolCacheLoader:
    """Loads the provider symbol catalog from the local cache file or the REST API."""

    def __init__(
        self,
        settings: MapperSettings,
        codec: IdentifierCodec,
        *,
        fetch: Optional[Fetcher] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.settings = settings
        self.codec = codec
        self._fetch: Fetcher = fetch or fetch_symbol_catalog
        self._clock = clock or _utcnow

    def use_local_file(self) -> bool:
        """Whether the next load reads the cache file instead of the API.

        The file is used once its creation date is before yesterday (UTC);
        a younger file triggers a fresh download.
        """

        path = self.settings.symbols_file
        if not self.settings.use_local_symbol_list or not path.exists():
            return False
        created: date = file_created_utc(path).date()
        threshold: date = self._clock().astimezone(timezone.utc).date() - timedelta(days=1)
        return created < threshold

    def read_payload(self, exchange_ids: List[str]) -> str:
        path = self.settings.symbols_file
        if self.use_local_file():
            logger.debug("Reading symbol catalog from %s", path)
            try:
                return path.read_text(encoding="utf-8")
            except OSError as e:
                raise CatalogFetchError(f"Could not read symbol cache {path}: {e}", context={"path": str(path)}) from e

        logger.debug("Fetching symbol catalog for %s", ",".join(exchange_ids))
        payload = self._fetch(self.settings, exchange_ids)
        if self.settings.use_local_symbol_list:
            try:
                write_cache_file(path, payload)
            except OSError as e:
                raise CatalogFetchError(f"Could not write symbol cache {path}: {e}", context={"path": str(path)}) from e
        return payload

    def load(self, exchange_ids: Iterable[str]) -> SymbolTable:
        ids = list(exchange_ids)
        started = time.perf_counter()
        payload = self.read_payload(ids)
        entries = parse_catalog(payload)
        table = build_symbol_table(entries, self.codec)
        logger.info(
            "Loaded %d symbols from %d catalog entries for %s in %.2fs",
            len(table),
            len(entries),
            ",".join(ids),
            time.perf_counter() - started,
        )
        return table
