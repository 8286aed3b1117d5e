from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .core.errors import ValidationError


DEFAULT_REST_URL = "https://rest.coinapi.io"
DEFAULT_SYMBOLS_FILE = "CoinApiSymbols.json"
DEFAULT_TIMEOUT = 15.0


def getenv(key: str, default: Optional[str] = None, *aliases: str) -> Optional[str]:
    """Return first non-empty env var among key and aliases."""

    for k in (key, *aliases):
        v = os.getenv(k)
        if v not in (None, ""):
            return v
    return default


def getenv_bool(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v is None:
        return default
    return str(v).strip().lower() in {"1", "true", "yes", "on"}


def getenv_float(key: str, default: float) -> float:
    v = getenv(key)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError:
        raise ValidationError(f"{key} must be a number, got {v!r}", context={"key": key}) from None


@dataclass(frozen=True)
class MapperSettings:
    """Settings consumed by the CoinAPI symbol mapper."""

    api_key: str = ""
    use_local_symbol_list: bool = False
    symbols_file: Path = Path(DEFAULT_SYMBOLS_FILE)
    rest_url: str = DEFAULT_REST_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbols_file", Path(self.symbols_file))
        object.__setattr__(self, "rest_url", self.rest_url.rstrip("/"))
        if self.timeout <= 0:
            raise ValidationError("timeout must be positive", context={"timeout": self.timeout})

    @classmethod
    def from_env(cls) -> "MapperSettings":
        return cls(
            api_key=getenv("COINAPI_API_KEY", "", "COINAPI_KEY") or "",
            use_local_symbol_list=getenv_bool("COINAPI_USE_LOCAL_SYMBOL_LIST", False),
            symbols_file=Path(getenv("COINAPI_SYMBOLS_FILE", DEFAULT_SYMBOLS_FILE) or DEFAULT_SYMBOLS_FILE),
            rest_url=getenv("COINAPI_REST_URL", DEFAULT_REST_URL) or DEFAULT_REST_URL,
            timeout=getenv_float("COINAPI_TIMEOUT", DEFAULT_TIMEOUT),
        )

    def __repr__(self) -> str:
        # api_key is a secret
        return (
            f"MapperSettings(api_key={'***' if self.api_key else ''!r}, "
            f"use_local_symbol_list={self.use_local_symbol_list}, symbols_file={str(self.symbols_file)!r}, "
            f"rest_url={self.rest_url!r}, timeout={self.timeout})"
        )
