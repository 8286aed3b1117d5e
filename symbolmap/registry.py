from __future__ import annotations

from typing import Any, Callable, Dict

from .core.interface import SymbolMapper
from .logging import get_logger


logger = get_logger(__name__)


class MapperRegistry:
    _registry: Dict[str, Callable[..., SymbolMapper]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., SymbolMapper]) -> None:
        cls._registry[name.lower()] = factory
        logger.debug("Registered symbol mapper '%s'", name.lower())

    @classmethod
    def create(cls, name: str, **kwargs: Any) -> SymbolMapper:
        key = name.lower()
        if key not in cls._registry:
            raise ValueError(f"Unknown symbol mapper '{name}'. Registered: {list(cls._registry)}")
        return cls._registry[key](**kwargs)

    @classmethod
    def names(cls) -> list[str]:
        return list(cls._registry)


def register_default_mappers() -> None:
    from .integrations.coinapi.mapper import CoinApiSymbolMapper

    MapperRegistry.register("coinapi", CoinApiSymbolMapper)


register_default_mappers()
