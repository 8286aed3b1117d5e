from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from .enums import OptionRight, SecurityType
from .schemas import CanonicalSymbol


class SymbolMapper(ABC):
    """Translates between canonical symbols and a provider's symbol ids.

    This is the whole surface order-routing and data-subscription components
    depend on; they never see the symbol table or the catalog loader.
    """

    @abstractmethod
    def to_provider_symbol(self, symbol: CanonicalSymbol) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    @abstractmethod
    def to_canonical_symbol(
        self,
        provider_symbol: str,
        security_type: SecurityType,
        market: str,
        expiration: Optional[datetime] = None,
        strike: float = 0.0,
        option_right: OptionRight = OptionRight.CALL,
    ) -> CanonicalSymbol:  # pragma: no cover - abstract
        raise NotImplementedError

    def exchange_id_for(self, market: str) -> Optional[str]:  # Optional
        return None
