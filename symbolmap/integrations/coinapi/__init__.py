"""CoinAPI symbol mapper."""

from .mapper import CoinApiSymbolMapper

__all__ = ["CoinApiSymbolMapper"]
