from __future__ import annotations

from enum import Enum


class SecurityType(str, Enum):
    EQUITY = "equity"
    FOREX = "forex"
    CRYPTO = "crypto"
    FUTURE = "future"
    OPTION = "option"
    CFD = "cfd"


class OptionRight(str, Enum):
    CALL = "call"
    PUT = "put"


class Market:
    GDAX = "gdax"  # Coinbase Pro
    BITFINEX = "bitfinex"
