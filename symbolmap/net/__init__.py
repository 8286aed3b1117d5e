"""Networking helpers: rate limiter and HTTP client wrappers."""

from .http import get_text
from .ratelimiter import rate_limited, rate_limited_coinapi

__all__ = ["get_text", "rate_limited", "rate_limited_coinapi"]
