from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple, TypeVar, cast

from ratelimit import limits, sleep_and_retry


F = TypeVar("F", bound=Callable[..., Any])


def rate_limited(
    *,
    calls_per_second: Optional[int] = None,
    calls_per_minute: Optional[int] = None,
    calls_per_day: Optional[int] = None,
) -> Callable[[F], F]:
    """Stack one ratelimit window per given limit.

    A call over any window sleeps until that window resets (no error raised).
    """

    windows: List[Tuple[int, int]] = [
        (calls, period)
        for calls, period in ((calls_per_second, 1), (calls_per_minute, 60), (calls_per_day, 86400))
        if calls is not None
    ]

    def decorator(func: F) -> F:
        wrapped: Callable[..., Any] = func
        for calls, period in windows:
            wrapped = sleep_and_retry(limits(calls=calls, period=period))(wrapped)
        return cast(F, wrapped)

    return decorator


def rate_limited_coinapi() -> Callable[[F], F]:
    """Preconfigured rate limiter for CoinAPI REST calls."""

    return rate_limited(calls_per_second=10, calls_per_day=100000)
