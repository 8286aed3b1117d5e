from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from ..core.errors import HTTPError, TimeoutError


DEFAULT_TIMEOUT = 15


def get_text(url: str, *, headers: Optional[Dict[str, str]] = None, params: Optional[Dict[str, Any]] = None, timeout: float = DEFAULT_TIMEOUT) -> str:
    """GET ``url`` and return the raw response body."""

    try:
        r = requests.get(url, headers=headers, params=params, timeout=timeout)
        r.raise_for_status()
        return r.text
    except requests.Timeout as e:
        raise TimeoutError(f"GET {url} timed out after {timeout}s", context={"url": url}) from e
    except requests.RequestException as e:
        status = getattr(getattr(e, "response", None), "status_code", None)
        raise HTTPError(f"GET {url} failed: {e}", context={"url": url, "status": status}) from e
