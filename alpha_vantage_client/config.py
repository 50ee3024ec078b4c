"""
Alpha Vantage configuration support.

This module defines the :class:`AlphaVantageConfig` dataclass which
encapsulates the parameters needed to reach the Alpha Vantage API:
the API key, which provider fronts the API (alphavantage.co directly
or the RapidAPI marketplace), the base URLs of both and the request
timeout used when the client creates its own HTTP connection pool.

Example
-------

    >>> from alpha_vantage_client.config import AlphaVantageConfig
    >>> cfg = AlphaVantageConfig(api_key="demo")
    >>> cfg.get_query_url()
    'https://www.alphavantage.co/query'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Optional

from .errors import AlphaVantageConfigError

Provider = Literal["alphavantage", "rapidapi"]

DEFAULT_BASE_URL = "https://www.alphavantage.co"
DEFAULT_RAPID_API_BASE_URL = "https://alpha-vantage.p.rapidapi.com"
RAPID_API_HOST = "alpha-vantage.p.rapidapi.com"
_PROVIDERS = ("alphavantage", "rapidapi")


def _strip_or_none(value: object) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _env_float(name: str, default: float) -> float:
    raw = _strip_or_none(os.environ.get(name))
    if raw is None:
        return float(default)
    try:
        return float(raw)
    except ValueError:
        return float(default)


@dataclass(frozen=True)
class AlphaVantageConfig:
    """Configuration container for the Alpha Vantage client.

    Attributes
    ----------
    api_key:
        The API key issued by Alpha Vantage (or RapidAPI when
        ``provider`` is ``"rapidapi"``).  The key is sent with every
        request; it is validated by the remote API, not locally.

    provider:
        ``"alphavantage"`` appends the key as the ``apikey`` query
        parameter; ``"rapidapi"`` sends it in the ``x-rapidapi-key``
        header instead.

    base_url:
        Base URL of the Alpha Vantage service.  Override it when you
        run a proxy or mirror.

    rapid_api_base_url:
        Base URL used when ``provider`` is ``"rapidapi"``.

    timeout:
        Timeout in seconds for the HTTP client the library creates when
        none is injected.  Injected clients keep their own timeouts.
    """

    api_key: str
    provider: Provider = "alphavantage"
    base_url: str = DEFAULT_BASE_URL
    rapid_api_base_url: str = DEFAULT_RAPID_API_BASE_URL
    timeout: float = 10.0

    def get_query_url(self) -> str:
        """Return the full query endpoint for the selected provider.

        Both providers expose a single ``/query`` endpoint; every
        function and parameter is passed on the query string.
        """
        base = self.rapid_api_base_url if self.provider == "rapidapi" else self.base_url
        return f"{base.rstrip('/')}/query"

    @staticmethod
    def from_env(*, require_api_key: bool = True) -> "AlphaVantageConfig":
        api_key = _strip_or_none(os.environ.get("ALPHA_VANTAGE_API_KEY"))
        if require_api_key and not api_key:
            raise AlphaVantageConfigError("ALPHA_VANTAGE_API_KEY is required.")

        provider = (_strip_or_none(os.environ.get("ALPHA_VANTAGE_PROVIDER")) or "alphavantage").lower()
        if provider not in _PROVIDERS:
            raise AlphaVantageConfigError(
                f"ALPHA_VANTAGE_PROVIDER must be one of {', '.join(_PROVIDERS)}; got {provider!r}."
            )

        base_url = _strip_or_none(os.environ.get("ALPHA_VANTAGE_BASE_URL")) or DEFAULT_BASE_URL
        timeout = _env_float("ALPHA_VANTAGE_TIMEOUT_SECONDS", 10.0)

        # When require_api_key=False the key may be absent; the API rejects it later.
        return AlphaVantageConfig(
            api_key=str(api_key or ""),
            provider=provider,  # type: ignore[arg-type]
            base_url=str(base_url),
            timeout=float(timeout),
        )
