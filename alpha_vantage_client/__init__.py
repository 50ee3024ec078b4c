"""
Alpha Vantage Client Library
============================

Typed asynchronous bindings for the Alpha Vantage REST API.  The entry
point is :class:`~alpha_vantage_client.api.ApiClient`, which pairs your
API key with an ``httpx.AsyncClient``.  Each endpoint category (quotes,
currency exchange, forex, crypto, stock time series, technical
indicators, earnings, economic indicators, sector performance and
symbol search) is a method on the client returning a request builder;
awaiting ``builder.json()`` issues one GET request and decodes the
response into a read-only pydantic record.

For example::

    import httpx
    from alpha_vantage_client import set_api

    async with httpx.AsyncClient() as http:
        api = set_api("YOUR_API_KEY", http)
        exchange = await api.exchange("USD", "EUR").json()
        print(exchange.rate)

Nothing is cached or retried.  Failures surface as subclasses of
:class:`~alpha_vantage_client.errors.AlphaVantageError` so callers can
tell configuration, transport, decode and vendor errors apart.
"""

from .api import ApiClient, client_from_env, set_api, set_rapid_api  # noqa: F401
from .config import AlphaVantageConfig  # noqa: F401
from .crypto import Crypto, CryptoEntry  # noqa: F401
from .earning import Earning  # noqa: F401
from .economic_indicator import EconomicIndicator, EconomicIndicatorOptions  # noqa: F401
from .errors import (  # noqa: F401
    AlphaVantageApiError,
    AlphaVantageConfigError,
    AlphaVantageConnectionError,
    AlphaVantageDecodeError,
    AlphaVantageEmptyResponseError,
    AlphaVantageError,
    AlphaVantageHTTPStatusError,
    AlphaVantageInvalidSymbolError,
    AlphaVantageNotEnoughEntriesError,
    AlphaVantageSchemaError,
    AlphaVantageThrottleError,
    AlphaVantageTimeoutError,
    AlphaVantageTransportError,
)
from .exchange import Exchange  # noqa: F401
from .forex import Forex, ForexEntry, ForexOptions  # noqa: F401
from .quote import Quote  # noqa: F401
from .search import Search, SearchMatch  # noqa: F401
from .sector import Sector  # noqa: F401
from .stock_time import TimeSeries, TimeSeriesEntry, TimeSeriesOptions  # noqa: F401
from .technical_indicator import TechnicalIndicator, TechnicalIndicatorOptions  # noqa: F401

__all__ = [
    "ApiClient",
    "AlphaVantageConfig",
    "set_api",
    "set_rapid_api",
    "client_from_env",
    "Crypto",
    "CryptoEntry",
    "Earning",
    "EconomicIndicator",
    "EconomicIndicatorOptions",
    "Exchange",
    "Forex",
    "ForexEntry",
    "ForexOptions",
    "Quote",
    "Search",
    "SearchMatch",
    "Sector",
    "TechnicalIndicator",
    "TechnicalIndicatorOptions",
    "TimeSeries",
    "TimeSeriesEntry",
    "TimeSeriesOptions",
    "AlphaVantageError",
    "AlphaVantageConfigError",
    "AlphaVantageTransportError",
    "AlphaVantageConnectionError",
    "AlphaVantageTimeoutError",
    "AlphaVantageHTTPStatusError",
    "AlphaVantageDecodeError",
    "AlphaVantageSchemaError",
    "AlphaVantageEmptyResponseError",
    "AlphaVantageApiError",
    "AlphaVantageThrottleError",
    "AlphaVantageInvalidSymbolError",
    "AlphaVantageNotEnoughEntriesError",
]
