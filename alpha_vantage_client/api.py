"""
Alpha Vantage API client.

:class:`ApiClient` pairs an API key with an ``httpx.AsyncClient`` and
exposes one method per endpoint category.  Each method returns an
immutable request builder; optional parameters are set on the builder
and the terminal ``await builder.json()`` performs exactly one GET and
returns a typed record.

Typical usage looks like this::

    import httpx
    from alpha_vantage_client import set_api

    async with httpx.AsyncClient() as http:
        api = set_api("YOUR_KEY", http)
        rate = (await api.exchange("USD", "EUR").json()).rate
        daily = await api.stock_time("daily", "IBM").output_size("full").json()
        print(daily.latest())

Errors are never retried; inspect the exception type (configuration,
transport, decode or vendor error) to decide what to do.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from .config import RAPID_API_HOST, AlphaVantageConfig, Provider
from .crypto import CryptoBuilder, CryptoFunction
from .custom import CustomBuilder
from .decode import decode_record, parse_json, raise_for_vendor_error
from .earning import EarningBuilder
from .economic_indicator import EconomicIndicatorBuilder
from .errors import (
    AlphaVantageApiError,
    AlphaVantageError,
    AlphaVantageInvalidSymbolError,
)
from .exchange import ExchangeBuilder
from .forex import ForexBuilder, ForexFunction
from .logging_config import log_event
from .params import TechnicalIndicatorInterval
from .quote import QuoteBuilder
from .search import SearchBuilder
from .sector import SectorBuilder
from .stock_time import StockFunction, TimeSeriesBuilder
from .technical_indicator import TechnicalIndicatorBuilder
from .transport import HttpTransport
from .url import build_url

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class ApiClient:
    """Handle combining an API key with a shared HTTP client.

    Instances are immutable after construction; concurrent calls from
    several coroutines may share one instance.

    Parameters
    ----------
    config : AlphaVantageConfig
        API key, provider and base URLs.
    http_client : httpx.AsyncClient, optional
        Client used for every request.  When omitted the instance creates
        its own and closes it in :meth:`aclose`; injected clients are left
        open.
    """

    def __init__(self, config: AlphaVantageConfig, *, http_client: Optional[httpx.AsyncClient] = None) -> None:
        self._config = config
        # trust_env=False keeps httpx from picking up proxy settings (and the
        # optional socksio dependency they may need) from the environment.
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=config.timeout, trust_env=False)
        self._transport = HttpTransport(self._http, api_key=config.api_key or None)
        self._query_url = config.get_query_url()

    @classmethod
    def set_api(cls, api_key: str, http_client: httpx.AsyncClient) -> "ApiClient":
        """Create a client talking to alphavantage.co directly."""
        return cls(AlphaVantageConfig(api_key=api_key), http_client=http_client)

    @classmethod
    def set_rapid_api(cls, api_key: str, http_client: httpx.AsyncClient) -> "ApiClient":
        """Create a client talking to the RapidAPI-hosted Alpha Vantage API."""
        return cls(AlphaVantageConfig(api_key=api_key, provider="rapidapi"), http_client=http_client)

    @classmethod
    def from_config(cls, config: AlphaVantageConfig, *, http_client: Optional[httpx.AsyncClient] = None) -> "ApiClient":
        return cls(config, http_client=http_client)

    @property
    def api_key(self) -> str:
        return self._config.api_key

    @property
    def provider(self) -> Provider:
        return self._config.provider

    @property
    def config(self) -> AlphaVantageConfig:
        return self._config

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool if this client created it."""
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Request plumbing used by the builders
    # ------------------------------------------------------------------
    def build_url(
        self,
        function: Optional[str],
        required: Mapping[str, Any],
        optional: Optional[Mapping[str, Any]] = None,
    ) -> str:
        api_key = self._config.api_key if self._config.provider == "alphavantage" else None
        return build_url(self._query_url, function, required, optional, api_key=api_key)

    def _headers(self) -> Optional[Dict[str, str]]:
        if self._config.provider != "rapidapi":
            return None
        return {"x-rapidapi-host": RAPID_API_HOST, "x-rapidapi-key": self._config.api_key}

    def _log(self, level: int, message: str, **context: Any) -> None:
        log_event(logger, level, message, api_key=self._config.api_key or None, **context)

    async def get_json(self, url: str, *, function: str, symbol: Optional[str] = None) -> Dict[str, Any]:
        """GET ``url`` and return the decoded JSON object.

        Vendor error payloads delivered with ``200 OK`` are raised as
        :class:`AlphaVantageApiError` subclasses.
        """
        self._log(
            logging.DEBUG,
            "Alpha Vantage request started",
            av_event="request_start",
            av_function=function,
            av_symbol=symbol,
            av_provider=self._config.provider,
        )
        started = time.monotonic()
        try:
            text = await self._transport.get_text(url, headers=self._headers())
            payload = parse_json(text)
            raise_for_vendor_error(payload)
        except AlphaVantageError as exc:
            level = logging.ERROR
            if isinstance(exc, AlphaVantageInvalidSymbolError):
                level = logging.INFO
            elif isinstance(exc, AlphaVantageApiError):
                # Throttle notes and other vendor messages.
                level = logging.WARNING
            self._log(
                level,
                "Alpha Vantage request failed",
                av_event="request_failed",
                av_function=function,
                av_symbol=symbol,
                av_error_type=type(exc).__name__,
                av_error_code=exc.code,
                av_error=str(exc),
            )
            raise

        elapsed_ms = (time.monotonic() - started) * 1000.0
        self._log(
            logging.DEBUG,
            "Alpha Vantage request succeeded",
            av_event="request_success",
            av_function=function,
            av_symbol=symbol,
            av_elapsed_ms=round(elapsed_ms, 1),
            av_payload_keys=list(payload.keys())[:10],
        )
        return payload

    async def get_record(
        self,
        url: str,
        model: Type[RecordT],
        *,
        function: str,
        symbol: Optional[str] = None,
        root_key: Optional[str] = None,
    ) -> RecordT:
        payload = await self.get_json(url, function=function, symbol=symbol)
        try:
            return decode_record(model, payload, root_key=root_key)
        except AlphaVantageError as exc:
            self._log(
                logging.ERROR,
                "Alpha Vantage response did not match schema",
                av_event="decode_failed",
                av_function=function,
                av_symbol=symbol,
                av_record=model.__name__,
                av_error_code=exc.code,
                av_error=str(exc),
            )
            raise

    # ------------------------------------------------------------------
    # Endpoint categories
    # ------------------------------------------------------------------
    def crypto(self, function: CryptoFunction, symbol: str, market: str) -> CryptoBuilder:
        """Digital currency time series (``DIGITAL_CURRENCY_*``) for ``symbol`` quoted in ``market``."""
        return CryptoBuilder(self, function, symbol, market)

    def custom(self, function: str) -> CustomBuilder:
        """Builder for any function this library does not wrap explicitly."""
        return CustomBuilder(self, function)

    def earning(self, symbol: str) -> EarningBuilder:
        return EarningBuilder(self, symbol)

    def economic_indicator(self, function: str) -> EconomicIndicatorBuilder:
        """Economic indicator such as ``REAL_GDP``, ``TREASURY_YIELD`` or ``CPI``."""
        return EconomicIndicatorBuilder(self, function)

    def exchange(self, from_currency: str, to_currency: str) -> ExchangeBuilder:
        """Realtime exchange rate between two physical or digital currencies."""
        return ExchangeBuilder(self, from_currency, to_currency)

    def forex(self, function: ForexFunction, from_symbol: str, to_symbol: str) -> ForexBuilder:
        return ForexBuilder(self, function, from_symbol, to_symbol)

    def quote(self, symbol: str) -> QuoteBuilder:
        return QuoteBuilder(self, symbol)

    def search(self, keywords: str) -> SearchBuilder:
        return SearchBuilder(self, keywords)

    def sector(self) -> SectorBuilder:
        return SectorBuilder(self)

    def stock_time(self, function: StockFunction, symbol: str) -> TimeSeriesBuilder:
        return TimeSeriesBuilder(self, function, symbol)

    def technical_indicator(
        self,
        function: str,
        symbol: str,
        interval: TechnicalIndicatorInterval,
    ) -> TechnicalIndicatorBuilder:
        """Technical indicator (``SMA``, ``EMA``, ``MAMA``, ...) for ``symbol``."""
        return TechnicalIndicatorBuilder(self, function, symbol, interval)


def set_api(api_key: str, http_client: httpx.AsyncClient) -> ApiClient:
    """Shortcut for :meth:`ApiClient.set_api`."""
    return ApiClient.set_api(api_key, http_client)


def set_rapid_api(api_key: str, http_client: httpx.AsyncClient) -> ApiClient:
    """Shortcut for :meth:`ApiClient.set_rapid_api`."""
    return ApiClient.set_rapid_api(api_key, http_client)


def client_from_env(*, http_client: Optional[httpx.AsyncClient] = None) -> ApiClient:
    """Build a client from ``ALPHA_VANTAGE_*`` environment variables."""
    config = AlphaVantageConfig.from_env(require_api_key=True)
    return ApiClient.from_config(config, http_client=http_client)
