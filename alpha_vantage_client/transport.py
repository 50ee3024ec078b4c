"""Single-GET HTTP transport over an injected ``httpx.AsyncClient``."""

from __future__ import annotations

import logging
import time
from typing import Mapping, Optional

import httpx

from .errors import AlphaVantageConnectionError, AlphaVantageHTTPStatusError, AlphaVantageTimeoutError
from .logging_config import log_event, redact

logger = logging.getLogger(__name__)


def _snippet(text: str, limit: int = 200) -> str:
    out = (text or "").strip().replace("\n", " ")
    if len(out) > limit:
        out = out[:limit] + "..."
    return out


class HttpTransport:
    """Issue one GET per call and return the body as text.

    The transport never retries.  Timeouts, connection failures and
    non-2xx statuses are mapped to distinct error types so callers can
    decide what to do with each.

    Parameters
    ----------
    http_client : httpx.AsyncClient
        Shared client providing TLS, pooling and timeouts.  The
        transport only reads from it; closing it is the owner's job.
    api_key : str, optional
        Used to scrub the key from log lines and error payloads.
    """

    def __init__(self, http_client: httpx.AsyncClient, *, api_key: Optional[str] = None) -> None:
        self._client = http_client
        self._api_key = api_key

    async def get_text(self, url: str, *, headers: Optional[Mapping[str, str]] = None) -> str:
        safe_url = redact(url, self._api_key)
        started = time.monotonic()
        try:
            response = await self._client.get(url, headers=dict(headers) if headers else None)
        except httpx.TimeoutException as exc:
            log_event(
                logger,
                logging.DEBUG,
                "Alpha Vantage request timed out",
                api_key=self._api_key,
                av_event="transport_timeout",
                av_url=safe_url,
                av_error_type=type(exc).__name__,
            )
            raise AlphaVantageTimeoutError(
                "Timed out waiting for Alpha Vantage.",
                payload={"url": safe_url},
            ) from exc
        except httpx.RequestError as exc:
            log_event(
                logger,
                logging.DEBUG,
                "Alpha Vantage connection failed",
                api_key=self._api_key,
                av_event="transport_error",
                av_url=safe_url,
                av_error_type=type(exc).__name__,
                av_error=str(exc),
            )
            raise AlphaVantageConnectionError(
                f"Request to Alpha Vantage failed: {redact(str(exc), self._api_key)}",
                payload={"url": safe_url},
            ) from exc

        elapsed_ms = (time.monotonic() - started) * 1000.0
        if not response.is_success:
            snippet = redact(_snippet(response.text), self._api_key)
            log_event(
                logger,
                logging.DEBUG,
                "Alpha Vantage returned an HTTP error status",
                api_key=self._api_key,
                av_event="http_status_error",
                av_url=safe_url,
                av_status_code=int(response.status_code),
                av_elapsed_ms=round(elapsed_ms, 1),
            )
            raise AlphaVantageHTTPStatusError(
                f"Alpha Vantage responded with HTTP {response.status_code}.",
                status_code=int(response.status_code),
                payload={"url": safe_url, "snippet": snippet},
            )

        text = response.text
        log_event(
            logger,
            logging.DEBUG,
            "Alpha Vantage response received",
            api_key=self._api_key,
            av_event="http_response",
            av_url=safe_url,
            av_status_code=int(response.status_code),
            av_elapsed_ms=round(elapsed_ms, 1),
            av_response_chars=len(text or ""),
        )
        return text
