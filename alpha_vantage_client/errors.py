from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class AlphaVantageError(Exception):
    """
    Base exception type for Alpha Vantage client failures.

    `payload` should contain a redacted, non-secret-bearing representation of the
    error body when available. Never include API keys in this payload.
    """

    message: str
    code: str = "alpha_vantage_error"
    payload: Optional[Mapping[str, Any]] = None
    status_code: Optional[int] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class AlphaVantageConfigError(AlphaVantageError):
    """Raised before any request when a required parameter is missing or invalid."""

    def __init__(self, message: str, *, payload: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(message=message, code="config", payload=payload)


class AlphaVantageTransportError(AlphaVantageError):
    """The request never produced a usable HTTP response."""


class AlphaVantageConnectionError(AlphaVantageTransportError):
    def __init__(self, message: str, *, payload: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(message=message, code="connection", payload=payload)


class AlphaVantageTimeoutError(AlphaVantageTransportError):
    def __init__(self, message: str, *, payload: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(message=message, code="timeout", payload=payload)


class AlphaVantageHTTPStatusError(AlphaVantageTransportError):
    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        payload: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, code="http_status", payload=payload, status_code=status_code)


class AlphaVantageDecodeError(AlphaVantageError):
    """Raised when the response body is not valid JSON."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "invalid_json",
        payload: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, code=code, payload=payload)


class AlphaVantageSchemaError(AlphaVantageDecodeError):
    """Raised when valid JSON does not match the endpoint's record schema."""

    def __init__(self, message: str, *, payload: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(message, code="schema_mismatch", payload=payload)


class AlphaVantageEmptyResponseError(AlphaVantageDecodeError):
    def __init__(self, message: str, *, payload: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(message, code="empty_response", payload=payload)


class AlphaVantageApiError(AlphaVantageError):
    """An error reported by Alpha Vantage inside a 200 response body."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "api_error",
        payload: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, code=code, payload=payload)


class AlphaVantageThrottleError(AlphaVantageApiError):
    def __init__(self, message: str, *, payload: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(message, code="throttle", payload=payload)


class AlphaVantageInvalidSymbolError(AlphaVantageApiError):
    def __init__(self, message: str, *, payload: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(message, code="invalid_symbol", payload=payload)


class AlphaVantageNotEnoughEntriesError(AlphaVantageError):
    """Raised by ``latest_n`` when fewer entries exist than were requested."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            message=f"Requested {requested} entries but only {available} are present.",
            code="not_enough_entries",
            payload={"requested": requested, "available": available},
        )
