"""Query URL construction for Alpha Vantage functions."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

import httpx

from .errors import AlphaVantageConfigError


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def filter_none(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``params`` without any ``None`` values."""
    out: Dict[str, Any] = {}
    for k, v in params.items():
        if v is None:
            continue
        out[str(k)] = v
    return out


def build_url(
    query_url: str,
    function: Optional[str],
    required: Mapping[str, Any],
    optional: Optional[Mapping[str, Any]] = None,
    api_key: Optional[str] = None,
) -> str:
    """Compose the full query URL for one Alpha Vantage call.

    Parameters are emitted in a fixed order: ``function``, the required
    parameters, the optional parameters and finally ``apikey``.  The
    key is omitted when ``api_key`` is ``None`` (RapidAPI passes it in a
    header instead).

    Raises
    ------
    AlphaVantageConfigError
        If ``function`` or any required parameter is missing or blank.
        Nothing is sent over the network in that case.
    """
    if function is None or not str(function).strip():
        raise AlphaVantageConfigError("Missing required parameter 'function'.")

    missing = [name for name, value in required.items() if value is None or not _render(value).strip()]
    if missing:
        raise AlphaVantageConfigError(
            f"Missing required parameter(s) for {function}: {', '.join(missing)}.",
            payload={"function": str(function), "missing": missing},
        )

    params: List[Tuple[str, str]] = [("function", str(function).strip())]
    params.extend((name, _render(value)) for name, value in required.items())
    for name, value in filter_none(optional or {}).items():
        if name.lower() == "apikey":
            continue
        params.append((name, _render(value)))
    if api_key is not None:
        params.append(("apikey", str(api_key)))

    return str(httpx.URL(query_url, params=params))
