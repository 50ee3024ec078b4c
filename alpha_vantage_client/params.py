"""Recognised parameter values shared by the endpoint builders."""

from __future__ import annotations

from typing import Iterable, Literal, Mapping, Optional, TypeVar

from .errors import AlphaVantageConfigError

T = TypeVar("T")

OutputSize = Literal["compact", "full"]
TimeSeriesInterval = Literal["1min", "5min", "15min", "30min", "60min"]
TechnicalIndicatorInterval = Literal["1min", "5min", "15min", "30min", "60min", "daily", "weekly", "monthly"]
SeriesType = Literal["open", "high", "low", "close"]

OUTPUT_SIZES = ("compact", "full")
TIME_SERIES_INTERVALS = ("1min", "5min", "15min", "30min", "60min")
TECHNICAL_INDICATOR_INTERVALS = TIME_SERIES_INTERVALS + ("daily", "weekly", "monthly")
SERIES_TYPES = ("open", "high", "low", "close")


def require_choice(name: str, value: Optional[str], choices: Iterable[str]) -> Optional[str]:
    """Return ``value`` if it is one of ``choices`` (or ``None``)."""
    if value is None:
        return None
    allowed = tuple(choices)
    normalized = str(value).strip().lower()
    if normalized not in allowed:
        raise AlphaVantageConfigError(
            f"Invalid {name} {value!r}; expected one of: {', '.join(allowed)}.",
            payload={"parameter": name, "value": str(value)},
        )
    return normalized


def resolve_function(kind: str, value: str, function_map: Mapping[str, T]) -> T:
    """Map a friendly function selector (``"daily"``) to its vendor name."""
    key = require_choice(f"{kind} function", value, function_map.keys())
    if key is None:
        raise AlphaVantageConfigError(f"Missing required {kind} function.")
    return function_map[key]
