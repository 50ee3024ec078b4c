"""
Technical indicators (``SMA``, ``EMA``, ``RSI``, ``MACD``, ``MAMA``, ...).

Every indicator shares the same envelope::

    {"Meta Data": {"1: Symbol": "IBM", "2: Indicator": "...", ...},
     "Technical Analysis: SMA": {"2024-01-02": {"SMA": "161.1"}, ...}}

The meta data keys differ per indicator, so they are kept as a mapping
with the ordinal prefixes removed.  Values are decoded per timestamp
and per output line (``MACD`` yields ``MACD``, ``MACD_Hist`` and
``MACD_Signal``).

Options recognised by :class:`TechnicalIndicatorOptions`:

``series_type``
    ``open``, ``high``, ``low`` or ``close``.
``time_period``
    Positive number of points in the look-back window.
``month``
    ``YYYY-MM``; only valid with an intraday ``interval``.
``extra_params``
    Indicator-specific parameters forwarded verbatim
    (``fastlimit``, ``slowperiod``, ...).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import model_validator

from .decode import META_DATA_KEY, Record, normalize_keys, split_series
from .errors import AlphaVantageConfigError
from .params import (
    SERIES_TYPES,
    TECHNICAL_INDICATOR_INTERVALS,
    TIME_SERIES_INTERVALS,
    SeriesType,
    TechnicalIndicatorInterval,
    require_choice,
)

if TYPE_CHECKING:
    from .api import ApiClient

_SECTION_PREFIX = "Technical Analysis:"
_RESERVED_PARAMS = {"function", "symbol", "interval", "series_type", "time_period", "month", "apikey"}


class TechnicalIndicator(Record):
    meta_data: Dict[str, Union[str, int, float]]
    indicator: str
    data: Dict[str, Dict[str, Decimal]]

    @model_validator(mode="before")
    @classmethod
    def _from_vendor(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or META_DATA_KEY not in data:
            return data
        meta, section, series = split_series(data)
        if not section.startswith(_SECTION_PREFIX):
            raise ValueError(f"Expected a {_SECTION_PREFIX!r} section, found {section!r}.")
        values: Dict[str, Any] = {}
        for time, point in series.items():
            if not isinstance(point, Mapping):
                raise ValueError(f"Entry {time!r} must be an object.")
            values[str(time)] = dict(point)
        return {
            "meta_data": normalize_keys(meta),
            "indicator": section[len(_SECTION_PREFIX):].strip(),
            "data": values,
        }

    @property
    def symbol(self) -> Optional[str]:
        value = self.meta_data.get("Symbol")
        return None if value is None else str(value)

    def times(self) -> List[str]:
        """Timestamps present in the response, newest first."""
        return sorted(self.data, reverse=True)

    def value(self, time: str, line: Optional[str] = None) -> Optional[Decimal]:
        """Indicator value at ``time``.

        ``line`` selects one output of multi-line indicators; when omitted
        the line named after the indicator is used, or the only line if
        there is just one.
        """
        point = self.data.get(time)
        if not point:
            return None
        if line is not None:
            return point.get(line)
        if self.indicator in point:
            return point[self.indicator]
        if len(point) == 1:
            return next(iter(point.values()))
        return None


@dataclass(frozen=True)
class TechnicalIndicatorOptions:
    series_type: Optional[SeriesType] = None
    time_period: Optional[int] = None
    month: Optional[str] = None
    extra_params: Tuple[Tuple[str, Any], ...] = ()

    def to_params(self, interval: str) -> Dict[str, Any]:
        series_type = require_choice("series_type", self.series_type, SERIES_TYPES)
        time_period = None
        if self.time_period is not None:
            try:
                time_period = int(self.time_period)
            except (TypeError, ValueError) as exc:
                raise AlphaVantageConfigError(
                    f"time_period must be a whole number, got {self.time_period!r}.",
                    payload={"parameter": "time_period", "value": str(self.time_period)},
                ) from exc
            if time_period <= 0:
                raise AlphaVantageConfigError(f"time_period must be positive, got {self.time_period!r}.")
        if self.month is not None and interval not in TIME_SERIES_INTERVALS:
            raise AlphaVantageConfigError(f"month only applies to intraday intervals, not {interval}.")

        params: Dict[str, Any] = {
            "series_type": series_type,
            "time_period": time_period,
            "month": self.month,
        }
        for key, value in self.extra_params:
            if key.lower() in _RESERVED_PARAMS:
                raise AlphaVantageConfigError(f"{key!r} cannot be passed as an extra parameter.")
            params[key] = value
        return params


@dataclass(frozen=True)
class TechnicalIndicatorBuilder:
    api_client: "ApiClient"
    function: str
    symbol: str
    interval: TechnicalIndicatorInterval
    options: TechnicalIndicatorOptions = field(default_factory=TechnicalIndicatorOptions)

    def with_options(self, options: TechnicalIndicatorOptions) -> "TechnicalIndicatorBuilder":
        return replace(self, options=options)

    def series_type(self, series_type: SeriesType) -> "TechnicalIndicatorBuilder":
        return replace(self, options=replace(self.options, series_type=series_type))

    def time_period(self, time_period: int) -> "TechnicalIndicatorBuilder":
        return replace(self, options=replace(self.options, time_period=time_period))

    def month(self, month: str) -> "TechnicalIndicatorBuilder":
        return replace(self, options=replace(self.options, month=month))

    def extra_param(self, key: str, value: Any) -> "TechnicalIndicatorBuilder":
        extra = self.options.extra_params + ((str(key), value),)
        return replace(self, options=replace(self.options, extra_params=extra))

    def url(self) -> str:
        interval = require_choice("interval", self.interval, TECHNICAL_INDICATOR_INTERVALS)
        function = str(self.function or "").strip().upper() or None
        return self.api_client.build_url(
            function,
            {"symbol": self.symbol, "interval": interval},
            self.options.to_params(str(interval)),
        )

    async def json(self) -> TechnicalIndicator:
        url = self.url()
        return await self.api_client.get_record(
            url, TechnicalIndicator, function=str(self.function).upper(), symbol=self.symbol
        )
