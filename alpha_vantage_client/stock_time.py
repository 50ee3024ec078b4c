"""
Stock time series (``TIME_SERIES_*``).

Daily, weekly and monthly series come in a raw and a split/dividend
adjusted flavour; intraday series need an ``interval`` and accept a few
intraday-only switches.  All of these are collected in
:class:`TimeSeriesOptions` so that every recognised option, and the
functions it applies to, is listed in one place:

``interval``
    ``1min`` .. ``60min``; required for ``intraday``, rejected otherwise.
``output_size``
    ``compact`` (latest 100 points) or ``full`` (entire history); only
    ``intraday``, ``daily`` and ``daily_adjusted``.
``adjusted``
    Intraday only: split/dividend adjust the intraday bars.
``extended_hours``
    Intraday only: include pre- and post-market bars.
``month``
    Intraday only: ``YYYY-MM`` month to fetch instead of the latest.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Literal, Mapping, Optional

from pydantic import Field, model_validator

from .decode import META_DATA_KEY, IndexedRecord, OptionalDecimal, Record, series_rows, split_series
from .errors import AlphaVantageConfigError
from .params import OUTPUT_SIZES, TIME_SERIES_INTERVALS, OutputSize, TimeSeriesInterval, require_choice, resolve_function
from .series import EntrySeriesMixin

if TYPE_CHECKING:
    from .api import ApiClient

StockFunction = Literal[
    "intraday",
    "daily",
    "daily_adjusted",
    "weekly",
    "weekly_adjusted",
    "monthly",
    "monthly_adjusted",
]

FUNCTION_MAP: Dict[str, str] = {
    "intraday": "TIME_SERIES_INTRADAY",
    "daily": "TIME_SERIES_DAILY",
    "daily_adjusted": "TIME_SERIES_DAILY_ADJUSTED",
    "weekly": "TIME_SERIES_WEEKLY",
    "weekly_adjusted": "TIME_SERIES_WEEKLY_ADJUSTED",
    "monthly": "TIME_SERIES_MONTHLY",
    "monthly_adjusted": "TIME_SERIES_MONTHLY_ADJUSTED",
}
_OUTPUT_SIZE_FUNCTIONS = {"intraday", "daily", "daily_adjusted"}


class TimeSeriesMetaData(IndexedRecord):
    information: str = Field(alias="Information")
    symbol: str = Field(alias="Symbol")
    last_refreshed: str = Field(alias="Last Refreshed")
    interval: Optional[str] = Field(default=None, alias="Interval")
    output_size: Optional[str] = Field(default=None, alias="Output Size")
    time_zone: str = Field(alias="Time Zone")


class TimeSeriesEntry(Record):
    time: str
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: int
    adjusted_close: OptionalDecimal = Field(default=None, alias="adjusted close")
    dividend_amount: OptionalDecimal = Field(default=None, alias="dividend amount")
    split_coefficient: OptionalDecimal = Field(default=None, alias="split coefficient")


class TimeSeries(EntrySeriesMixin, Record):
    meta_data: TimeSeriesMetaData
    entries: List[TimeSeriesEntry]

    @model_validator(mode="before")
    @classmethod
    def _from_vendor(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or META_DATA_KEY not in data:
            return data
        meta, _, series = split_series(data)
        return {"meta_data": meta, "entries": series_rows(series)}

    @property
    def information(self) -> str:
        return self.meta_data.information

    @property
    def symbol(self) -> str:
        return self.meta_data.symbol

    @property
    def last_refreshed(self) -> str:
        return self.meta_data.last_refreshed

    @property
    def interval(self) -> Optional[str]:
        return self.meta_data.interval

    @property
    def output_size(self) -> Optional[str]:
        return self.meta_data.output_size

    @property
    def time_zone(self) -> str:
        return self.meta_data.time_zone


@dataclass(frozen=True)
class TimeSeriesOptions:
    interval: Optional[TimeSeriesInterval] = None
    output_size: Optional[OutputSize] = None
    adjusted: Optional[bool] = None
    extended_hours: Optional[bool] = None
    month: Optional[str] = None

    def to_params(self, function: str) -> Dict[str, Any]:
        """Validate the options against ``function`` and return query parameters."""
        interval = require_choice("interval", self.interval, TIME_SERIES_INTERVALS)
        output_size = require_choice("output_size", self.output_size, OUTPUT_SIZES)

        if function == "intraday":
            if interval is None:
                raise AlphaVantageConfigError("interval is required for intraday time series.")
        else:
            intraday_only = {
                "interval": interval,
                "adjusted": self.adjusted,
                "extended_hours": self.extended_hours,
                "month": self.month,
            }
            invalid = [name for name, value in intraday_only.items() if value is not None]
            if invalid:
                raise AlphaVantageConfigError(
                    f"{', '.join(invalid)} only apply to intraday time series, not {function}.",
                    payload={"function": function, "invalid": invalid},
                )
        if output_size is not None and function not in _OUTPUT_SIZE_FUNCTIONS:
            raise AlphaVantageConfigError(f"output_size does not apply to {function} time series.")

        return {
            "interval": interval,
            "outputsize": output_size,
            "adjusted": self.adjusted,
            "extended_hours": self.extended_hours,
            "month": self.month,
        }


@dataclass(frozen=True)
class TimeSeriesBuilder:
    api_client: "ApiClient"
    function: StockFunction
    symbol: str
    options: TimeSeriesOptions = field(default_factory=TimeSeriesOptions)

    def with_options(self, options: TimeSeriesOptions) -> "TimeSeriesBuilder":
        return replace(self, options=options)

    def interval(self, interval: TimeSeriesInterval) -> "TimeSeriesBuilder":
        return replace(self, options=replace(self.options, interval=interval))

    def output_size(self, output_size: OutputSize) -> "TimeSeriesBuilder":
        return replace(self, options=replace(self.options, output_size=output_size))

    def adjusted(self, adjusted: bool) -> "TimeSeriesBuilder":
        return replace(self, options=replace(self.options, adjusted=adjusted))

    def extended_hours(self, extended_hours: bool) -> "TimeSeriesBuilder":
        return replace(self, options=replace(self.options, extended_hours=extended_hours))

    def month(self, month: str) -> "TimeSeriesBuilder":
        return replace(self, options=replace(self.options, month=month))

    def _function_name(self) -> str:
        return resolve_function("stock time series", self.function, FUNCTION_MAP)

    def url(self) -> str:
        function_name = self._function_name()
        optional = self.options.to_params(str(self.function).strip().lower())
        return self.api_client.build_url(function_name, {"symbol": self.symbol}, optional)

    async def json(self) -> TimeSeries:
        url = self.url()
        return await self.api_client.get_record(url, TimeSeries, function=self._function_name(), symbol=self.symbol)
