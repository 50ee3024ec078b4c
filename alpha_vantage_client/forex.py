"""
Foreign exchange time series (``FX_*``).

Options recognised by :class:`ForexOptions`:

``interval``
    ``1min`` .. ``60min``; required for ``intraday``, rejected otherwise.
``output_size``
    ``compact`` or ``full``; only ``intraday`` and ``daily``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Literal, Mapping, Optional

from pydantic import Field, model_validator

from .decode import META_DATA_KEY, IndexedRecord, Record, series_rows, split_series
from .errors import AlphaVantageConfigError
from .params import OUTPUT_SIZES, TIME_SERIES_INTERVALS, OutputSize, TimeSeriesInterval, require_choice, resolve_function
from .series import EntrySeriesMixin

if TYPE_CHECKING:
    from .api import ApiClient

ForexFunction = Literal["intraday", "daily", "weekly", "monthly"]

FUNCTION_MAP: Dict[str, str] = {
    "intraday": "FX_INTRADAY",
    "daily": "FX_DAILY",
    "weekly": "FX_WEEKLY",
    "monthly": "FX_MONTHLY",
}


class ForexMetaData(IndexedRecord):
    information: str = Field(alias="Information")
    from_symbol: str = Field(alias="From Symbol")
    to_symbol: str = Field(alias="To Symbol")
    last_refreshed: str = Field(alias="Last Refreshed")
    interval: Optional[str] = Field(default=None, alias="Interval")
    output_size: Optional[str] = Field(default=None, alias="Output Size")
    time_zone: str = Field(alias="Time Zone")


class ForexEntry(Record):
    time: str
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal


class Forex(EntrySeriesMixin, Record):
    meta_data: ForexMetaData
    entries: List[ForexEntry]

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
    def symbol_from(self) -> str:
        return self.meta_data.from_symbol

    @property
    def symbol_to(self) -> str:
        return self.meta_data.to_symbol

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
class ForexOptions:
    interval: Optional[TimeSeriesInterval] = None
    output_size: Optional[OutputSize] = None

    def to_params(self, function: str) -> Dict[str, Any]:
        interval = require_choice("interval", self.interval, TIME_SERIES_INTERVALS)
        output_size = require_choice("output_size", self.output_size, OUTPUT_SIZES)
        if function == "intraday" and interval is None:
            raise AlphaVantageConfigError("interval is required for intraday forex series.")
        if function != "intraday" and interval is not None:
            raise AlphaVantageConfigError(f"interval only applies to intraday forex series, not {function}.")
        if output_size is not None and function not in {"intraday", "daily"}:
            raise AlphaVantageConfigError(f"output_size does not apply to {function} forex series.")
        return {"interval": interval, "outputsize": output_size}


@dataclass(frozen=True)
class ForexBuilder:
    api_client: "ApiClient"
    function: ForexFunction
    from_symbol: str
    to_symbol: str
    options: ForexOptions = field(default_factory=ForexOptions)

    def with_options(self, options: ForexOptions) -> "ForexBuilder":
        return replace(self, options=options)

    def interval(self, interval: TimeSeriesInterval) -> "ForexBuilder":
        return replace(self, options=replace(self.options, interval=interval))

    def output_size(self, output_size: OutputSize) -> "ForexBuilder":
        return replace(self, options=replace(self.options, output_size=output_size))

    def _function_name(self) -> str:
        return resolve_function("forex", self.function, FUNCTION_MAP)

    def url(self) -> str:
        function_name = self._function_name()
        optional = self.options.to_params(str(self.function).strip().lower())
        return self.api_client.build_url(
            function_name,
            {"from_symbol": self.from_symbol, "to_symbol": self.to_symbol},
            optional,
        )

    async def json(self) -> Forex:
        url = self.url()
        return await self.api_client.get_record(url, Forex, function=self._function_name(), symbol=self.from_symbol)
