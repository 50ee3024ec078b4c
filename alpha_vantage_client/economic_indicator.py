"""
US economic indicators (``REAL_GDP``, ``TREASURY_YIELD``, ``CPI``, ...).

Options recognised by :class:`EconomicIndicatorOptions`:

``interval``
    ``daily``, ``weekly``, ``monthly``, ``quarterly``, ``semiannual`` or
    ``annual``; which values are accepted depends on the indicator.
``maturity``
    Treasury maturity such as ``3month`` or ``10year``
    (``TREASURY_YIELD`` only, enforced by the API).
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Dict, List, Literal, Optional

from .decode import OptionalDecimal, Record
from .params import require_choice

if TYPE_CHECKING:
    from .api import ApiClient

EconomicInterval = Literal["daily", "weekly", "monthly", "quarterly", "semiannual", "annual"]
ECONOMIC_INTERVALS = ("daily", "weekly", "monthly", "quarterly", "semiannual", "annual")


class EconomicDataPoint(Record):
    date: dt.date
    value: OptionalDecimal


class EconomicIndicator(Record):
    name: str
    interval: str
    unit: str
    data: List[EconomicDataPoint]

    def value_on(self, day: dt.date) -> Optional[EconomicDataPoint]:
        for point in self.data:
            if point.date == day:
                return point
        return None


@dataclass(frozen=True)
class EconomicIndicatorOptions:
    interval: Optional[EconomicInterval] = None
    maturity: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        return {
            "interval": require_choice("interval", self.interval, ECONOMIC_INTERVALS),
            "maturity": self.maturity,
        }


@dataclass(frozen=True)
class EconomicIndicatorBuilder:
    api_client: "ApiClient"
    function: str
    options: EconomicIndicatorOptions = field(default_factory=EconomicIndicatorOptions)

    def with_options(self, options: EconomicIndicatorOptions) -> "EconomicIndicatorBuilder":
        return replace(self, options=options)

    def interval(self, interval: EconomicInterval) -> "EconomicIndicatorBuilder":
        return replace(self, options=replace(self.options, interval=interval))

    def maturity(self, maturity: str) -> "EconomicIndicatorBuilder":
        return replace(self, options=replace(self.options, maturity=maturity))

    def url(self) -> str:
        function = str(self.function or "").strip().upper() or None
        return self.api_client.build_url(function, {}, self.options.to_params())

    async def json(self) -> EconomicIndicator:
        url = self.url()
        return await self.api_client.get_record(url, EconomicIndicator, function=str(self.function).upper())
