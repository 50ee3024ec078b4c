"""Latest price and volume for a single ticker (``GLOBAL_QUOTE``)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import Field

from .decode import IndexedRecord, Percent

if TYPE_CHECKING:
    from .api import ApiClient

FUNCTION = "GLOBAL_QUOTE"
ROOT_KEY = "Global Quote"


class Quote(IndexedRecord):
    symbol: str
    open: Decimal
    high: Decimal
    low: Decimal
    price: Decimal
    volume: int
    last_trading_day: date = Field(alias="latest trading day")
    previous_close: Decimal = Field(alias="previous close")
    change: Decimal
    change_percent: Percent = Field(alias="change percent")


@dataclass(frozen=True)
class QuoteBuilder:
    api_client: "ApiClient"
    symbol: str

    def url(self) -> str:
        return self.api_client.build_url(FUNCTION, {"symbol": self.symbol})

    async def json(self) -> Quote:
        return await self.api_client.get_record(
            self.url(), Quote, function=FUNCTION, symbol=self.symbol, root_key=ROOT_KEY
        )
