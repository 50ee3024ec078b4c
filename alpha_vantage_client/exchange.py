"""Realtime exchange rate between two currencies (``CURRENCY_EXCHANGE_RATE``).

Works for physical currencies (``USD``) and digital ones (``BTC``).
Only the rate itself is required; the descriptive fields, bid and ask
are decoded when the vendor includes them.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from pydantic import Field

from .decode import IndexedRecord, OptionalDecimal

if TYPE_CHECKING:
    from .api import ApiClient

FUNCTION = "CURRENCY_EXCHANGE_RATE"
ROOT_KEY = "Realtime Currency Exchange Rate"


class Exchange(IndexedRecord):
    rate: Decimal = Field(alias="Exchange Rate")
    code_from: Optional[str] = Field(default=None, alias="From_Currency Code")
    name_from: Optional[str] = Field(default=None, alias="From_Currency Name")
    code_to: Optional[str] = Field(default=None, alias="To_Currency Code")
    name_to: Optional[str] = Field(default=None, alias="To_Currency Name")
    last_refreshed: Optional[str] = Field(default=None, alias="Last Refreshed")
    time_zone: Optional[str] = Field(default=None, alias="Time Zone")
    bid_price: OptionalDecimal = Field(default=None, alias="Bid Price")
    ask_price: OptionalDecimal = Field(default=None, alias="Ask Price")


@dataclass(frozen=True)
class ExchangeBuilder:
    api_client: "ApiClient"
    from_currency: str
    to_currency: str

    def url(self) -> str:
        return self.api_client.build_url(
            FUNCTION,
            {"from_currency": self.from_currency, "to_currency": self.to_currency},
        )

    async def json(self) -> Exchange:
        return await self.api_client.get_record(
            self.url(), Exchange, function=FUNCTION, symbol=self.from_currency, root_key=ROOT_KEY
        )
