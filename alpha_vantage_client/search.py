"""Ticker search by keywords (``SYMBOL_SEARCH``)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from pydantic import Field

from .decode import IndexedRecord, Record

if TYPE_CHECKING:
    from .api import ApiClient

FUNCTION = "SYMBOL_SEARCH"


class SearchMatch(IndexedRecord):
    symbol: str
    name: str
    stock_type: str = Field(alias="type")
    region: str
    market_open: str = Field(alias="marketOpen")
    market_close: str = Field(alias="marketClose")
    time_zone: str = Field(alias="timezone")
    currency: str
    match_score: Decimal = Field(alias="matchScore")


class Search(Record):
    matches: List[SearchMatch] = Field(alias="bestMatches")

    def best(self) -> Optional[SearchMatch]:
        if not self.matches:
            return None
        return max(self.matches, key=lambda match: match.match_score)


@dataclass(frozen=True)
class SearchBuilder:
    api_client: "ApiClient"
    keywords: str

    def url(self) -> str:
        return self.api_client.build_url(FUNCTION, {"keywords": self.keywords})

    async def json(self) -> Search:
        return await self.api_client.get_record(self.url(), Search, function=FUNCTION, symbol=self.keywords)
