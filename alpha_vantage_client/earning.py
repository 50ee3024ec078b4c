"""Annual and quarterly earnings per share (``EARNINGS``)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, List, Optional

from pydantic import Field

from .decode import OptionalDecimal, Record

if TYPE_CHECKING:
    from .api import ApiClient

FUNCTION = "EARNINGS"


class AnnualEarning(Record):
    fiscal_date_ending: date = Field(alias="fiscalDateEnding")
    reported_eps: OptionalDecimal = Field(alias="reportedEPS")


class QuarterlyEarning(Record):
    fiscal_date_ending: date = Field(alias="fiscalDateEnding")
    reported_date: date = Field(alias="reportedDate")
    reported_eps: OptionalDecimal = Field(alias="reportedEPS")
    estimated_eps: OptionalDecimal = Field(alias="estimatedEPS")
    surprise: OptionalDecimal
    surprise_percentage: OptionalDecimal = Field(alias="surprisePercentage")
    report_time: Optional[str] = Field(default=None, alias="reportTime")


class Earning(Record):
    symbol: str
    annual_earnings: List[AnnualEarning] = Field(alias="annualEarnings")
    quarterly_earnings: List[QuarterlyEarning] = Field(alias="quarterlyEarnings")

    def annual(self, fiscal_date_ending: date) -> Optional[AnnualEarning]:
        for row in self.annual_earnings:
            if row.fiscal_date_ending == fiscal_date_ending:
                return row
        return None

    def quarterly(self, fiscal_date_ending: date) -> Optional[QuarterlyEarning]:
        for row in self.quarterly_earnings:
            if row.fiscal_date_ending == fiscal_date_ending:
                return row
        return None


@dataclass(frozen=True)
class EarningBuilder:
    api_client: "ApiClient"
    symbol: str

    def url(self) -> str:
        return self.api_client.build_url(FUNCTION, {"symbol": self.symbol})

    async def json(self) -> Earning:
        return await self.api_client.get_record(self.url(), Earning, function=FUNCTION, symbol=self.symbol)
