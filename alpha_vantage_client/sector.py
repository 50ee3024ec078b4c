"""Realtime and historical US sector performance (``SECTOR``)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from pydantic import Field, model_validator

from .decode import META_DATA_KEY, Percent, Record

if TYPE_CHECKING:
    from .api import ApiClient

FUNCTION = "SECTOR"

_RANK_RE = re.compile(r"^Rank\s+([A-Z]+)\s*:\s*(.+)$")


class SectorMetaData(Record):
    information: str = Field(alias="Information")
    last_refreshed: str = Field(alias="Last Refreshed")


class Sector(Record):
    meta_data: SectorMetaData
    # "Real-Time Performance" -> {"Energy": Decimal("1.07"), ...}; values are percentages.
    performance: Dict[str, Dict[str, Percent]]

    @model_validator(mode="before")
    @classmethod
    def _from_vendor(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or META_DATA_KEY not in data:
            return data
        performance: Dict[str, Any] = {}
        for key, value in data.items():
            if key == META_DATA_KEY:
                continue
            match = _RANK_RE.match(str(key))
            if match is None:
                raise ValueError(f"Unexpected section {key!r} in sector response.")
            performance[match.group(2).strip()] = value
        return {"meta_data": data[META_DATA_KEY], "performance": performance}

    @property
    def information(self) -> str:
        return self.meta_data.information

    @property
    def last_refreshed(self) -> str:
        return self.meta_data.last_refreshed

    def periods(self) -> List[str]:
        return list(self.performance)

    def sector_performance(self, period: str, sector: str) -> Optional[Decimal]:
        """Percentage change of ``sector`` over ``period`` (e.g. ``"1 Year Performance"``)."""
        return self.performance.get(period, {}).get(sector)


@dataclass(frozen=True)
class SectorBuilder:
    api_client: "ApiClient"

    def url(self) -> str:
        return self.api_client.build_url(FUNCTION, {})

    async def json(self) -> Sector:
        return await self.api_client.get_record(self.url(), Sector, function=FUNCTION)
