"""
Digital currency time series (``DIGITAL_CURRENCY_*``).

Prices are quoted in the requested market currency.  Older responses
also carry USD prices (``"1b. open (USD)"``) and a USD market cap;
those fields are decoded when present and left as ``None`` otherwise.
When the market itself is USD the market prices double as USD prices.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Literal, Mapping

from pydantic import Field, model_validator

from .decode import META_DATA_KEY, IndexedRecord, OptionalDecimal, Record, normalize_keys, split_series, strip_index
from .params import resolve_function
from .series import EntrySeriesMixin

if TYPE_CHECKING:
    from .api import ApiClient

CryptoFunction = Literal["daily", "weekly", "monthly"]

FUNCTION_MAP: Dict[str, str] = {
    "daily": "DIGITAL_CURRENCY_DAILY",
    "weekly": "DIGITAL_CURRENCY_WEEKLY",
    "monthly": "DIGITAL_CURRENCY_MONTHLY",
}

_PRICE_FIELDS = ("open", "high", "low", "close")
_LABEL_RE = re.compile(r"^(open|high|low|close|volume|market cap)(?:\s*\(([A-Za-z0-9]+)\))?$", re.IGNORECASE)


class CryptoMetaData(IndexedRecord):
    information: str = Field(alias="Information")
    digital_code: str = Field(alias="Digital Currency Code")
    digital_name: str = Field(alias="Digital Currency Name")
    market_code: str = Field(alias="Market Code")
    market_name: str = Field(alias="Market Name")
    last_refreshed: str = Field(alias="Last Refreshed")
    time_zone: str = Field(alias="Time Zone")


class CryptoEntry(Record):
    time: str
    market_open: Decimal
    market_high: Decimal
    market_low: Decimal
    market_close: Decimal
    usd_open: OptionalDecimal = None
    usd_high: OptionalDecimal = None
    usd_low: OptionalDecimal = None
    usd_close: OptionalDecimal = None
    volume: Decimal
    market_cap: OptionalDecimal = None


def _entry_fields(time: str, values: Mapping[str, Any], market: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {"time": time}
    for raw_key, value in values.items():
        match = _LABEL_RE.match(strip_index(raw_key))
        if match is None:
            raise ValueError(f"Unexpected field {raw_key!r} in crypto entry {time!r}.")
        name = match.group(1).lower()
        currency = (match.group(2) or "").upper()
        if name == "volume":
            out["volume"] = value
        elif name == "market cap":
            out["market_cap"] = value
        elif currency == "USD" and market != "USD":
            out[f"usd_{name}"] = value
        else:
            out[f"market_{name}"] = value
    if market == "USD":
        for name in _PRICE_FIELDS:
            if f"market_{name}" in out:
                out.setdefault(f"usd_{name}", out[f"market_{name}"])
    return out


class Crypto(EntrySeriesMixin, Record):
    meta_data: CryptoMetaData
    entries: List[CryptoEntry]

    @model_validator(mode="before")
    @classmethod
    def _from_vendor(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or META_DATA_KEY not in data:
            return data
        meta, _, series = split_series(data)
        normalized_meta = normalize_keys(meta)
        market = ""
        if isinstance(normalized_meta, Mapping):
            market = str(normalized_meta.get("Market Code") or "").upper()
        entries = []
        for time, values in series.items():
            if not isinstance(values, Mapping):
                raise ValueError(f"Entry {time!r} must be an object.")
            entries.append(_entry_fields(str(time), values, market))
        return {"meta_data": meta, "entries": entries}

    @property
    def information(self) -> str:
        return self.meta_data.information

    @property
    def digital_code(self) -> str:
        return self.meta_data.digital_code

    @property
    def digital_name(self) -> str:
        return self.meta_data.digital_name

    @property
    def market_code(self) -> str:
        return self.meta_data.market_code

    @property
    def market_name(self) -> str:
        return self.meta_data.market_name

    @property
    def last_refreshed(self) -> str:
        return self.meta_data.last_refreshed

    @property
    def time_zone(self) -> str:
        return self.meta_data.time_zone


@dataclass(frozen=True)
class CryptoBuilder:
    api_client: "ApiClient"
    function: CryptoFunction
    symbol: str
    market: str

    def _function_name(self) -> str:
        return resolve_function("crypto", self.function, FUNCTION_MAP)

    def url(self) -> str:
        return self.api_client.build_url(self._function_name(), {"symbol": self.symbol, "market": self.market})

    async def json(self) -> Crypto:
        url = self.url()
        return await self.api_client.get_record(url, Crypto, function=self._function_name(), symbol=self.symbol)
