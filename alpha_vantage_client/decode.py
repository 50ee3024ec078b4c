"""
Response decoding helpers.

Alpha Vantage answers almost every request with ``200 OK`` and a JSON
object.  Three things can be wrong with that object and each one is
reported with its own exception type:

* the body is not JSON at all (:class:`AlphaVantageDecodeError`);
* the body is a vendor error/throttle payload such as
  ``{"Note": "..."}`` or ``{"Error Message": "..."}``
  (:class:`AlphaVantageApiError` and subclasses);
* the body is JSON but does not match the record schema of the
  endpoint (:class:`AlphaVantageSchemaError`).

Vendor keys carry ordinal prefixes (``"1. Information"``,
``"1a. open (EUR)"``, ``"1: Symbol"``); records strip them with
:func:`strip_index` and then validate against an explicit field list,
so an unknown field fails at decode time instead of being ignored.
"""

from __future__ import annotations

import json
import re
from decimal import Decimal
from typing import Annotated, Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError, model_validator

from .errors import (
    AlphaVantageApiError,
    AlphaVantageDecodeError,
    AlphaVantageEmptyResponseError,
    AlphaVantageError,
    AlphaVantageInvalidSymbolError,
    AlphaVantageSchemaError,
    AlphaVantageThrottleError,
)

RecordT = TypeVar("RecordT", bound=BaseModel)

_INDEX_PREFIX_RE = re.compile(r"^\s*\d+(?:\.\d+)?[a-z]?\s*[.:]\s*", re.IGNORECASE)
_MISSING_PLACEHOLDERS = {"", "none", "null", ".", "-", "n/a"}
META_DATA_KEY = "Meta Data"


def strip_index(key: str) -> str:
    """``"1. Information"`` -> ``"Information"``; keys without a prefix pass through."""
    return _INDEX_PREFIX_RE.sub("", str(key)).strip()


def normalize_keys(data: Any) -> Any:
    if not isinstance(data, Mapping):
        return data
    out: Dict[str, Any] = {}
    for key, value in data.items():
        label = strip_index(key)
        if label in out:
            raise ValueError(f"Duplicate field {label!r} after removing ordinal prefixes.")
        out[label] = value
    return out


def _missing_to_none(value: Any) -> Any:
    if isinstance(value, str) and value.strip().lower() in _MISSING_PLACEHOLDERS:
        return None
    return value


def _strip_percent(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().rstrip("%").strip()
    return value


OptionalDecimal = Annotated[Optional[Decimal], BeforeValidator(_missing_to_none)]
Percent = Annotated[Decimal, BeforeValidator(_strip_percent)]


class Record(BaseModel):
    """Read-only decoded response.  Unknown fields are rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class IndexedRecord(Record):
    """Record whose vendor keys carry ordinal prefixes."""

    @model_validator(mode="before")
    @classmethod
    def _strip_ordinals(cls, data: Any) -> Any:
        return normalize_keys(data)


def split_series(data: Mapping[str, Any]) -> Tuple[Any, str, Mapping[str, Any]]:
    """Split ``{"Meta Data": ..., "<series key>": {...}}`` into its parts."""
    series_keys = [key for key in data if key != META_DATA_KEY]
    if len(series_keys) != 1:
        raise ValueError(f"Expected exactly one data section next to 'Meta Data', found {series_keys!r}.")
    series_key = series_keys[0]
    series = data[series_key]
    if not isinstance(series, Mapping):
        raise ValueError(f"Section {series_key!r} must be an object.")
    return data[META_DATA_KEY], series_key, series


def series_rows(series: Mapping[str, Any]) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for time, values in series.items():
        if not isinstance(values, Mapping):
            raise ValueError(f"Entry {time!r} must be an object.")
        rows.append({"time": str(time), **normalize_keys(values)})
    return rows


def parse_json(text: str) -> Dict[str, Any]:
    """Parse a response body, requiring a JSON object at the top level."""
    try:
        parsed = json.loads(text)
    except (TypeError, ValueError, RecursionError) as exc:
        snippet = (text or "").strip().replace("\n", " ")
        if len(snippet) > 200:
            snippet = snippet[:200] + "..."
        raise AlphaVantageDecodeError(
            "Failed to parse JSON response from Alpha Vantage.",
            payload={"snippet": snippet},
        ) from exc
    if not isinstance(parsed, dict):
        raise AlphaVantageDecodeError(
            f"Expected a JSON object from Alpha Vantage, got {type(parsed).__name__}.",
        )
    return parsed


def classify_payload_error(payload: Mapping[str, Any]) -> Optional[AlphaVantageError]:
    """
    Alpha Vantage often returns HTTP 200 with an error payload.

    Common patterns:
    - {"Note": "..."} (throttle)
    - {"Information": "..."} (throttle / informational)
    - {"Error Message": "..."} (invalid symbol / bad request)
    """
    note = payload.get("Note") or payload.get("Information")
    if isinstance(note, str) and note.strip():
        return AlphaVantageThrottleError(note.strip(), payload=dict(payload))

    error_message = payload.get("Error Message")
    if isinstance(error_message, str) and error_message.strip():
        text = error_message.strip()
        lowered = text.lower()
        if "invalid api call" in lowered or "invalid symbol" in lowered:
            return AlphaVantageInvalidSymbolError(text, payload=dict(payload))
        return AlphaVantageApiError(text, payload=dict(payload))

    return None


def raise_for_vendor_error(payload: Mapping[str, Any]) -> None:
    classified = classify_payload_error(payload)
    if classified is not None:
        raise classified


def decode_record(model: Type[RecordT], payload: Mapping[str, Any], *, root_key: Optional[str] = None) -> RecordT:
    """Validate ``payload`` (or ``payload[root_key]``) into ``model``.

    Raises
    ------
    AlphaVantageEmptyResponseError
        If the payload, or the object under ``root_key``, is empty.  The
        vendor answers unknown symbols on some endpoints this way.
    AlphaVantageSchemaError
        If the payload does not match the record's schema.
    """
    if not payload:
        raise AlphaVantageEmptyResponseError(f"Alpha Vantage returned an empty {model.__name__} response.")

    data: Any = payload
    if root_key is not None:
        if root_key not in payload:
            raise AlphaVantageSchemaError(
                f"{model.__name__} response is missing the {root_key!r} section.",
                payload={"keys": list(payload.keys())[:10]},
            )
        data = payload[root_key]
        if isinstance(data, Mapping) and not data:
            raise AlphaVantageEmptyResponseError(f"Alpha Vantage returned an empty {root_key!r} section.")

    try:
        return model.model_validate(data)
    except ValidationError as exc:
        errors = [
            {"loc": ".".join(str(part) for part in err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
            for err in exc.errors()[:20]
        ]
        raise AlphaVantageSchemaError(
            f"{model.__name__} response does not match the expected schema ({exc.error_count()} error(s)).",
            payload={"errors": errors},
        ) from exc
