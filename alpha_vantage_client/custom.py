"""Escape hatch for Alpha Vantage functions without a dedicated builder."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple, Type, TypeVar, Union, overload

from pydantic import BaseModel

from .decode import decode_record
from .errors import AlphaVantageConfigError

if TYPE_CHECKING:
    from .api import ApiClient

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class CustomBuilder:
    """Call any function by name.

    Without a model ``json()`` returns the decoded JSON object (vendor
    error payloads are still raised).  Pass a pydantic model to get the
    same strict validation the built-in records use.
    """

    api_client: "ApiClient"
    function: str
    extra_params: Tuple[Tuple[str, Any], ...] = ()

    def extra_param(self, key: str, value: Any) -> "CustomBuilder":
        if str(key).lower() in {"function", "apikey"}:
            raise AlphaVantageConfigError(f"{key!r} cannot be passed as an extra parameter.")
        return replace(self, extra_params=self.extra_params + ((str(key), value),))

    def url(self) -> str:
        function = str(self.function or "").strip().upper() or None
        return self.api_client.build_url(function, {}, dict(self.extra_params))

    @overload
    async def json(self) -> Dict[str, Any]: ...

    @overload
    async def json(self, model: Type[ModelT]) -> ModelT: ...

    async def json(self, model: Optional[Type[ModelT]] = None) -> Union[Dict[str, Any], ModelT]:
        url = self.url()
        params = dict(self.extra_params)
        symbol = params.get("symbol")
        payload = await self.api_client.get_json(
            url, function=str(self.function).upper(), symbol=str(symbol) if symbol is not None else None
        )
        if model is None:
            return payload
        return decode_record(model, payload)
