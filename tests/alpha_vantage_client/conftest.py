import httpx
import pytest

from alpha_vantage_client import set_api, set_rapid_api


@pytest.fixture
def make_api():
    """Build an ApiClient backed by ``httpx.MockTransport``.

    Returns ``(api, requests)``; every request the transport sees is
    appended to ``requests``.
    """

    def _make(payload=None, *, status_code=200, text=None, handler=None, api_key="TEST", provider="alphavantage"):
        requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if handler is not None:
                return handler(request)
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=payload)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(_handler))
        if provider == "rapidapi":
            api = set_rapid_api(api_key, http_client)
        else:
            api = set_api(api_key, http_client)
        return api, requests

    return _make
