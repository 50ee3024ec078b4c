import httpx
import pytest

from alpha_vantage_client import AlphaVantageConfig, AlphaVantageConfigError, client_from_env


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "ALPHA_VANTAGE_API_KEY",
        "ALPHA_VANTAGE_PROVIDER",
        "ALPHA_VANTAGE_BASE_URL",
        "ALPHA_VANTAGE_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_query_url_per_provider():
    assert AlphaVantageConfig(api_key="k").get_query_url() == "https://www.alphavantage.co/query"
    assert (
        AlphaVantageConfig(api_key="k", provider="rapidapi").get_query_url()
        == "https://alpha-vantage.p.rapidapi.com/query"
    )
    assert AlphaVantageConfig(api_key="k", base_url="http://proxy.local/").get_query_url() == "http://proxy.local/query"


def test_from_env_defaults(monkeypatch):
    monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", " abc ")

    cfg = AlphaVantageConfig.from_env()

    assert cfg.api_key == "abc"
    assert cfg.provider == "alphavantage"
    assert cfg.timeout == 10.0


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", "abc")
    monkeypatch.setenv("ALPHA_VANTAGE_PROVIDER", "RapidAPI")
    monkeypatch.setenv("ALPHA_VANTAGE_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("ALPHA_VANTAGE_BASE_URL", "http://mirror.local")

    cfg = AlphaVantageConfig.from_env()

    assert cfg.provider == "rapidapi"
    assert cfg.timeout == 2.5
    assert cfg.base_url == "http://mirror.local"


def test_from_env_ignores_bad_timeout(monkeypatch):
    monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", "abc")
    monkeypatch.setenv("ALPHA_VANTAGE_TIMEOUT_SECONDS", "soon")

    assert AlphaVantageConfig.from_env().timeout == 10.0


def test_from_env_requires_key():
    with pytest.raises(AlphaVantageConfigError):
        AlphaVantageConfig.from_env()

    assert AlphaVantageConfig.from_env(require_api_key=False).api_key == ""


def test_from_env_rejects_unknown_provider(monkeypatch):
    monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", "abc")
    monkeypatch.setenv("ALPHA_VANTAGE_PROVIDER", "yahoo")

    with pytest.raises(AlphaVantageConfigError):
        AlphaVantageConfig.from_env()


@pytest.mark.asyncio
async def test_client_from_env_uses_injected_client(monkeypatch):
    monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", "ENVKEY")
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"Realtime Currency Exchange Rate": {"5. Exchange Rate": "1.25"}})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        api = client_from_env(http_client=http)
        exchange = await api.exchange("GBP", "USD").json()

    assert api.api_key == "ENVKEY"
    assert str(exchange.rate) == "1.25"
    assert seen[0].url.params["apikey"] == "ENVKEY"
