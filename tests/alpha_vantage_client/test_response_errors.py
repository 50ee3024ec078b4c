import pytest

from alpha_vantage_client import (
    AlphaVantageApiError,
    AlphaVantageDecodeError,
    AlphaVantageEmptyResponseError,
    AlphaVantageError,
    AlphaVantageInvalidSymbolError,
    AlphaVantageSchemaError,
    AlphaVantageThrottleError,
    Quote,
)
from alpha_vantage_client.decode import classify_payload_error, decode_record, parse_json, strip_index


@pytest.mark.parametrize(
    "key, expected",
    [
        ("1. Information", "Information"),
        ("01. symbol", "symbol"),
        ("1a. open (CNY)", "open (CNY)"),
        ("1: Symbol", "Symbol"),
        ("5.1: Fast Limit", "Fast Limit"),
        ("bestMatches", "bestMatches"),
        ("Rank A: Real-Time Performance", "Rank A: Real-Time Performance"),
    ],
)
def test_strip_index(key, expected):
    assert strip_index(key) == expected


def test_parse_json_rejects_malformed_body():
    with pytest.raises(AlphaVantageDecodeError) as excinfo:
        parse_json("<html>Bad Gateway</html>")

    assert excinfo.value.code == "invalid_json"
    assert excinfo.value.payload == {"snippet": "<html>Bad Gateway</html>"}


def test_parse_json_rejects_deeply_nested_body():
    depth = 200_000
    body = "{\"a\":" + "[" * depth + "]" * depth + "}"

    with pytest.raises(AlphaVantageDecodeError) as excinfo:
        parse_json(body)

    assert excinfo.value.code == "invalid_json"


def test_parse_json_rejects_non_object():
    with pytest.raises(AlphaVantageDecodeError):
        parse_json("[1, 2, 3]")


def test_classify_payload_error_variants():
    throttle = classify_payload_error({"Note": "Thank you for using Alpha Vantage! Our standard API call frequency is 5 calls per minute."})
    info = classify_payload_error({"Information": "The **demo** API key is for demo purposes only."})
    invalid = classify_payload_error({"Error Message": "Invalid API call. Please retry or visit the documentation."})
    other = classify_payload_error({"Error Message": "the parameter apikey is invalid or missing."})

    assert isinstance(throttle, AlphaVantageThrottleError)
    assert isinstance(info, AlphaVantageThrottleError)
    assert isinstance(invalid, AlphaVantageInvalidSymbolError)
    assert type(other) is AlphaVantageApiError
    assert classify_payload_error({"Global Quote": {}}) is None


def test_decode_record_empty_payload():
    with pytest.raises(AlphaVantageEmptyResponseError) as excinfo:
        decode_record(Quote, {})

    assert excinfo.value.code == "empty_response"


def test_decode_record_empty_root_section():
    with pytest.raises(AlphaVantageEmptyResponseError):
        decode_record(Quote, {"Global Quote": {}}, root_key="Global Quote")


def test_decode_record_missing_root_section():
    with pytest.raises(AlphaVantageSchemaError) as excinfo:
        decode_record(Quote, {"Something Else": {"a": 1}}, root_key="Global Quote")

    assert excinfo.value.payload == {"keys": ["Something Else"]}


def test_decode_record_schema_mismatch_lists_errors():
    with pytest.raises(AlphaVantageSchemaError) as excinfo:
        decode_record(Quote, {"01. symbol": "IBM", "05. price": "not-a-number"})

    err = excinfo.value
    assert isinstance(err, AlphaVantageDecodeError)
    assert err.code == "schema_mismatch"
    locs = {item["loc"] for item in err.payload["errors"]}
    assert "price" in locs


@pytest.mark.asyncio
async def test_throttle_note_is_raised_from_client(make_api):
    api, requests = make_api({"Note": "Our standard API call frequency is 5 calls per minute."})

    with pytest.raises(AlphaVantageThrottleError) as excinfo:
        await api.quote("IBM").json()

    assert excinfo.value.code == "throttle"
    assert "5 calls per minute" in excinfo.value.message
    assert len(requests) == 1


@pytest.mark.asyncio
async def test_invalid_symbol_is_raised_from_client(make_api):
    api, _ = make_api({"Error Message": "Invalid API call. Please retry or visit the documentation."})

    with pytest.raises(AlphaVantageInvalidSymbolError):
        await api.stock_time("daily", "NOPE").json()


@pytest.mark.asyncio
async def test_malformed_json_from_client(make_api):
    api, _ = make_api(text="not json")

    with pytest.raises(AlphaVantageDecodeError) as excinfo:
        await api.sector().json()

    assert not isinstance(excinfo.value, AlphaVantageSchemaError)


@pytest.mark.asyncio
async def test_unexpected_shape_is_schema_error(make_api):
    api, _ = make_api({"Meta Data": {"1. Information": "x"}, "Time Series (Daily)": {}, "Extra": {}})

    with pytest.raises(AlphaVantageSchemaError):
        await api.stock_time("daily", "IBM").json()


@pytest.mark.asyncio
async def test_unknown_entry_field_is_rejected(make_api):
    payload = {
        "Meta Data": {
            "1. Information": "Daily",
            "2. Symbol": "IBM",
            "3. Last Refreshed": "2024-05-03",
            "4. Time Zone": "US/Eastern",
        },
        "Time Series (Daily)": {
            "2024-05-03": {
                "1. open": "1",
                "2. high": "1",
                "3. low": "1",
                "4. close": "1",
                "5. volume": "1",
                "6. surprise": "1",
            }
        },
    }
    api, _ = make_api(payload)

    with pytest.raises(AlphaVantageSchemaError):
        await api.stock_time("daily", "IBM").json()


def test_errors_share_base_class():
    err = AlphaVantageThrottleError("slow down")

    assert isinstance(err, AlphaVantageApiError)
    assert isinstance(err, AlphaVantageError)
    assert str(err) == "slow down"
