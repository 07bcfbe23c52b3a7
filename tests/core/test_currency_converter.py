import httpx

from packages.core.currency import converter
from packages.core.currency.converter import (
    Conversion,
    ConversionError,
    convert_currency,
    format_conversion,
)


def _fake_get(status_code=200, payload=None, calls=None):
    def fake_get(url, timeout=None):
        if calls is not None:
            calls.append(url)
        return httpx.Response(status_code, json=payload or {}, request=httpx.Request("GET", url))

    return fake_get


def test_convert_currency_happy_path(monkeypatch):
    calls = []
    monkeypatch.setattr(converter.httpx, "get", _fake_get(payload={"rates": {"INR": 83}}, calls=calls))

    result = convert_currency(100, "usd", "inr")

    assert isinstance(result, Conversion)
    assert result.from_currency == "USD"
    assert result.to_currency == "INR"
    assert result.converted == 8300
    assert calls == ["https://open.er-api.com/v6/latest/USD"]

    text = format_conversion(result)
    assert text.startswith("✔")
    assert "8300.00" in text
    assert "1 USD = 83 INR" in text
    assert "Converted 100 USD" in text


def test_convert_currency_rounds_to_two_decimals(monkeypatch):
    monkeypatch.setattr(converter.httpx, "get", _fake_get(payload={"rates": {"EUR": 0.92345}}))

    result = convert_currency(10.5, "USD", "EUR")

    assert result.converted == 9.7
    text = format_conversion(result)
    assert "9.70 EUR" in text
    assert "Converted 10.5 USD" in text
    assert "1 USD = 0.92345 EUR" in text


def test_convert_currency_unknown_target(monkeypatch):
    monkeypatch.setattr(converter.httpx, "get", _fake_get(payload={"rates": {"INR": 83}}))

    result = convert_currency(100, "USD", "xyz")

    assert isinstance(result, ConversionError)
    assert result.kind == converter.ERROR_UNKNOWN_TARGET
    assert format_conversion(result) == "✖ Error occurred: Invalid target currency: XYZ"


def test_convert_currency_missing_rate_table(monkeypatch):
    monkeypatch.setattr(converter.httpx, "get", _fake_get(payload={"result": "error"}))

    result = convert_currency(1, "USD", "INR")

    assert isinstance(result, ConversionError)
    assert result.kind == converter.ERROR_UNKNOWN_TARGET


def test_convert_currency_fetch_failure(monkeypatch):
    monkeypatch.setattr(converter.httpx, "get", _fake_get(status_code=404))

    result = convert_currency(100, "usd", "INR")

    assert isinstance(result, ConversionError)
    assert result.kind == converter.ERROR_RATE_FETCH
    assert result.currency == "USD"
    text = format_conversion(result)
    assert text.startswith("✖")
    assert "USD" in text


def test_convert_currency_transport_error(monkeypatch):
    def failing_get(url, timeout=None):
        raise httpx.ConnectError("boom", request=httpx.Request("GET", url))

    monkeypatch.setattr(converter.httpx, "get", failing_get)

    result = convert_currency(5, "GBP", "INR")

    assert isinstance(result, ConversionError)
    assert result.message == "Failed to fetch exchange rate for GBP"


def test_convert_currency_rejects_bad_code(monkeypatch):
    calls = []
    monkeypatch.setattr(converter.httpx, "get", _fake_get(payload={"rates": {}}, calls=calls))

    result = convert_currency(5, "US", "INR")

    assert isinstance(result, ConversionError)
    assert result.kind == converter.ERROR_INVALID_CODE
    assert calls == []


def test_convert_currency_is_repeatable(monkeypatch):
    monkeypatch.setattr(converter.httpx, "get", _fake_get(payload={"rates": {"INR": 83}}))

    first = format_conversion(convert_currency(100, "usd", "inr"))
    second = format_conversion(convert_currency(100, "usd", "inr"))

    assert first == second


def test_convert_currency_uses_configured_timeout(monkeypatch):
    seen = {}

    def fake_get(url, timeout=None):
        seen["timeout"] = timeout
        return httpx.Response(200, json={"rates": {"INR": 83}}, request=httpx.Request("GET", url))

    monkeypatch.setattr(converter.httpx, "get", fake_get)
    monkeypatch.delenv("EXCHANGE_RATE_TIMEOUT_SECONDS", raising=False)
    convert_currency(1, "USD", "INR")
    assert seen["timeout"] is None

    monkeypatch.setenv("EXCHANGE_RATE_TIMEOUT_SECONDS", "2.5")
    convert_currency(1, "USD", "INR")
    assert seen["timeout"] == 2.5
