# tests/test_insight.py
from __future__ import annotations

import json

import pytest

import src.api.insight as insight
from src.api.errors import MalformedPayload, TransportError


def test_fetch_insight_payload_builds_query(monkeypatch):
    captured = {}

    def fake_get_bytes(url, params=None, session=None):
        captured["url"] = url
        captured["params"] = params
        captured["session"] = session
        return b"{}"

    monkeypatch.setattr(insight, "http_get_bytes", fake_get_bytes)

    out = insight.fetch_insight_payload(api_key="abc123")

    assert out == b"{}"
    assert captured["url"] == insight.INSIGHT_URL
    assert captured["params"] == {"api_key": "abc123", "feedtype": "json", "ver": "1.0"}


def test_fetch_insight_payload_defaults_to_configured_key(monkeypatch):
    captured = {}

    def fake_get_bytes(url, params=None, session=None):
        captured["params"] = params
        return b"{}"

    monkeypatch.setattr(insight, "http_get_bytes", fake_get_bytes)
    monkeypatch.setattr(insight, "NASA_API_KEY", "from-env")

    insight.fetch_insight_payload()

    assert captured["params"]["api_key"] == "from-env"


def test_fetch_insight_payload_does_not_log_api_key(monkeypatch, caplog):
    monkeypatch.setattr(insight, "http_get_bytes", lambda *a, **k: b"{}")

    with caplog.at_level("INFO", logger="marsweather"):
        insight.fetch_insight_payload(api_key="secret-key")

    assert "secret-key" not in caplog.text


def test_fetch_mars_weather_decodes(monkeypatch):
    body = json.dumps({"sol_keys": ["6", "7"], "6": {"AT": {"av": -62.3}}}).encode()
    monkeypatch.setattr(insight, "http_get_bytes", lambda *a, **k: body)

    report = insight.fetch_mars_weather(api_key="k")

    assert report.sol_keys == ("6", "7")
    assert list(report.sols) == ["6"]


def test_fetch_mars_weather_propagates_decode_error(monkeypatch):
    monkeypatch.setattr(insight, "http_get_bytes", lambda *a, **k: b"<html>oops</html>")

    with pytest.raises(MalformedPayload):
        insight.fetch_mars_weather()


def test_fetch_mars_weather_propagates_transport_error(monkeypatch):
    def fail(*a, **k):
        raise TransportError("down", status_code=503)

    monkeypatch.setattr(insight, "http_get_bytes", fail)

    with pytest.raises(TransportError) as exc_info:
        insight.fetch_mars_weather()
    assert exc_info.value.status_code == 503
