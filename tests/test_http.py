# tests/test_http.py
from __future__ import annotations

import pytest
import requests

import src.api.http as http
from src.api.errors import TransportError


class DummyResp:
    def __init__(self, status: int, content: bytes = b""):
        self.status_code = status
        self.content = content


class DummySession:
    """Tallentaa get()-kutsut ja palauttaa annetun vastauksen."""

    def __init__(self, resp: DummyResp):
        self.resp = resp
        self.calls: list[dict] = []

    def get(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        return self.resp


def test_http_get_bytes_returns_raw_content():
    sess = DummySession(DummyResp(200, b'{"sol_keys": []}'))

    out = http.http_get_bytes("https://api.test/x", params={"a": "1"}, session=sess)

    assert out == b'{"sol_keys": []}'
    call = sess.calls[0]
    assert call["url"] == "https://api.test/x"
    assert call["params"] == {"a": "1"}
    assert call["timeout"] == http.HTTP_TIMEOUT_S
    assert call["headers"]["User-Agent"].startswith("MarsWeather/")


def test_http_get_bytes_uses_requests_module_by_default(monkeypatch):
    seen = {}

    def fake_get(url, **kwargs):
        seen["url"] = url
        return DummyResp(200, b"{}")

    monkeypatch.setattr(http.requests, "get", fake_get)

    assert http.http_get_bytes("https://api.test") == b"{}"
    assert seen["url"] == "https://api.test"


@pytest.mark.parametrize("status", [400, 403, 429, 500, 503])
def test_http_get_bytes_raises_on_http_error(status):
    sess = DummySession(DummyResp(status, b"nope"))

    with pytest.raises(TransportError) as exc_info:
        http.http_get_bytes("https://api.test", session=sess)

    assert exc_info.value.status_code == status
    # ei uusintayritystä
    assert len(sess.calls) == 1


def test_http_get_bytes_wraps_request_exception(monkeypatch):
    def boom(*a, **k):
        raise requests.ConnectionError("dns failure")

    monkeypatch.setattr(http.requests, "get", boom)

    with pytest.raises(TransportError) as exc_info:
        http.http_get_bytes("https://api.test")

    assert exc_info.value.status_code is None
    assert "dns failure" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


def test_http_get_bytes_wraps_timeout(monkeypatch):
    monkeypatch.setattr(
        http.requests,
        "get",
        lambda *a, **k: (_ for _ in ()).throw(requests.Timeout("slow")),
    )

    with pytest.raises(TransportError):
        http.http_get_bytes("https://api.test", timeout=0.1)
