"""Tests for the delivery API client."""

import pytest
import requests

import cms_locale.retrieval.client as client_mod
from cms_locale.retrieval.client import ClientConfig, DeliveryClient
from cms_locale.retrieval.errors import FetchError


class _Response:
    def __init__(self, status_code=200, payload=None, body_error=None):
        self.status_code = status_code
        self._payload = payload
        self._body_error = body_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)

    def json(self):
        if self._body_error is not None:
            raise self._body_error
        return self._payload


def _client(**overrides):
    settings = {"space": "space-1", "access_token": "secret-token"}
    settings.update(overrides)
    return DeliveryClient(ClientConfig(**settings))


def test_get_entries_builds_request(monkeypatch):
    calls = []

    def fake_get(url, params=None, headers=None, timeout=None):
        calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        return _Response(payload={"items": []})

    monkeypatch.setattr(client_mod.requests, "get", fake_get)

    result = _client(timeout_seconds=5).get_entries({"content_type": "post", "locale": "*"})

    assert result == {"items": []}
    assert calls[0]["url"] == "https://cdn.contentful.com/spaces/space-1/environments/master/entries"
    assert calls[0]["params"] == {"content_type": "post", "locale": "*"}
    assert calls[0]["headers"]["Authorization"] == "Bearer secret-token"
    assert calls[0]["timeout"] == 5


@pytest.mark.parametrize(
    "host,expected",
    [
        ("preview.contentful.com", "https://preview.contentful.com"),
        ("https://preview.contentful.com/", "https://preview.contentful.com"),
        ("http://localhost:8080", "http://localhost:8080"),
    ],
)
def test_host_override(host, expected):
    assert _client(host=host).base_url == expected


def test_environment_in_entries_url():
    client = _client(environment="staging")
    assert client.entries_url.endswith("/spaces/space-1/environments/staging/entries")


def test_http_error_raises_fetch_error_with_status(monkeypatch):
    monkeypatch.setattr(client_mod.requests, "get", lambda *a, **k: _Response(status_code=401))

    with pytest.raises(FetchError) as exc_info:
        _client().get_entries({"content_type": "post"})

    assert exc_info.value.status_code == 401
    assert isinstance(exc_info.value.__cause__, requests.HTTPError)


def test_connection_error_raises_fetch_error(monkeypatch):
    def fake_get(*_args, **_kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(client_mod.requests, "get", fake_get)

    with pytest.raises(FetchError, match="connection refused") as exc_info:
        _client().get_entries({"content_type": "post"})

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


def test_invalid_json_raises_fetch_error(monkeypatch):
    response = _Response(payload=None, body_error=ValueError("Expecting value"))
    monkeypatch.setattr(client_mod.requests, "get", lambda *a, **k: response)

    with pytest.raises(FetchError, match="parse") as exc_info:
        _client().get_entries({"content_type": "post"})

    assert exc_info.value.status_code == 200


def test_client_config_rejects_blank_space():
    with pytest.raises(ValueError):
        ClientConfig(space=" ", access_token="token")
