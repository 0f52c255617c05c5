from __future__ import annotations

import threading

import httpx
import pytest

import http_event_client
from http_event_client import ClientConfig, EventClient, MissingServerURL


def _client(seen):
    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"event": request.url.path})

    return EventClient(ClientConfig(base_url="events.test"), transport=httpx.MockTransport(_handler))


def test_emit_uses_configured_default_client() -> None:
    seen = []
    http_event_client.configure(_client(seen))

    assert http_event_client.emit("ping") == {"event": "/ping"}
    assert len(seen) == 1


def test_emit_explicit_client_takes_precedence() -> None:
    default_seen, explicit_seen = [], []
    http_event_client.configure(_client(default_seen))

    http_event_client.emit("ping", client=_client(explicit_seen))

    assert default_seen == []
    assert len(explicit_seen) == 1


def test_default_client_is_read_from_environment_once(monkeypatch) -> None:
    monkeypatch.setenv("HTTP_EVENT_SERVER_URL", "first.test")
    first = http_event_client.default_client()
    monkeypatch.setenv("HTTP_EVENT_SERVER_URL", "second.test")

    assert http_event_client.default_client() is first
    assert first.config.base_url == "first.test"


def test_emit_without_configuration_raises_missing_url() -> None:
    with pytest.raises(MissingServerURL):
        http_event_client.emit("ping")


def test_configure_accepts_plain_config() -> None:
    client = http_event_client.configure(ClientConfig(base_url="cfg.test"))
    assert http_event_client.default_client() is client


def test_emit_async_module_level() -> None:
    seen = []
    client = _client(seen)
    http_event_client.configure(client)

    assert http_event_client.emit_async("ping", {"a": 1}) is None
    assert client.dispatcher.wait_all(5)
    assert len(seen) == 1


def test_emit_accepts_explicit_config(monkeypatch) -> None:
    seen = []
    http_event_client.configure(_client(seen))
    sent = []

    def _send(self, event, payload, method):
        sent.append((self.config.base_url, event, payload, method))
        return "ok"

    monkeypatch.setattr(EventClient, "_send", _send)

    assert http_event_client.emit("ping", {"a": 1}, client=ClientConfig(base_url="explicit.test")) == "ok"
    assert sent == [("explicit.test", "ping", {"a": 1}, "POST")]
    assert seen == []


def test_emit_async_accepts_explicit_config() -> None:
    done = []
    finished = threading.Event()

    def _on_complete(future) -> None:
        done.append(future)
        finished.set()

    http_event_client.emit_async("ping", client=ClientConfig(base_url=None), on_complete=_on_complete)

    assert finished.wait(5)
    assert isinstance(done[0].exception(), MissingServerURL)
