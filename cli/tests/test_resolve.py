from __future__ import annotations

import pytest

from http_event_client import ClientConfig, UnsupportedMethod
from http_event_client.resolve import event_name_valid, event_url, resolve_method, resolve_server_url


@pytest.mark.parametrize("name", ["ping", "user_signed_up", "cache-warmup", "A1", "2024_report-v2", "_", "-"])
def test_event_name_valid_accepts_word_characters(name) -> None:
    assert event_name_valid(name)


@pytest.mark.parametrize("name", ["", "my event", "a.b", "résumé", "a/b", "ping\n", "semi;colon", None, 42])
def test_event_name_valid_rejects_other_characters(name) -> None:
    assert not event_name_valid(name)


def test_resolve_server_url_adds_http_to_bare_host() -> None:
    assert resolve_server_url("example.com", force_tls=False) == "http://example.com"


def test_resolve_server_url_keeps_existing_scheme() -> None:
    assert resolve_server_url("https://example.com", force_tls=False) == "https://example.com"
    assert resolve_server_url("http://example.com:4000/hooks") == "http://example.com:4000/hooks"


def test_resolve_server_url_force_tls_rewrites_scheme() -> None:
    assert resolve_server_url("http://example.com", force_tls=True) == "https://example.com"
    assert resolve_server_url("HTTPS://example.com", force_tls=True) == "https://example.com"
    assert resolve_server_url("example.com", force_tls=True) == "https://example.com"


@pytest.mark.parametrize("url", [None, False, "", "   "])
def test_resolve_server_url_unset(url) -> None:
    assert resolve_server_url(url, force_tls=True) is None


def test_event_url_uses_single_separator() -> None:
    assert event_url("http://example.com", "ping") == "http://example.com/ping"
    assert event_url("http://example.com/hooks/", "ping") == "http://example.com/hooks/ping"


def test_resolve_method_precedence() -> None:
    assert resolve_method("put", "PATCH") == "PUT"
    assert resolve_method(None, "patch") == "PATCH"
    assert resolve_method(None, None) == "POST"
    assert resolve_method(None) == "POST"


def test_resolve_method_rejects_unknown_verbs() -> None:
    with pytest.raises(UnsupportedMethod) as exc:
        resolve_method("OPTIONS")
    assert exc.value.method == "OPTIONS"


def test_client_config_normalizes_fields() -> None:
    cfg = ClientConfig(base_url="  example.com ", auth_token="", default_method="delete")
    assert cfg.base_url == "example.com"
    assert cfg.auth_token is None
    assert cfg.default_method == "DELETE"
    assert cfg.resolved_base_url == "http://example.com"


def test_client_config_rejects_unknown_default_method() -> None:
    with pytest.raises(UnsupportedMethod):
        ClientConfig(base_url="example.com", default_method="TRACE")


def test_client_config_without_url_resolves_to_none() -> None:
    assert ClientConfig().resolved_base_url is None
