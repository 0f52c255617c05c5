from __future__ import annotations

import pytest

import http_event_client
from http_event_cli import config
from http_event_client import settings


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    for name in (
        settings.ENV_SERVER_URL,
        settings.ENV_API_TOKEN,
        settings.ENV_FORCE_SSL,
        settings.ENV_DEFAULT_HTTP_METHOD,
        settings.ENV_TIMEOUT,
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path / "config"))
    http_event_client.reset()
    yield
    http_event_client.reset()
