"""Process-wide configuration read from the environment."""

from __future__ import annotations

import os
from typing import Mapping

from .config_types import ClientConfig
from .resolve import DEFAULT_METHOD

ENV_SERVER_URL = "HTTP_EVENT_SERVER_URL"
ENV_API_TOKEN = "HTTP_EVENT_API_TOKEN"
ENV_FORCE_SSL = "HTTP_EVENT_FORCE_SSL"
ENV_DEFAULT_HTTP_METHOD = "HTTP_EVENT_DEFAULT_HTTP_METHOD"
ENV_TIMEOUT = "HTTP_EVENT_TIMEOUT"

DEFAULT_TIMEOUT_S = 15.0

_TRUTHY = {"1", "true", "yes", "on"}


def parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in _TRUTHY


def parse_timeout(value: object, default: float = DEFAULT_TIMEOUT_S) -> float:
    text = str(value or "").strip()
    if not text:
        return default
    try:
        timeout = float(text)
    except ValueError:
        return default
    return timeout if timeout > 0 else default


def load_client_config(environ: Mapping[str, str] | None = None) -> ClientConfig:
    env = os.environ if environ is None else environ
    return ClientConfig(
        base_url=env.get(ENV_SERVER_URL, "").strip() or None,
        auth_token=env.get(ENV_API_TOKEN, "").strip() or None,
        force_tls=parse_bool(env.get(ENV_FORCE_SSL)),
        default_method=env.get(ENV_DEFAULT_HTTP_METHOD, "").strip() or DEFAULT_METHOD,
        timeout_s=parse_timeout(env.get(ENV_TIMEOUT)),
    )
