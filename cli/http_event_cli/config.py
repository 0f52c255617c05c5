from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from http_event_client import ClientConfig
from http_event_client.resolve import DEFAULT_METHOD
from http_event_client.settings import (
    DEFAULT_TIMEOUT_S,
    ENV_API_TOKEN,
    ENV_DEFAULT_HTTP_METHOD,
    ENV_FORCE_SSL,
    ENV_SERVER_URL,
    ENV_TIMEOUT,
    parse_bool,
    parse_timeout,
)

APP_NAME = "http-event"
CONFIG_FILENAME = "config.toml"

SETTING_KEYS = ("event_server_url", "api_token", "force_ssl", "default_http_method", "timeout_s")


@dataclass
class AppConfig:
    event_server_url: str = ""
    api_token: str = ""
    force_ssl: bool = False
    default_http_method: str = DEFAULT_METHOD
    timeout_s: float = DEFAULT_TIMEOUT_S


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def normalize_method(raw: str | None) -> str:
    # Unknown verbs are kept as-is; ClientConfig rejects them
    return str(raw or "").strip().upper() or DEFAULT_METHOD


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "event_server_url": cfg.event_server_url,
        "api_token": cfg.api_token,
        "force_ssl": cfg.force_ssl,
        "default_http_method": cfg.default_http_method,
        "timeout_s": cfg.timeout_s,
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    return AppConfig(
        event_server_url=str(data.get("event_server_url") or "").strip(),
        api_token=str(data.get("api_token") or "").strip(),
        force_ssl=parse_bool(data.get("force_ssl")),
        default_http_method=normalize_method(data.get("default_http_method")),
        timeout_s=parse_timeout(data.get("timeout_s")),
    )


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path


def apply_env(cfg: AppConfig) -> AppConfig:
    """Overlay HTTP_EVENT_* environment variables on top of the file values."""
    server_url = os.getenv(ENV_SERVER_URL, "").strip()
    token = os.getenv(ENV_API_TOKEN, "").strip()
    force_ssl = os.getenv(ENV_FORCE_SSL)
    method = os.getenv(ENV_DEFAULT_HTTP_METHOD, "").strip()
    timeout = os.getenv(ENV_TIMEOUT, "").strip()
    return AppConfig(
        event_server_url=server_url or cfg.event_server_url,
        api_token=token or cfg.api_token,
        force_ssl=parse_bool(force_ssl) if force_ssl is not None else cfg.force_ssl,
        default_http_method=method or cfg.default_http_method,
        timeout_s=parse_timeout(timeout, cfg.timeout_s),
    )


def to_client_config(cfg: AppConfig) -> ClientConfig:
    return ClientConfig(
        base_url=cfg.event_server_url or None,
        auth_token=cfg.api_token or None,
        force_tls=cfg.force_ssl,
        default_method=cfg.default_http_method,
        timeout_s=cfg.timeout_s,
    )
