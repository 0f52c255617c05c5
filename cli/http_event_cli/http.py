from __future__ import annotations

from dataclasses import replace

from http_event_client import EventClient

from .config import AppConfig, apply_env, to_client_config


def make_client(
    cfg: AppConfig,
    *,
    url_override: str | None = None,
    token_override: str | None = None,
    force_ssl: bool | None = None,
) -> EventClient:
    effective = apply_env(cfg)
    if url_override:
        effective = replace(effective, event_server_url=url_override.strip())
    if token_override:
        effective = replace(effective, api_token=token_override.strip())
    if force_ssl is not None:
        effective = replace(effective, force_ssl=force_ssl)
    return EventClient(to_client_config(effective))
