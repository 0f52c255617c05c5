from __future__ import annotations

import os

import typer

from http_event_client.resolve import SUPPORTED_METHODS

from .. import console
from ..config import SETTING_KEYS, config_path, default_config, load_config, save_config, to_toml

app = typer.Typer(help="Manage local settings (~/.config/http-event/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        url: str = typer.Option(
            ...,
            "--url",
            prompt="Event server URL",
            help="Event server URL like https://events.example.com/hooks",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.event_server_url = url.strip()
    if not cfg.event_server_url:
        console.err("Event server URL cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    token_state = "(set)" if cfg.api_token else "(empty)"
    console.console.print(
        f"event_server_url={cfg.event_server_url or '(unset)'} api_token={token_state} "
        f"force_ssl={str(cfg.force_ssl).lower()} default_http_method={cfg.default_http_method} "
        f"timeout_s={cfg.timeout_s:g}",
        markup=False,
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help=f"Setting key ({', '.join(SETTING_KEYS)})."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k not in SETTING_KEYS:
        console.err(f"Unknown setting: {key}")
        raise typer.Exit(code=2)
    value = to_toml(cfg)[k]
    if isinstance(value, bool):
        value = str(value).lower()
    console.console.print(str(value), markup=False)


@app.command("set")
def set_setting(
        url: str | None = typer.Option(None, "--url", help="Set event server URL."),
        token: str | None = typer.Option(None, "--token", help="Set API token."),
        force_ssl: bool | None = typer.Option(None, "--force-ssl/--no-force-ssl", help="Force https://."),
        method: str | None = typer.Option(None, "--method", help="Set default HTTP method."),
        timeout_s: float | None = typer.Option(None, "--timeout", help="Set request timeout in seconds."),
):
    cfg = load_config()
    if url is not None:
        cfg.event_server_url = url.strip()
    if token is not None:
        cfg.api_token = token.strip()
    if force_ssl is not None:
        cfg.force_ssl = force_ssl
    if method is not None:
        normalized = method.strip().upper()
        if normalized not in SUPPORTED_METHODS:
            console.err(f"Unsupported HTTP method: {method}")
            raise typer.Exit(code=2)
        cfg.default_http_method = normalized
    if timeout_s is not None:
        if timeout_s <= 0:
            console.err("Timeout must be positive.")
            raise typer.Exit(code=2)
        cfg.timeout_s = timeout_s
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
