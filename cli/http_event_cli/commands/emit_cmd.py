from __future__ import annotations

import json
from concurrent.futures import Future
from pathlib import Path
from typing import Any

import typer

from http_event_client import (
    ApiError,
    InvalidEventName,
    MissingServerURL,
    NetworkError,
    UnsupportedMethod,
)
from http_event_client.dispatch import ThreadDispatcher

from .. import console
from ..config import load_config
from ..http import make_client


def _parse_payload(raw: str | None) -> Any:
    if raw is None:
        return None
    text = raw
    if raw.startswith("@"):
        path = Path(raw[1:]).expanduser()
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            console.err(f"Cannot read payload file {path}: {e}")
            raise typer.Exit(code=2)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        console.err(f"Payload is not valid JSON: {e}")
        raise typer.Exit(code=2)


def _print_result(result: Any, *, json_output: bool) -> None:
    if json_output:
        console.print_json(result)
        return
    if isinstance(result, (dict, list)):
        console.print_json(result)
    elif result in (None, ""):
        console.ok("Event sent.")
    else:
        console.console.print(str(result), markup=False)


def emit(
        event: str = typer.Argument(..., help="Event name (letters, digits, '_' and '-')."),
        data: str | None = typer.Option(None, "--data", "-d", help="JSON payload, or @path to a JSON file."),
        method: str | None = typer.Option(None, "--method", "-X", help="HTTP method (POST, PUT, PATCH, GET, DELETE)."),
        async_: bool = typer.Option(False, "--async", help="Dispatch without waiting for the response."),
        url: str | None = typer.Option(None, "--url", help="Override event server URL."),
        token: str | None = typer.Option(None, "--token", help="Override API token."),
        force_ssl: bool | None = typer.Option(None, "--force-ssl/--no-force-ssl", help="Force https://."),
        wait_timeout: float = typer.Option(30.0, "--wait-timeout", help="Seconds to wait for async delivery before exit."),
        json_output: bool = typer.Option(False, "--json", help="Output JSON only."),
):
    payload = _parse_payload(data)
    cfg = load_config()
    try:
        client = make_client(cfg, url_override=url, token_override=token, force_ssl=force_ssl)
    except UnsupportedMethod as e:
        console.err(f"Configured default method is not supported: {e.method}")
        raise typer.Exit(code=2)

    try:
        if async_:
            error = _emit_async(client, event, payload, method, wait_timeout=wait_timeout, json_output=json_output)
            if error is not None:
                raise error
            return
        result = client.emit(event, payload, method)
    except InvalidEventName as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    except UnsupportedMethod as e:
        console.err(f"Unsupported HTTP method: {e.method}")
        raise typer.Exit(code=2)
    except MissingServerURL:
        console.err("Event server URL is not configured. Run `http-event settings set --url ...` first.")
        raise typer.Exit(code=2)
    except ApiError as e:
        console.err(f"Event server rejected {event} ({e.status_code}): {e}")
        raise typer.Exit(code=1)
    except NetworkError as e:
        console.err(f"Cannot reach event server: {e}")
        raise typer.Exit(code=1)

    _print_result(result, json_output=json_output)


def _emit_async(client, event: str, payload: Any, method: str | None, *, wait_timeout: float,
                json_output: bool) -> BaseException | None:
    outcome: dict[str, Any] = {}

    def _done(future: Future) -> None:
        outcome["error"] = future.exception()

    client.emit_async(event, payload, method, on_complete=_done)
    if not json_output:
        console.ok(f"Event {event} dispatched.")

    # Worker threads are daemons; drain them before the interpreter exits.
    dispatcher = client.dispatcher
    if isinstance(dispatcher, ThreadDispatcher) and not dispatcher.wait_all(wait_timeout):
        console.warn(f"Event {event} still in flight after {wait_timeout:g}s.")
        return None

    error = outcome.get("error")
    if json_output:
        console.print_json({"event": event, "dispatched": True, "error": str(error) if error else None})
    return error
