from __future__ import annotations

import threading
from concurrent.futures import Future
from typing import Any, Callable

from .client import EventClient
from .config_types import ClientConfig
from .errors import (
    ApiError,
    AuthError,
    EventClientError,
    InvalidEventName,
    MissingServerURL,
    NetworkError,
    TransportError,
    UnsupportedMethod,
)
from .resolve import event_name_valid

__version__ = "0.3.0"

__all__ = [
    "EventClient",
    "ClientConfig",
    "ApiError",
    "AuthError",
    "EventClientError",
    "InvalidEventName",
    "MissingServerURL",
    "NetworkError",
    "TransportError",
    "UnsupportedMethod",
    "configure",
    "default_client",
    "emit",
    "emit_async",
    "event_name_valid",
    "reset",
]

_default: EventClient | None = None
_lock = threading.Lock()


def configure(cfg: ClientConfig | EventClient) -> EventClient:
    """Install the process-wide client used when no client is passed."""
    global _default
    client = cfg if isinstance(cfg, EventClient) else EventClient(cfg)
    with _lock:
        _default = client
    return client


def default_client() -> EventClient:
    """Return the process-wide client, reading the environment on first use."""
    global _default
    with _lock:
        if _default is None:
            _default = EventClient.from_env()
        return _default


def reset() -> None:
    global _default
    with _lock:
        _default = None


def _client_for(client: ClientConfig | EventClient | None) -> EventClient:
    if client is None:
        return default_client()
    return client if isinstance(client, EventClient) else EventClient(client)


def emit(
        event: str,
        payload: Any = None,
        method: str | None = None,
        *,
        client: ClientConfig | EventClient | None = None,
) -> Any:
    return _client_for(client).emit(event, payload, method)


def emit_async(
        event: str,
        payload: Any = None,
        method: str | None = None,
        *,
        client: ClientConfig | EventClient | None = None,
        on_complete: Callable[[Future], Any] | None = None,
) -> None:
    _client_for(client).emit_async(event, payload, method, on_complete=on_complete)
