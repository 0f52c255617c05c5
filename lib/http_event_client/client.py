from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import Any, Callable

import httpx

from .config_types import ClientConfig
from .dispatch import Dispatcher, ThreadDispatcher, log_failure
from .errors import InvalidEventName, MissingServerURL
from .resolve import event_name_valid, event_url, resolve_method
from .settings import load_client_config
from .transport import Transport

logger = logging.getLogger(__name__)


class EventClient:
    """Emits events to an HTTP event server.

    Events go to ``<base_url>/<event>`` with the configured default method
    (POST unless set otherwise). Only letters, digits, ``_`` and ``-`` are
    allowed in event names.

    ``emit`` blocks and returns the decoded response body. ``emit_async``
    hands the same request to a dispatcher and returns immediately.
    """

    def __init__(
            self,
            cfg: ClientConfig,
            *,
            dispatcher: Dispatcher | None = None,
            transport: httpx.BaseTransport | None = None,
    ):
        self._cfg = cfg
        self._dispatcher = dispatcher or ThreadDispatcher()
        self._transport = transport

    @classmethod
    def from_env(cls, **kwargs: Any) -> EventClient:
        return cls(load_client_config(), **kwargs)

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    def emit(self, event: str, payload: Any = None, method: str | None = None) -> Any:
        if not event_name_valid(event):
            raise InvalidEventName(event)
        return self._send(event, payload, resolve_method(method, self._cfg.default_method))

    def emit_async(
            self,
            event: str,
            payload: Any = None,
            method: str | None = None,
            *,
            on_complete: Callable[[Future], Any] | None = None,
    ) -> None:
        if not event_name_valid(event):
            raise InvalidEventName(event)
        resolved = resolve_method(method, self._cfg.default_method)

        future = self._dispatcher.submit(self._send, event, payload, resolved)
        future.add_done_callback(log_failure)
        if on_complete is not None:
            future.add_done_callback(on_complete)

    def _send(self, event: str, payload: Any, method: str) -> Any:
        base_url = self._cfg.resolved_base_url
        if base_url is None:
            raise MissingServerURL()
        url = event_url(base_url, event)
        logger.debug("sending %s %s to %s", method, event, url, extra={"event": event, "method": method})
        with Transport(self._cfg, transport=self._transport) as t:
            return t.request(method, url, payload)
