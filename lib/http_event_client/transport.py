from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import ApiError, AuthError, NetworkError

logger = logging.getLogger(__name__)

USER_AGENT = "http-event-client/0.3.0"


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        headers = {
            "User-Agent": USER_AGENT,
            "Content-Type": "application/json",
        }
        if cfg.auth_token:
            headers["Authorization"] = f"Bearer {cfg.auth_token}"

        self._client = httpx.Client(
            timeout=cfg.timeout_s,
            headers=headers,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def request(self, method: str, url: str, payload: Any = None) -> Any:
        body = json.dumps(payload)
        try:
            r = self._client.request(method, url, content=body)
        except httpx.RequestError as e:
            raise NetworkError(f"{method} {url} failed: {e}") from e

        # Plain-text bodies are a valid reply, not a decode error
        data: Any = None
        decoded = False
        try:
            data = r.json()
            decoded = True
        except ValueError:
            pass

        logger.debug("%s %s -> %s", method, url, r.status_code)

        if r.status_code >= 400:
            msg = f"{method} {url} failed with {r.status_code}"
            details = None

            if isinstance(data, dict) and "detail" in data:
                details = json.dumps(data, ensure_ascii=False)
                msg = str(data.get("detail") or msg)
            elif r.text:
                details = r.text[:1000]

            if r.status_code in (401, 403):
                raise AuthError(r.status_code, msg, details)
            raise ApiError(r.status_code, msg, details)

        return data if decoded else r.text
