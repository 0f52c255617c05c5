from __future__ import annotations

from dataclasses import dataclass

from .resolve import DEFAULT_METHOD, resolve_method, resolve_server_url


@dataclass(frozen=True)
class ClientConfig:
    base_url: str | None = None
    auth_token: str | None = None
    force_tls: bool = False
    default_method: str = DEFAULT_METHOD
    timeout_s: float = 15.0

    def __post_init__(self) -> None:
        base_url = (self.base_url or "").strip() or None
        object.__setattr__(self, "base_url", base_url)
        object.__setattr__(self, "auth_token", self.auth_token or None)
        object.__setattr__(self, "default_method", resolve_method(None, self.default_method))

    @property
    def resolved_base_url(self) -> str | None:
        return resolve_server_url(self.base_url, force_tls=self.force_tls)
