from __future__ import annotations

import re

from .errors import UnsupportedMethod

SUPPORTED_METHODS = frozenset({"POST", "PUT", "PATCH", "GET", "DELETE"})
DEFAULT_METHOD = "POST"

_EVENT_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")
_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def event_name_valid(name: object) -> bool:
    return isinstance(name, str) and _EVENT_NAME_RE.fullmatch(name) is not None


def resolve_server_url(url: str | None, *, force_tls: bool = False) -> str | None:
    """Return a scheme-qualified base URL, or None when no URL is configured.

    With ``force_tls`` any existing scheme is replaced by ``https://``.
    Otherwise an explicit ``http://``/``https://`` is kept and bare hosts
    get ``http://``.
    """
    if not url:
        return None
    value = str(url).strip()
    if not value:
        return None
    if force_tls:
        return "https://" + _SCHEME_RE.sub("", value)
    if _SCHEME_RE.match(value):
        return value
    return f"http://{value}"


def event_url(base_url: str, event: str) -> str:
    return f"{base_url.rstrip('/')}/{event}"


def resolve_method(method: str | None, default: str | None = DEFAULT_METHOD) -> str:
    value = method or default or DEFAULT_METHOD
    if not isinstance(value, str):
        raise UnsupportedMethod(value)
    normalized = value.strip().upper()
    if normalized not in SUPPORTED_METHODS:
        raise UnsupportedMethod(value)
    return normalized
