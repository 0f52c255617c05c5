from __future__ import annotations


class EventClientError(Exception):
    """Base client error."""


class InvalidEventName(EventClientError, ValueError):
    def __init__(self, event: object):
        super().__init__(f'Event "{event}" is not a valid event name')
        self.event = event


class UnsupportedMethod(EventClientError, ValueError):
    def __init__(self, method: object):
        super().__init__(f"Unsupported HTTP method: {method!r}")
        self.method = method


class MissingServerURL(EventClientError):
    """Event server URL is not configured."""

    def __init__(self, message: str = "Event server URL not defined"):
        super().__init__(message)


class TransportError(EventClientError):
    """Underlying HTTP exchange failed."""


class NetworkError(TransportError):
    """Connection error or timeout."""


class ApiError(TransportError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""
