"""Typed exceptions raised by the PAM SCIM client."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List


class PamScimError(Exception):
    """Base exception for all PAM SCIM operations.

    Accessors prepend resource context (e.g. "failed to get user 8") while the
    exception propagates, so ``str(exc)`` reads as a chain from the outermost
    operation down to the original failure.
    """

    def __init__(self, message: str):
        self.message = message
        self.context: List[str] = []
        super().__init__(message)

    def add_context(self, context: str) -> None:
        self.context.insert(0, context)

    def __str__(self) -> str:
        return ": ".join(self.context + [self.message])


class ScimAPIError(PamScimError):
    """Non-success HTTP status from the SCIM API.

    Attributes:
        status_code: HTTP status code
        detail: Error message without the status/endpoint prefix
        endpoint: API endpoint that failed
    """

    def __init__(self, status_code: int, detail: str, endpoint: str):
        self.status_code = status_code
        self.detail = detail
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {detail}")


class NotFoundError(ScimAPIError):
    """The requested resource was not found (404)."""

    def __init__(self, endpoint: str, status_code: int = 404):
        super().__init__(status_code, "the requested resource not found", endpoint)


class AccessDeniedError(ScimAPIError):
    """The token does not grant access to the resource (401/403)."""

    def __init__(self, endpoint: str, status_code: int = 403):
        super().__init__(status_code, "you do not have access to the requested resource", endpoint)


class RateLimitedError(ScimAPIError):
    """The API throttled the request (429)."""

    def __init__(self, endpoint: str, status_code: int = 429):
        super().__init__(status_code, "you have exceeded throttle", endpoint)


class DecodeError(PamScimError):
    """Response body could not be parsed into the expected model."""

    def __init__(self, method: str, url: str, body: str, reason: str):
        self.method = method
        self.url = url
        self.body = body
        super().__init__(f"could not parse response body: {reason} [{method}:{url}] {body}")


class TransportError(PamScimError):
    """Network-level failure (connection, DNS, timeout)."""

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        super().__init__(f"failed to make request [{method}:{url}]: {reason}")


class ScimValidationError(PamScimError, ValueError):
    """Invalid query argument, detected before any request is sent."""
    pass


class AuthenticationError(PamScimError):
    """OAuth2 token could not be obtained."""
    pass


class ConfigurationError(PamScimError, ValueError):
    """Settings are missing or inconsistent."""
    pass


@contextmanager
def error_context(context: str) -> Iterator[None]:
    """Prefix ``context`` onto any PamScimError raised inside the block."""
    try:
        yield
    except PamScimError as exc:
        exc.add_context(context)
        raise
