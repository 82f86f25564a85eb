"""Low-level HTTP client for the PAM SCIM API.

Handles request construction, JSON encoding/decoding and status-code
classification. Authentication headers are attached by the session the
client is built with (see ``pamscim.service``).
"""
from __future__ import annotations
import logging
from typing import Any, Mapping, Optional, Type, TypeVar, Union

import requests
from pydantic import BaseModel

from .exceptions import (
    AccessDeniedError,
    DecodeError,
    NotFoundError,
    RateLimitedError,
    ScimAPIError,
    TransportError,
)

REQUEST_TIMEOUT = 10

SUCCESS_STATUSES = frozenset({200, 201, 204})

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
Timeout = Union[float, tuple, None]


def _model_dump(payload: Any) -> Any:
    """Return a JSON-serialisable value for supported payload types."""
    if payload is None:
        return None
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(payload, Mapping):
        return dict(payload)
    if isinstance(payload, (list, tuple)):
        return [_model_dump(item) for item in payload]
    raise TypeError(f"Unsupported SCIM payload type: {type(payload)!r}")


def _redact(headers: Mapping[str, str]) -> dict:
    redacted = dict(headers)
    if "Authorization" in redacted:
        scheme = redacted["Authorization"].split(" ", 1)[0]
        redacted["Authorization"] = f"{scheme} ***"
    return redacted


class ScimClient:
    """HTTP client for the PAM SCIM API.

    Features:
    - One request/response round trip per call, no retries
    - Centralized error classification (404, 401/403, 429, other)
    - Optional verbose dumps of every request and response

    Usage:
        client = ScimClient("https://example.my.idaptive.app/scim/v2", session=session)
        users = client.get("/Users", UserList)
    """

    def __init__(
        self,
        api_url: str,
        *,
        session: Optional[requests.Session] = None,
        verbose: bool = False,
        timeout: Timeout = REQUEST_TIMEOUT,
    ):
        """Initialize SCIM client.

        Args:
            api_url: Base API URL including API name and version
                (e.g. "https://example.my.idaptive.app/scim/v2")
            session: HTTP session used to execute requests; its auth hook
                supplies the bearer token
            verbose: Log full requests and responses
            timeout: Default per-request timeout in seconds
        """
        if not api_url:
            raise ValueError("api_url is required")
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.verbose = verbose
        self.timeout = timeout

    def get(self, path: str, model: Optional[Type[ModelT]] = None, *, timeout: Timeout = None) -> Optional[ModelT]:
        """Execute GET request.

        Args:
            path: Resource path with optional query string (e.g. "/Users?count=5")
            model: Model class the response body is decoded into
            timeout: Per-call deadline, overriding the client default

        Returns:
            Decoded model instance, or None when no model is given

        Raises:
            PamScimError: On transport failure, error status or decode failure
        """
        return self._request("GET", path, None, model, timeout)

    def post(
        self,
        path: str,
        payload: Any = None,
        model: Optional[Type[ModelT]] = None,
        *,
        timeout: Timeout = None,
    ) -> Optional[ModelT]:
        """Execute POST request with a JSON payload."""
        return self._request("POST", path, payload, model, timeout)

    def put(
        self,
        path: str,
        payload: Any = None,
        model: Optional[Type[ModelT]] = None,
        *,
        timeout: Timeout = None,
    ) -> Optional[ModelT]:
        """Execute PUT request with a JSON payload."""
        return self._request("PUT", path, payload, model, timeout)

    def patch(
        self,
        path: str,
        payload: Any = None,
        model: Optional[Type[ModelT]] = None,
        *,
        timeout: Timeout = None,
    ) -> Optional[ModelT]:
        """Execute PATCH request with a JSON payload."""
        return self._request("PATCH", path, payload, model, timeout)

    def delete(self, path: str, model: Optional[Type[ModelT]] = None, *, timeout: Timeout = None) -> Optional[ModelT]:
        """Execute DELETE request. No response body is expected."""
        return self._request("DELETE", path, None, model, timeout)

    def _request(
        self,
        method: str,
        path: str,
        payload: Any,
        model: Optional[Type[ModelT]],
        timeout: Timeout,
    ) -> Optional[ModelT]:
        request = requests.Request(method, f"{self.api_url}{path}", json=_model_dump(payload))
        prepared = self.session.prepare_request(request)

        if self.verbose:
            self._dump_request(prepared)

        logger.debug("%s %s", method, prepared.url)
        try:
            resp = self.session.send(prepared, timeout=timeout if timeout is not None else self.timeout)
        except requests.RequestException as exc:
            raise TransportError(method, prepared.url, str(exc)) from exc

        if self.verbose:
            self._dump_response(resp)

        self._handle_error(resp)

        if model is None or not resp.content:
            return None
        return self._decode(method, resp, model)

    def _decode(self, method: str, resp: requests.Response, model: Type[ModelT]) -> ModelT:
        """Validate the response body into a fresh ``model`` instance."""
        try:
            return model.model_validate(resp.json())
        except ValueError as exc:
            raise DecodeError(method, resp.url, resp.text, str(exc)) from exc

    def _handle_error(self, resp: requests.Response) -> None:
        """Centralized error handling for HTTP responses.

        Args:
            resp: Response object to check

        Raises:
            NotFoundError: 404
            AccessDeniedError: 401 or 403
            RateLimitedError: 429
            ScimAPIError: Any other non-success status
        """
        status = resp.status_code
        if status in SUCCESS_STATUSES:
            return
        if status == 404:
            raise NotFoundError(resp.url)
        if status in (401, 403):
            raise AccessDeniedError(resp.url, status)
        if status == 429:
            raise RateLimitedError(resp.url)
        raise ScimAPIError(status, f"failed to do request, {status} status code received", resp.url)

    def _dump_request(self, prepared: requests.PreparedRequest) -> None:
        body = prepared.body.decode("utf-8", "replace") if isinstance(prepared.body, bytes) else prepared.body
        logger.info(
            "%s %s\nheaders=%s\n%s",
            prepared.method,
            prepared.url,
            _redact(prepared.headers),
            body or "",
        )

    def _dump_response(self, resp: requests.Response) -> None:
        logger.info(
            "HTTP %s %s\nheaders=%s\n%s",
            resp.status_code,
            resp.reason,
            dict(resp.headers),
            resp.text,
        )
