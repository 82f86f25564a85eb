"""OAuth2 token acquisition for the PAM SCIM API.

The identity tenant exposes one token endpoint per OAuth2 application:

    <host>/oauth2/token/<app_id>

Two grants are supported, both with scope ``scim``:
- Client credentials (service account, HTTP Basic client authentication)
- Resource owner password (interactive user credentials)

A literal bearer token can also be wrapped with ``bearer_token``.
"""
from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import parse_qsl

import requests
from authlib.common.errors import AuthlibBaseError
from authlib.integrations.requests_client import OAuth2Session

from .client import REQUEST_TIMEOUT
from .exceptions import AuthenticationError, ConfigurationError

SCIM_SCOPE = "scim"

TOKEN_REQUEST_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/x-www-form-urlencoded",
}

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    """Access token returned by the identity tenant.

    Attributes:
        access_token: Bearer credential sent on every SCIM request
        token_type: Usually "Bearer"
        refresh_token: Present for resource owner grants when the app allows it
        expiry: UTC expiry time, None when the server did not report one
    """
    access_token: str
    token_type: str = "Bearer"
    refresh_token: Optional[str] = None
    expiry: Optional[datetime] = None

    @property
    def valid(self) -> bool:
        """True when the token is non-empty and not expired."""
        if not self.access_token:
            return False
        if self.expiry is None:
            return True
        return datetime.now(timezone.utc) < self.expiry


def normalize_host(host: str) -> str:
    """Strip trailing slashes and default the scheme to https."""
    if not host:
        raise ConfigurationError("identity host is required")
    host = host.rstrip("/")
    if "://" not in host:
        host = f"https://{host}"
    return host


def token_endpoint(host: str, app_id: str) -> str:
    return f"{normalize_host(host)}/oauth2/token/{app_id}"


def authorize_endpoint(host: str, app_id: str) -> str:
    return f"{normalize_host(host)}/oauth2/authorize/{app_id}"


def _form_encoded_token_response(resp: requests.Response) -> requests.Response:
    """Rewrite a form-encoded token response as JSON so authlib can parse it."""
    content_type = resp.headers.get("Content-Type", "")
    if "application/json" in content_type:
        return resp
    try:
        json.loads(resp.text)
        return resp
    except ValueError:
        pass
    fields = dict(parse_qsl(resp.text, keep_blank_values=True))
    if "access_token" in fields:
        resp._content = json.dumps(fields).encode("utf-8")
    return resp


def _oauth_session(client_id: str, client_secret: str, **metadata) -> OAuth2Session:
    session = OAuth2Session(
        client_id,
        client_secret,
        scope=SCIM_SCOPE,
        default_timeout=REQUEST_TIMEOUT,
        **metadata,
    )
    session.register_compliance_hook("access_token_response", _form_encoded_token_response)
    return session


def _to_token(raw: dict) -> Token:
    access_token = raw.get("access_token")
    if not access_token:
        raise AuthenticationError("token response did not contain an access_token")
    expiry = None
    expires_at = raw.get("expires_at")
    if expires_at:
        expiry = datetime.fromtimestamp(int(expires_at), tz=timezone.utc)
    return Token(
        access_token=access_token,
        token_type=raw.get("token_type") or "Bearer",
        refresh_token=raw.get("refresh_token"),
        expiry=expiry,
    )


def _fetch(session: OAuth2Session, url: str, **params) -> Token:
    try:
        raw = session.fetch_token(url, headers=dict(TOKEN_REQUEST_HEADERS), **params)
    except (AuthlibBaseError, requests.RequestException, ValueError) as exc:
        logger.warning("[auth] token request to %s failed: %s", url, exc)
        raise AuthenticationError(f"failed to get oauth2 token from {url}: {exc}") from exc
    finally:
        session.close()
    return _to_token(raw)


def oauth_client_credentials(client_id: str, client_secret: str, app_id: str, host: str) -> Token:
    """Obtain a token with the client credentials grant.

    Sends ``grant_type=client_credentials&scope=scim`` with the client id
    and secret as HTTP Basic credentials.

    Args:
        client_id: Service account user (e.g. "svc-scim@example.com")
        client_secret: Service account password
        app_id: OAuth2 application id configured in the tenant
        host: Tenant host, with or without scheme (e.g. "example.my.idaptive.app")

    Returns:
        Token carrying the access token and its type

    Raises:
        AuthenticationError: If the exchange fails or no token is returned
    """
    url = token_endpoint(host, app_id)
    logger.debug("[auth] client credentials grant against %s", url)
    session = _oauth_session(client_id, client_secret, token_endpoint=url)
    return _fetch(session, url, grant_type="client_credentials")


def oauth_resource_owner(
    client_id: str,
    client_secret: str,
    app_id: str,
    host: str,
    username: str,
    password: str,
) -> Token:
    """Obtain a token with the resource owner password grant.

    Args:
        client_id: OAuth2 client id
        client_secret: OAuth2 client secret
        app_id: OAuth2 application id configured in the tenant
        host: Tenant host, with or without scheme
        username: End user name
        password: End user password

    Raises:
        AuthenticationError: If the exchange fails or no token is returned
    """
    url = token_endpoint(host, app_id)
    logger.debug("[auth] resource owner grant for %s against %s", username, url)
    session = _oauth_session(
        client_id,
        client_secret,
        token_endpoint=url,
        authorization_endpoint=authorize_endpoint(host, app_id),
    )
    return _fetch(session, url, grant_type="password", username=username, password=password)


def bearer_token(access_token: str) -> Token:
    """Wrap an already issued access token."""
    if not access_token:
        raise AuthenticationError("bearer token is empty")
    return Token(access_token=access_token)
