"""Authenticated entry point for the PAM SCIM API."""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Optional, Union

import requests
from requests.auth import AuthBase

from .auth import Token, normalize_host, bearer_token, oauth_client_credentials, oauth_resource_owner
from .client import REQUEST_TIMEOUT, ScimClient, Timeout
from .discovery import DiscoveryService
from .exceptions import ConfigurationError
from .groups import GroupService
from .privileged_data import PrivilegedDataService
from .privileged_data_permissions import PrivilegedDataPermissionService
from .safe_permissions import SafePermissionService
from .safes import SafeService
from .users import UserService

if TYPE_CHECKING:
    from .config.settings import ScimSettings

logger = logging.getLogger(__name__)


class BearerAuth(AuthBase):
    """Attach the SCIM JSON headers and the bearer token to every request."""

    def __init__(self, token: str):
        self._token = token

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        r.headers["Content-Type"] = "application/json"
        r.headers["Accept"] = "application/json"
        r.headers["Authorization"] = f"Bearer {self._token}"
        return r


class PamScimService:
    """Session bound to one tenant and one access token.

    The host, API path and token are fixed at construction; to use another
    token, build another service.

    Usage:
        token = oauth_client_credentials(client_id, client_secret, app_id, host)
        scim = PamScimService("example.my.idaptive.app", token=token)
        scim.users.get_users_index(1, 50)
        scim.safes.get_safe_by_name("NotificationEngine")
    """

    def __init__(
        self,
        host: str,
        api_endpoint: str = "scim",
        api_version: str = "v2",
        verbose: bool = False,
        token: Union[Token, str, None] = None,
        timeout: Timeout = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the service.

        Args:
            host: Tenant host, with or without scheme
            api_endpoint: API name segment of the URL
            api_version: API version segment of the URL
            verbose: Log every request and response at INFO level
            token: Token from ``pamscim.auth`` or a raw access token string
            timeout: Default per-request timeout in seconds
            session: Optional requests session to reuse
        """
        if token is None:
            raise ConfigurationError("an access token is required")
        if isinstance(token, str):
            token = bearer_token(token)
        self._token = token
        self._api_url = f"{normalize_host(host)}/{api_endpoint.strip('/')}/{api_version.strip('/')}"

        http = session or requests.Session()
        http.auth = BearerAuth(token.access_token)
        self._client = ScimClient(self._api_url, session=http, verbose=verbose, timeout=timeout)

        self.users = UserService(self._client)
        self.groups = GroupService(self._client)
        self.safes = SafeService(self._client)
        self.safe_permissions = SafePermissionService(self._client)
        self.privileged_data = PrivilegedDataService(self._client)
        self.privileged_data_permissions = PrivilegedDataPermissionService(self._client)
        self.discovery = DiscoveryService(self._client)

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def token_type(self) -> str:
        return self._token.token_type

    @property
    def client(self) -> ScimClient:
        return self._client

    @classmethod
    def from_settings(cls, settings: "ScimSettings", session: Optional[requests.Session] = None) -> "PamScimService":
        """Acquire a token for the configured auth mode and build the service.

        Args:
            settings: Loaded settings (see ``pamscim.config.load_settings``)
            session: Optional requests session to reuse for SCIM calls

        Raises:
            ConfigurationError: If settings do not describe a usable auth mode
            AuthenticationError: If the token exchange fails
        """
        mode = settings.auth_mode
        logger.debug("[service] authenticating against %s using %s", settings.host, mode)
        if mode == "token":
            token = bearer_token(settings.bearer_token)
        elif mode == "resource_owner":
            token = oauth_resource_owner(
                settings.client_id,
                settings.client_secret,
                settings.app_id,
                settings.host,
                settings.username,
                settings.password,
            )
        else:
            token = oauth_client_credentials(
                settings.client_id,
                settings.client_secret,
                settings.app_id,
                settings.host,
            )
        return cls(
            settings.host,
            api_endpoint=settings.api_endpoint,
            api_version=settings.api_version,
            verbose=settings.verbose,
            token=token,
            timeout=settings.timeout,
            session=session,
        )
