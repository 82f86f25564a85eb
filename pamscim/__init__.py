"""PAM SCIM API client library.

This package provides a typed, testable interface to the SCIM API of a
privileged access management tenant.

Architecture:
- client.py: HTTP client with status classification and JSON decoding
- service.py: Authenticated session binding host, API version and token
- auth.py: OAuth2 token acquisition (client credentials, resource owner)
- users.py, groups.py: Identity resources
- safes.py, safe_permissions.py: Safes (Containers) and their members
- privileged_data.py, privileged_data_permissions.py: Stored secrets and their members
- discovery.py: ServiceProviderConfig, ResourceTypes and Schemas
- query.py: startIndex/count, sortBy/sortOrder and filter builders
- models/: Pydantic models of the SCIM resources
- config/: Settings from YAML, environment and /run/secrets
- exceptions.py: Typed exceptions for error handling

Usage:
    from pamscim import PamScimService, oauth_client_credentials

    token = oauth_client_credentials(client_id, client_secret, app_id, "example.my.idaptive.app")
    scim = PamScimService("example.my.idaptive.app", token=token)

    users = scim.users.get_users_by_filter("userName", "alice@example.com")
    safe = scim.safes.get_safe_by_name("NotificationEngine")

    # Or from IDENTITY_* settings
    from pamscim.config import load_settings
    scim = PamScimService.from_settings(load_settings("config.yml"))
"""
from .auth import (
    Token,
    bearer_token,
    oauth_client_credentials,
    oauth_resource_owner,
)
from .client import ScimClient, REQUEST_TIMEOUT
from .service import BearerAuth, PamScimService
from .exceptions import (
    PamScimError,
    ScimAPIError,
    NotFoundError,
    AccessDeniedError,
    RateLimitedError,
    DecodeError,
    TransportError,
    ScimValidationError,
    AuthenticationError,
    ConfigurationError,
)
from .users import UserService
from .groups import GroupService
from .safes import SafeService
from .safe_permissions import SafePermissionService
from .privileged_data import PrivilegedDataService
from .privileged_data_permissions import PrivilegedDataPermissionService
from .discovery import DiscoveryService
from .query import filter_query, index_query, sort_query

__all__ = [
    # Auth
    "Token",
    "bearer_token",
    "oauth_client_credentials",
    "oauth_resource_owner",

    # Client & session
    "ScimClient",
    "REQUEST_TIMEOUT",
    "BearerAuth",
    "PamScimService",

    # Exceptions
    "PamScimError",
    "ScimAPIError",
    "NotFoundError",
    "AccessDeniedError",
    "RateLimitedError",
    "DecodeError",
    "TransportError",
    "ScimValidationError",
    "AuthenticationError",
    "ConfigurationError",

    # Services
    "UserService",
    "GroupService",
    "SafeService",
    "SafePermissionService",
    "PrivilegedDataService",
    "PrivilegedDataPermissionService",
    "DiscoveryService",

    # Query builders
    "filter_query",
    "index_query",
    "sort_query",
]
