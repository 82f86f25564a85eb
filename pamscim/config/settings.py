"""Settings loader with YAML file, environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..client import REQUEST_TIMEOUT
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SECRETS_DIR = Path("/run/secrets")
CONFIG_SECTION = "IDENTITY"

# settings field -> (YAML key under IDENTITY, environment variable, secret file name)
_SOURCES = {
    "host": ("URL", "IDENTITY_URL", None),
    "app_id": ("APP_ID", "IDENTITY_APP_ID", None),
    "client_id": ("CLIENT_ID", "IDENTITY_CLIENT_ID", None),
    "client_secret": ("CLIENT_SECRET", "IDENTITY_CLIENT_SECRET", "identity_client_secret"),
    "username": ("USERNAME", "IDENTITY_USERNAME", None),
    "password": ("SECRET", "IDENTITY_SECRET", "identity_secret"),
    "bearer_token": ("TOKEN", "IDENTITY_TOKEN", "identity_token"),
}


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = SECRETS_DIR / secret_name

    if secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
        except OSError as e:
            logger.warning("[settings] Failed to read %s: %s", secret_file, e)
        else:
            if secret_value:
                logger.info("[settings] Loaded %s from %s", secret_name, SECRETS_DIR)
                return secret_value

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.info("[settings] Loaded %s from environment", env_var)
            return secret_value

    return None


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _read_config_file(config_path: Union[str, Path]) -> dict:
    path = Path(config_path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            document = yaml.safe_load(handle) or {}
    except OSError as e:
        raise ConfigurationError(f"could not read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"invalid YAML in config file {path}: {e}") from e

    section = document.get(CONFIG_SECTION) if isinstance(document, dict) else None
    if section is None:
        raise ConfigurationError(f"config file {path} has no {CONFIG_SECTION} section")
    if not isinstance(section, dict):
        raise ConfigurationError(f"{CONFIG_SECTION} section in {path} must be a mapping")
    logger.info("[settings] Loaded %s from %s", CONFIG_SECTION, path)
    return section


@dataclass(frozen=True)
class ScimSettings:
    """PAM SCIM client configuration container."""
    # Tenant
    host: str = ""
    app_id: str = ""

    # OAuth2 client
    client_id: str = ""
    client_secret: str = ""

    # Resource owner credentials
    username: str = ""
    password: str = ""

    # Pre-issued token, bypasses the OAuth2 exchange
    bearer_token: str = ""

    # API
    api_endpoint: str = "scim"
    api_version: str = "v2"
    verbose: bool = False
    timeout: float = REQUEST_TIMEOUT

    @property
    def auth_mode(self) -> str:
        """Select how the access token is obtained.

        Priority:
        1. "token": a bearer token is configured
        2. "resource_owner": client, app and user credentials are configured
        3. "client_credentials": client and app credentials are configured

        Raises:
            ConfigurationError: If the host or credentials are missing
        """
        if not self.host:
            raise ConfigurationError("IDENTITY_URL is required")
        if self.bearer_token:
            return "token"
        if not (self.app_id and self.client_id and self.client_secret):
            raise ConfigurationError(
                "IDENTITY_TOKEN or IDENTITY_APP_ID, IDENTITY_CLIENT_ID and IDENTITY_CLIENT_SECRET are required"
            )
        if self.username and self.password:
            return "resource_owner"
        return "client_credentials"


def load_settings(config_path: Optional[Union[str, Path]] = None) -> ScimSettings:
    """Load settings from an optional YAML file, environment and /run/secrets.

    Environment variables (``IDENTITY_*``) and secret files override values
    read from the YAML file.

    Args:
        config_path: YAML file with an ``IDENTITY`` section; falls back to
            the ``IDENTITY_CONFIG`` environment variable

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    config_path = config_path or os.environ.get("IDENTITY_CONFIG")
    section = _read_config_file(config_path) if config_path else {}

    values: dict[str, Any] = {}
    for field_name, (yaml_key, env_var, secret_name) in _SOURCES.items():
        if secret_name:
            value = _load_secret_from_file(secret_name, env_var)
        else:
            value = os.environ.get(env_var)
        if value is None and section.get(yaml_key) is not None:
            value = str(section[yaml_key])
        values[field_name] = value or ""

    verbose = os.environ.get("IDENTITY_VERBOSE", section.get("VERBOSE", False))
    timeout = os.environ.get("IDENTITY_TIMEOUT", section.get("TIMEOUT", REQUEST_TIMEOUT))
    try:
        timeout = float(timeout)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"invalid timeout value {timeout!r}") from e

    return ScimSettings(
        api_endpoint=os.environ.get("IDENTITY_API_ENDPOINT", section.get("API_ENDPOINT", "scim")),
        api_version=os.environ.get("IDENTITY_API_VERSION", section.get("API_VERSION", "v2")),
        verbose=_as_bool(verbose),
        timeout=timeout,
        **values,
    )
