"""Configuration module for the PAM SCIM client."""
from .settings import ScimSettings, load_settings

__all__ = ["ScimSettings", "load_settings"]
