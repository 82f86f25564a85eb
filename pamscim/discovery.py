"""SCIM discovery endpoints: service provider config, resource types, schemas."""
from __future__ import annotations

from .client import ScimClient, Timeout
from .exceptions import error_context
from .models import ListResponse, ResourceType, Schema, ServiceProviderConfig


class DiscoveryService:
    """Read-only access to what the SCIM server supports."""

    def __init__(self, client: ScimClient):
        self.client = client

    def get_service_provider_config(self, *, timeout: Timeout = None) -> ServiceProviderConfig:
        """Retrieve supported features (patch, bulk, filter, sort, auth schemes)."""
        with error_context("failed to get service provider config"):
            return self.client.get("/ServiceProviderConfig", ServiceProviderConfig, timeout=timeout)

    def get_resource_types(self, *, timeout: Timeout = None) -> ListResponse[ResourceType]:
        with error_context("failed to get resource types"):
            return self.client.get("/ResourceTypes", ListResponse[ResourceType], timeout=timeout)

    def get_schemas(self, *, timeout: Timeout = None) -> ListResponse[Schema]:
        with error_context("failed to get schemas"):
            return self.client.get("/Schemas", ListResponse[Schema], timeout=timeout)
