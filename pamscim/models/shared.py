"""SCIM structures shared by every resource type."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

LIST_RESPONSE_SCHEMA = "urn:ietf:params:scim:api:messages:2.0:ListResponse"
PATCH_OP_SCHEMA = "urn:ietf:params:scim:api:messages:2.0:PatchOp"


class ScimModel(BaseModel):
    """Base for SCIM payloads. Unknown attributes are kept and sent back as-is."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Meta(ScimModel):
    resourceType: Optional[str] = None
    created: Optional[datetime] = None
    lastModified: Optional[datetime] = None
    location: Optional[str] = None
    version: Optional[str] = None


class ScimResource(ScimModel):
    """Attributes common to every persisted SCIM resource.

    ``id`` is assigned by the server and left unset on create payloads.
    """

    schemas: List[str] = Field(default_factory=list)
    id: Optional[str] = None
    externalId: Optional[str] = None
    meta: Optional[Meta] = None


class Reference(ScimModel):
    """A ``value``/``$ref``/``display`` pointer to another resource."""

    value: Optional[str] = None
    ref: Optional[str] = Field(None, alias="$ref")
    display: Optional[str] = None


class UserRef(Reference):
    pass


class GroupRef(Reference):
    pass


class PrivilegedDataRef(Reference):
    type: Optional[str] = None


class ContainerRef(Reference):
    name: Optional[str] = None


ResourceT = TypeVar("ResourceT")


class ListResponse(ScimModel, Generic[ResourceT]):
    """Collection envelope returned by list, index, sort and filter calls."""

    schemas: List[str] = Field(default_factory=lambda: [LIST_RESPONSE_SCHEMA])
    totalResults: int = 0
    itemsPerPage: Optional[int] = None
    startIndex: Optional[int] = None
    Resources: List[ResourceT] = Field(default_factory=list)


class PatchOperation(ScimModel):
    op: str
    path: Optional[str] = None
    value: Optional[Any] = None


class PatchRequest(ScimModel):
    schemas: List[str] = Field(default_factory=lambda: [PATCH_OP_SCHEMA])
    Operations: List[PatchOperation] = Field(default_factory=list)


# ServiceProviderConfig
class Supported(ScimModel):
    supported: bool = False


class BulkConfig(Supported):
    maxOperations: int = 0
    maxPayloadSize: int = 0


class FilterConfig(Supported):
    maxResults: int = 0


class AuthenticationScheme(ScimModel):
    type: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


class ServiceProviderConfig(ScimModel):
    schemas: List[str] = Field(default_factory=list)
    patch: Optional[Supported] = None
    bulk: Optional[BulkConfig] = None
    filter: Optional[FilterConfig] = None
    changePassword: Optional[Supported] = None
    sort: Optional[Supported] = None
    etag: Optional[Supported] = None
    authenticationSchemes: List[AuthenticationScheme] = Field(default_factory=list)
    meta: Optional[Meta] = None


# ResourceTypes
class SchemaExtension(ScimModel):
    schema_uri: str = Field(alias="schema")
    required: bool = False


class ResourceType(ScimResource):
    name: Optional[str] = None
    endpoint: Optional[str] = None
    schema_uri: Optional[str] = Field(None, alias="schema")
    schemaExtensions: List[SchemaExtension] = Field(default_factory=list)


# Schemas
class SubAttribute(ScimModel):
    name: str
    type: Optional[str] = None
    multiValued: bool = False
    required: bool = False
    caseExact: Optional[bool] = None


class SchemaAttribute(SubAttribute):
    subAttributes: List[SubAttribute] = Field(default_factory=list)
    mutability: Optional[str] = None
    returned: Optional[str] = None


class Schema(ScimResource):
    name: Optional[str] = None
    description: Optional[str] = None
    attributes: List[SchemaAttribute] = Field(default_factory=list)
