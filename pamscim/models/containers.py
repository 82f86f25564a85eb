"""SCIM Container resource, the API's representation of a Safe."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .shared import ListResponse, PrivilegedDataRef, Reference, ScimModel, ScimResource

CONTAINER_SCHEMA = "urn:ietf:params:scim:schemas:pam:1.0:Container"
CYBERARK_SAFE_SCHEMA = "urn:ietf:params:scim:schemas:cyberark:1.0:Safe"


class Owner(Reference):
    pass


class CyberArkSafe(ScimModel):
    NumberOfDaysRetention: Optional[int] = None
    ManagingCPM: Optional[str] = None


class Container(ScimResource):
    """A Safe. Addressed by ``name`` rather than ``id``."""

    name: Optional[str] = None
    displayName: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    owner: Optional[Owner] = None
    privilegedData: Optional[List[PrivilegedDataRef]] = None
    cyberarkSafe: Optional[CyberArkSafe] = Field(None, alias=CYBERARK_SAFE_SCHEMA)


ContainerList = ListResponse[Container]
