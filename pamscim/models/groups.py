"""SCIM Group resource."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .shared import ListResponse, Reference, ScimModel, ScimResource

GROUP_SCHEMA = "urn:ietf:params:scim:schemas:core:2.0:Group"
CYBERARK_GROUP_SCHEMA = "urn:ietf:params:scim:schemas:cyberark:1.0:Group"


class Member(Reference):
    type: Optional[str] = None


class CyberArkGroup(ScimModel):
    directoryType: Optional[str] = None
    directoryName: Optional[str] = None


class Group(ScimResource):
    displayName: Optional[str] = None
    members: Optional[List[Member]] = None
    cyberarkGroup: Optional[CyberArkGroup] = Field(None, alias=CYBERARK_GROUP_SCHEMA)


GroupList = ListResponse[Group]
