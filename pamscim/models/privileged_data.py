"""SCIM PrivilegedData resource (accounts, SSH keys and other secrets)."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .shared import ListResponse, ScimModel, ScimResource

PRIVILEGED_DATA_SCHEMA = "urn:ietf:params:scim:schemas:pam:1.0:PrivilegedData"
CYBERARK_PRIVILEGED_DATA_SCHEMA = "urn:ietf:params:scim:schemas:cyberark:1.0:PrivilegedData"


class Property(ScimModel):
    key: str
    value: Optional[str] = None


class CyberArkPrivilegedData(ScimModel):
    safe: Optional[str] = None
    folder: Optional[str] = None
    password: Optional[str] = None
    properties: Optional[List[Property]] = None


class PrivilegedData(ScimResource):
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    cyberarkPrivilegedData: Optional[CyberArkPrivilegedData] = Field(
        None, alias=CYBERARK_PRIVILEGED_DATA_SCHEMA
    )


PrivilegedDataList = ListResponse[PrivilegedData]
