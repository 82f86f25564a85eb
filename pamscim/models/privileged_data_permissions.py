"""SCIM PrivilegedDataPermission resource."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .shared import GroupRef, ListResponse, PrivilegedDataRef, ScimResource, UserRef

PRIVILEGED_DATA_PERMISSION_SCHEMA = "urn:ietf:params:scim:schemas:pam:1.0:PrivilegedDataPermission"


class PrivilegedDataPermission(ScimResource):
    privilegedData: Optional[PrivilegedDataRef] = None
    user: Optional[UserRef] = None
    group: Optional[GroupRef] = None
    rights: List[str] = Field(default_factory=list)


PrivilegedDataPermissionList = ListResponse[PrivilegedDataPermission]
