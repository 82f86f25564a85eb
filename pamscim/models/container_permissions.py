"""SCIM ContainerPermission resource: a principal's rights on a Safe."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .shared import ContainerRef, GroupRef, ListResponse, ScimModel, ScimResource, UserRef

CONTAINER_PERMISSION_SCHEMA = "urn:ietf:params:scim:schemas:pam:1.0:ContainerPermission"
CYBERARK_SAFE_MEMBER_SCHEMA = "urn:ietf:params:scim:schemas:cyberark:1.0:SafeMember"


class CyberArkSafeMember(ScimModel):
    membershipExpirationDate: Optional[int] = None
    memberType: Optional[str] = None
    searchIn: Optional[str] = None


class ContainerPermission(ScimResource):
    container: Optional[ContainerRef] = None
    user: Optional[UserRef] = None
    group: Optional[GroupRef] = None
    rights: List[str] = Field(default_factory=list)
    safeMember: Optional[CyberArkSafeMember] = Field(None, alias=CYBERARK_SAFE_MEMBER_SCHEMA)

    @property
    def container_name(self) -> Optional[str]:
        if self.container is None:
            return None
        return self.container.name or self.container.display

    @property
    def principal_name(self) -> Optional[str]:
        """Display name of the user, or of the group when no user is set."""
        for ref in (self.user, self.group):
            if ref is not None and ref.display:
                return ref.display
        return None


ContainerPermissionList = ListResponse[ContainerPermission]
