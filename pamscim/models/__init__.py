"""Pydantic models mirroring the PAM SCIM resource schemas."""
from .shared import (
    LIST_RESPONSE_SCHEMA,
    PATCH_OP_SCHEMA,
    AuthenticationScheme,
    ContainerRef,
    GroupRef,
    ListResponse,
    Meta,
    PatchOperation,
    PatchRequest,
    PrivilegedDataRef,
    Reference,
    ResourceType,
    Schema,
    SchemaAttribute,
    ScimModel,
    ScimResource,
    ServiceProviderConfig,
    UserRef,
)
from .users import (
    USER_SCHEMA,
    ENTERPRISE_USER_SCHEMA,
    CYBERARK_USER_SCHEMA,
    Address,
    CyberArkUser,
    EnterpriseUser,
    LinkedObject,
    Manager,
    MultiValuedAttribute,
    Name,
    User,
    UserList,
)
from .groups import GROUP_SCHEMA, CyberArkGroup, Group, GroupList, Member
from .containers import CONTAINER_SCHEMA, Container, ContainerList, CyberArkSafe, Owner
from .container_permissions import (
    CONTAINER_PERMISSION_SCHEMA,
    ContainerPermission,
    ContainerPermissionList,
    CyberArkSafeMember,
)
from .privileged_data import (
    PRIVILEGED_DATA_SCHEMA,
    CYBERARK_PRIVILEGED_DATA_SCHEMA,
    CyberArkPrivilegedData,
    PrivilegedData,
    PrivilegedDataList,
    Property,
)
from .privileged_data_permissions import (
    PRIVILEGED_DATA_PERMISSION_SCHEMA,
    PrivilegedDataPermission,
    PrivilegedDataPermissionList,
)

__all__ = [
    # Shared
    "LIST_RESPONSE_SCHEMA",
    "PATCH_OP_SCHEMA",
    "AuthenticationScheme",
    "ContainerRef",
    "GroupRef",
    "ListResponse",
    "Meta",
    "PatchOperation",
    "PatchRequest",
    "PrivilegedDataRef",
    "Reference",
    "ResourceType",
    "Schema",
    "SchemaAttribute",
    "ScimModel",
    "ScimResource",
    "ServiceProviderConfig",
    "UserRef",

    # Users
    "USER_SCHEMA",
    "ENTERPRISE_USER_SCHEMA",
    "CYBERARK_USER_SCHEMA",
    "Address",
    "CyberArkUser",
    "EnterpriseUser",
    "LinkedObject",
    "Manager",
    "MultiValuedAttribute",
    "Name",
    "User",
    "UserList",

    # Groups
    "GROUP_SCHEMA",
    "CyberArkGroup",
    "Group",
    "GroupList",
    "Member",

    # Safes
    "CONTAINER_SCHEMA",
    "Container",
    "ContainerList",
    "CyberArkSafe",
    "Owner",
    "CONTAINER_PERMISSION_SCHEMA",
    "ContainerPermission",
    "ContainerPermissionList",
    "CyberArkSafeMember",

    # Privileged data
    "PRIVILEGED_DATA_SCHEMA",
    "CYBERARK_PRIVILEGED_DATA_SCHEMA",
    "CyberArkPrivilegedData",
    "PrivilegedData",
    "PrivilegedDataList",
    "Property",
    "PRIVILEGED_DATA_PERMISSION_SCHEMA",
    "PrivilegedDataPermission",
    "PrivilegedDataPermissionList",
]
