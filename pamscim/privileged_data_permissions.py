"""PAM SCIM Privileged Data permission operations."""
from __future__ import annotations
from typing import Optional

from .client import Timeout
from .models import PrivilegedDataPermission, PrivilegedDataPermissionList
from .resource import ResourceService
from .safe_permissions import permission_key


class PrivilegedDataPermissionService(ResourceService):
    """Service for managing user and group permissions on Privileged Data.

    Permissions are addressed by ``<containerName>:<userOrGroupName>``.
    """

    resource = "PrivilegedDataPermissions"
    allowed_sort_by = ("id",)

    def get_privileged_data_permissions(self, *, timeout: Timeout = None) -> PrivilegedDataPermissionList:
        return self._get(
            "failed to get privileged data permissions", PrivilegedDataPermissionList, timeout=timeout
        )

    def get_privileged_data_permissions_index(
        self, start_index: int, count: int, *, timeout: Timeout = None
    ) -> PrivilegedDataPermissionList:
        return self._list_index(
            "failed to get privileged data permissions",
            PrivilegedDataPermissionList,
            start_index,
            count,
            timeout=timeout,
        )

    def get_privileged_data_permissions_sort(
        self, sort_by: str, sort_order: Optional[str] = None, *, timeout: Timeout = None
    ) -> PrivilegedDataPermissionList:
        return self._list_sorted(
            "failed to get privileged data permissions",
            PrivilegedDataPermissionList,
            sort_by,
            sort_order,
            timeout=timeout,
        )

    def get_privileged_data_permissions_by_name(
        self, container_name: str, principal_name: str, *, timeout: Timeout = None
    ) -> PrivilegedDataPermission:
        """Retrieve one user's or group's permissions on Privileged Data in a container."""
        return self._get(
            f"failed to get {principal_name} privileged data permissions on {container_name}",
            PrivilegedDataPermission,
            key=permission_key(container_name, principal_name),
            timeout=timeout,
        )

    def get_privileged_data_permissions_by_filter(
        self, filter_type: str, filter_query: str, *, timeout: Timeout = None
    ) -> PrivilegedDataPermissionList:
        """Retrieve permissions matching a filter, e.g. ``("user.display", "EPMAgent")``."""
        return self._list_filtered(
            f"failed to get privileged data permissions based on filter parameters - {filter_type} = {filter_query}",
            PrivilegedDataPermissionList,
            filter_type,
            filter_query,
            timeout=timeout,
        )

    def add_privileged_data_permissions(
        self, permission: PrivilegedDataPermission, *, timeout: Timeout = None
    ) -> PrivilegedDataPermission:
        return self._post(
            "failed to add privileged data permissions",
            permission,
            PrivilegedDataPermission,
            timeout=timeout,
        )

    def update_privileged_data_permissions(
        self,
        container_name: str,
        principal_name: str,
        permission: PrivilegedDataPermission,
        *,
        timeout: Timeout = None,
    ) -> PrivilegedDataPermission:
        """Replace a principal's rights on Privileged Data.

        Args:
            container_name: Container holding the Privileged Data
            principal_name: User or group name
            permission: Full permission record sent as the replacement
        """
        self._require(container_name, "container name")
        self._require(principal_name, "user or group name")
        return self._put(
            f"failed to update {principal_name} privileged data permissions on {container_name}",
            permission_key(container_name, principal_name),
            permission,
            PrivilegedDataPermission,
            timeout=timeout,
        )

    def delete_privileged_data_permissions(
        self, container_name: str, principal_name: str, *, timeout: Timeout = None
    ) -> None:
        self._delete(
            f"failed to remove {principal_name} privileged data permissions from {container_name}",
            permission_key(container_name, principal_name),
            timeout=timeout,
        )
