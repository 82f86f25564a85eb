"""PAM SCIM Safe permission (ContainerPermission) operations."""
from __future__ import annotations
from typing import Optional

from .client import Timeout
from .models import ContainerPermission, ContainerPermissionList
from .resource import ResourceService


def permission_key(safe_name: str, principal_name: str) -> str:
    """Composite ``<safeName>:<userOrGroupName>`` key used by permission resources."""
    return f"{safe_name}:{principal_name}"


class SafePermissionService(ResourceService):
    """Service for managing user and group permissions on Safes.

    Permissions are addressed by ``<safeName>:<userOrGroupName>``.
    """

    resource = "ContainerPermissions"
    allowed_sort_by = ("id",)

    def get_safe_permissions(self, *, timeout: Timeout = None) -> ContainerPermissionList:
        """Retrieve permissions on all Safes."""
        return self._get("failed to get safe permissions", ContainerPermissionList, timeout=timeout)

    def get_safe_permissions_index(
        self, start_index: int, count: int, *, timeout: Timeout = None
    ) -> ContainerPermissionList:
        """Retrieve a page of Safe permissions starting at the 1-based ``start_index``."""
        return self._list_index(
            "failed to get safe permissions", ContainerPermissionList, start_index, count, timeout=timeout
        )

    def get_safe_permissions_sort(
        self, sort_by: str, sort_order: Optional[str] = None, *, timeout: Timeout = None
    ) -> ContainerPermissionList:
        """Retrieve all Safe permissions sorted on ``id``, the only supported attribute."""
        return self._list_sorted(
            "failed to get safe permissions", ContainerPermissionList, sort_by, sort_order, timeout=timeout
        )

    def get_safe_permissions_by_name(
        self, safe_name: str, principal_name: str, *, timeout: Timeout = None
    ) -> ContainerPermission:
        """Retrieve one user's or group's permissions on a Safe.

        Args:
            safe_name: Safe name (e.g. "VaultInternal")
            principal_name: User or group name (e.g. "EPMAgent")
        """
        return self._get(
            f"failed to get {principal_name} permissions on safe {safe_name}",
            ContainerPermission,
            key=permission_key(safe_name, principal_name),
            timeout=timeout,
        )

    def get_safe_permissions_by_filter(
        self, filter_type: str, filter_query: str, *, timeout: Timeout = None
    ) -> ContainerPermissionList:
        """Retrieve Safe permissions matching a filter (case sensitive).

        Args:
            filter_type: e.g. container.name, container.display, user.display,
                user.value, group.display, group.value
            filter_query: Value to match

        Example:
            # all permissions on one safe
            service.get_safe_permissions_by_filter("container.name", "PVWATicketingSystem")
            # one user's permissions on every safe
            service.get_safe_permissions_by_filter("user.display", "EPMAgent")
        """
        return self._list_filtered(
            f"failed to get safe permissions based on filter parameters - {filter_type} = {filter_query}",
            ContainerPermissionList,
            filter_type,
            filter_query,
            timeout=timeout,
        )

    def add_safe_permissions(
        self, permission: ContainerPermission, *, timeout: Timeout = None
    ) -> ContainerPermission:
        """Grant a user or group rights on a Safe.

        ``permission`` names the Safe (``container.name``), the principal
        (``user.display`` or ``group.display``) and the ``rights`` list.
        """
        return self._post(
            f"failed to add {permission.principal_name} permissions to safe {permission.container_name}",
            permission,
            ContainerPermission,
            timeout=timeout,
        )

    def update_safe_permissions(
        self, permission: ContainerPermission, *, timeout: Timeout = None
    ) -> ContainerPermission:
        """Replace a principal's rights on a Safe.

        The key is taken from ``permission.container`` and ``permission.user``
        (or ``permission.group``).
        """
        safe_name = self._require(permission.container_name, "container name")
        principal_name = self._require(permission.principal_name, "user or group display name")
        return self._put(
            f"failed to update {principal_name} permissions on safe {safe_name}",
            permission_key(safe_name, principal_name),
            permission,
            ContainerPermission,
            timeout=timeout,
        )

    def delete_safe_permission(self, safe_name: str, principal_name: str, *, timeout: Timeout = None) -> None:
        """Remove a user's or group's permissions from a Safe."""
        self._delete(
            f"failed to remove {principal_name} permissions from safe {safe_name}",
            permission_key(safe_name, principal_name),
            timeout=timeout,
        )
