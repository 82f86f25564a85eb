"""PAM SCIM group operations."""
from __future__ import annotations
from typing import Optional

from .client import Timeout
from .models import Group, GroupList
from .resource import ResourceService

GROUP_FILTER_TYPES = ("id", "displayName")


class GroupService(ResourceService):
    """Service for managing SCIM groups. Groups are addressed by ``id``."""

    resource = "Groups"
    allowed_sort_by = ("displayName",)

    def get_groups(self, *, timeout: Timeout = None) -> GroupList:
        """Retrieve all groups."""
        return self._get("failed to get groups", GroupList, timeout=timeout)

    def get_groups_index(self, start_index: int, count: int, *, timeout: Timeout = None) -> GroupList:
        """Retrieve a page of groups starting at the 1-based ``start_index``."""
        return self._list_index("failed to get groups", GroupList, start_index, count, timeout=timeout)

    def get_groups_sort(self, sort_by: str, sort_order: Optional[str] = None, *, timeout: Timeout = None) -> GroupList:
        """Retrieve all groups sorted on ``displayName``."""
        return self._list_sorted("failed to get groups", GroupList, sort_by, sort_order, timeout=timeout)

    def get_group_by_id(self, group_id: str, *, timeout: Timeout = None) -> Group:
        """Retrieve a single group by id."""
        return self._get(f"failed to get group {group_id}", Group, key=group_id, timeout=timeout)

    def get_groups_by_filter(self, filter_type: str, filter_query: str, *, timeout: Timeout = None) -> GroupList:
        """Retrieve groups by ``id`` or ``displayName``.

        The API requires the value to be quoted for groups, e.g.
        ``filter=displayName eq "Auditors"``.

        Args:
            filter_type: "id" or "displayName"
            filter_query: Value to match (e.g. "Auditors")

        Raises:
            ScimValidationError: If filter_type is not id or displayName
        """
        return self._list_filtered(
            f"failed to get group based on filter parameters - {filter_type} = {filter_query}",
            GroupList,
            filter_type,
            filter_query,
            timeout=timeout,
            allowed_types=GROUP_FILTER_TYPES,
            quote_value=True,
        )

    def add_group(self, group: Group, *, timeout: Timeout = None) -> Group:
        """Create a group. ``displayName`` and ``schemas`` are required."""
        return self._post(f"failed to add group {group.displayName}", group, Group, timeout=timeout)

    def update_group(self, group: Group, *, timeout: Timeout = None) -> Group:
        """Replace the group identified by ``group.id``."""
        group_id = self._require(group.id, "group id")
        return self._put(f"failed to update group {group_id}", group_id, group, Group, timeout=timeout)

    def delete_group(self, group_id: str, *, timeout: Timeout = None) -> None:
        """Delete a group. Deleting the same id twice raises NotFoundError."""
        self._delete(f"failed to delete group {group_id}", group_id, timeout=timeout)
