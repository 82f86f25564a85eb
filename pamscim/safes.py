"""PAM SCIM Safe (Container) operations."""
from __future__ import annotations
from typing import Optional

from .client import Timeout
from .models import Container, ContainerList
from .resource import ResourceService


class SafeService(ResourceService):
    """Service for managing Safes, exposed by the API as Containers.

    Safes are addressed by ``name``, not by ``id``.
    """

    resource = "Containers"
    allowed_sort_by = (
        "name",
        "displayName",
        "description",
        "id",
        "meta.created",
        "meta.lastmodified",
        "meta.location",
    )

    def get_safes(self, *, timeout: Timeout = None) -> ContainerList:
        """Retrieve all Safes."""
        return self._get("failed to get safes", ContainerList, timeout=timeout)

    def get_safes_index(self, start_index: int, count: int, *, timeout: Timeout = None) -> ContainerList:
        """Retrieve a page of Safes starting at the 1-based ``start_index``."""
        return self._list_index("failed to get safes", ContainerList, start_index, count, timeout=timeout)

    def get_safes_sort(
        self, sort_by: str, sort_order: Optional[str] = None, *, timeout: Timeout = None
    ) -> ContainerList:
        """Retrieve all Safes sorted on an attribute from ``allowed_sort_by``."""
        return self._list_sorted("failed to get safes", ContainerList, sort_by, sort_order, timeout=timeout)

    def get_safe_by_name(self, safe_name: str, *, timeout: Timeout = None) -> Container:
        """Retrieve a single Safe by name.

        Args:
            safe_name: Safe name (e.g. "NotificationEngine")
        """
        return self._get(f"failed to get safe {safe_name}", Container, key=safe_name, timeout=timeout)

    def get_safes_by_filter(self, filter_type: str, filter_query: str, *, timeout: Timeout = None) -> ContainerList:
        """Retrieve Safes whose attribute equals a value (case sensitive).

        Args:
            filter_type: Attribute name (e.g. "name", "displayName", "description")
            filter_query: Value to match (e.g. "PVWATicketingSystem")
        """
        return self._list_filtered(
            f"failed to get safes based on filter parameters - {filter_type} = {filter_query}",
            ContainerList,
            filter_type,
            filter_query,
            timeout=timeout,
        )

    def add_safe(self, safe: Container, *, timeout: Timeout = None) -> Container:
        """Create a Safe. ``name`` and ``schemas`` are required."""
        return self._post(f"failed to add safe {safe.name}", safe, Container, timeout=timeout)

    def update_safe(self, safe: Container, *, timeout: Timeout = None) -> Container:
        """Replace the Safe identified by ``safe.name``.

        Attributes left unset are cleared by the server.
        """
        safe_name = self._require(safe.name, "safe name")
        return self._put(f"failed to update safe {safe_name}", safe_name, safe, Container, timeout=timeout)

    def delete_safe(self, safe_name: str, *, timeout: Timeout = None) -> None:
        """Delete a Safe by name. Deleting it twice raises NotFoundError."""
        self._delete(f"failed to delete safe {safe_name}", safe_name, timeout=timeout)
