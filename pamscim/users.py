"""PAM SCIM user operations."""
from __future__ import annotations
from typing import Optional

from .client import Timeout
from .models import User, UserList
from .resource import ResourceService


class UserService(ResourceService):
    """Service for managing SCIM users. Users are addressed by ``id``."""

    resource = "Users"
    allowed_sort_by = (
        "active",
        "userName",
        "displayName",
        "name.givenName",
        "name.familyName",
        "userType",
        "id",
        "meta.created",
        "meta.lastmodified",
        "meta.location",
    )

    def get_users(self, *, timeout: Timeout = None) -> UserList:
        """Retrieve all users.

        Returns:
            Collection envelope with every user
        """
        return self._get("failed to get users", UserList, timeout=timeout)

    def get_users_index(self, start_index: int, count: int, *, timeout: Timeout = None) -> UserList:
        """Retrieve a page of users.

        Args:
            start_index: 1-based index of the first user
            count: Page size

        Returns:
            Collection envelope with at most ``count`` users
        """
        return self._list_index("failed to get users", UserList, start_index, count, timeout=timeout)

    def get_users_sort(self, sort_by: str, sort_order: Optional[str] = None, *, timeout: Timeout = None) -> UserList:
        """Retrieve all users sorted on an attribute.

        Args:
            sort_by: One of ``allowed_sort_by``
            sort_order: "ascending", "descending", or None for the server default

        Raises:
            ScimValidationError: If sort_by or sort_order is not accepted
        """
        return self._list_sorted("failed to get users", UserList, sort_by, sort_order, timeout=timeout)

    def get_user_by_id(self, user_id: str, *, timeout: Timeout = None) -> User:
        """Retrieve a single user by id.

        Args:
            user_id: Server-assigned user id

        Raises:
            NotFoundError: If the user does not exist
        """
        return self._get(f"failed to get user {user_id}", User, key=user_id, timeout=timeout)

    def get_users_by_filter(self, filter_type: str, filter_query: str, *, timeout: Timeout = None) -> UserList:
        """Retrieve users whose attribute equals a value (case sensitive).

        Args:
            filter_type: Attribute name (e.g. "userName", "name.familyName")
            filter_query: Value to match (e.g. "john.smith@example.com")
        """
        return self._list_filtered(
            f"failed to get users based on filter parameters - {filter_type} = {filter_query}",
            UserList,
            filter_type,
            filter_query,
            timeout=timeout,
        )

    def add_user(self, user: User, *, timeout: Timeout = None) -> User:
        """Create a user.

        At a minimum ``user`` must carry ``userName``, ``password`` and ``schemas``.

        Returns:
            The user as stored by the server, including its new id
        """
        return self._post(f"failed to add user {user.userName}", user, User, timeout=timeout)

    def update_user(self, user: User, *, timeout: Timeout = None) -> User:
        """Replace a user. Attributes left unset are cleared by the server.

        Args:
            user: Full user record; ``user.id`` selects the user to replace
        """
        user_id = self._require(user.id, "user id")
        return self._put(f"failed to update user {user_id}", user_id, user, User, timeout=timeout)

    def delete_user(self, user_id: str, *, timeout: Timeout = None) -> None:
        """Delete a user. Deleting the same id twice raises NotFoundError."""
        self._delete(f"failed to delete user {user_id}", user_id, timeout=timeout)
