"""PAM SCIM Privileged Data operations (accounts, keys and other secrets)."""
from __future__ import annotations
from typing import Any, Iterable, Mapping, Optional, Union

from .client import Timeout
from .models import PatchOperation, PatchRequest, PrivilegedData, PrivilegedDataList
from .resource import ResourceService


class PrivilegedDataService(ResourceService):
    """Service for managing Privileged Data stored in Safes.

    Privileged Data is addressed by ``id``. Besides the full replace done by
    ``update_privileged_data`` it supports partial updates through PATCH.
    """

    resource = "PrivilegedData"
    allowed_sort_by = (
        "name",
        "id",
        "type",
        "meta.created",
        "meta.lastmodified",
        "meta.location",
    )

    def get_privileged_data(self, *, timeout: Timeout = None) -> PrivilegedDataList:
        """Retrieve all Privileged Data visible to the token."""
        return self._get("failed to get privileged data", PrivilegedDataList, timeout=timeout)

    def get_privileged_data_index(
        self, start_index: int, count: int, *, timeout: Timeout = None
    ) -> PrivilegedDataList:
        """Retrieve a page of Privileged Data starting at the 1-based ``start_index``."""
        return self._list_index(
            "failed to get privileged data", PrivilegedDataList, start_index, count, timeout=timeout
        )

    def get_privileged_data_sort(
        self, sort_by: str, sort_order: Optional[str] = None, *, timeout: Timeout = None
    ) -> PrivilegedDataList:
        """Retrieve all Privileged Data sorted on an attribute from ``allowed_sort_by``."""
        return self._list_sorted(
            "failed to get privileged data", PrivilegedDataList, sort_by, sort_order, timeout=timeout
        )

    def get_privileged_data_by_id(self, data_id: str, *, timeout: Timeout = None) -> PrivilegedData:
        """Retrieve a single Privileged Data record by id.

        Args:
            data_id: Server-assigned id (e.g. "VaultInternal_Operator-PW")
        """
        return self._get(f"failed to get privileged data {data_id}", PrivilegedData, key=data_id, timeout=timeout)

    def get_privileged_data_by_filter(
        self, filter_type: str, filter_query: str, *, timeout: Timeout = None
    ) -> PrivilegedDataList:
        """Retrieve Privileged Data whose attribute equals a value (case sensitive).

        Args:
            filter_type: Attribute name (e.g. "name", "type")
            filter_query: Value to match (e.g. "password")
        """
        return self._list_filtered(
            f"failed to get privileged data based on filter parameters - {filter_type} = {filter_query}",
            PrivilegedDataList,
            filter_type,
            filter_query,
            timeout=timeout,
        )

    def add_privileged_data(self, data: PrivilegedData, *, timeout: Timeout = None) -> PrivilegedData:
        """Create Privileged Data. ``name``, ``type`` and the target safe are required."""
        return self._post(f"failed to add privileged data {data.name}", data, PrivilegedData, timeout=timeout)

    def update_privileged_data(self, data: PrivilegedData, *, timeout: Timeout = None) -> PrivilegedData:
        """Replace the Privileged Data identified by ``data.id``."""
        data_id = self._require(data.id, "privileged data id")
        return self._put(f"failed to update privileged data {data_id}", data_id, data, PrivilegedData, timeout=timeout)

    def modify_privileged_data(
        self,
        data_id: str,
        operations: Iterable[Union[PatchOperation, Mapping[str, Any]]],
        *,
        timeout: Timeout = None,
    ) -> PrivilegedData:
        """Apply a partial update to Privileged Data.

        Args:
            data_id: Server-assigned id
            operations: Patch operations, as models or plain dicts
                (e.g. ``{"op": "replace", "path": "description", "value": "rotated"}``)

        Returns:
            The record as stored after the patch
        """
        self._require(data_id, "privileged data id")
        request = PatchRequest(Operations=[
            op if isinstance(op, PatchOperation) else PatchOperation.model_validate(op)
            for op in operations
        ])
        return self._patch(
            f"failed to modify privileged data {data_id}", data_id, request, PrivilegedData, timeout=timeout
        )

    def delete_privileged_data(self, data_id: str, *, timeout: Timeout = None) -> None:
        """Delete Privileged Data. Deleting the same id twice raises NotFoundError."""
        self._delete(f"failed to delete privileged data {data_id}", data_id, timeout=timeout)
