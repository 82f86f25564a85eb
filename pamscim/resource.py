"""Shared plumbing for the per-resource services."""
from __future__ import annotations
from typing import Any, Collection, Optional, Type, TypeVar
from urllib.parse import quote

from pydantic import BaseModel

from .client import ScimClient, Timeout
from .exceptions import ScimValidationError, error_context
from .query import filter_query, index_query, sort_query

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResourceService:
    """Base class binding a resource collection path to a SCIM client.

    Subclasses set ``resource`` (the collection name, e.g. "Users") and
    ``allowed_sort_by``, and expose resource-named methods built on the
    helpers below.
    """

    resource: str = ""
    allowed_sort_by: Collection[str] = ()

    def __init__(self, client: ScimClient):
        """Initialize resource service.

        Args:
            client: Authenticated SCIM client
        """
        self.client = client

    @staticmethod
    def _require(value: Optional[str], label: str) -> str:
        if not value:
            raise ScimValidationError(f"{label} is required")
        return value

    def _path(self, key: Optional[str] = None, query: Optional[str] = None) -> str:
        path = f"/{self.resource}"
        if key is not None:
            path = f"{path}/{quote(str(key), safe=':@')}"
        if query:
            path = f"{path}?{query}"
        return path

    def _get(self, context: str, model: Type[ModelT], key: Optional[str] = None,
             query: Optional[str] = None, timeout: Timeout = None) -> Optional[ModelT]:
        with error_context(context):
            return self.client.get(self._path(key, query), model, timeout=timeout)

    def _list_index(self, context: str, model: Type[ModelT], start_index: int, count: int,
                    timeout: Timeout = None) -> Optional[ModelT]:
        with error_context(context):
            query = index_query(start_index, count)
            return self.client.get(self._path(query=query), model, timeout=timeout)

    def _list_sorted(self, context: str, model: Type[ModelT], sort_by: str, sort_order: Optional[str],
                     timeout: Timeout = None) -> Optional[ModelT]:
        with error_context(context):
            query = sort_query(sort_by, sort_order, self.allowed_sort_by)
            return self.client.get(self._path(query=query), model, timeout=timeout)

    def _list_filtered(self, context: str, model: Type[ModelT], filter_type: str, filter_value: str,
                       timeout: Timeout = None, **filter_options: Any) -> Optional[ModelT]:
        with error_context(context):
            query = filter_query(filter_type, filter_value, **filter_options)
            return self.client.get(self._path(query=query), model, timeout=timeout)

    def _post(self, context: str, payload: Any, model: Type[ModelT], timeout: Timeout = None) -> Optional[ModelT]:
        with error_context(context):
            return self.client.post(self._path(), payload, model, timeout=timeout)

    def _put(self, context: str, key: str, payload: Any, model: Type[ModelT],
             timeout: Timeout = None) -> Optional[ModelT]:
        with error_context(context):
            return self.client.put(self._path(key), payload, model, timeout=timeout)

    def _patch(self, context: str, key: str, payload: Any, model: Type[ModelT],
               timeout: Timeout = None) -> Optional[ModelT]:
        with error_context(context):
            return self.client.patch(self._path(key), payload, model, timeout=timeout)

    def _delete(self, context: str, key: str, timeout: Timeout = None) -> None:
        with error_context(context):
            self.client.delete(self._path(key), timeout=timeout)
