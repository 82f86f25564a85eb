"""Query-string builders for SCIM pagination, sorting and filtering.

All builders validate their arguments and raise ``ScimValidationError``
before anything is sent to the API.
"""
from __future__ import annotations
from typing import Collection, Optional
from urllib.parse import quote, urlencode

from .exceptions import ScimValidationError

SORT_ORDERS = ("ascending", "descending")


def _encode(params: list) -> str:
    return urlencode(params, quote_via=quote)


def index_query(start_index: int, count: int) -> str:
    """Build ``startIndex=N&count=M``.

    Args:
        start_index: 1-based index of the first result
        count: Page size

    Raises:
        ScimValidationError: If either value is not a valid integer
    """
    for label, value in (("startIndex", start_index), ("count", count)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ScimValidationError(f"invalid {label} provided, an integer is required")
    if start_index < 1:
        raise ScimValidationError("invalid startIndex provided, the index is 1-based")
    if count < 0:
        raise ScimValidationError("invalid count provided, count cannot be negative")
    return _encode([("startIndex", start_index), ("count", count)])


def sort_query(sort_by: str, sort_order: Optional[str], allowed_sort_by: Collection[str]) -> str:
    """Build ``sortBy=<field>[&sortOrder=<order>]``.

    Args:
        sort_by: Attribute to sort on; must be in ``allowed_sort_by``
        sort_order: "ascending", "descending", or empty for the server default
        allowed_sort_by: Attributes the resource type supports sorting on

    Raises:
        ScimValidationError: If sort_by or sort_order is not accepted
    """
    if sort_by not in allowed_sort_by:
        raise ScimValidationError(
            f"invalid sortBy value provided, accepted values are {', '.join(allowed_sort_by)}"
        )
    params = [("sortBy", sort_by)]
    if sort_order:
        if sort_order not in SORT_ORDERS:
            raise ScimValidationError(
                "invalid sortOrder provided, accepted values are ascending, descending, or no input"
            )
        params.append(("sortOrder", sort_order))
    return _encode(params)


def filter_query(
    filter_type: str,
    filter_query: str,
    *,
    allowed_types: Optional[Collection[str]] = None,
    quote_value: bool = False,
) -> str:
    """Build ``filter=<filter_type> eq <filter_query>``.

    Matching is case sensitive and performed by the server.

    Args:
        filter_type: Attribute to filter on (e.g. "userName", "name.familyName")
        filter_query: Value the attribute must equal
        allowed_types: Restricts filter_type when the resource only supports some attributes
        quote_value: Wrap the value in double quotes

    Raises:
        ScimValidationError: If filter_type is empty or not accepted
    """
    if not filter_type:
        raise ScimValidationError("a filter attribute is required")
    if allowed_types is not None and filter_type not in allowed_types:
        raise ScimValidationError(
            f"invalid filterType provided, accepted types are {' or '.join(allowed_types)}"
        )
    value = f'"{filter_query}"' if quote_value else filter_query
    return _encode([("filter", f"{filter_type} eq {value}")])
