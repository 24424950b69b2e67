"""Utility functions for the IAM Python client."""

import json
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

from .types.common import IamResponse

# Request parameters understood by the IAM query language.
_API_PARAM_NAMES = {
    "query": "api:query",
    "search": "api:search",
    "sort": "api:sort",
    "aggregation": "api:aggregation",
    "distinct": "api:distinct",
}


def bool_to_str(value: bool) -> str:
    """Convert a boolean value to string representation used by the API.

    Args:
        value: The boolean value to convert.

    Returns:
        "true" if value is True, "false" otherwise.
    """
    return "true" if value else "false"


def build_params(**kwargs: Any) -> dict[str, Any]:
    """Build query parameters dictionary, filtering None values and converting booleans.

    Example:
        >>> build_params(limit=10, cursor=None, active=True)
        {'limit': 10, 'active': 'true'}
    """
    params: dict[str, Any] = {}
    for key, value in kwargs.items():
        if value is not None:
            if isinstance(value, bool):
                params[key] = bool_to_str(value)
            else:
                params[key] = value
    return params


def _encode_value(value: Any) -> str:
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def serialize_params(params: Mapping[str, Any]) -> str:
    """Serialize request parameters into a query string.

    Keys from the IAM query language (``query``, ``search``, ``sort``,
    ``aggregation``, ``distinct``, ``pagination``) are renamed to their
    ``api:`` form; structured values are JSON-encoded. Any other key is
    passed through as a plain pair.

    Example:
        >>> serialize_params({"a": 1, "b": 2})
        'a=1&b=2'
        >>> serialize_params({"pagination": {"page": 2, "page_size": 10}})
        'api:page=2&api:pageSize=10'
    """
    pairs: list[tuple[str, str]] = []
    for key, value in build_params(**params).items():
        if key == "pagination" and isinstance(value, Mapping):
            page = value.get("page")
            page_size = value.get("page_size", value.get("pageSize"))
            if page is not None:
                pairs.append(("api:page", str(page)))
            if page_size is not None:
                pairs.append(("api:pageSize", str(page_size)))
            continue
        if key == "distinct" and isinstance(value, (list, tuple)):
            pairs.append(("api:distinct", ",".join(str(v) for v in value)))
            continue
        pairs.append((_API_PARAM_NAMES.get(key, key), _encode_value(value)))
    return urlencode(pairs, safe=":")


def build_uri(resource: str, identifier: str | None = None, *, domain: str | None = None) -> str:
    """Expand a resource path, optionally scoped to a domain and an entity id.

    Example:
        >>> build_uri("user", "me")
        '/user/me'
        >>> build_uri("user", domain="acme")
        '/acme/user'
    """
    segments: list[str] = []
    if domain:
        segments.append(quote(domain, safe=""))
    segments.append(resource.strip("/"))
    if identifier:
        segments.append(quote(identifier, safe=""))
    return "/" + "/".join(segments)


def extract_location_id(response: IamResponse) -> str | None:
    """Return the last path segment of the ``Location`` header, if any."""
    location = None
    for name, value in response.headers.items():
        if name.lower() == "location":
            location = value
            break
    if not location:
        return None
    return location.rsplit("/", 1)[-1]


def with_location_id(response: IamResponse) -> IamResponse:
    """Replace the response payload with the created resource identifier."""
    response.data = extract_location_id(response)
    return response
