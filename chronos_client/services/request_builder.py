"""
Build the URL and request for a single Chronos API call.

Nothing here touches the client: every call gets its own URL and request, so
concurrent operations on one client never see each other's path or query.
"""
import posixpath
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx
from pydantic_core import PydanticSerializationError, to_json

from chronos_client.core.config import Settings
from chronos_client.core.exceptions import InvalidInputError, SerializationError

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def join_path(prefix: str, path: str) -> str:
    """Join the API prefix and a resource path, collapsing redundant slashes."""
    parts = [part for part in (prefix, path) if part]
    if not parts:
        return ""
    joined = posixpath.normpath("/".join(parts))
    # normpath keeps a leading "//"
    if joined.startswith("//"):
        joined = joined[1:]
    return joined


def build_url(
    settings: Settings,
    path: str,
    params: Mapping[str, str] | None = None,
) -> httpx.URL:
    """Fresh URL for base address + prefixed path + query, in the caller's order.

    The path is percent-encoded segment by segment, so job names holding
    "#", "?" or "%" reach Chronos exactly as given.
    """
    full_path = "/" + quote(join_path(settings.api_prefix, path).lstrip("/"), safe="/")
    try:
        return httpx.URL(settings.url).copy_with(
            path=full_path,
            params=list(params.items()) if params else None,
        )
    except httpx.InvalidURL as e:
        raise InvalidInputError(f"Invalid request target {path!r}: {e}") from e


def serialize_body(body: Any) -> bytes:
    try:
        return to_json(body, by_alias=True, exclude_none=True)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise SerializationError(f"Could not serialize request body: {e}") from e


def build_request(
    settings: Settings,
    method: str,
    path: str,
    params: Mapping[str, str] | None = None,
    body: Any = None,
) -> httpx.Request:
    content = serialize_body(body) if body is not None else None
    return httpx.Request(
        method,
        build_url(settings, path, params),
        headers=JSON_HEADERS,
        content=content,
    )
