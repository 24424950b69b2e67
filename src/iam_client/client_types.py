"""
Shared request/transport contracts used by the resource builders.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from .types.common import IamResponse


@dataclass(slots=True, frozen=True)
class RequestDescriptor:
    """
    Describes one outbound IAM request.

    Args:
        path: Path relative to the client's base URL, e.g. ``/user/me/devices``.
        method: HTTP verb.
        query: Already-serialized query string (without the leading ``?``).
        data: JSON body. ``None`` means the request carries no body at all.
        with_auth: Whether the transport must attach the bearer token.
    """

    path: str
    method: str
    query: str | None = None
    data: Mapping[str, Any] | None = None
    with_auth: bool = True


class RequesterProtocol(Protocol):
    def send(self, request: RequestDescriptor) -> IamResponse: ...


class AsyncRequesterProtocol(Protocol):
    async def send(self, request: RequestDescriptor) -> IamResponse: ...
