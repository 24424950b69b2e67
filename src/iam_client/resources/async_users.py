"""
User management endpoints (async).
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from .._utils import build_uri, serialize_params, with_location_id
from ..client_types import AsyncRequesterProtocol, RequestDescriptor
from ..types.common import IamResponse


class AsyncUserBuilder:
    """Requests scoped to a single user (async)."""

    uri = "user"

    def __init__(
        self,
        requester: AsyncRequesterProtocol,
        identifier: str,
        *,
        domain: str | None = None,
    ) -> None:
        self._requester = requester
        self._id = identifier
        self._domain = domain

    @property
    def id(self) -> str:
        return self._id

    def _path(self, postfix: str = "") -> str:
        return build_uri(self.uri, self._id, domain=self._domain) + postfix

    async def _send(
        self,
        method: str,
        postfix: str = "",
        *,
        data: Mapping[str, Any] | None = None,
    ) -> IamResponse:
        return await self._requester.send(
            RequestDescriptor(path=self._path(postfix), method=method, data=data)
        )

    async def get(self) -> IamResponse:
        """Get the user."""
        return await self._send("GET")

    async def update(self, data: Mapping[str, Any]) -> IamResponse:
        """Update the user with the given fields."""
        return await self._send("PUT", data=data)

    async def delete(self) -> IamResponse:
        """Delete the user."""
        return await self._send("DELETE")

    async def sign_out(self) -> IamResponse:
        """Sign out the user."""
        return await self._send("PUT", "/signout")

    async def disconnect(self) -> IamResponse:
        """Disconnect the user. All of the user's tokens are deleted."""
        return await self._send("PUT", "/disconnect")

    async def add_identity(self, identity: Mapping[str, Any]) -> IamResponse:
        """Link the user to an OAuth server or social network.

        Raises:
            ValueError: If ``identity`` is missing or empty. No request is sent.
        """
        if not identity:
            raise ValueError("Missing identity")
        return await self._send("POST", "/identity", data=identity)

    async def get_identities(self) -> IamResponse:
        return await self._send("GET", "/identity")

    async def register_device(self, data: Mapping[str, Any]) -> IamResponse:
        """Register a device; ``data`` of the result is the device id."""
        return with_location_id(await self._send("PUT", "/devices", data=data))

    async def get_device(self, device_id: str) -> IamResponse:
        return await self._send("GET", f"/devices/{quote(device_id, safe='')}")

    async def get_devices(self) -> IamResponse:
        return await self._send("GET", "/devices/")

    async def delete_device(self, device_id: str) -> IamResponse:
        return await self._send("DELETE", f"/devices/{quote(device_id, safe='')}")

    async def get_profile(self) -> IamResponse:
        return await self._send("GET", "/profile")


class AsyncUsersBuilder:
    """Requests over the users collection (async)."""

    uri = "user"

    def __init__(self, requester: AsyncRequesterProtocol, *, domain: str | None = None) -> None:
        self._requester = requester
        self._domain = domain

    def _path(self, postfix: str = "") -> str:
        return build_uri(self.uri, domain=self._domain) + postfix

    async def get(self, params: Mapping[str, Any] | None = None) -> IamResponse:
        """List the users of the current domain."""
        return await self._requester.send(
            RequestDescriptor(
                path=self._path(),
                method="GET",
                query=serialize_params(params) if params else None,
            )
        )

    async def create(self, data: Mapping[str, Any]) -> IamResponse:
        """Create a new user; ``data`` of the result is the new user id."""
        response = await self._requester.send(
            RequestDescriptor(path=self._path(), method="POST", data=data)
        )
        return with_location_id(response)

    async def send_reset_password_email(self, email: str) -> IamResponse:
        """Send a reset password email to the given address."""
        response = await self._requester.send(
            RequestDescriptor(
                path=self._path("/resetPassword"),
                method="GET",
                query=f"email={email}",
            )
        )
        return with_location_id(response)

    async def get_profiles(self, params: Mapping[str, Any] | None = None) -> IamResponse:
        return await self._requester.send(
            RequestDescriptor(
                path=self._path("/profile"),
                method="GET",
                query=serialize_params(params) if params else None,
            )
        )
