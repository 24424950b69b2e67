"""
User management endpoints.
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from .._utils import build_uri, serialize_params, with_location_id
from ..client_types import RequestDescriptor, RequesterProtocol
from ..types.common import IamResponse


class UserBuilder:
    """Requests scoped to a single user.

    The identifier is either a user id or the ``"me"`` alias for the user
    owning the access token.
    """

    uri = "user"

    def __init__(
        self,
        requester: RequesterProtocol,
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

    def _send(
        self,
        method: str,
        postfix: str = "",
        *,
        data: Mapping[str, Any] | None = None,
    ) -> IamResponse:
        return self._requester.send(
            RequestDescriptor(path=self._path(postfix), method=method, data=data)
        )

    def get(self) -> IamResponse:
        """Get the user."""
        return self._send("GET")

    def update(self, data: Mapping[str, Any]) -> IamResponse:
        """Update the user with the given fields."""
        return self._send("PUT", data=data)

    def delete(self) -> IamResponse:
        """Delete the user."""
        return self._send("DELETE")

    def sign_out(self) -> IamResponse:
        """Sign out the user, invalidating the current session token.

        Example::

            client.user("me").sign_out()
        """
        return self._send("PUT", "/signout")

    def disconnect(self) -> IamResponse:
        """Disconnect the user. All of the user's tokens are deleted."""
        return self._send("PUT", "/disconnect")

    def add_identity(self, identity: Mapping[str, Any]) -> IamResponse:
        """Link the user to an OAuth server or social network.

        Args:
            identity: The identity data, e.g. ``{"oAuthService": "google", "oAuthId": "..."}``.

        Raises:
            ValueError: If ``identity`` is missing or empty. No request is sent.
        """
        if not identity:
            raise ValueError("Missing identity")
        return self._send("POST", "/identity", data=identity)

    def get_identities(self) -> IamResponse:
        """Get the identities linked to the user."""
        return self._send("GET", "/identity")

    def register_device(self, data: Mapping[str, Any]) -> IamResponse:
        """Register a device for the user.

        Args:
            data: The device data (``URI`` token, ``name`` and ``type``).

        Returns:
            The response, with ``data`` set to the id of the registered device.
        """
        return with_location_id(self._send("PUT", "/devices", data=data))

    def get_device(self, device_id: str) -> IamResponse:
        return self._send("GET", f"/devices/{quote(device_id, safe='')}")

    def get_devices(self) -> IamResponse:
        return self._send("GET", "/devices/")

    def delete_device(self, device_id: str) -> IamResponse:
        return self._send("DELETE", f"/devices/{quote(device_id, safe='')}")

    def get_profile(self) -> IamResponse:
        """Get the public profile of the user."""
        return self._send("GET", "/profile")


class UsersBuilder:
    """Requests over the users collection."""

    uri = "user"

    def __init__(self, requester: RequesterProtocol, *, domain: str | None = None) -> None:
        self._requester = requester
        self._domain = domain

    def _path(self, postfix: str = "") -> str:
        return build_uri(self.uri, domain=self._domain) + postfix

    def get(self, params: Mapping[str, Any] | None = None) -> IamResponse:
        """List the users of the current domain.

        Args:
            params: Optional request parameters, serialized with ``serialize_params``.
        """
        return self._requester.send(
            RequestDescriptor(
                path=self._path(),
                method="GET",
                query=serialize_params(params) if params else None,
            )
        )

    def create(self, data: Mapping[str, Any]) -> IamResponse:
        """Create a new user.

        Returns:
            The response, with ``data`` set to the id of the created user.
        """
        response = self._requester.send(
            RequestDescriptor(path=self._path(), method="POST", data=data)
        )
        return with_location_id(response)

    def send_reset_password_email(self, email: str) -> IamResponse:
        """Send a reset password email to the given address."""
        response = self._requester.send(
            RequestDescriptor(
                path=self._path("/resetPassword"),
                method="GET",
                query=f"email={email}",
            )
        )
        return with_location_id(response)

    def get_profiles(self, params: Mapping[str, Any] | None = None) -> IamResponse:
        """Get the public profiles of the users of the current domain."""
        return self._requester.send(
            RequestDescriptor(
                path=self._path("/profile"),
                method="GET",
                query=serialize_params(params) if params else None,
            )
        )
