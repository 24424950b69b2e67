"""
Exception hierarchy for the IAM client.
"""

from __future__ import annotations

from typing import Any, Mapping


class IamError(Exception):
    """Base class for every error raised by the client."""


class APIError(IamError):
    """Raised when the IAM API answers with a non-2xx status."""

    def __init__(
        self,
        *,
        status_code: int,
        message: str,
        error: str | None = None,
        payload: Mapping[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.error = error
        self.payload = payload
        super().__init__(f"{status_code}: {message}")


class TransportError(IamError):
    """Raised when the request never produced an HTTP response."""
