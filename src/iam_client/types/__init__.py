"""Type definitions for API responses."""

from .common import IamResponse

__all__ = [
    "IamResponse",
]
