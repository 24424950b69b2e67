"""
Python SDK for the IAM user-management API.
"""

from __future__ import annotations

from .async_client import IamAsyncClient
from .client import DEFAULT_BASE_URL, IamClient
from .client_types import RequestDescriptor
from .config import IamClientConfig, get_local_client_config
from .errors import APIError, IamError, TransportError
from .log import get_logger
from .types.common import IamResponse

__all__ = [
    "APIError",
    "DEFAULT_BASE_URL",
    "IamAsyncClient",
    "IamClient",
    "IamClientConfig",
    "IamError",
    "IamResponse",
    "RequestDescriptor",
    "TransportError",
    "get_local_client_config",
    "get_logger",
    "__version__",
]

# The version is kept in sync with pyproject.toml during releases.
__version__ = "0.1.0"
