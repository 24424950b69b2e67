"""Resource-specific request builders for the IAM client."""

from .async_users import AsyncUserBuilder, AsyncUsersBuilder
from .users import UserBuilder, UsersBuilder

__all__ = [
    "AsyncUserBuilder",
    "AsyncUsersBuilder",
    "UserBuilder",
    "UsersBuilder",
]
