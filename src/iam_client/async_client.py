"""
High-level asynchronous client for the IAM API.
"""

from __future__ import annotations

import httpx

from .client import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, build_request_kwargs, handle_response
from .client_types import RequestDescriptor
from .config import IamClientConfig
from .errors import APIError, TransportError
from .log import LOG
from .resources.async_users import AsyncUserBuilder, AsyncUsersBuilder
from .types.common import IamResponse


class IamAsyncClient:
    """
    Asynchronous HTTP client for the IAM REST API.

    Example::

        async with IamAsyncClient(access_token="...") as iam:
            profile = await iam.user("me").get_profile()
    """

    def __init__(
        self,
        *,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        domain: str | None = None,
        timeout: float | httpx.Timeout | None = 10.0,
        user_agent: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not access_token:
            raise ValueError("access_token is required")

        base_url = base_url.rstrip("/")
        headers = {
            "Accept": "application/json",
            "User-Agent": user_agent or DEFAULT_USER_AGENT,
        }

        if client is not None:
            self._client = client
            self._owns_client = False
            if client.base_url == httpx.URL():
                client.base_url = httpx.URL(base_url)
            for name, value in headers.items():
                if name not in client.headers:
                    client.headers[name] = value
            self._base_url = str(client.base_url) or base_url
        else:
            self._client = httpx.AsyncClient(base_url=base_url, headers=headers, timeout=timeout)
            self._owns_client = True
            self._base_url = base_url

        self._access_token = access_token
        self._domain = domain
        self._timeout = timeout

    @classmethod
    def from_config(
        cls, config: IamClientConfig, *, client: httpx.AsyncClient | None = None
    ) -> "IamAsyncClient":
        return cls(
            access_token=config.iam_access_token or "",
            base_url=config.iam_base_url,
            domain=config.iam_domain,
            timeout=config.iam_timeout,
            user_agent=config.iam_user_agent,
            client=client,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def domain(self) -> str | None:
        return self._domain

    def user(self, id: str | None = None) -> AsyncUserBuilder | AsyncUsersBuilder:
        """Start a user request; see ``IamClient.user``."""
        if id:
            return AsyncUserBuilder(self, id, domain=self._domain)
        return AsyncUsersBuilder(self, domain=self._domain)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "IamAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def send(self, request: RequestDescriptor) -> IamResponse:
        kwargs = build_request_kwargs(
            request, access_token=self._access_token, timeout=self._timeout
        )
        LOG.debug("IAM request %s %s", kwargs["method"], kwargs["url"])
        try:
            response = await self._client.request(**kwargs)
        except httpx.HTTPError as exc:
            LOG.warning("IAM request %s %s failed: %s", kwargs["method"], kwargs["url"], exc)
            raise TransportError(str(exc)) from exc

        try:
            return handle_response(response)
        except APIError as exc:
            LOG.warning("IAM request %s %s rejected: %s", kwargs["method"], kwargs["url"], exc)
            raise
