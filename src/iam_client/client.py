"""
High-level synchronous client for the IAM API.
"""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from .client_types import RequestDescriptor
from .config import DEFAULT_BASE_URL, IamClientConfig
from .errors import APIError, TransportError
from .log import LOG
from .resources.users import UserBuilder, UsersBuilder
from .types.common import IamResponse

try:  # pragma: no cover - metadata might be unavailable during development
    from importlib import metadata as _metadata

    _VERSION = _metadata.version("iam-client")
except Exception:  # noqa: BLE001 - fall back gracefully
    _VERSION = "0.0.0"

DEFAULT_USER_AGENT = f"iam-client/{_VERSION}"


def build_url(request: RequestDescriptor) -> str:
    if request.query:
        return f"{request.path}?{request.query}"
    return request.path


def build_request_kwargs(
    request: RequestDescriptor,
    *,
    access_token: str,
    timeout: float | httpx.Timeout | None,
) -> dict[str, Any]:
    """Translate a descriptor into keyword arguments for ``httpx`` ``request``."""
    kwargs: dict[str, Any] = {
        "method": request.method,
        "url": build_url(request),
        "timeout": timeout,
    }
    if request.with_auth:
        kwargs["headers"] = {"Authorization": f"Bearer {access_token}"}
    # A missing body is never sent as a JSON null.
    if request.data is not None:
        kwargs["json"] = request.data
    return kwargs


def handle_response(response: httpx.Response) -> IamResponse:
    """Turn an ``httpx`` response into an ``IamResponse`` or raise ``APIError``."""
    content_type = response.headers.get("content-type", "")

    parsed: Any = None
    if "json" in content_type and response.content:
        try:
            parsed = response.json()
        except ValueError:
            parsed = None

    if not response.is_success:
        message = response.reason_phrase
        error: str | None = None
        payload: Mapping[str, Any] | None = parsed if isinstance(parsed, Mapping) else None
        if payload:
            message = str(payload.get("errorDescription") or payload.get("message") or message)
            raw_error = payload.get("error")
            error = str(raw_error) if raw_error is not None else None
        raise APIError(
            status_code=response.status_code,
            message=message,
            error=error,
            payload=payload,
        )

    data = parsed if parsed is not None else (response.text or None)
    headers = {name.lower(): value for name, value in response.headers.items()}
    return IamResponse(status_code=response.status_code, headers=headers, data=data)


class IamClient:
    """
    Synchronous HTTP client for the IAM REST API.

    Example::

        from iam_client import IamClient

        with IamClient(access_token="...", domain="acme") as iam:
            me = iam.user("me").get().data
            new_id = iam.user().create({"username": "alice", "email": "a@b.c"}).data
    """

    def __init__(
        self,
        *,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        domain: str | None = None,
        timeout: float | httpx.Timeout | None = 10.0,
        user_agent: str | None = None,
        client: httpx.Client | None = None,
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
            # Merge headers without clobbering user overrides.
            for name, value in headers.items():
                if name not in client.headers:
                    client.headers[name] = value
            self._base_url = str(client.base_url) or base_url
        else:
            self._client = httpx.Client(base_url=base_url, headers=headers, timeout=timeout)
            self._owns_client = True
            self._base_url = base_url

        self._access_token = access_token
        self._domain = domain
        self._timeout = timeout

    @classmethod
    def from_config(
        cls, config: IamClientConfig, *, client: httpx.Client | None = None
    ) -> "IamClient":
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

    def user(self, id: str | None = None) -> UserBuilder | UsersBuilder:
        """Start a user request.

        Args:
            id: A user id, or ``"me"`` for the token owner. When omitted the
                builder targets the users collection.
        """
        if id:
            return UserBuilder(self, id, domain=self._domain)
        return UsersBuilder(self, domain=self._domain)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "IamClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: D401 - standard context manager protocol
        self.close()

    def send(self, request: RequestDescriptor) -> IamResponse:
        kwargs = build_request_kwargs(
            request, access_token=self._access_token, timeout=self._timeout
        )
        LOG.debug("IAM request %s %s", kwargs["method"], kwargs["url"])
        try:
            response = self._client.request(**kwargs)
        except httpx.HTTPError as exc:
            LOG.warning("IAM request %s %s failed: %s", kwargs["method"], kwargs["url"], exc)
            raise TransportError(str(exc)) from exc

        try:
            return handle_response(response)
        except APIError as exc:
            LOG.warning("IAM request %s %s rejected: %s", kwargs["method"], kwargs["url"], exc)
            raise
