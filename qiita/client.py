"""Qiita API v2 client.

`QiitaClient` holds the immutable configuration (base endpoint, token,
user agent, transport) and exposes one resource object per API area:

    with QiitaClient(access_token="...") as client:
        user = client.users.get("muiscript")
        page = client.items.list(page=1, per_page=20)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from qiita.config import DEFAULT_BASE_URL, Settings
from qiita.net.http import HttpClient
from qiita.pagination import LAST_PAGE_CEILING
from qiita.resources import (
    AuthenticatedUserResource,
    CommentsResource,
    ItemsResource,
    TagsResource,
    UsersResource,
)

if TYPE_CHECKING:
    import httpx

__all__ = ["QiitaClient"]

log = logger.bind(module="client")


class QiitaClient:
    """Typed client for the Qiita v2 REST API."""

    def __init__(
        self,
        access_token: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str | None = None,
        timeout_seconds: float = 10.0,
        last_page_ceiling: int = LAST_PAGE_CEILING,
        transport: "httpx.BaseTransport | None" = None,
        reuse_connections: bool = False,
    ) -> None:
        self.http = HttpClient(
            base_url=base_url,
            access_token=access_token,
            timeout_seconds=timeout_seconds,
            user_agent=user_agent,
            transport=transport,
            reuse_connections=bool(reuse_connections),
        )
        self.last_page_ceiling = int(last_page_ceiling)

        self.users = UsersResource(self)
        self.items = ItemsResource(self)
        self.tags = TagsResource(self)
        self.comments = CommentsResource(self)
        self.authenticated_user = AuthenticatedUserResource(self)

        log.debug(
            "client ready base_url={} authenticated={}",
            self.http.base_url,
            bool(self.http.access_token),
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: "httpx.BaseTransport | None" = None,
        reuse_connections: bool = False,
    ) -> "QiitaClient":
        return cls(
            settings.access_token,
            base_url=settings.base_url,
            user_agent=settings.user_agent,
            timeout_seconds=settings.timeout_seconds,
            last_page_ceiling=settings.last_page_ceiling,
            transport=transport,
            reuse_connections=reuse_connections,
        )

    @property
    def base_url(self) -> str:
        return str(self.http.base_url)

    def close(self) -> None:
        """Close any underlying persistent HTTP resources."""
        self.http.close()

    def __enter__(self) -> "QiitaClient":
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()
