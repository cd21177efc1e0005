"""Shared HTTP helpers built on top of httpx.

This module builds requests against the configured API base endpoint and
interprets responses into `HttpResult` values. Status codes are never raised
here; callers decide how to map them. Network failures and malformed JSON on
successful responses are raised as `HttpCallError` subclasses.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import httpx
from loguru import logger

__all__ = [
    "DEFAULT_USER_AGENT",
    "HttpCallError",
    "HttpClient",
    "HttpResult",
    "RequestBuildError",
    "ResponseDecodeError",
]

log = logger.bind(module="net.http")

DEFAULT_USER_AGENT = "qiita-python-client (+https://github.com/muiscript/qiita)"

_MIN_TIMEOUT_SECONDS = 0.1


class HttpCallError(RuntimeError):
    """Raised when an HTTP request cannot be built, sent or decoded."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = str(message)
        self.status_code = int(status_code) if status_code is not None else None

    def __str__(self) -> str:  # pragma: no cover - trivial
        if self.status_code is None:
            return self.message
        return f"{self.message} (status = {self.status_code})"


class RequestBuildError(HttpCallError):
    """Raised when request inputs (path segments, base URL) are malformed."""


class ResponseDecodeError(HttpCallError):
    """Raised when a successful response carries a body that cannot be decoded."""


@dataclass(frozen=True, slots=True)
class HttpResult:
    """Status, headers and decoded JSON payload of one round-trip.

    `data` is only populated for 2xx responses with a non-empty body.
    """

    status_code: int
    headers: httpx.Headers
    data: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def _parse_base_url(base_url: str) -> httpx.URL:
    raw = (base_url or "").strip()
    if not raw:
        raise RequestBuildError("Invalid API base URL: value is empty.")
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError) as exc:
        raise RequestBuildError(f"Invalid API base URL {raw!r}: {exc}") from exc
    if not url.is_absolute_url:
        raise RequestBuildError(f"Invalid API base URL {raw!r}: URL must be absolute.")
    return url


def _join_path(base_path: str, segments: Sequence[object]) -> str:
    parts = [base_path.rstrip("/")]
    for segment in segments:
        text = str(segment).strip()
        if not text:
            raise RequestBuildError("Path segments must be non-empty.")
        if "/" in text:
            raise RequestBuildError(f"Path segment {text!r} must not contain '/'.")
        parts.append(text)
    return "/".join(parts) or "/"


class HttpClient:
    """Small sync HTTP client bound to one API base endpoint.

    Notes:
        - The base endpoint is parsed once; `httpx.URL` is immutable so every
          built request works on its own copy of it.
        - By default, a short-lived `httpx.Client` is created per request.
        - With `reuse_connections=True` one pooled `httpx.Client` is opened on
          first use and kept until `close()`.
        - Timeouts are clamped to at least `_MIN_TIMEOUT_SECONDS`.
    """

    def __init__(
        self,
        *,
        base_url: str,
        access_token: str | None = None,
        timeout_seconds: float = 10.0,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
        reuse_connections: bool = False,
    ) -> None:
        self.base_url = _parse_base_url(base_url)
        self.access_token = (access_token or "").strip()
        self.timeout_seconds = float(max(_MIN_TIMEOUT_SECONDS, timeout_seconds))
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.transport = transport
        self.reuse_connections = bool(reuse_connections)
        self._client: httpx.Client | None = None

    def _new_session(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout_seconds, transport=self.transport)

    def _dispatch(self, request: httpx.Request) -> httpx.Response:
        if not self.reuse_connections:
            with self._new_session() as session:
                return session.send(request)
        if self._client is None:
            self._client = self._new_session()
        return self._client.send(request)

    def close(self) -> None:
        """Close the pooled `httpx.Client`, if one was opened."""
        if self._client is None:
            return
        self._client.close()
        self._client = None

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    def build_request(
        self,
        method: str,
        segments: Sequence[object],
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        json_body: Any | None = None,
    ) -> httpx.Request:
        """Build a request for `base_path/segments...` without sending it.

        Raises:
            RequestBuildError: When a path segment is empty or contains '/'.
        """
        method = (method or "GET").strip().upper()
        url = self.base_url.copy_with(path=_join_path(self.base_url.path, segments))

        query: list[tuple[str, str]] = []
        for key in sorted(params or {}):
            value = params[key]  # type: ignore[index]
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            query.append((str(key), str(value)))
        if query:
            url = url.copy_with(params=query)

        merged: dict[str, str] = {"Accept": "application/json"}
        merged.update(dict(headers or {}))
        merged["User-Agent"] = self.user_agent
        if self.access_token:
            merged["Authorization"] = f"Bearer {self.access_token}"

        content: bytes | None = None
        if json_body is not None:
            content = json.dumps(json_body, ensure_ascii=False).encode("utf-8")
            merged["Content-Type"] = "application/json"

        return httpx.Request(
            method,
            url,
            headers=merged,
            content=content,
            extensions={"timeout": httpx.Timeout(self.timeout_seconds).as_dict()},
        )

    def send(self, request: httpx.Request) -> HttpResult:
        """Send a built request and interpret the response.

        Raises:
            HttpCallError: When the request fails at the transport level.
            ResponseDecodeError: When a 2xx body is not valid UTF-8 JSON.
        """
        log.debug("send {} request to {}", request.method, request.url)
        try:
            response = self._dispatch(request)
        except httpx.RequestError as exc:
            raise HttpCallError(f"HTTP request failed: {exc}") from exc

        status_code = int(response.status_code)
        result = HttpResult(status_code=status_code, headers=response.headers)
        if not result.ok:
            log.debug("{} {} returned status {}", request.method, request.url, status_code)
            return result
        if not response.content:
            return result
        try:
            data = json.loads(response.content.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ResponseDecodeError(
                f"Invalid JSON response: {exc}",
                status_code=status_code,
            ) from exc
        return HttpResult(status_code=status_code, headers=response.headers, data=data)

    def request(
        self,
        method: str,
        segments: Sequence[object],
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        json_body: Any | None = None,
    ) -> HttpResult:
        """Build and send a request in one step."""
        request = self.build_request(
            method,
            segments,
            params=params,
            headers=headers,
            json_body=json_body,
        )
        return self.send(request)
