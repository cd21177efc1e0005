"""Shared request/response shapes used by every resource.

Each public operation is one of four shapes: get-one, list (paginated),
mutate (optionally decoding the body), or toggle-check. They all validate inputs, send a single request and
map the status through `raise_for_outcome`.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any, Mapping, Sequence, TypeVar

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from qiita.errors import StatusOutcome, UnknownStatusError, classify_status, raise_for_outcome
from qiita.net.http import HttpClient, HttpResult, ResponseDecodeError
from qiita.pagination import extract_pagination, validate_pagination
from qiita.schemas.pagination import Page

if TYPE_CHECKING:
    from qiita.client import QiitaClient

log = logger.bind(module="resources.base")

T = TypeVar("T")

# Other 2xx codes are not part of the write endpoints' contract.
MUTATION_SUCCESS_CODES = frozenset({200, 201, 204})


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def decode(shape: Any, result: HttpResult) -> Any:
    """Validate a decoded JSON payload into `shape` (a model or `list[Model]`)."""
    if result.data is None:
        raise ResponseDecodeError("Empty response body", status_code=result.status_code)
    try:
        return _adapter(shape).validate_python(result.data)
    except ValidationError as exc:
        raise ResponseDecodeError(
            f"Unexpected response payload: {exc}",
            status_code=result.status_code,
        ) from exc


class Resource:
    """Base class binding operations to a `QiitaClient`."""

    def __init__(self, client: "QiitaClient") -> None:
        self._client = client

    @property
    def _http(self) -> HttpClient:
        return self._client.http

    def _get_one(self, model: type[T], segments: Sequence[object], *, subject: str | None = None) -> T:
        result = self._http.request("GET", segments)
        raise_for_outcome(result.status_code, subject=subject)
        return decode(model, result)

    def _list(
        self,
        model: type[T],
        segments: Sequence[object],
        *,
        page: int,
        per_page: int,
        params: Mapping[str, Any] | None = None,
        subject: str | None = None,
    ) -> Page[T]:
        validate_pagination(page, per_page)
        query: dict[str, Any] = {"page": page, "per_page": per_page}
        query.update(params or {})

        result = self._http.request("GET", segments, params=query)
        raise_for_outcome(result.status_code, subject=subject)

        items = decode(list[model], result) if result.data is not None else []  # type: ignore[valid-type]
        pagination = extract_pagination(
            result.headers,
            page,
            per_page,
            ceiling=self._client.last_page_ceiling,
        )
        log.debug(
            "listed {} {} on page {}/{}",
            len(items),
            model.__name__,
            pagination.page,
            pagination.last_page,
        )
        return Page[model](items=items, pagination=pagination)  # type: ignore[valid-type]

    def _send_mutation(
        self,
        method: str,
        segments: Sequence[object],
        *,
        json_body: Any | None,
        subject: str | None,
        forbidden_hint: str | None,
    ) -> HttpResult:
        result = self._http.request(method, segments, json_body=json_body)
        raise_for_outcome(result.status_code, subject=subject, forbidden_hint=forbidden_hint)
        if result.status_code not in MUTATION_SUCCESS_CODES:
            raise UnknownStatusError("unknown error", status_code=result.status_code)
        return result

    def _mutate(
        self,
        method: str,
        segments: Sequence[object],
        *,
        json_body: Any | None = None,
        subject: str | None = None,
        forbidden_hint: str | None = None,
    ) -> None:
        self._send_mutation(
            method,
            segments,
            json_body=json_body,
            subject=subject,
            forbidden_hint=forbidden_hint,
        )

    def _mutate_into(
        self,
        model: type[T],
        method: str,
        segments: Sequence[object],
        *,
        json_body: Any | None = None,
        subject: str | None = None,
        forbidden_hint: str | None = None,
    ) -> T:
        """Like `_mutate`, decoding the response body into `model`."""
        result = self._send_mutation(
            method,
            segments,
            json_body=json_body,
            subject=subject,
            forbidden_hint=forbidden_hint,
        )
        return decode(model, result)

    def _toggle(self, segments: Sequence[object]) -> bool:
        """Check a relationship sub-path: 204 is True, 404 is False.

        A 404 does not distinguish a missing relationship from a missing
        resource, so False means "not confirmed", not "confirmed absent".
        """
        result = self._http.request("GET", segments)
        if result.status_code == 204:
            return True
        outcome = classify_status(result.status_code)
        if outcome is StatusOutcome.NOT_FOUND:
            return False
        if outcome is StatusOutcome.UNAUTHORIZED:
            raise_for_outcome(result.status_code)
        raise UnknownStatusError("unknown error", status_code=result.status_code)
