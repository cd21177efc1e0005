"""Pagination helpers: input validation and `Link`/`Total-Count` header parsing."""

from __future__ import annotations

import re
from typing import Final, Mapping

import httpx

from qiita.errors import PaginationError
from qiita.net.http import ResponseDecodeError
from qiita.schemas.pagination import PaginationSummary

__all__ = [
    "LAST_PAGE_CEILING",
    "PAGE_MAX",
    "PAGE_MIN",
    "PER_PAGE_MAX",
    "PER_PAGE_MIN",
    "PaginationHeaderError",
    "extract_pagination",
    "parse_link_header",
    "validate_pagination",
]

PAGE_MIN: Final[int] = 1
PAGE_MAX: Final[int] = 100
PER_PAGE_MIN: Final[int] = 1
PER_PAGE_MAX: Final[int] = 100

# The API never exposes more than 100 pages of any collection.
LAST_PAGE_CEILING: Final[int] = 100

_LINK_RE = re.compile(r'<(?P<url>[^>]*)>.*rel="(?P<rel>[^"]*)"')


class PaginationHeaderError(ResponseDecodeError):
    """Raised when `Link` or `Total-Count` headers are missing or malformed."""


def validate_pagination(page: int, per_page: int) -> None:
    """Range-check page inputs before a request is issued."""
    if not PAGE_MIN <= page <= PAGE_MAX:
        raise PaginationError(
            f"page parameter should be between {PAGE_MIN} and {PAGE_MAX}. got {page}"
        )
    if not PER_PAGE_MIN <= per_page <= PER_PAGE_MAX:
        raise PaginationError(
            f"perPage parameter should be between {PER_PAGE_MIN} and {PER_PAGE_MAX}. got {per_page}"
        )


def parse_link_header(value: str | None) -> dict[str, httpx.URL]:
    """Parse an RFC 5988 style `Link` header into a rel -> URL mapping.

    Entries are separated by ``", "`` and look like ``<URL>; rel="REL"``.
    """
    text = (value or "").strip()
    if not text:
        raise PaginationHeaderError("Link header is missing.")

    links: dict[str, httpx.URL] = {}
    for entry in text.split(", "):
        match = _LINK_RE.search(entry)
        if match is None:
            raise PaginationHeaderError(f"Malformed Link header entry: {entry!r}")
        try:
            links[match.group("rel")] = httpx.URL(match.group("url"))
        except httpx.InvalidURL as exc:
            raise PaginationHeaderError(f"Malformed Link header URL: {exc}") from exc
    return links


def _header_int(headers: httpx.Headers, name: str) -> int:
    raw = headers.get(name)
    if raw is None:
        raise PaginationHeaderError(f"{name} header is missing.")
    try:
        return int(str(raw).strip())
    except ValueError as exc:
        raise PaginationHeaderError(f"{name} header is not an integer: {raw!r}") from exc


def extract_pagination(
    headers: Mapping[str, str],
    page: int,
    per_page: int,
    *,
    ceiling: int = LAST_PAGE_CEILING,
) -> PaginationSummary:
    """Build a `PaginationSummary` from list response headers.

    The last page comes from the `page` query parameter of the ``rel="last"``
    link and is clamped to `ceiling`. The total count comes from `Total-Count`.
    Header names are matched case-insensitively, so a plain dict works too.
    """
    lookup = httpx.Headers(headers)
    links = parse_link_header(lookup.get("Link"))
    last_url = links.get("last")
    if last_url is None:
        raise PaginationHeaderError('Link header has no rel="last" entry.')

    raw_last = last_url.params.get("page")
    try:
        last_page = int(raw_last) if raw_last is not None else None
    except ValueError:
        last_page = None
    if last_page is None:
        raise PaginationHeaderError(f"Last page link has no integer page parameter: {last_url}")
    last_page = min(last_page, int(ceiling))

    total_count = _header_int(lookup, "Total-Count")

    return PaginationSummary(
        page=page,
        per_page=per_page,
        first_page=1,
        last_page=last_page,
        total_count=total_count,
    )
