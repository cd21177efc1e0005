"""Status classification and API error types.

Every resource operation funnels its response status through
`classify_status()` and `raise_for_outcome()` so the status-to-error mapping
lives in one place and can be tested without network I/O.
"""

from __future__ import annotations

import enum

from qiita.net.http import HttpCallError

__all__ = [
    "ForbiddenError",
    "NotFoundError",
    "PaginationError",
    "QiitaAPIError",
    "StatusOutcome",
    "UnauthorizedError",
    "UnknownStatusError",
    "classify_status",
    "raise_for_outcome",
]


class StatusOutcome(str, enum.Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    UNKNOWN = "unknown"


def classify_status(status_code: int) -> StatusOutcome:
    """Map an HTTP status code onto the finite set of outcomes the client handles."""
    code = int(status_code)
    if 200 <= code < 300:
        return StatusOutcome.SUCCESS
    if code == 404:
        return StatusOutcome.NOT_FOUND
    if code == 401:
        return StatusOutcome.UNAUTHORIZED
    if code == 403:
        return StatusOutcome.FORBIDDEN
    return StatusOutcome.UNKNOWN


class PaginationError(ValueError):
    """Raised before any request when page/per_page are out of range."""


class QiitaAPIError(HttpCallError):
    """Raised when the API answers with a status the operation cannot accept."""

    outcome: StatusOutcome = StatusOutcome.UNKNOWN


class NotFoundError(QiitaAPIError):
    outcome = StatusOutcome.NOT_FOUND


class UnauthorizedError(QiitaAPIError):
    outcome = StatusOutcome.UNAUTHORIZED


class ForbiddenError(QiitaAPIError):
    """Raised on 403.

    The API uses 403 for several unrelated conditions (duplicate action, empty
    required field, missing permission); the message carries a per-endpoint hint.
    """

    outcome = StatusOutcome.FORBIDDEN


class UnknownStatusError(QiitaAPIError):
    outcome = StatusOutcome.UNKNOWN


def raise_for_outcome(
    status_code: int,
    *,
    subject: str | None = None,
    forbidden_hint: str | None = None,
) -> None:
    """Raise the error matching `status_code`, or return on success.

    Args:
        status_code: HTTP status of the response.
        subject: Human readable resource reference used in not-found messages,
            e.g. ``"user with id 'muiscript'"``.
        forbidden_hint: Endpoint specific explanation appended to 403 errors.
    """
    outcome = classify_status(status_code)
    if outcome is StatusOutcome.SUCCESS:
        return
    if outcome is StatusOutcome.NOT_FOUND:
        target = subject or "resource"
        raise NotFoundError(f"{target} not found", status_code=status_code)
    if outcome is StatusOutcome.UNAUTHORIZED:
        raise UnauthorizedError(
            "unauthorized. you may have provided no/invalid access token",
            status_code=status_code,
        )
    if outcome is StatusOutcome.FORBIDDEN:
        message = "forbidden"
        if forbidden_hint:
            message = f"forbidden. {forbidden_hint}"
        raise ForbiddenError(message, status_code=status_code)
    raise UnknownStatusError("unknown error", status_code=status_code)
