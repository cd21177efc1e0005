"""Typed client for the Qiita v2 REST API.

Logging goes through loguru and is disabled for this package by default;
call ``logger.enable("qiita")`` to receive request diagnostics.
"""

from __future__ import annotations

from loguru import logger

from qiita.client import QiitaClient
from qiita.errors import (
    ForbiddenError,
    NotFoundError,
    PaginationError,
    QiitaAPIError,
    StatusOutcome,
    UnauthorizedError,
    UnknownStatusError,
)
from qiita.net.http import HttpCallError, RequestBuildError, ResponseDecodeError
from qiita.pagination import PaginationHeaderError
from qiita.schemas.comments import Comment, CommentDraft
from qiita.schemas.items import Item, ItemDraft
from qiita.schemas.pagination import Page, PaginationSummary
from qiita.schemas.tags import Tag, Tagging
from qiita.schemas.users import User

logger.disable("qiita")

__all__ = [
    "Comment",
    "CommentDraft",
    "ForbiddenError",
    "HttpCallError",
    "Item",
    "ItemDraft",
    "NotFoundError",
    "Page",
    "PaginationError",
    "PaginationHeaderError",
    "PaginationSummary",
    "QiitaAPIError",
    "QiitaClient",
    "RequestBuildError",
    "ResponseDecodeError",
    "StatusOutcome",
    "Tag",
    "Tagging",
    "UnauthorizedError",
    "UnknownStatusError",
    "User",
]
