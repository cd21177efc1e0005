"""Per-resource API operations exposed through `QiitaClient`."""

from __future__ import annotations

from qiita.resources.authenticated_user import AuthenticatedUserResource
from qiita.resources.comments import CommentsResource
from qiita.resources.items import ItemsResource
from qiita.resources.tags import TagsResource
from qiita.resources.users import UsersResource

__all__ = [
    "AuthenticatedUserResource",
    "CommentsResource",
    "ItemsResource",
    "TagsResource",
    "UsersResource",
]
