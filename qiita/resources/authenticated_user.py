from __future__ import annotations

from qiita.resources.base import Resource
from qiita.schemas.items import Item
from qiita.schemas.pagination import Page
from qiita.schemas.users import User


class AuthenticatedUserResource(Resource):
    """Operations on the user owning the configured access token."""

    def get(self) -> User:
        """GET /authenticated_user"""
        return self._get_one(User, ("authenticated_user",), subject="authenticated user")

    def items(self, page: int = 1, per_page: int = 20) -> Page[Item]:
        """GET /authenticated_user/items (includes private items)."""
        return self._list(Item, ("authenticated_user", "items"), page=page, per_page=per_page)
