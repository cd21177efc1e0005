"""User operations: profiles, follow relationships and per-user collections."""

from __future__ import annotations

from qiita.resources.base import Resource
from qiita.schemas.items import Item
from qiita.schemas.pagination import Page
from qiita.schemas.tags import Tag
from qiita.schemas.users import User


def _subject(user_id: str) -> str:
    return f"user with id '{user_id}'"


class UsersResource(Resource):
    def get(self, user_id: str) -> User:
        """GET /users/:user_id"""
        return self._get_one(User, ("users", user_id), subject=_subject(user_id))

    def list(self, page: int = 1, per_page: int = 20) -> Page[User]:
        """GET /users (sorted by registration date, newest first)."""
        return self._list(User, ("users",), page=page, per_page=per_page)

    def followees(self, user_id: str, page: int = 1, per_page: int = 20) -> Page[User]:
        """GET /users/:user_id/followees"""
        return self._list(
            User,
            ("users", user_id, "followees"),
            page=page,
            per_page=per_page,
            subject=_subject(user_id),
        )

    def followers(self, user_id: str, page: int = 1, per_page: int = 20) -> Page[User]:
        """GET /users/:user_id/followers"""
        return self._list(
            User,
            ("users", user_id, "followers"),
            page=page,
            per_page=per_page,
            subject=_subject(user_id),
        )

    def items(self, user_id: str, page: int = 1, per_page: int = 20) -> Page[Item]:
        """GET /users/:user_id/items"""
        return self._list(
            Item,
            ("users", user_id, "items"),
            page=page,
            per_page=per_page,
            subject=_subject(user_id),
        )

    def stocks(self, user_id: str, page: int = 1, per_page: int = 20) -> Page[Item]:
        """GET /users/:user_id/stocks"""
        return self._list(
            Item,
            ("users", user_id, "stocks"),
            page=page,
            per_page=per_page,
            subject=_subject(user_id),
        )

    def following_tags(self, user_id: str, page: int = 1, per_page: int = 20) -> Page[Tag]:
        """GET /users/:user_id/following_tags"""
        return self._list(
            Tag,
            ("users", user_id, "following_tags"),
            page=page,
            per_page=per_page,
            subject=_subject(user_id),
        )

    def is_following(self, user_id: str) -> bool:
        """GET /users/:user_id/following (requires a token)."""
        return self._toggle(("users", user_id, "following"))

    def follow(self, user_id: str) -> None:
        """PUT /users/:user_id/following (requires a token)."""
        self._mutate(
            "PUT",
            ("users", user_id, "following"),
            subject=_subject(user_id),
            forbidden_hint=f"user '{user_id}' may already be followed",
        )

    def unfollow(self, user_id: str) -> None:
        """DELETE /users/:user_id/following (requires a token)."""
        self._mutate(
            "DELETE",
            ("users", user_id, "following"),
            subject=_subject(user_id),
            forbidden_hint=f"user '{user_id}' may not be followed",
        )
