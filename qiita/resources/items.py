"""Item operations: CRUD, stockers, stock relationship and comments."""

from __future__ import annotations

from qiita.resources.base import Resource
from qiita.schemas.comments import Comment, CommentDraft
from qiita.schemas.items import Item, ItemDraft
from qiita.schemas.pagination import Page
from qiita.schemas.users import User


def _subject(item_id: str) -> str:
    return f"item with id '{item_id}'"


class ItemsResource(Resource):
    def get(self, item_id: str) -> Item:
        """GET /items/:item_id"""
        return self._get_one(Item, ("items", item_id), subject=_subject(item_id))

    def list(self, page: int = 1, per_page: int = 20, *, query: str | None = None) -> Page[Item]:
        """GET /items, optionally filtered by a search `query`."""
        return self._list(
            Item,
            ("items",),
            page=page,
            per_page=per_page,
            params={"query": query},
        )

    def create(self, draft: ItemDraft) -> Item:
        """POST /items (requires a token)."""
        return self._mutate_into(
            Item,
            "POST",
            ("items",),
            json_body=draft.to_payload(),
            forbidden_hint="title, body or tags may be empty",
        )

    def update(self, item_id: str, draft: ItemDraft) -> Item:
        """PATCH /items/:item_id (requires a token)."""
        payload = draft.to_payload()
        # tweet is only accepted on creation.
        payload.pop("tweet", None)
        return self._mutate_into(
            Item,
            "PATCH",
            ("items", item_id),
            json_body=payload,
            subject=_subject(item_id),
            forbidden_hint=f"you may not be allowed to edit item '{item_id}'",
        )

    def delete(self, item_id: str) -> None:
        """DELETE /items/:item_id (requires a token)."""
        self._mutate(
            "DELETE",
            ("items", item_id),
            subject=_subject(item_id),
            forbidden_hint=f"you may not be allowed to delete item '{item_id}'",
        )

    def stockers(self, item_id: str, page: int = 1, per_page: int = 20) -> Page[User]:
        """GET /items/:item_id/stockers"""
        return self._list(
            User,
            ("items", item_id, "stockers"),
            page=page,
            per_page=per_page,
            subject=_subject(item_id),
        )

    def comments(self, item_id: str) -> list[Comment]:
        """GET /items/:item_id/comments (not paginated)."""
        return self._get_one(
            list[Comment],  # type: ignore[arg-type]
            ("items", item_id, "comments"),
            subject=_subject(item_id),
        )

    def add_comment(self, item_id: str, draft: CommentDraft) -> Comment:
        """POST /items/:item_id/comments (requires a token)."""
        return self._mutate_into(
            Comment,
            "POST",
            ("items", item_id, "comments"),
            json_body=draft.to_payload(),
            subject=_subject(item_id),
            forbidden_hint="comment body may be empty",
        )

    def is_stocked(self, item_id: str) -> bool:
        """GET /items/:item_id/stock (requires a token)."""
        return self._toggle(("items", item_id, "stock"))

    def stock(self, item_id: str) -> None:
        """PUT /items/:item_id/stock (requires a token)."""
        self._mutate(
            "PUT",
            ("items", item_id, "stock"),
            subject=_subject(item_id),
            forbidden_hint=f"item '{item_id}' may already be stocked",
        )

    def unstock(self, item_id: str) -> None:
        """DELETE /items/:item_id/stock (requires a token)."""
        self._mutate(
            "DELETE",
            ("items", item_id, "stock"),
            subject=_subject(item_id),
            forbidden_hint=f"item '{item_id}' may not be stocked",
        )
