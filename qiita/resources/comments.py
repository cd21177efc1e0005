from __future__ import annotations

from qiita.resources.base import Resource
from qiita.schemas.comments import Comment, CommentDraft


def _subject(comment_id: str) -> str:
    return f"comment with id '{comment_id}'"


class CommentsResource(Resource):
    def get(self, comment_id: str) -> Comment:
        """GET /comments/:comment_id"""
        return self._get_one(Comment, ("comments", comment_id), subject=_subject(comment_id))

    def update(self, comment_id: str, draft: CommentDraft) -> Comment:
        """PATCH /comments/:comment_id (requires a token)."""
        return self._mutate_into(
            Comment,
            "PATCH",
            ("comments", comment_id),
            json_body=draft.to_payload(),
            subject=_subject(comment_id),
            forbidden_hint=f"you may not be allowed to edit comment '{comment_id}'",
        )

    def delete(self, comment_id: str) -> None:
        """DELETE /comments/:comment_id (requires a token)."""
        self._mutate(
            "DELETE",
            ("comments", comment_id),
            subject=_subject(comment_id),
            forbidden_hint=f"you may not be allowed to delete comment '{comment_id}'",
        )

    def thank(self, comment_id: str) -> None:
        """PUT /comments/:comment_id/thank (requires a token)."""
        self._mutate(
            "PUT",
            ("comments", comment_id, "thank"),
            subject=_subject(comment_id),
            forbidden_hint="the comment may already be thanked or be your own",
        )

    def unthank(self, comment_id: str) -> None:
        """DELETE /comments/:comment_id/thank (requires a token)."""
        self._mutate(
            "DELETE",
            ("comments", comment_id, "thank"),
            subject=_subject(comment_id),
            forbidden_hint="the comment may not be thanked",
        )
