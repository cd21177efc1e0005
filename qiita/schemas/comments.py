"""Comment schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from qiita.schemas import ApiModel
from qiita.schemas.users import User


class Comment(ApiModel):
    id: str
    body: str = ""
    rendered_body: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    user: User | None = None


class CommentDraft(ApiModel):
    body: str

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
