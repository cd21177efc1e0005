"""Item (article) schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from qiita.schemas import ApiModel
from qiita.schemas.tags import Tagging
from qiita.schemas.users import User


class Item(ApiModel):
    id: str
    title: str
    url: str | None = None
    body: str = ""
    rendered_body: str = ""
    private: bool = False
    coediting: bool = False

    created_at: datetime | None = None
    updated_at: datetime | None = None

    comments_count: int = 0
    likes_count: int = 0
    reactions_count: int = 0
    page_views_count: int | None = None

    user: User | None = None
    tags: list[Tagging] = Field(default_factory=list)


class ItemDraft(ApiModel):
    """Fields accepted by item create/update requests."""

    title: str
    body: str
    tags: list[Tagging] = Field(default_factory=list)
    private: bool = False
    tweet: bool | None = None
    coediting: bool | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
