"""Tag schemas.

`Tagging` is the by-value reference embedded in items and drafts; `Tag` is the
standalone resource served by `/tags`.
"""

from __future__ import annotations

from pydantic import Field

from qiita.schemas import ApiModel


class Tagging(ApiModel):
    name: str
    versions: list[str] = Field(default_factory=list)


class Tag(ApiModel):
    id: str
    icon_url: str | None = None
    items_count: int = 0
    followers_count: int = 0
