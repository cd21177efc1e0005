from __future__ import annotations

from typing import Literal

from qiita.resources.base import Resource
from qiita.schemas.pagination import Page
from qiita.schemas.tags import Tag

TagSort = Literal["count", "name"]


class TagsResource(Resource):
    def get(self, tag_id: str) -> Tag:
        """GET /tags/:tag_id"""
        return self._get_one(Tag, ("tags", tag_id), subject=f"tag with id '{tag_id}'")

    def list(self, page: int = 1, per_page: int = 20, *, sort: TagSort = "count") -> Page[Tag]:
        """GET /tags sorted by item count (default) or name."""
        if sort not in ("count", "name"):
            raise ValueError(f"sort parameter should be 'count' or 'name'. got {sort!r}")
        return self._list(Tag, ("tags",), page=page, per_page=per_page, params={"sort": sort})
