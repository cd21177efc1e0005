"""User schemas."""

from __future__ import annotations

from qiita.schemas import ApiModel


class User(ApiModel):
    id: str
    permanent_id: int | None = None
    name: str | None = None
    profile_image_url: str | None = None
    description: str | None = None
    location: str | None = None
    organization: str | None = None
    website_url: str | None = None
    team_only: bool = False

    items_count: int = 0
    followees_count: int = 0
    followers_count: int = 0

    github_login_name: str | None = None
    linkedin_id: str | None = None
    twitter_screen_name: str | None = None
    facebook_id: str | None = None
