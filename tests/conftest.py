from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from qiita.client import QiitaClient

BASE_URL = "http://qiita.local/api/v2"

Handler = Callable[[httpx.Request], httpx.Response]


def user_payload(user_id: str = "muiscript", **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": user_id,
        "permanent_id": 123456,
        "name": "Mui Script",
        "profile_image_url": f"https://example.local/{user_id}.png",
        "description": "",
        "location": "Tokyo",
        "organization": None,
        "website_url": "",
        "team_only": False,
        "items_count": 5,
        "followees_count": 3,
        "followers_count": 11,
        "github_login_name": user_id,
        "linkedin_id": None,
        "twitter_screen_name": None,
        "facebook_id": None,
    }
    payload.update(overrides)
    return payload


def item_payload(item_id: str = "b4ca1773580317e7112e", **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": item_id,
        "title": "Writing an API client",
        "url": f"https://qiita.com/muiscript/items/{item_id}",
        "body": "# hello",
        "rendered_body": "<h1>hello</h1>",
        "private": False,
        "coediting": False,
        "created_at": "2017-06-05T12:37:49+09:00",
        "updated_at": "2017-06-06T08:00:00+09:00",
        "comments_count": 1,
        "likes_count": 4,
        "reactions_count": 0,
        "page_views_count": None,
        "user": user_payload(),
        "tags": [
            {"name": "Go", "versions": ["1.8"]},
            {"name": "API", "versions": []},
        ],
    }
    payload.update(overrides)
    return payload


def tag_payload(tag_id: str = "Go", **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": tag_id,
        "icon_url": f"https://example.local/tags/{tag_id}.png",
        "items_count": 1200,
        "followers_count": 340,
    }
    payload.update(overrides)
    return payload


def comment_payload(comment_id: str = "3391f50c35f953abfc4f", **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": comment_id,
        "body": "Nice article",
        "rendered_body": "<p>Nice article</p>",
        "created_at": "2017-06-07T10:00:00+09:00",
        "updated_at": "2017-06-07T10:00:00+09:00",
        "user": user_payload("yaotti"),
    }
    payload.update(overrides)
    return payload


def pagination_headers(path: str, *, last_page: int, total_count: int, per_page: int) -> dict[str, str]:
    """Headers shaped like the API's list responses."""

    def _url(page: int) -> str:
        return f"https://qiita.com/api/v2{path}?page={page}&per_page={per_page}"

    link = ", ".join(
        [
            f'<{_url(1)}>; rel="first"',
            f'<{_url(2)}>; rel="next"',
            f'<{_url(last_page)}>; rel="last"',
        ]
    )
    return {"Link": link, "Total-Count": str(total_count)}


@pytest.fixture
def make_client() -> Callable[..., QiitaClient]:
    """Return a factory building a client whose requests go to `handler`."""

    def _factory(handler: Handler, *, access_token: str | None = "secret-token", **kwargs: Any) -> QiitaClient:
        return QiitaClient(
            access_token,
            base_url=BASE_URL,
            transport=httpx.MockTransport(handler),
            **kwargs,
        )

    return _factory


@pytest.fixture
def no_request() -> Handler:
    """Handler failing the test if any request reaches the transport."""

    def handler(request: httpx.Request) -> httpx.Response:
        pytest.fail(f"unexpected request: {request.method} {request.url}")

    return handler
