from __future__ import annotations

import httpx
import pytest

from qiita.errors import UnauthorizedError

from conftest import item_payload, pagination_headers, user_payload


def test_get_authenticated_user(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/v2/authenticated_user"
        assert request.headers["authorization"] == "Bearer secret-token"
        return httpx.Response(200, json=user_payload("me"), request=request)

    assert make_client(handler).authenticated_user.get().id == "me"


def test_get_authenticated_user_without_token(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, request=request)

    with pytest.raises(UnauthorizedError):
        make_client(handler, access_token=None).authenticated_user.get()


def test_authenticated_user_items(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/v2/authenticated_user/items"
        assert request.url.query == b"page=1&per_page=10"
        return httpx.Response(
            200,
            json=[item_payload("secret", private=True)],
            headers=pagination_headers("/authenticated_user/items", last_page=1, total_count=1, per_page=10),
            request=request,
        )

    page = make_client(handler).authenticated_user.items(page=1, per_page=10)
    assert page.items[0].private is True
    assert page.pagination.total_count == 1
