"""Tests for wren._internal.invoke — calling sync and async route handlers."""

import pytest

from wren._internal.invoke import call_handler


@pytest.mark.anyio
async def test_sync_handler_result_returned() -> None:
    def handler(url: str, route: object, params: dict[str, str]) -> str:
        return f"{url}:{params['id']}"

    assert await call_handler(handler, "/u/1", None, {"id": "1"}) == "/u/1:1"


@pytest.mark.anyio
async def test_async_handler_awaited() -> None:
    async def handler(url: str, route: object, params: dict[str, str]) -> str:
        return params["slug"].upper()

    assert await call_handler(handler, "/p/x", None, {"slug": "x"}) == "X"


@pytest.mark.anyio
async def test_none_passed_through() -> None:
    assert await call_handler(lambda url, route, params: None, "/", None, {}) is None
