r"""Unit tests for the cookie executors."""

from __future__ import annotations

from unittest.mock import AsyncMock

import httpx
import pytest

from achain import RequestOptions, with_cookie, with_cookies
from tests.helpers import TEST_URL


def test_with_cookies_empty() -> None:
    with pytest.raises(ValueError, match=r"with_cookies requires at least one cookie"):
        with_cookies({})


@pytest.mark.asyncio
async def test_with_cookie(mock_request_func: AsyncMock) -> None:
    await with_cookie("session", "abc123")(mock_request_func)(TEST_URL)

    request, options = mock_request_func.await_args.args
    assert request == TEST_URL
    assert options.headers["Cookie"] == "session=abc123"


@pytest.mark.asyncio
async def test_with_cookies_multiple(mock_request_func: AsyncMock) -> None:
    await with_cookies({"a": "1", "b": "2"})(mock_request_func)(TEST_URL)
    assert mock_request_func.await_args.args[1].headers["Cookie"] == "a=1; b=2"


@pytest.mark.asyncio
async def test_with_cookies_appends_to_option_cookies(mock_request_func: AsyncMock) -> None:
    options = RequestOptions(method="POST", headers={"cookie": "x=0"})
    await with_cookies({"a": "1"})(mock_request_func)(TEST_URL, options)

    forwarded = mock_request_func.await_args.args[1]
    assert forwarded.method == "POST"
    assert forwarded.headers["Cookie"] == "x=0; a=1"


@pytest.mark.asyncio
async def test_with_cookies_appends_to_request_cookies(mock_request_func: AsyncMock) -> None:
    request = httpx.Request("GET", TEST_URL, headers={"Cookie": "x=0", "X-A": "1"})
    await with_cookie("a", "1")(mock_request_func)(request)

    forwarded, options = mock_request_func.await_args.args
    assert isinstance(forwarded, httpx.Request)
    assert forwarded.headers["Cookie"] == "x=0; a=1"
    assert forwarded.headers["X-A"] == "1"
    assert options is None


@pytest.mark.asyncio
async def test_with_cookies_request_and_option_headers(mock_request_func: AsyncMock) -> None:
    request = httpx.Request("GET", TEST_URL, headers={"Cookie": "x=0"})
    options = RequestOptions(headers={"X-B": "2"})
    await with_cookie("a", "1")(mock_request_func)(request, options)

    forwarded, forwarded_options = mock_request_func.await_args.args
    assert forwarded.headers["Cookie"] == "x=0; a=1"
    assert forwarded_options.headers["Cookie"] == "x=0; a=1"
    assert forwarded_options.headers["X-B"] == "2"


@pytest.mark.asyncio
async def test_with_cookies_chained(mock_request_func: AsyncMock) -> None:
    fetch = with_cookie("b", "2")(with_cookie("a", "1")(mock_request_func))
    await fetch(TEST_URL)
    assert mock_request_func.await_args.args[1].headers["Cookie"] == "b=2; a=1"
