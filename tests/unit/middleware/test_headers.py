from __future__ import annotations

from unittest.mock import AsyncMock

import httpx
import pytest

from achain import RequestOptions, with_header, with_headers
from tests.helpers import TEST_URL

#################################
#     Tests for with_header     #
#################################


@pytest.mark.asyncio
async def test_with_header_adds_header(mock_request_func: AsyncMock) -> None:
    fetch = with_header("X-Api-Version", "2")(mock_request_func)
    await fetch(TEST_URL)

    request, options = mock_request_func.await_args.args
    assert request == TEST_URL
    assert options.headers["x-api-version"] == "2"


@pytest.mark.asyncio
async def test_with_header_keeps_option_header(mock_request_func: AsyncMock) -> None:
    fetch = with_header("X-Api-Version", "2")(mock_request_func)
    await fetch(TEST_URL, RequestOptions(headers={"x-api-version": "1"}))

    options = mock_request_func.await_args.args[1]
    assert options.headers.get_list("X-Api-Version") == ["1"]


@pytest.mark.asyncio
async def test_with_header_keeps_request_header(mock_request_func: AsyncMock) -> None:
    request = httpx.Request("GET", TEST_URL, headers={"X-API-VERSION": "1"})
    fetch = with_header("X-Api-Version", "2")(mock_request_func)
    await fetch(request)

    forwarded, options = mock_request_func.await_args.args
    assert forwarded is request
    assert "X-Api-Version" not in options.headers


@pytest.mark.asyncio
async def test_with_header_preserves_other_options(mock_request_func: AsyncMock) -> None:
    original = RequestOptions(method="POST", content=b"data")
    fetch = with_header("Accept", "application/json")(mock_request_func)
    await fetch(TEST_URL, original)

    options = mock_request_func.await_args.args[1]
    assert options.method == "POST"
    assert options.content == b"data"
    assert options.headers["Accept"] == "application/json"
    assert original.headers is None


##################################
#     Tests for with_headers     #
##################################


@pytest.mark.asyncio
async def test_with_headers_adds_missing_headers_only(mock_request_func: AsyncMock) -> None:
    fetch = with_headers({"Accept": "application/json", "User-Agent": "achain"})(
        mock_request_func
    )
    await fetch(TEST_URL, RequestOptions(headers={"user-agent": "custom"}))

    headers = mock_request_func.await_args.args[1].headers
    assert headers["Accept"] == "application/json"
    assert headers["User-Agent"] == "custom"


def test_with_headers_empty_is_passthrough(mock_request_func: AsyncMock) -> None:
    assert with_headers({})(mock_request_func) is mock_request_func


@pytest.mark.asyncio
async def test_with_headers_accepts_httpx_headers(mock_request_func: AsyncMock) -> None:
    fetch = with_headers(httpx.Headers({"X-Trace": "on"}))(mock_request_func)
    response = await fetch(TEST_URL)

    assert response.status_code == 200
    assert mock_request_func.await_args.args[1].headers["x-trace"] == "on"
