r"""Unit tests for the query parameter executors."""

from __future__ import annotations

from unittest.mock import AsyncMock

import httpx
import pytest

from achain import with_query_param, with_query_params
from tests.helpers import TEST_URL


def _forwarded_url(mock_request_func: AsyncMock) -> httpx.URL:
    request = mock_request_func.await_args.args[0]
    if isinstance(request, httpx.Request):
        return request.url
    return httpx.URL(request)


@pytest.mark.asyncio
async def test_with_query_param(mock_request_func: AsyncMock) -> None:
    await with_query_param("api_key", "secret")(mock_request_func)(TEST_URL)

    forwarded = mock_request_func.await_args.args[0]
    assert isinstance(forwarded, str)
    assert forwarded == f"{TEST_URL}?api_key=secret"


@pytest.mark.asyncio
async def test_with_query_params_placed_before_request_params(mock_request_func: AsyncMock) -> None:
    await with_query_params({"page": "1", "lang": "en"})(mock_request_func)(f"{TEST_URL}?page=2")

    url = _forwarded_url(mock_request_func)
    assert list(url.params.multi_items()) == [("page", "1"), ("lang", "en"), ("page", "2")]
    assert url.params.get_list("page")[-1] == "2"


@pytest.mark.asyncio
async def test_with_query_params_repeat_format(mock_request_func: AsyncMock) -> None:
    await with_query_params({"tags": ["a", "b"]})(mock_request_func)(TEST_URL)
    assert _forwarded_url(mock_request_func).params.get_list("tags") == ["a", "b"]


@pytest.mark.asyncio
async def test_with_query_params_brackets_format(mock_request_func: AsyncMock) -> None:
    executor = with_query_params({"tags": ("a", "b")}, array_format="brackets")
    await executor(mock_request_func)(TEST_URL)

    params = _forwarded_url(mock_request_func).params
    assert params.get_list("tags[]") == ["a", "b"]
    assert "tags" not in params


@pytest.mark.asyncio
async def test_with_query_params_skips_empty_list(mock_request_func: AsyncMock) -> None:
    await with_query_params({"tags": [], "q": "x"})(mock_request_func)(TEST_URL)

    params = _forwarded_url(mock_request_func).params
    assert list(params.multi_items()) == [("q", "x")]


@pytest.mark.asyncio
async def test_with_query_params_url_input(mock_request_func: AsyncMock) -> None:
    await with_query_param("q", "x")(mock_request_func)(httpx.URL(TEST_URL))

    forwarded = mock_request_func.await_args.args[0]
    assert isinstance(forwarded, httpx.URL)
    assert forwarded.params["q"] == "x"


@pytest.mark.asyncio
async def test_with_query_params_request_input(mock_request_func: AsyncMock) -> None:
    request = httpx.Request("DELETE", f"{TEST_URL}?id=7")
    await with_query_param("q", "x")(mock_request_func)(request)

    forwarded = mock_request_func.await_args.args[0]
    assert isinstance(forwarded, httpx.Request)
    assert forwarded.method == "DELETE"
    assert list(forwarded.url.params.multi_items()) == [("q", "x"), ("id", "7")]


def test_with_query_params_empty_is_passthrough(mock_request_func: AsyncMock) -> None:
    assert with_query_params({})(mock_request_func) is mock_request_func


@pytest.mark.parametrize("params", [{}, {"a": "1"}])
def test_with_query_params_invalid_array_format(params: dict) -> None:
    with pytest.raises(ValueError, match=r"array_format must be one of"):
        with_query_params(params, array_format="comma")
