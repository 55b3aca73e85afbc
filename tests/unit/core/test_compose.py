r"""Unit tests for the chain composer."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from achain import compose, pipeline
from tests.helpers import TEST_URL, make_response, tracing_executor

#############################
#     Tests for compose     #
#############################


def test_compose_without_executors_returns_base(mock_request_func: AsyncMock) -> None:
    assert compose()(mock_request_func) is mock_request_func


@pytest.mark.asyncio
async def test_compose_last_executor_is_outermost(mock_request_func: AsyncMock) -> None:
    trace = []
    fetch = compose(tracing_executor("e1", trace), tracing_executor("e2", trace))(
        mock_request_func
    )

    await fetch(TEST_URL)

    assert trace == ["e2", "e1"]
    mock_request_func.assert_awaited_once_with(TEST_URL, None)


def test_compose_nesting_structure(mock_request_func: AsyncMock) -> None:
    trace = []
    fetch = compose(
        tracing_executor("e1", trace), tracing_executor("e2", trace), tracing_executor("e3", trace)
    )(mock_request_func)

    assert fetch.executor_name == "e3"
    assert fetch.wrapped.executor_name == "e2"
    assert fetch.wrapped.wrapped.executor_name == "e1"
    assert fetch.wrapped.wrapped.wrapped is mock_request_func


@pytest.mark.asyncio
async def test_compose_is_associative(mock_request_func: AsyncMock) -> None:
    trace = []
    e1, e2, e3 = (tracing_executor(name, trace) for name in ("e1", "e2", "e3"))

    await compose(compose(e1, e2), e3)(mock_request_func)(TEST_URL)
    left = list(trace)
    trace.clear()
    await compose(e1, compose(e2, e3))(mock_request_func)(TEST_URL)
    right = list(trace)
    trace.clear()
    await compose(e1, e2, e3)(mock_request_func)(TEST_URL)

    assert left == right == trace == ["e3", "e2", "e1"]


@pytest.mark.asyncio
async def test_compose_returns_response_unchanged() -> None:
    response = make_response(201)
    fetch = compose(tracing_executor("e1", []))(AsyncMock(return_value=response))
    assert await fetch(TEST_URL) is response


@pytest.mark.asyncio
async def test_compose_is_reusable(mock_request_func: AsyncMock) -> None:
    trace = []
    fetch = compose(tracing_executor("e1", trace), tracing_executor("e2", trace))(
        mock_request_func
    )

    await fetch(TEST_URL)
    await fetch(TEST_URL)

    assert trace == ["e2", "e1", "e2", "e1"]
    assert mock_request_func.await_count == 2


##############################
#     Tests for pipeline     #
##############################


def test_pipeline_without_executors_returns_base(mock_request_func: AsyncMock) -> None:
    assert pipeline()(mock_request_func) is mock_request_func


@pytest.mark.asyncio
async def test_pipeline_first_executor_is_outermost(mock_request_func: AsyncMock) -> None:
    trace = []
    fetch = pipeline(tracing_executor("e1", trace), tracing_executor("e2", trace))(
        mock_request_func
    )

    await fetch(TEST_URL)

    assert trace == ["e1", "e2"]


def test_pipeline_nesting_structure(mock_request_func: AsyncMock) -> None:
    trace = []
    fetch = pipeline(
        tracing_executor("e1", trace), tracing_executor("e2", trace), tracing_executor("e3", trace)
    )(mock_request_func)

    assert fetch.executor_name == "e1"
    assert fetch.wrapped.executor_name == "e2"
    assert fetch.wrapped.wrapped.executor_name == "e3"
    assert fetch.wrapped.wrapped.wrapped is mock_request_func


@pytest.mark.asyncio
async def test_pipeline_is_associative(mock_request_func: AsyncMock) -> None:
    trace = []
    e1, e2, e3 = (tracing_executor(name, trace) for name in ("e1", "e2", "e3"))

    await pipeline(pipeline(e1, e2), e3)(mock_request_func)(TEST_URL)
    left = list(trace)
    trace.clear()
    await pipeline(e1, pipeline(e2, e3))(mock_request_func)(TEST_URL)
    right = list(trace)
    trace.clear()
    await pipeline(e1, e2, e3)(mock_request_func)(TEST_URL)

    assert left == right == trace == ["e1", "e2", "e3"]


@pytest.mark.asyncio
async def test_pipeline_reverses_compose(mock_request_func: AsyncMock) -> None:
    trace = []
    e1, e2 = tracing_executor("e1", trace), tracing_executor("e2", trace)

    await pipeline(e1, e2)(mock_request_func)(TEST_URL)
    pipeline_trace = list(trace)
    trace.clear()
    await compose(e2, e1)(mock_request_func)(TEST_URL)

    assert pipeline_trace == trace == ["e1", "e2"]
