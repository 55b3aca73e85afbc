r"""Shared test helpers for request executor tests."""

from __future__ import annotations

__all__ = ["TEST_URL", "create_strategy_mock", "make_response", "tracing_executor"]

from typing import TYPE_CHECKING
from unittest.mock import Mock

import httpx

from achain.backoff import BackoffStrategy

if TYPE_CHECKING:
    from collections.abc import Sequence

    from achain.types import RequestExecutor, RequestFunc, RequestInput, RequestOptions

TEST_URL = "https://api.example.com/data"


def make_response(
    status_code: int = 200,
    *,
    headers: dict[str, str] | None = None,
    text: str = "ok",
    url: str = TEST_URL,
) -> httpx.Response:
    """Create a real ``httpx.Response`` bound to a GET request."""
    return httpx.Response(
        status_code, headers=headers, text=text, request=httpx.Request("GET", url)
    )


def create_strategy_mock(delays: Sequence[float | None]) -> Mock:
    """Create a mock backoff strategy factory.

    Each strategy created by the factory returns the delays in sequence,
    then ``None`` once they are exhausted. The created strategies are
    available in ``factory.strategies``.
    """
    strategies = []

    def factory() -> Mock:
        values = iter(delays)
        strategy = Mock(spec=BackoffStrategy)
        strategy.next_backoff.side_effect = lambda: next(values, None)
        strategies.append(strategy)
        return strategy

    mock = Mock(side_effect=factory)
    mock.strategies = strategies
    return mock


def tracing_executor(name: str, trace: list[str]) -> RequestExecutor:
    """Create an executor appending ``name`` to ``trace`` on each
    request."""

    def executor(next_func: RequestFunc) -> RequestFunc:
        async def request_func(
            request: RequestInput, options: RequestOptions | None = None
        ) -> httpx.Response:
            trace.append(name)
            return await next_func(request, options)

        request_func.wrapped = next_func
        request_func.executor_name = name
        return request_func

    return executor

