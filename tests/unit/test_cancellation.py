r"""Unit tests for the cancellation token."""

from __future__ import annotations

import asyncio

import pytest

from achain import CancelToken, RequestAbortedError


def test_cancel_token_initial_state() -> None:
    token = CancelToken()
    assert not token.cancelled
    assert token.reason is None
    assert repr(token) == "CancelToken(cancelled=False)"


def test_cancel_token_cancel() -> None:
    token = CancelToken()
    token.cancel("shutdown")
    assert token.cancelled
    assert token.reason == "shutdown"


def test_cancel_token_first_reason_wins() -> None:
    token = CancelToken()
    token.cancel("first")
    token.cancel("second")
    assert token.reason == "first"


def test_cancel_token_raise_if_cancelled() -> None:
    token = CancelToken()
    token.raise_if_cancelled()
    token.cancel()
    with pytest.raises(RequestAbortedError, match=r"The operation was aborted"):
        token.raise_if_cancelled()


def test_cancel_token_error_carries_reason() -> None:
    token = CancelToken()
    token.cancel("timeout")
    error = token.error()
    assert isinstance(error, RequestAbortedError)
    assert error.reason == "timeout"
    assert str(error) == "The operation was aborted: timeout"


@pytest.mark.asyncio
async def test_cancel_token_wait() -> None:
    token = CancelToken()
    waiter = asyncio.ensure_future(token.wait())
    await asyncio.sleep(0)
    assert not waiter.done()
    token.cancel()
    await asyncio.wait_for(waiter, timeout=5)
    assert waiter.done()
