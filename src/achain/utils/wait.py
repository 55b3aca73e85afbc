r"""Cancellable wait primitives.

This module provides the sleep used between retry attempts. The sleep
resolves after the requested delay, or raises as soon as the caller's
cancellation token fires.
"""

from __future__ import annotations

__all__ = ["run_cancellable", "wait_for"]

import asyncio
import logging
from contextlib import suppress
from typing import TYPE_CHECKING, TypeVar

from achain.core.validation import validate_delay

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from achain.cancellation import CancelToken

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


async def run_cancellable(awaitable: Awaitable[T], token: CancelToken | None) -> T:
    """Await ``awaitable`` unless ``token`` fires first.

    When the token fires first, the task running ``awaitable`` is
    cancelled and awaited before the abort error is raised, so no work
    is left running in the background.

    Args:
        awaitable: The awaitable to run.
        token: The cancellation token to observe. ``None`` awaits
            ``awaitable`` directly.

    Returns:
        The result of ``awaitable``.

    Raises:
        RequestAbortedError: If the token fires before ``awaitable``
            completes, or had already fired.
    """
    if token is None:
        return await awaitable
    if token.cancelled:
        # Close a bare coroutine so it does not warn about never being awaited
        close = getattr(awaitable, "close", None)
        if close is not None:
            close()
        raise token.error()

    task = asyncio.ensure_future(awaitable)
    waiter = asyncio.ensure_future(token.wait())
    try:
        await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        waiter.cancel()
        if not task.done():
            task.cancel()
            with suppress(asyncio.CancelledError):
                await task
        raise

    if task.done():
        waiter.cancel()
        return task.result()

    task.cancel()
    with suppress(asyncio.CancelledError):
        await task
    raise token.error()


async def wait_for(delay: float, token: CancelToken | None = None) -> None:
    """Wait for ``delay`` milliseconds, observing a cancellation token.

    Args:
        delay: The delay in milliseconds. Negative values are treated
            as zero.
        token: Optional cancellation token. If it fires before the delay
            has elapsed, the wait stops at once.

    Raises:
        ValueError: If the delay is NaN or larger than the maximum
            timer delay. This is raised before any suspension.
        RequestAbortedError: If the token fires during the wait or had
            already fired.

    Example:
        ```pycon
        >>> import asyncio
        >>> from achain.utils.wait import wait_for
        >>> asyncio.run(wait_for(1))

        ```
    """
    validate_delay(delay)
    seconds = max(0.0, delay) / 1000
    logger.debug(f"Waiting {seconds:.3f}s")
    await run_cancellable(asyncio.sleep(seconds), token)
