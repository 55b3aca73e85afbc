r"""Retry requests that fail with a transient HTTP status code."""

from __future__ import annotations

__all__ = ["with_retry_status"]

import logging
from typing import TYPE_CHECKING

from achain.backoff.base import is_stop
from achain.core.config import RETRY_CANCEL_REASON, RETRYABLE_STATUSES
from achain.retry.config import RetryStatusConfig
from achain.utils.request import get_request_method, get_request_url, resolve_cancel_token
from achain.utils.response import release_body
from achain.utils.wait import wait_for

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    import httpx

    from achain.backoff import BackoffStrategy
    from achain.types import RequestExecutor, RequestFunc, RequestInput, RequestOptions

logger: logging.Logger = logging.getLogger(__name__)


def with_retry_status(
    strategy: Callable[[], BackoffStrategy],
    *,
    retryable_statuses: Iterable[int] = RETRYABLE_STATUSES,
) -> RequestExecutor:
    """Create an executor retrying requests on transient status codes.

    Behavior summary:
    - Successful responses (2xx) and statuses outside
      ``retryable_statuses`` are returned immediately.
    - Otherwise the backoff strategy gives the delay before the next
      attempt. When it signals stop, the last failing response is
      returned, not raised.
    - The body of the discarded response is released before waiting.
      A release failure never blocks the retry.
    - The wait observes the cancellation token of the call, and
      retries replay the original request input and options.
    - Exceptions raised by the wrapped request function propagate
      unchanged: only completed exchanges with a failing status are
      retried.

    A new strategy instance is created for each call, so concurrent
    calls never share their retry counters.

    Args:
        strategy: Factory creating the backoff strategy of a call.
            Wrap the strategy with ``upto`` to limit the number of
            retries.
        retryable_statuses: Status codes that trigger a retry. Defaults
            to 408, 429, 500, 502, 503 and 504. An empty collection
            disables retrying.

    Returns:
        The request executor.

    Raises:
        TypeError: If ``strategy`` is not callable.
        ValueError: If a status code is invalid.

    Example:
        ```pycon
        >>> from achain import with_retry_status
        >>> from achain.backoff import LinearBackoff, upto
        >>> executor = with_retry_status(lambda: upto(5, LinearBackoff(1000, 10000)))
        >>> fetch = executor(base_fetch)  # doctest: +SKIP
        >>> response = await fetch("https://api.example.com/data")  # doctest: +SKIP

        ```
    """
    config = RetryStatusConfig(strategy=strategy, retryable_statuses=retryable_statuses)

    def executor(next_func: RequestFunc) -> RequestFunc:
        async def request_func(
            request: RequestInput, options: RequestOptions | None = None
        ) -> httpx.Response:
            token = resolve_cancel_token(request, options)
            backoff = config.strategy()

            response = await next_func(request, options)
            while not _is_final(response, config.retryable_statuses):
                delay = backoff.next_backoff()
                if is_stop(delay):
                    logger.debug(
                        f"Backoff strategy stopped retrying after status {response.status_code}"
                    )
                    break

                # Released before waiting so the body is freed even if the wait aborts
                await release_body(response, RETRY_CANCEL_REASON)
                logger.debug(
                    f"{get_request_method(request, options)} request to "
                    f"{get_request_url(request)} failed with status {response.status_code}, "
                    f"retrying in {delay}ms"
                )
                await wait_for(delay, token)
                response = await next_func(request, options)

            return response

        return request_func

    return executor


def _is_final(response: httpx.Response, retryable_statuses: frozenset[int]) -> bool:
    return response.is_success or response.status_code not in retryable_statuses
