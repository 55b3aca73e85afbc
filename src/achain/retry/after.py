r"""Retry requests as directed by the ``Retry-After`` response header."""

from __future__ import annotations

__all__ = ["with_retry_after"]

import logging
from typing import TYPE_CHECKING

from achain.core.config import (
    DEFAULT_MAX_RETRIES,
    MAX_WAIT_DELAY,
    RETRY_AFTER_HEADER,
    RETRY_AFTER_STATUSES,
    RETRY_CANCEL_REASON,
)
from achain.exceptions import RetryDelayExceededError
from achain.retry.config import RetryAfterConfig
from achain.utils.request import resolve_cancel_token
from achain.utils.response import release_body
from achain.utils.retry_after import parse_retry_after
from achain.utils.wait import wait_for

if TYPE_CHECKING:
    import httpx

    from achain.types import RequestExecutor, RequestFunc, RequestInput, RequestOptions

logger: logging.Logger = logging.getLogger(__name__)


def with_retry_after(
    *,
    max_retries: int = DEFAULT_MAX_RETRIES,
    max_delay_time: float | None = None,
) -> RequestExecutor:
    """Create an executor honoring the server's ``Retry-After``
    directive.

    Only responses with status 429 (Too Many Requests) or 503 (Service
    Unavailable) carrying a valid ``Retry-After`` header are retried,
    following RFC 9110 section 10.2.3.

    Behavior summary:
    - Successful responses pass through unchanged, even if they include
      a ``Retry-After`` header.
    - Missing or invalid headers result in no retry.
    - Numeric values are seconds. HTTP-date values are an absolute
      time; past or present dates result in an immediate retry.
    - A delay above ``max_delay_time`` raises
      ``RetryDelayExceededError`` before any wait. Delays above the
      largest timer delay always do, even without ``max_delay_time``.
    - After ``max_retries`` retries the last response is returned.
    - The body of the discarded response is released before waiting,
      the wait observes the cancellation token of the call, and
      retries replay the original request input and options.

    Args:
        max_retries: Maximum number of retries. Zero (the default), a
            negative or a non-integer value disables retrying.
        max_delay_time: Optional ceiling in milliseconds on a single
            wait. A negative or non-numeric value means no ceiling
            other than ``MAX_WAIT_DELAY``.

    Returns:
        The request executor.

    Example:
        ```pycon
        >>> from achain import with_retry_after
        >>> executor = with_retry_after(max_retries=3, max_delay_time=120_000)
        >>> fetch = executor(base_fetch)  # doctest: +SKIP
        >>> response = await fetch("https://api.example.com/data")  # doctest: +SKIP

        ```
    """
    config = RetryAfterConfig(max_retries=max_retries, max_delay_time=max_delay_time)

    def executor(next_func: RequestFunc) -> RequestFunc:
        async def request_func(
            request: RequestInput, options: RequestOptions | None = None
        ) -> httpx.Response:
            token = resolve_cancel_token(request, options)

            response = await next_func(request, options)
            for attempt in range(config.max_retries):
                if response.is_success or response.status_code not in RETRY_AFTER_STATUSES:
                    break

                delay = parse_retry_after(response.headers.get(RETRY_AFTER_HEADER))
                if delay is None:
                    break

                await release_body(response, RETRY_CANCEL_REASON)
                ceiling = _delay_ceiling(config.max_delay_time)
                if delay > ceiling:
                    raise RetryDelayExceededError(delay, ceiling)

                logger.debug(
                    f"Status {response.status_code} with Retry-After, retrying in {delay}ms "
                    f"(retry {attempt + 1}/{config.max_retries})"
                )
                await wait_for(delay, token)
                response = await next_func(request, options)

            return response

        return request_func

    return executor


def _delay_ceiling(max_delay_time: float | None) -> float:
    # Server delays above the largest timer delay are never waited for
    if max_delay_time is None:
        return MAX_WAIT_DELAY
    return min(max_delay_time, MAX_WAIT_DELAY)
