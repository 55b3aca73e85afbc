r"""achain - Composable async HTTP request executors.

This package lets callers build an HTTP request pipeline by composing
small, independent request executors around a base request function
backed by ``httpx.AsyncClient``.

Key Features:
    - ``compose`` (last executor outermost) and ``pipeline`` (first
      executor outermost) to assemble executors
    - Status-driven retries with pluggable backoff strategies
    - Retry-After driven retries (integer seconds and HTTP-date formats)
    - Cooperative cancellation of retry waits and exchanges
    - Header, cookie, query parameter, base URL, authorization,
      response error and structured logging executors

Example:
    ```pycon
    >>> import httpx
    >>> from achain import from_client, pipeline, with_retry_after, with_retry_status
    >>> from achain.backoff import ExponentialBackoff, upto
    >>> async def main():
    ...     async with httpx.AsyncClient() as client:
    ...         fetch = pipeline(
    ...             with_retry_after(max_retries=3, max_delay_time=60_000),
    ...             with_retry_status(lambda: upto(3, ExponentialBackoff(base_delay=300))),
    ...         )(from_client(client))
    ...         return await fetch("https://api.example.com/data")
    ...
    >>> import asyncio
    >>> asyncio.run(main())  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "AchainError",
    "CancelToken",
    "RequestAbortedError",
    "RequestExecutor",
    "RequestFunc",
    "RequestInput",
    "RequestOptions",
    "ResponseError",
    "RetryDelayExceededError",
    "__version__",
    "compose",
    "from_client",
    "pipeline",
    "wait_for",
    "with_authorization",
    "with_base_url",
    "with_cookie",
    "with_cookies",
    "with_header",
    "with_headers",
    "with_logging",
    "with_query_param",
    "with_query_params",
    "with_response_error",
    "with_retry_after",
    "with_retry_status",
]

from importlib.metadata import PackageNotFoundError, version

from achain.cancellation import CancelToken
from achain.core import compose, from_client, pipeline
from achain.exceptions import (
    AchainError,
    RequestAbortedError,
    ResponseError,
    RetryDelayExceededError,
)
from achain.middleware import (
    with_authorization,
    with_base_url,
    with_cookie,
    with_cookies,
    with_header,
    with_headers,
    with_logging,
    with_query_param,
    with_query_params,
    with_response_error,
)
from achain.retry import with_retry_after, with_retry_status
from achain.types import RequestExecutor, RequestFunc, RequestInput, RequestOptions
from achain.utils.wait import wait_for

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
