r"""Add default headers to requests."""

from __future__ import annotations

__all__ = ["with_header", "with_headers"]

from dataclasses import replace
from typing import TYPE_CHECKING

import httpx

from achain.types import RequestOptions

if TYPE_CHECKING:
    from collections.abc import Mapping

    from achain.types import RequestExecutor, RequestFunc, RequestInput


def with_header(name: str, value: str) -> RequestExecutor:
    """Create an executor adding a single header.

    The header is only added when the request does not already carry
    it, either on a request object or in the call options. Names are
    compared case-insensitively.

    Example:
        ```pycon
        >>> from achain import with_header
        >>> executor = with_header("X-Api-Version", "2")

        ```
    """
    return with_headers({name: value})


def with_headers(headers: Mapping[str, str] | httpx.Headers) -> RequestExecutor:
    """Create an executor adding default headers.

    Each header is only added when the request does not already carry
    it. An empty mapping creates a passthrough executor.

    Args:
        headers: The default headers.

    Returns:
        The request executor.

    Example:
        ```pycon
        >>> from achain import with_headers
        >>> executor = with_headers({"Accept": "application/json", "User-Agent": "achain"})

        ```
    """
    defaults = httpx.Headers(headers)
    if not defaults:
        return _passthrough

    def executor(next_func: RequestFunc) -> RequestFunc:
        async def request_func(
            request: RequestInput, options: RequestOptions | None = None
        ) -> httpx.Response:
            return await next_func(request, _merge_headers(request, options, defaults))

        return request_func

    return executor


def _merge_headers(
    request: RequestInput, options: RequestOptions | None, defaults: httpx.Headers
) -> RequestOptions:
    options = options or RequestOptions()
    existing = httpx.Headers(options.headers)
    merged = existing.copy()
    for name, value in defaults.multi_items():
        if name in existing:
            continue
        if isinstance(request, httpx.Request) and name in request.headers:
            continue
        merged[name] = value
    return replace(options, headers=merged)


def _passthrough(next_func: RequestFunc) -> RequestFunc:
    return next_func
