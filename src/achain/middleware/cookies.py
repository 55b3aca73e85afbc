r"""Add cookies to requests."""

from __future__ import annotations

__all__ = ["with_cookie", "with_cookies"]

from dataclasses import replace
from typing import TYPE_CHECKING

import httpx

from achain.types import RequestOptions
from achain.utils.request import clone_request, get_request_headers

if TYPE_CHECKING:
    from collections.abc import Mapping

    from achain.types import RequestExecutor, RequestFunc, RequestInput

COOKIE_HEADER = "Cookie"


def with_cookie(name: str, value: str) -> RequestExecutor:
    """Create an executor adding a single cookie.

    Example:
        ```pycon
        >>> from achain import with_cookie
        >>> executor = with_cookie("session", "abc123")

        ```
    """
    return _cookie_executor(f"{name}={value}")


def with_cookies(cookies: Mapping[str, str]) -> RequestExecutor:
    """Create an executor adding cookies to the ``Cookie`` header.

    The cookies are appended to any ``Cookie`` header already present,
    separated with ``"; "``.

    Args:
        cookies: The cookies, by name.

    Returns:
        The request executor.

    Raises:
        ValueError: If ``cookies`` is empty.

    Example:
        ```pycon
        >>> from achain import with_cookies
        >>> executor = with_cookies({"session": "abc123", "theme": "dark"})

        ```
    """
    if not cookies:
        msg = "with_cookies requires at least one cookie"
        raise ValueError(msg)
    return _cookie_executor("; ".join(f"{name}={value}" for name, value in cookies.items()))


def _cookie_executor(cookie_string: str) -> RequestExecutor:
    def executor(next_func: RequestFunc) -> RequestFunc:
        async def request_func(
            request: RequestInput, options: RequestOptions | None = None
        ) -> httpx.Response:
            headers = get_request_headers(request, options)
            headers[COOKIE_HEADER] = _merge_cookies(headers.get(COOKIE_HEADER), cookie_string)
            if isinstance(request, httpx.Request):
                request = clone_request(request, headers=headers)
                if options is not None and options.headers is not None:
                    # Options headers are merged last and must not drop the new cookies
                    options = replace(options, headers=headers)
                return await next_func(request, options)
            return await next_func(request, replace(options or RequestOptions(), headers=headers))

        return request_func

    return executor


def _merge_cookies(existing: str | None, cookies: str) -> str:
    if not existing:
        return cookies
    return f"{existing}; {cookies}"
