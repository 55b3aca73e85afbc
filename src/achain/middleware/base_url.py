r"""Resolve request URLs against a base URL."""

from __future__ import annotations

__all__ = ["with_base_url"]

from typing import TYPE_CHECKING

import httpx

from achain.utils.request import clone_request

if TYPE_CHECKING:
    from achain.types import RequestExecutor, RequestFunc, RequestInput, RequestOptions


def with_base_url(base_url: str | httpx.URL) -> RequestExecutor:
    """Create an executor resolving request URLs against ``base_url``.

    Relative URLs and URLs with the same origin as the base are resolved
    against the base path: the leading slash of their path is dropped,
    so ``"/users"`` with base ``"https://api.example.com/v1/"`` becomes
    ``"https://api.example.com/v1/users"``. URLs of another origin pass
    through unchanged. The type of the input (string, ``httpx.URL`` or
    ``httpx.Request``) is preserved.

    Args:
        base_url: The absolute base URL. Give it a trailing slash to
            keep its last path segment.

    Returns:
        The request executor.

    Raises:
        ValueError: If ``base_url`` is not absolute.

    Example:
        ```pycon
        >>> from achain import with_base_url
        >>> executor = with_base_url("https://api.example.com/v1/")

        ```
    """
    base = httpx.URL(base_url)
    if not base.is_absolute_url:
        msg = f"base_url must be an absolute URL, got {str(base_url)!r}"
        raise ValueError(msg)

    def executor(next_func: RequestFunc) -> RequestFunc:
        async def request_func(
            request: RequestInput, options: RequestOptions | None = None
        ) -> httpx.Response:
            if isinstance(request, httpx.Request):
                resolved = _resolve(request.url, base)
                if resolved is not request.url:
                    request = clone_request(request, url=resolved)
            elif isinstance(request, httpx.URL):
                request = _resolve(request, base)
            else:
                request = str(_resolve(httpx.URL(request), base))
            return await next_func(request, options)

        return request_func

    return executor


def _resolve(url: httpx.URL, base: httpx.URL) -> httpx.URL:
    if url.is_absolute_url and not _same_origin(url, base):
        return url
    relative = url.raw_path.decode("ascii").lstrip("/")
    if url.fragment:
        relative += f"#{url.fragment}"
    return base.join(relative)


def _same_origin(url: httpx.URL, base: httpx.URL) -> bool:
    return (url.scheme, url.host, url.port) == (base.scheme, base.host, base.port)
