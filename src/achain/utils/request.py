r"""Helpers to inspect and rebuild request inputs.

The executors accept three kinds of request input: a URL string, an
``httpx.URL`` or a full ``httpx.Request``. These helpers hide the
differences between them.
"""

from __future__ import annotations

__all__ = [
    "clone_request",
    "get_request_headers",
    "get_request_method",
    "get_request_url",
    "resolve_cancel_token",
]

from typing import TYPE_CHECKING

import httpx

from achain.core.config import CANCEL_TOKEN_EXTENSION

if TYPE_CHECKING:
    from achain.cancellation import CancelToken
    from achain.types import RequestInput, RequestOptions


def resolve_cancel_token(
    request: RequestInput, options: RequestOptions | None
) -> CancelToken | None:
    """Return the cancellation token that applies to a call.

    The token of the per-call options wins over a token embedded in the
    extensions of a request object.

    Example:
        ```pycon
        >>> from achain.cancellation import CancelToken
        >>> from achain.types import RequestOptions
        >>> from achain.utils.request import resolve_cancel_token
        >>> token = CancelToken()
        >>> resolve_cancel_token("https://example.com", RequestOptions(cancel_token=token)) is token
        True
        >>> resolve_cancel_token("https://example.com", None) is None
        True

        ```
    """
    if options is not None and options.cancel_token is not None:
        return options.cancel_token
    if isinstance(request, httpx.Request):
        return request.extensions.get(CANCEL_TOKEN_EXTENSION)
    return None


def get_request_url(request: RequestInput) -> httpx.URL:
    r"""Return the URL of a request input."""
    if isinstance(request, httpx.Request):
        return request.url
    return httpx.URL(request)


def get_request_method(request: RequestInput, options: RequestOptions | None) -> str:
    r"""Return the HTTP method used for a request input."""
    if options is not None and options.method is not None:
        return options.method.upper()
    if isinstance(request, httpx.Request):
        return request.method
    return "GET"


def get_request_headers(request: RequestInput, options: RequestOptions | None) -> httpx.Headers:
    """Return the effective headers of a call.

    The headers of the options take precedence over the headers of a
    request object.
    """
    headers = httpx.Headers(request.headers if isinstance(request, httpx.Request) else None)
    if options is not None and options.headers is not None:
        headers.update(options.headers)
    return headers


def clone_request(
    request: httpx.Request,
    *,
    url: httpx.URL | str | None = None,
    headers: httpx.Headers | None = None,
) -> httpx.Request:
    """Return a copy of ``request`` with a new URL and/or headers.

    The body stream and the extensions are shared with the original
    request.
    """
    return httpx.Request(
        request.method,
        request.url if url is None else url,
        headers=request.headers if headers is None else headers,
        stream=request.stream,
        extensions=request.extensions,
    )
