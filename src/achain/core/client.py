r"""Base request function backed by an ``httpx.AsyncClient``."""

from __future__ import annotations

__all__ = ["build_request", "from_client"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from achain.utils.request import get_request_headers, get_request_method, resolve_cancel_token
from achain.utils.wait import run_cancellable

if TYPE_CHECKING:
    from achain.types import RequestFunc, RequestInput, RequestOptions

logger: logging.Logger = logging.getLogger(__name__)

BODY_HEADERS = ("content-length", "transfer-encoding", "content-type")


def build_request(
    client: httpx.AsyncClient, request: RequestInput, options: RequestOptions | None = None
) -> httpx.Request:
    """Build the ``httpx.Request`` sent for a request input and options.

    A request object without options is sent as is. Otherwise the
    options override the method, their headers are merged over the
    request headers, and their body replaces the request body along
    with its framing headers.

    Args:
        client: The client used to build the request, so its base URL,
            default headers and cookies apply.
        request: The request input.
        options: Optional per-call overrides.

    Returns:
        The request to send.
    """
    if options is None and isinstance(request, httpx.Request):
        return request

    kwargs: dict[str, Any] = {}
    if options is not None:
        if options.params is not None:
            kwargs["params"] = options.params
        if options.content is not None:
            kwargs["content"] = options.content
        if options.json is not None:
            kwargs["json"] = options.json
        if options.timeout is not None:
            kwargs["timeout"] = options.timeout

    if isinstance(request, httpx.Request):
        headers = get_request_headers(request, options)
        if "content" in kwargs or "json" in kwargs:
            _drop_body_headers(headers, options)
        built = client.build_request(
            get_request_method(request, options),
            request.url,
            headers=headers,
            extensions=request.extensions,
            **kwargs,
        )
        if "content" not in kwargs and "json" not in kwargs:
            built.stream = request.stream
        return built

    return client.build_request(
        get_request_method(request, options),
        request,
        headers=get_request_headers(request, options),
        **kwargs,
    )


def _drop_body_headers(headers: httpx.Headers, options: RequestOptions) -> None:
    # The replaced body gets its own framing headers unless the caller set them
    explicit = httpx.Headers(options.headers)
    for name in BODY_HEADERS:
        if name not in explicit and name in headers:
            del headers[name]


def from_client(client: httpx.AsyncClient) -> RequestFunc:
    """Create a base request function sending requests with ``client``.

    The returned function is the innermost function of a chain of
    request executors. When the call carries a cancellation token, the
    exchange is aborted as soon as the token fires.

    Args:
        client: The HTTP client. Its lifecycle is owned by the caller.

    Returns:
        The request function.

    Example:
        ```pycon
        >>> import httpx
        >>> from achain import compose, from_client, with_retry_status
        >>> from achain.backoff import LinearBackoff, upto
        >>> async def main():
        ...     async with httpx.AsyncClient() as client:
        ...         fetch = compose(
        ...             with_retry_status(lambda: upto(3, LinearBackoff(base_delay=500)))
        ...         )(from_client(client))
        ...         return await fetch("https://api.example.com/data")
        ...
        >>> import asyncio
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    async def request_func(
        request: RequestInput, options: RequestOptions | None = None
    ) -> httpx.Response:
        built = build_request(client, request, options)
        logger.debug(f"Sending {built.method} request to {built.url}")
        return await run_cancellable(client.send(built), resolve_cancel_token(request, options))

    return request_func
