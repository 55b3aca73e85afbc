r"""Types describing the request function contract.

A request function takes a request input plus optional per-call options
and returns an HTTP response. A request executor wraps one request
function to produce another, which is the composable unit of the
library.
"""

from __future__ import annotations

__all__ = ["RequestExecutor", "RequestFunc", "RequestInput", "RequestOptions"]

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

import httpx

if TYPE_CHECKING:
    from achain.cancellation import CancelToken

RequestInput = Union[str, httpx.URL, httpx.Request]


@dataclass(frozen=True)
class RequestOptions:
    """Per-call overrides passed alongside a request input.

    Every field defaults to ``None``, which means "not overridden". The
    options are immutable: executors derive new options with
    ``dataclasses.replace`` instead of mutating the caller's object.

    Attributes:
        method: The HTTP method. Defaults to the method of the request
            object, or ``GET`` for URL inputs.
        headers: Headers merged over the headers of the request object.
        params: Query parameters added to the URL.
        content: Raw request body.
        json: JSON-serializable request body.
        timeout: The ``httpx`` timeout for this exchange.
        cancel_token: Token used to abort waits and exchanges. It takes
            precedence over a token embedded in a request object.

    Example:
        ```pycon
        >>> from dataclasses import replace
        >>> from achain.types import RequestOptions
        >>> options = RequestOptions(method="POST", headers={"Accept": "application/json"})
        >>> replace(options, method="PUT").method
        'PUT'

        ```
    """

    method: str | None = None
    headers: Mapping[str, str] | httpx.Headers | None = None
    params: Mapping[str, Any] | None = None
    content: bytes | str | None = None
    json: Any = None
    timeout: float | httpx.Timeout | None = None
    cancel_token: CancelToken | None = None


RequestFunc = Callable[[RequestInput, Union[RequestOptions, None]], Awaitable[httpx.Response]]
RequestExecutor = Callable[[RequestFunc], RequestFunc]
