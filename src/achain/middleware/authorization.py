r"""Inject an authorization token and refresh it on ``401``
responses."""

from __future__ import annotations

__all__ = ["AuthorizationToken", "TokenProvider", "with_authorization"]

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import httpx

from achain.backoff.base import is_stop
from achain.core.config import RETRY_CANCEL_REASON
from achain.core.validation import validate_strategy_factory
from achain.types import RequestOptions
from achain.utils.request import get_request_headers, resolve_cancel_token
from achain.utils.response import release_body
from achain.utils.wait import wait_for

if TYPE_CHECKING:
    from collections.abc import Callable

    from achain.backoff import BackoffStrategy
    from achain.types import RequestExecutor, RequestFunc, RequestInput

logger: logging.Logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"


@dataclass(frozen=True)
class AuthorizationToken:
    """Token returned by a :class:`TokenProvider`.

    Attributes:
        access_token: The credential.
        token_type: The authorization scheme, e.g. ``"Bearer"``.
    """

    access_token: str
    token_type: str

    def header_value(self) -> str:
        r"""Return the value of the ``Authorization`` header."""
        return f"{self.token_type} {self.access_token}"


@runtime_checkable
class TokenProvider(Protocol):
    r"""Source of authorization tokens."""

    async def get_token(self) -> AuthorizationToken:
        r"""Return a valid, possibly refreshed, token."""


def with_authorization(
    token_provider: TokenProvider, strategy: Callable[[], BackoffStrategy]
) -> RequestExecutor:
    """Create an executor authorizing requests with a token provider.

    Requests that already carry an ``Authorization`` header are sent
    unchanged on the first attempt; other requests get
    ``Authorization: <token_type> <access_token>``. When the response
    status is ``401 Unauthorized``, the request is retried with a fresh
    token from the provider, using the same backoff, body release and
    cancellable wait as ``with_retry_status``. When the strategy stops,
    the last ``401`` response is returned.

    Args:
        token_provider: The provider of tokens.
        strategy: Factory creating the backoff strategy of a call.

    Returns:
        The request executor.

    Raises:
        TypeError: If ``strategy`` is not callable, or at call time if
            the provider returns a malformed token.

    Example:
        ```pycon
        >>> from achain import with_authorization
        >>> from achain.backoff import ConstantBackoff, upto
        >>> from achain.middleware import AuthorizationToken
        >>> class StaticProvider:
        ...     async def get_token(self):
        ...         return AuthorizationToken(access_token="secret", token_type="Bearer")
        ...
        >>> executor = with_authorization(StaticProvider(), lambda: upto(1, ConstantBackoff(0)))

        ```
    """
    validate_strategy_factory(strategy)

    def executor(next_func: RequestFunc) -> RequestFunc:
        async def request_func(
            request: RequestInput, options: RequestOptions | None = None
        ) -> httpx.Response:
            token = resolve_cancel_token(request, options)
            backoff = strategy()

            if AUTHORIZATION_HEADER in get_request_headers(request, options):
                response = await next_func(request, options)
            else:
                response = await next_func(request, await _authorize(options, token_provider))

            while response.status_code == httpx.codes.UNAUTHORIZED:
                delay = backoff.next_backoff()
                if is_stop(delay):
                    break

                await release_body(response, RETRY_CANCEL_REASON)
                logger.debug(f"Unauthorized response, refreshing token in {delay}ms")
                await wait_for(delay, token)
                response = await next_func(request, await _authorize(options, token_provider))

            return response

        return request_func

    return executor


async def _authorize(
    options: RequestOptions | None, token_provider: TokenProvider
) -> RequestOptions:
    token = await token_provider.get_token()
    _validate_token(token)
    options = options or RequestOptions()
    headers = httpx.Headers(options.headers)
    headers[AUTHORIZATION_HEADER] = token.header_value()
    return replace(options, headers=headers)


def _validate_token(token: object) -> None:
    if (
        not isinstance(token, AuthorizationToken)
        or not isinstance(token.access_token, str)
        or not isinstance(token.token_type, str)
    ):
        msg = (
            "TokenProvider.get_token() must return an AuthorizationToken with "
            f"'access_token' (str) and 'token_type' (str), got {token!r}"
        )
        raise TypeError(msg)
