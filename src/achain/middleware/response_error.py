r"""Raise exceptions for failing HTTP responses."""

from __future__ import annotations

__all__ = ["ResponseErrorMapper", "default_throw_on_status_code", "with_response_error"]

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Union

import httpx

from achain.exceptions import ResponseError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from achain.types import RequestExecutor, RequestFunc, RequestInput, RequestOptions

logger: logging.Logger = logging.getLogger(__name__)

ResponseErrorMapper = Callable[[httpx.Response], Union[BaseException, Awaitable[BaseException]]]


def default_throw_on_status_code(status_code: int) -> bool:
    r"""Return ``True`` for client and server error status codes."""
    return status_code >= 400


def with_response_error(
    *,
    status_map: Mapping[int, ResponseErrorMapper] | None = None,
    default_mapper: ResponseErrorMapper | None = None,
    throw_on_status_code: Callable[[int], bool] | None = None,
) -> RequestExecutor:
    """Create an executor raising an exception for failing responses.

    Args:
        status_map: Mappers for specific status codes. A mapper takes
            the response and returns (or resolves to) the exception to
            raise.
        default_mapper: Mapper used for status codes missing from
            ``status_map``. Defaults to ``ResponseError``.
        throw_on_status_code: Predicate selecting the status codes that
            raise. Defaults to status codes ``>= 400``.

    Returns:
        The request executor.

    Example:
        ```pycon
        >>> from achain import with_response_error
        >>> class NotFoundError(Exception):
        ...     pass
        ...
        >>> executor = with_response_error(status_map={404: lambda response: NotFoundError()})

        ```
    """
    status_map = dict(status_map or {})
    default_mapper = default_mapper or ResponseError
    throw_on_status_code = throw_on_status_code or default_throw_on_status_code

    def executor(next_func: RequestFunc) -> RequestFunc:
        async def request_func(
            request: RequestInput, options: RequestOptions | None = None
        ) -> httpx.Response:
            response = await next_func(request, options)
            if not throw_on_status_code(response.status_code):
                return response

            mapper = status_map.get(response.status_code, default_mapper)
            error = mapper(response)
            if inspect.isawaitable(error):
                error = await error
            if not isinstance(error, BaseException):
                msg = f"response error mapper must return an exception, got {error!r}"
                raise TypeError(msg)
            logger.debug(f"Raising {type(error).__name__} for status {response.status_code}")
            raise error

        return request_func

    return executor
