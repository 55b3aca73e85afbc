r"""Add query parameters to request URLs."""

from __future__ import annotations

__all__ = ["with_query_param", "with_query_params"]

from typing import TYPE_CHECKING, Literal, Union

import httpx

from achain.utils.request import clone_request

if TYPE_CHECKING:
    from collections.abc import Mapping

    from achain.types import RequestExecutor, RequestFunc, RequestInput, RequestOptions

QueryParamValue = Union[str, list[str], tuple[str, ...]]
ArrayFormat = Literal["repeat", "brackets"]

_ARRAY_FORMATS = ("repeat", "brackets")


def with_query_param(
    name: str, value: QueryParamValue, *, array_format: ArrayFormat = "repeat"
) -> RequestExecutor:
    """Create an executor adding a single query parameter.

    Example:
        ```pycon
        >>> from achain import with_query_param
        >>> executor = with_query_param("tags", ["a", "b"], array_format="brackets")

        ```
    """
    return _query_params_executor({name: value}, array_format)


def with_query_params(
    params: Mapping[str, QueryParamValue], *, array_format: ArrayFormat = "repeat"
) -> RequestExecutor:
    """Create an executor adding query parameters to every request.

    The executor parameters are placed before the parameters already in
    the request URL, so the request's own values come last and win for
    readers keeping the last value. List values either repeat the key
    (``"repeat"``) or use ``key[]`` (``"brackets"``); empty lists are
    skipped. An empty mapping creates a passthrough executor.

    Args:
        params: The query parameters.
        array_format: How list values are encoded.

    Returns:
        The request executor.

    Raises:
        ValueError: If ``array_format`` is unknown.

    Example:
        ```pycon
        >>> from achain import with_query_params
        >>> executor = with_query_params({"api_key": "secret", "lang": "en"})

        ```
    """
    if not params:
        _validate_array_format(array_format)
        return _passthrough
    return _query_params_executor(params, array_format)


def _query_params_executor(
    params: Mapping[str, QueryParamValue], array_format: ArrayFormat
) -> RequestExecutor:
    _validate_array_format(array_format)
    items = _flatten(params, array_format)

    def executor(next_func: RequestFunc) -> RequestFunc:
        async def request_func(
            request: RequestInput, options: RequestOptions | None = None
        ) -> httpx.Response:
            if isinstance(request, httpx.Request):
                request = clone_request(request, url=_merge(request.url, items))
            elif isinstance(request, httpx.URL):
                request = _merge(request, items)
            else:
                request = str(_merge(httpx.URL(request), items))
            return await next_func(request, options)

        return request_func

    return executor


def _flatten(
    params: Mapping[str, QueryParamValue], array_format: ArrayFormat
) -> list[tuple[str, str]]:
    items = []
    for name, value in params.items():
        if isinstance(value, str):
            items.append((name, value))
            continue
        key = f"{name}[]" if array_format == "brackets" else name
        items.extend((key, item) for item in value)
    return items


def _merge(url: httpx.URL, items: list[tuple[str, str]]) -> httpx.URL:
    return url.copy_with(params=[*items, *url.params.multi_items()])


def _validate_array_format(array_format: str) -> None:
    if array_format not in _ARRAY_FORMATS:
        msg = f"array_format must be one of {_ARRAY_FORMATS}, got {array_format!r}"
        raise ValueError(msg)


def _passthrough(next_func: RequestFunc) -> RequestFunc:
    return next_func
