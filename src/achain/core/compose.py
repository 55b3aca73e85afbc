r"""Compose request executors into a single request executor.

Both functions build nested request functions at composition time. The
nesting is fixed once built and shared by every call, so the composed
request function is reusable and safe to call concurrently as long as
the executors keep their per-call state inside the returned function.
"""

from __future__ import annotations

__all__ = ["compose", "pipeline"]

from functools import reduce
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from achain.types import RequestExecutor, RequestFunc


def compose(*executors: RequestExecutor) -> RequestExecutor:
    """Compose request executors in right-to-left order.

    ``compose(e1, e2, ..., en)(base)`` builds ``en(...e2(e1(base)))``:
    the last executor listed is outermost, so it sees the request first
    and the response last. With no executor, the base function is
    returned unchanged.

    Args:
        *executors: The request executors to compose.

    Returns:
        A request executor wrapping a base request function.

    Example:
        ```pycon
        >>> from achain import compose
        >>> trace = []
        >>> def tag(name):
        ...     def executor(next_func):
        ...         async def request_func(request, options=None):
        ...             trace.append(name)
        ...             return await next_func(request, options)
        ...         return request_func
        ...     return executor
        ...
        >>> fetch = compose(tag("retry"), tag("logging"))(base_fetch)  # doctest: +SKIP
        >>> # Request flow: logging -> retry -> base_fetch

        ```
    """

    def executor(base: RequestFunc) -> RequestFunc:
        return reduce(lambda next_func, current: current(next_func), executors, base)

    return executor


def pipeline(*executors: RequestExecutor) -> RequestExecutor:
    """Compose request executors in left-to-right order.

    ``pipeline(e1, e2, ..., en)(base)`` builds ``e1(e2(...en(base)))``:
    the first executor listed is outermost, so it sees the request first
    and the response last. With no executor, the base function is
    returned unchanged.

    Args:
        *executors: The request executors to compose.

    Returns:
        A request executor wrapping a base request function.

    Example:
        ```pycon
        >>> from achain import pipeline, with_logging, with_retry_status
        >>> from achain.backoff import ExponentialBackoff, upto
        >>> executor = pipeline(
        ...     with_logging(),
        ...     with_retry_status(lambda: upto(3, ExponentialBackoff())),
        ... )
        >>> # Request flow: logging -> retry -> base request function

        ```
    """

    def executor(base: RequestFunc) -> RequestFunc:
        return reduce(lambda next_func, current: current(next_func), reversed(executors), base)

    return executor
