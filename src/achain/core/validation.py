r"""Parameter validation utilities for the request executors.

This module provides validation and normalization functions used when
the executors are configured, so invalid values fail at construction
time rather than in the middle of a request.
"""

from __future__ import annotations

__all__ = [
    "normalize_max_delay_time",
    "normalize_max_retries",
    "validate_delay",
    "validate_statuses",
    "validate_strategy_factory",
]

import math
from typing import TYPE_CHECKING, Any

from achain.core.config import MAX_WAIT_DELAY

if TYPE_CHECKING:
    from collections.abc import Iterable


def validate_delay(delay: float) -> None:
    """Validate a wait delay.

    Args:
        delay: The delay in milliseconds.

    Raises:
        ValueError: If the delay is not a finite number or exceeds
            ``MAX_WAIT_DELAY``.

    Example:
        ```pycon
        >>> from achain.core.validation import validate_delay
        >>> validate_delay(1000)
        >>> validate_delay(-5)
        >>> validate_delay(2**31)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: delay must be <= 2147483647 ms, got 2147483648

        ```
    """
    if isinstance(delay, bool) or not isinstance(delay, (int, float)):
        msg = f"delay must be a number, got {delay!r}"
        raise TypeError(msg)
    if math.isnan(delay):
        msg = "delay must not be NaN"
        raise ValueError(msg)
    if delay > MAX_WAIT_DELAY:
        msg = f"delay must be <= {MAX_WAIT_DELAY} ms, got {delay}"
        raise ValueError(msg)


def validate_statuses(statuses: Iterable[int]) -> frozenset[int]:
    """Validate a set of HTTP status codes.

    Args:
        statuses: The status codes.

    Returns:
        The status codes as a frozenset.

    Raises:
        ValueError: If a status code is not an integer in ``[100, 599]``.

    Example:
        ```pycon
        >>> from achain.core.validation import validate_statuses
        >>> sorted(validate_statuses([503, 500]))
        [500, 503]

        ```
    """
    statuses = frozenset(statuses)
    for status in statuses:
        if isinstance(status, bool) or not isinstance(status, int) or not 100 <= status <= 599:
            msg = f"status codes must be integers in [100, 599], got {status!r}"
            raise ValueError(msg)
    return statuses


def validate_strategy_factory(strategy: Any) -> None:
    """Validate a backoff strategy factory.

    Args:
        strategy: The factory that creates a backoff strategy per call.

    Raises:
        TypeError: If ``strategy`` is not callable.
    """
    if not callable(strategy):
        msg = f"strategy must be a callable returning a BackoffStrategy, got {strategy!r}"
        raise TypeError(msg)


def normalize_max_retries(max_retries: Any) -> int:
    """Normalize the maximum number of server-directed retries.

    Non-integer and negative values disable retrying.

    Example:
        ```pycon
        >>> from achain.core.validation import normalize_max_retries
        >>> normalize_max_retries(3)
        3
        >>> normalize_max_retries(-1)
        0
        >>> normalize_max_retries("3")
        0

        ```
    """
    if isinstance(max_retries, bool) or not isinstance(max_retries, int):
        return 0
    return max(0, max_retries)


def normalize_max_delay_time(max_delay_time: Any) -> float | None:
    """Normalize the ceiling of a single server-directed wait.

    Non-numeric, NaN and negative values mean no ceiling.

    Example:
        ```pycon
        >>> from achain.core.validation import normalize_max_delay_time
        >>> normalize_max_delay_time(120_000)
        120000
        >>> normalize_max_delay_time(-1) is None
        True

        ```
    """
    if isinstance(max_delay_time, bool) or not isinstance(max_delay_time, (int, float)):
        return None
    if math.isnan(max_delay_time) or max_delay_time < 0:
        return None
    return max_delay_time
