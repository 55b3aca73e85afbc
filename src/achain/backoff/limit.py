r"""Limit the number of delays produced by a backoff strategy."""

from __future__ import annotations

__all__ = ["LimitedBackoff", "upto"]

from achain.backoff.base import BackoffStrategy, is_stop


class LimitedBackoff(BackoffStrategy):
    """Backoff strategy that stops after a fixed number of delays.

    Args:
        retries: The maximum number of delays to produce.
        strategy: The wrapped strategy computing each delay.

    Example:
        ```pycon
        >>> from achain.backoff import ConstantBackoff, LimitedBackoff
        >>> backoff = LimitedBackoff(2, ConstantBackoff(100))
        >>> [backoff.next_backoff() for _ in range(3)]
        [100, 100, None]

        ```
    """

    def __init__(self, retries: int, strategy: BackoffStrategy) -> None:
        if isinstance(retries, bool) or not isinstance(retries, int) or retries < 0:
            msg = f"retries must be a non-negative integer, got {retries!r}"
            raise ValueError(msg)
        self.retries = retries
        self.strategy = strategy
        self._count = 0

    def next_backoff(self) -> float | None:
        if self._count >= self.retries:
            return None
        delay = self.strategy.next_backoff()
        if is_stop(delay):
            return None
        self._count += 1
        return delay

    def reset_backoff(self) -> None:
        self._count = 0
        self.strategy.reset_backoff()


def upto(retries: int, strategy: BackoffStrategy) -> LimitedBackoff:
    """Limit ``strategy`` to at most ``retries`` delays.

    Example:
        ```pycon
        >>> from achain.backoff import LinearBackoff, upto
        >>> backoff = upto(3, LinearBackoff(base_delay=1000))
        >>> [backoff.next_backoff() for _ in range(4)]
        [1000, 2000, 3000, None]

        ```
    """
    return LimitedBackoff(retries, strategy)
