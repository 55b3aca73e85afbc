r"""Fibonacci backoff strategy."""

from __future__ import annotations

__all__ = ["FibonacciBackoff"]

from achain.backoff.base import AttemptBackoff


class FibonacciBackoff(AttemptBackoff):
    """Fibonacci backoff strategy.

    Calculates delay as: base_delay * fibonacci(attempt + 1), with optional max_delay cap.

    The Fibonacci sequence (1, 1, 2, 3, 5, 8, 13, ...) ramps up more
    gradually than exponential backoff.

    Args:
        base_delay: The base delay in milliseconds (default: 1000).
        max_delay: Optional maximum delay cap in milliseconds.

    Example:
        ```pycon
        >>> from achain.backoff import FibonacciBackoff
        >>> backoff = FibonacciBackoff(base_delay=1000)
        >>> [backoff.next_backoff() for _ in range(5)]
        [1000, 1000, 2000, 3000, 5000]
        >>> backoff = FibonacciBackoff(base_delay=1000, max_delay=10000)
        >>> backoff.calculate(10)  # fib(11) = 89, capped
        10000

        ```
    """

    def __init__(self, base_delay: float = 1000, max_delay: float | None = None) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)
        super().__init__()
        self.base_delay = base_delay
        self.max_delay = max_delay

    @staticmethod
    def _fibonacci(n: int) -> int:
        r"""Return the nth Fibonacci number (1-indexed)."""
        if n <= 0:
            return 0
        a, b = 0, 1
        for _ in range(n - 1):
            a, b = b, a + b
        return b

    def calculate(self, attempt: int) -> float:
        delay = self.base_delay * self._fibonacci(attempt + 1)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
