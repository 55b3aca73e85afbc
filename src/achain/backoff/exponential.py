r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from achain.backoff.base import AttemptBackoff


class ExponentialBackoff(AttemptBackoff):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (2 ** attempt), with optional max_delay cap.

    This works well for most scenarios where you want progressively
    longer delays between retries.

    Args:
        base_delay: The base delay in milliseconds (default: 300).
        max_delay: Optional maximum delay cap in milliseconds.

    Example:
        ```pycon
        >>> from achain.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=300)
        >>> backoff.calculate(0)
        300
        >>> backoff.calculate(2)
        1200
        >>> backoff = ExponentialBackoff(base_delay=1000, max_delay=5000)
        >>> backoff.calculate(10)  # Would be 1024000, but capped
        5000

        ```
    """

    def __init__(self, base_delay: float = 300, max_delay: float | None = None) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)
        super().__init__()
        self.base_delay = base_delay
        self.max_delay = max_delay

    def calculate(self, attempt: int) -> float:
        delay = self.base_delay * (2**attempt)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
