r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from achain.backoff.base import AttemptBackoff


class LinearBackoff(AttemptBackoff):
    """Linear backoff strategy.

    Calculates delay as: base_delay * (attempt + 1), with optional max_delay cap.

    Args:
        base_delay: The base delay in milliseconds (default: 1000).
        max_delay: Optional maximum delay cap in milliseconds.

    Example:
        ```pycon
        >>> from achain.backoff import LinearBackoff
        >>> backoff = LinearBackoff(base_delay=1000, max_delay=2500)
        >>> [backoff.next_backoff() for _ in range(4)]
        [1000, 2000, 2500, 2500]

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

    def calculate(self, attempt: int) -> float:
        delay = self.base_delay * (attempt + 1)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
