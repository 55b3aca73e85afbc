r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from achain.backoff.base import AttemptBackoff


class ConstantBackoff(AttemptBackoff):
    """Constant backoff strategy.

    Always returns the same delay, regardless of the attempt number.
    Combine it with ``upto`` to bound the number of retries.

    Args:
        delay: The fixed delay in milliseconds (default: 1000).

    Example:
        ```pycon
        >>> from achain.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=500)
        >>> backoff.next_backoff()
        500
        >>> backoff.next_backoff()
        500

        ```
    """

    def __init__(self, delay: float = 1000) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)
        super().__init__()
        self.delay = delay

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay
