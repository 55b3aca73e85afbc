r"""Abstract base classes for backoff strategies."""

from __future__ import annotations

__all__ = ["AttemptBackoff", "BackoffStrategy", "is_stop"]

import math
from abc import ABC, abstractmethod


class BackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy is a stateful delay generator. A new instance is
    created for every top-level call to a retrying request function and
    discarded once that call's retry loop ends.
    """

    @abstractmethod
    def next_backoff(self) -> float | None:
        """Return the delay before the next retry attempt.

        Returns:
            The delay in milliseconds, or ``None`` to stop retrying.
        """

    @abstractmethod
    def reset_backoff(self) -> None:
        r"""Reset the strategy to its initial state."""


class AttemptBackoff(BackoffStrategy):
    """Backoff strategy computing each delay from the attempt number.

    Subclasses implement :meth:`calculate`; this class keeps the
    attempt counter.
    """

    def __init__(self) -> None:
        self._attempt = 0

    @property
    def attempt(self) -> int:
        r"""The number of delays produced since the last reset."""
        return self._attempt

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the backoff delay for a given retry attempt.

        Args:
            attempt: The current attempt number (0-indexed). For example,
                attempt=0 is the first retry, attempt=1 is the second retry, etc.

        Returns:
            The calculated delay in milliseconds before the next retry attempt.
        """

    def next_backoff(self) -> float:
        delay = self.calculate(self._attempt)
        self._attempt += 1
        return delay

    def reset_backoff(self) -> None:
        self._attempt = 0


def is_stop(delay: float | None) -> bool:
    """Indicate if a value returned by ``next_backoff`` means "stop".

    ``None`` is the stop signal of this library. ``NaN`` is accepted as
    well for strategies that follow the floating-point convention.

    Example:
        ```pycon
        >>> from achain.backoff import is_stop
        >>> is_stop(None)
        True
        >>> is_stop(float("nan"))
        True
        >>> is_stop(0.0)
        False

        ```
    """
    return delay is None or (isinstance(delay, float) and math.isnan(delay))
