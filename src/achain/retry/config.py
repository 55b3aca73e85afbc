r"""Configuration dataclasses for the retry coordinators.

The configuration objects are frozen: they are the only state shared by
the concurrent calls of a composed request function.
"""

from __future__ import annotations

__all__ = ["RetryAfterConfig", "RetryStatusConfig"]

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from achain.core.config import DEFAULT_MAX_RETRIES, RETRYABLE_STATUSES
from achain.core.validation import (
    normalize_max_delay_time,
    normalize_max_retries,
    validate_statuses,
    validate_strategy_factory,
)

if TYPE_CHECKING:
    from achain.backoff import BackoffStrategy


@dataclass(frozen=True)
class RetryStatusConfig:
    """Configuration of the status-driven retry coordinator.

    Attributes:
        strategy: Factory creating a fresh backoff strategy per call.
        retryable_statuses: Status codes that trigger a retry. An empty
            set disables retrying.

    Example:
        ```pycon
        >>> from achain.backoff import ConstantBackoff
        >>> from achain.retry import RetryStatusConfig
        >>> config = RetryStatusConfig(strategy=ConstantBackoff, retryable_statuses={503})
        >>> config.retryable_statuses
        frozenset({503})

        ```
    """

    strategy: Callable[[], BackoffStrategy]
    retryable_statuses: frozenset[int] = field(default=RETRYABLE_STATUSES)

    def __post_init__(self) -> None:
        validate_strategy_factory(self.strategy)
        object.__setattr__(self, "retryable_statuses", validate_statuses(self.retryable_statuses))


@dataclass(frozen=True)
class RetryAfterConfig:
    """Configuration of the Retry-After driven retry coordinator.

    Invalid values are normalized rather than rejected: a non-integer or
    negative ``max_retries`` disables retrying and a non-numeric or
    negative ``max_delay_time`` removes the ceiling.

    Attributes:
        max_retries: Maximum number of retries. ``0`` disables retrying.
        max_delay_time: Optional ceiling in milliseconds on a single wait.

    Example:
        ```pycon
        >>> from achain.retry import RetryAfterConfig
        >>> RetryAfterConfig(max_retries=-2, max_delay_time="soon")
        RetryAfterConfig(max_retries=0, max_delay_time=None)

        ```
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    max_delay_time: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "max_retries", normalize_max_retries(self.max_retries))
        object.__setattr__(self, "max_delay_time", normalize_max_delay_time(self.max_delay_time))
