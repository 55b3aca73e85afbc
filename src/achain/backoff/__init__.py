r"""Backoff strategies used by the retry coordinators.

A backoff strategy yields the delay, in milliseconds, before each retry
and signals when to stop by returning ``None``. The retry coordinators
take a factory so that each call gets its own strategy instance.
"""

from __future__ import annotations

__all__ = [
    "AttemptBackoff",
    "BackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "LimitedBackoff",
    "LinearBackoff",
    "is_stop",
    "upto",
]

from achain.backoff.base import AttemptBackoff, BackoffStrategy, is_stop
from achain.backoff.constant import ConstantBackoff
from achain.backoff.exponential import ExponentialBackoff
from achain.backoff.fibonacci import FibonacciBackoff
from achain.backoff.limit import LimitedBackoff, upto
from achain.backoff.linear import LinearBackoff
