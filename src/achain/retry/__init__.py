r"""Retry coordinators.

Public API:
    - with_retry_status: Retry on transient status codes with a backoff strategy
    - with_retry_after: Retry as directed by the Retry-After header
    - RetryStatusConfig: Configuration of ``with_retry_status``
    - RetryAfterConfig: Configuration of ``with_retry_after``
"""

from __future__ import annotations

__all__ = ["RetryAfterConfig", "RetryStatusConfig", "with_retry_after", "with_retry_status"]

from achain.retry.after import with_retry_after
from achain.retry.config import RetryAfterConfig, RetryStatusConfig
from achain.retry.status import with_retry_status
