r"""Configuration constants shared by the request executors.

This module gathers the defaults used by the retry coordinators and the
cancellable wait primitive so they are defined in a single place.
"""

from __future__ import annotations

__all__ = [
    "CANCEL_TOKEN_EXTENSION",
    "DEFAULT_MAX_RETRIES",
    "MAX_WAIT_DELAY",
    "RETRYABLE_STATUSES",
    "RETRY_AFTER_HEADER",
    "RETRY_AFTER_STATUSES",
    "RETRY_CANCEL_REASON",
]

# HTTP status codes retried by default by ``with_retry_status``
# 408: Request Timeout
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRYABLE_STATUSES: frozenset[int] = frozenset({408, 429, 500, 502, 503, 504})

# HTTP status codes that carry Retry-After semantics
RETRY_AFTER_STATUSES: frozenset[int] = frozenset({429, 503})

RETRY_AFTER_HEADER = "Retry-After"

# Default number of Retry-After driven retries (disabled)
DEFAULT_MAX_RETRIES = 0

# Reason attached to a response body released before a retry
RETRY_CANCEL_REASON = "Retry scheduled"

# Largest accepted wait delay in milliseconds (signed 32-bit timer range)
MAX_WAIT_DELAY = 2_147_483_647

# Key of the cancellation token in ``httpx.Request.extensions``
CANCEL_TOKEN_EXTENSION = "cancel_token"
