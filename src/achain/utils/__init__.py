r"""Utility functions for request handling and retry logic.

This package provides helpers for the cancellable wait used between
retries, Retry-After header parsing, best-effort response body release,
request input inspection and structured logging.
"""

from __future__ import annotations

__all__ = [
    "clone_request",
    "get_request_headers",
    "get_request_method",
    "get_request_url",
    "parse_retry_after",
    "release_body",
    "resolve_cancel_token",
    "run_cancellable",
    "wait_for",
]

from achain.utils.request import (
    clone_request,
    get_request_headers,
    get_request_method,
    get_request_url,
    resolve_cancel_token,
)
from achain.utils.response import release_body
from achain.utils.retry_after import parse_retry_after
from achain.utils.wait import run_cancellable, wait_for
