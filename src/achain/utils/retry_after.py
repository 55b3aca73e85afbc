r"""Retry-After header parsing utilities.

This module provides functions for parsing the Retry-After header value
from HTTP responses according to RFC 9110 section 10.2.3.
"""

from __future__ import annotations

__all__ = ["parse_retry_after"]

import logging
import math
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

logger: logging.Logger = logging.getLogger(__name__)

_DELTA_SECONDS = re.compile(r"[+-]?\d+")


def parse_retry_after(retry_after_header: str | None) -> float | None:
    """Parse the Retry-After header value into a delay in milliseconds.

    The Retry-After header can be specified in two formats:
    1. An integer representing the number of seconds to wait (e.g., "120")
    2. An HTTP-date in RFC 5322 format (e.g., "Wed, 21 Oct 2015 07:28:00 GMT")

    Negative seconds and dates in the past are clamped to ``0.0``, which
    means "retry immediately".

    Args:
        retry_after_header: The value of the Retry-After header as a string,
            or None if the header is not present in the response.

    Returns:
        The number of milliseconds to wait before retrying, or None if:
        - The header is not present (retry_after_header is None)
        - The header value cannot be parsed as either an integer or HTTP-date

    Example:
        ```pycon
        >>> from achain.utils import parse_retry_after
        >>> # Parse integer seconds
        >>> parse_retry_after("120")
        120000.0
        >>> parse_retry_after("0")
        0.0
        >>> parse_retry_after("-10")
        0.0
        >>> # No header present
        >>> parse_retry_after(None) is None
        True
        >>> # Invalid format returns None
        >>> parse_retry_after("invalid") is None
        True
        >>> parse_retry_after("1.5") is None
        True

        ```
    """
    if retry_after_header is None:
        return None

    value = retry_after_header.strip()
    if _DELTA_SECONDS.fullmatch(value):
        try:
            seconds = float(int(value))
        except OverflowError:
            return math.inf
        return max(0.0, seconds * 1000)

    # Try parsing as HTTP-date (RFC 5322 format)
    try:
        retry_date: datetime = parsedate_to_datetime(value)
    except (ValueError, TypeError, IndexError):
        logger.debug(f"Failed to parse Retry-After header: {retry_after_header!r}")
        return None
    if retry_date.tzinfo is None:
        retry_date = retry_date.replace(tzinfo=timezone.utc)
    now = datetime.now(timezone.utc)
    delta_seconds = (retry_date - now).total_seconds()
    return max(0.0, delta_seconds * 1000)
