r"""Exceptions raised by the request executors."""

from __future__ import annotations

__all__ = [
    "AchainError",
    "RequestAbortedError",
    "ResponseError",
    "RetryDelayExceededError",
]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


class AchainError(Exception):
    r"""Base class of all the errors raised by ``achain``."""


class RequestAbortedError(AchainError):
    """Raised when a request or a retry wait is aborted.

    This is the cancellation-style error of the library. It is raised
    when the cancellation token of a call fires while the call is
    waiting, and it is never retried.

    Args:
        message: A human-readable description of the abort.
        reason: The optional reason given when the token was fired.

    Example:
        ```pycon
        >>> from achain.exceptions import RequestAbortedError
        >>> error = RequestAbortedError("request aborted", reason="shutdown")
        >>> error.reason
        'shutdown'

        ```
    """

    def __init__(self, message: str = "The operation was aborted", reason: Any = None) -> None:
        super().__init__(message)
        self.reason = reason


class RetryDelayExceededError(RequestAbortedError):
    """Raised when a server-directed delay exceeds the configured
    ceiling.

    Args:
        delay: The delay in milliseconds requested by the server.
        max_delay_time: The configured ceiling in milliseconds.
    """

    def __init__(self, delay: float, max_delay_time: float) -> None:
        super().__init__(
            "Exceeded maximum ceiling for Retry-After value: "
            f"expected up to {max_delay_time}, received {delay}"
        )
        self.delay = delay
        self.max_delay_time = max_delay_time


class ResponseError(AchainError):
    """Raised by ``with_response_error`` for a failing HTTP response.

    Args:
        response: The HTTP response that triggered the error.

    Attributes:
        status_code: The HTTP status code of the response.
        reason_phrase: The HTTP reason phrase of the response.
        url: The URL of the request, or an empty string if unknown.
        response: The HTTP response object.
    """

    def __init__(self, response: httpx.Response) -> None:
        self.status_code = response.status_code
        self.reason_phrase = response.reason_phrase
        self.url = _response_url(response)
        self.response = response
        super().__init__(f"HTTP {self.status_code} {self.reason_phrase}: {self.url}")


def _response_url(response: httpx.Response) -> str:
    try:
        return str(response.request.url)
    except RuntimeError:
        # The response was built without a request
        return ""
