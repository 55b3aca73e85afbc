r"""Log every HTTP exchange as a structured entry."""

from __future__ import annotations

__all__ = [
    "DEFAULT_REDACT_HEADERS",
    "LogEntry",
    "RequestLog",
    "ResponseLog",
    "default_log_sink",
    "with_logging",
]

import logging
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from achain.utils.request import get_request_headers, get_request_method, get_request_url
from achain.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    import httpx

    from achain.types import RequestExecutor, RequestFunc, RequestInput, RequestOptions

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_REDACT_HEADERS: tuple[str, ...] = ("authorization", "cookie", "set-cookie")

REDACTED = "[REDACTED]"


@dataclass
class RequestLog:
    """Request part of a log entry.

    Attributes:
        url: The requested URL.
        method: The HTTP method.
        headers: The request headers, possibly redacted or empty.
    """

    url: str
    method: str
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class ResponseLog:
    """Response part of a log entry.

    Attributes:
        status_code: The HTTP status code.
        reason_phrase: The HTTP reason phrase.
        headers: The response headers, possibly redacted or empty.
        ok: Whether the status code is in the 2xx range.
    """

    status_code: int
    reason_phrase: str
    headers: dict[str, str] = field(default_factory=dict)
    ok: bool = False


@dataclass
class LogEntry:
    """One HTTP exchange, as emitted by ``with_logging``.

    Attributes:
        request: The request information.
        duration_ms: The duration of the exchange in milliseconds.
        timestamp: ISO 8601 UTC timestamp of the start of the exchange.
        response: The response information, unless the exchange failed.
        error: The exception raised by the exchange, if any.
    """

    request: RequestLog
    duration_ms: float
    timestamp: str
    response: ResponseLog | None = None
    error: BaseException | None = None

    def to_dict(self) -> dict[str, Any]:
        r"""Return the entry as a dictionary of plain values."""
        data = {
            "request": asdict(self.request),
            "duration_ms": self.duration_ms,
            "timestamp": self.timestamp,
        }
        if self.response is not None:
            data["response"] = asdict(self.response)
        if self.error is not None:
            data["error"] = f"{type(self.error).__name__}: {self.error}"
        return data


def default_log_sink(entry: LogEntry) -> None:
    """Log an entry on the ``achain.middleware.logger`` logger.

    Successful exchanges are logged at INFO and failed exchanges at
    WARNING, with the entry fields attached as structured data.
    """
    level = logging.INFO if entry.error is None else logging.WARNING
    request = entry.request
    if entry.response is not None:
        message = f"{request.method} {request.url} -> {entry.response.status_code}"
    else:
        message = f"{request.method} {request.url} failed"
    log_structured(logger, level, message, **entry.to_dict())


def with_logging(
    *,
    logger: Callable[[LogEntry], None] | None = None,
    include_request_headers: bool = True,
    include_response_headers: bool = True,
    redact_headers: Iterable[str] = DEFAULT_REDACT_HEADERS,
) -> RequestExecutor:
    """Create an executor logging each HTTP exchange.

    One :class:`LogEntry` is emitted per exchange, after the response is
    received or the exchange fails. Errors are re-raised unchanged.

    Args:
        logger: Sink receiving each entry. Defaults to
            :func:`default_log_sink`.
        include_request_headers: Whether request headers are logged.
        include_response_headers: Whether response headers are logged.
        redact_headers: Header names (case-insensitive) whose value is
            replaced with ``"[REDACTED]"``.

    Returns:
        The request executor.

    Example:
        ```pycon
        >>> from achain import with_logging
        >>> entries = []
        >>> executor = with_logging(logger=entries.append, include_response_headers=False)

        ```
    """
    sink = logger or default_log_sink
    redacted = frozenset(name.lower() for name in redact_headers)

    def executor(next_func: RequestFunc) -> RequestFunc:
        async def request_func(
            request: RequestInput, options: RequestOptions | None = None
        ) -> httpx.Response:
            timestamp = datetime.now(timezone.utc).isoformat()
            start_time = time.perf_counter()
            request_log = RequestLog(
                url=str(get_request_url(request)),
                method=get_request_method(request, options),
                headers=(
                    _headers_to_dict(get_request_headers(request, options), redacted)
                    if include_request_headers
                    else {}
                ),
            )

            try:
                response = await next_func(request, options)
            except Exception as exc:
                sink(
                    LogEntry(
                        request=request_log,
                        duration_ms=(time.perf_counter() - start_time) * 1000,
                        timestamp=timestamp,
                        error=exc,
                    )
                )
                raise

            sink(
                LogEntry(
                    request=request_log,
                    duration_ms=(time.perf_counter() - start_time) * 1000,
                    timestamp=timestamp,
                    response=ResponseLog(
                        status_code=response.status_code,
                        reason_phrase=response.reason_phrase,
                        headers=(
                            _headers_to_dict(response.headers, redacted)
                            if include_response_headers
                            else {}
                        ),
                        ok=response.is_success,
                    ),
                )
            )
            return response

        return request_func

    return executor


def _headers_to_dict(headers: httpx.Headers, redacted: frozenset[str]) -> dict[str, str]:
    return {
        name: REDACTED if name.lower() in redacted else value
        for name, value in headers.items()
    }
