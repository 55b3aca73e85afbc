r"""Cooperative cancellation token for request calls.

A :class:`CancelToken` is created and owned by the caller. It is handed
to a call through ``RequestOptions.cancel_token`` or embedded in a
request object with ``extensions={"cancel_token": token}``. Firing it
aborts the pending retry wait, and the in-flight exchange of the base
request function, of every call that observes it.
"""

from __future__ import annotations

__all__ = ["CancelToken"]

import asyncio
from typing import Any

from achain.exceptions import RequestAbortedError


class CancelToken:
    """Cancellation token bound to the running event loop.

    Example:
        ```pycon
        >>> from achain.cancellation import CancelToken
        >>> token = CancelToken()
        >>> token.cancelled
        False
        >>> token.cancel("shutting down")
        >>> token.cancelled
        True
        >>> token.reason
        'shutting down'

        ```
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: Any = None

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(cancelled={self.cancelled})"

    @property
    def cancelled(self) -> bool:
        r"""``True`` once :meth:`cancel` has been called."""
        return self._event.is_set()

    @property
    def reason(self) -> Any:
        r"""The reason given to :meth:`cancel`, if any."""
        return self._reason

    def cancel(self, reason: Any = None) -> None:
        """Fire the token.

        Only the first call records its reason; later calls are no-ops.

        Args:
            reason: Optional value describing why the token fired.
        """
        if self._event.is_set():
            return
        self._reason = reason
        self._event.set()

    def error(self) -> RequestAbortedError:
        r"""Return the error describing this token's cancellation."""
        message = "The operation was aborted"
        if self._reason is not None:
            message = f"{message}: {self._reason}"
        return RequestAbortedError(message, reason=self._reason)

    def raise_if_cancelled(self) -> None:
        """Raise if the token has fired.

        Raises:
            RequestAbortedError: if the token has fired.
        """
        if self.cancelled:
            raise self.error()

    async def wait(self) -> None:
        r"""Wait until the token fires."""
        await self._event.wait()
