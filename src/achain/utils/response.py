r"""HTTP response handling utilities."""

from __future__ import annotations

__all__ = ["release_body"]

import logging
from typing import TYPE_CHECKING

from achain.core.config import RETRY_CANCEL_REASON

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)


async def release_body(response: httpx.Response, reason: str = RETRY_CANCEL_REASON) -> None:
    """Release the body of a response that is about to be discarded.

    This is a best-effort cleanup: a failure to close the response
    stream (already consumed, stream error, ...) is logged and never
    raised, so it cannot take part in any retry decision.

    Args:
        response: The response to release.
        reason: Human-readable reason reported in the logs.
    """
    try:
        await response.aclose()
    except Exception as exc:  # noqa: BLE001
        logger.debug(f"Failed to release response body ({reason}): {type(exc).__name__}: {exc}")
    else:
        logger.debug(f"Released response body with status {response.status_code} ({reason})")
