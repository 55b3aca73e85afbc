r"""Unit tests for response handling utilities."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock

import pytest

from achain.utils import release_body
from tests.helpers import make_response

##################################
#     Tests for release_body     #
##################################


@pytest.mark.asyncio
async def test_release_body_closes_response() -> None:
    response = make_response(500)
    await release_body(response)
    assert response.is_closed


@pytest.mark.asyncio
async def test_release_body_swallows_errors(caplog: pytest.LogCaptureFixture) -> None:
    """Test that a release failure is logged and not raised."""
    response = make_response(500)
    response.aclose = AsyncMock(side_effect=RuntimeError("stream error"))

    with caplog.at_level(logging.DEBUG, logger="achain.utils.response"):
        await release_body(response, "Retry scheduled")

    response.aclose.assert_awaited_once()
    assert "Failed to release response body (Retry scheduled)" in caplog.text
    assert "stream error" in caplog.text


@pytest.mark.asyncio
async def test_release_body_already_closed() -> None:
    response = make_response(503)
    await response.aclose()
    await release_body(response)
    assert response.is_closed
