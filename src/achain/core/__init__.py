r"""Core of the request pipeline.

This package provides the chain composer, the base request function
backed by ``httpx.AsyncClient``, the configuration constants and the
parameter validation helpers.
"""

from __future__ import annotations

__all__ = ["build_request", "compose", "from_client", "pipeline"]

from achain.core.client import build_request, from_client
from achain.core.compose import compose, pipeline
