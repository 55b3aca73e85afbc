r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import pytest

import achain


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(achain.__version__, str)


def test_package_version_format() -> None:
    """Test that __version__ follows semantic versioning."""
    assert "." in achain.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in achain.__all__:
        assert hasattr(achain, name), f"{name} is in __all__ but not defined in module"


def test_all_exports_sorted() -> None:
    assert list(achain.__all__) == sorted(achain.__all__)


@pytest.mark.parametrize(
    "func_name",
    [
        "with_authorization",
        "with_base_url",
        "with_cookie",
        "with_cookies",
        "with_header",
        "with_headers",
        "with_logging",
        "with_query_param",
        "with_query_params",
        "with_response_error",
        "with_retry_after",
        "with_retry_status",
    ],
)
def test_all_executor_factories_are_callable(func_name: str) -> None:
    """Test that all executor factories are callable."""
    func = getattr(achain, func_name)
    assert callable(func), f"{func_name} is not callable"


def test_exceptions_hierarchy() -> None:
    assert issubclass(achain.RequestAbortedError, achain.AchainError)
    assert issubclass(achain.RetryDelayExceededError, achain.RequestAbortedError)
    assert issubclass(achain.ResponseError, achain.AchainError)
