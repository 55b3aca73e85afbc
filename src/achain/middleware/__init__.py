r"""Stateless request executors transforming requests and responses.

These executors consume and produce the same request function contract
as the retry coordinators, but hold no retry or timing logic, except
``with_authorization`` which refreshes its token on ``401`` responses.
"""

from __future__ import annotations

__all__ = [
    "AuthorizationToken",
    "LogEntry",
    "RequestLog",
    "ResponseLog",
    "TokenProvider",
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
]

from achain.middleware.authorization import AuthorizationToken, TokenProvider, with_authorization
from achain.middleware.base_url import with_base_url
from achain.middleware.cookies import with_cookie, with_cookies
from achain.middleware.headers import with_header, with_headers
from achain.middleware.logger import LogEntry, RequestLog, ResponseLog, with_logging
from achain.middleware.query_params import with_query_param, with_query_params
from achain.middleware.response_error import with_response_error
