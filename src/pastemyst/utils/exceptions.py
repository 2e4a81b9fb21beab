r"""Exception handling utilities for HTTP requests.

This module translates the httpx errors raised while sending a request
(timeouts, connection errors, DNS failures, ...) into
``TransportError``.
"""

from __future__ import annotations

__all__ = ["handle_request_error"]

import logging
from typing import NoReturn

from pastemyst.exceptions import TransportError

logger: logging.Logger = logging.getLogger(__name__)


def handle_request_error(exc: Exception, url: str, method: str) -> NoReturn:
    """Handle network and connection errors during HTTP requests.

    This function logs the error with its type and raises a
    ``TransportError``. The request is not retried.

    Args:
        exc: The request error that was raised (typically httpx.RequestError or
            a subclass like httpx.ConnectError, httpx.ReadTimeout, etc.).
        url: The URL that was requested, used in error messages.
        method: The HTTP method name (e.g., "GET", "POST"), used in error messages.

    Raises:
        TransportError: Always. The original exception is chained as
            the cause.
    """
    error_type = type(exc).__name__
    logger.debug(f"{method} request to {url} encountered {error_type}: {exc}")
    raise TransportError(
        method=method,
        url=url,
        message=f"{method} request to {url} failed with {error_type}: {exc}",
    ) from exc
