r"""Define the exceptions raised by the PasteMyst client.

Every public operation either returns a decoded value or raises one of
the exceptions below. All of them derive from ``PasteMystError`` so
callers can catch the whole family at once.
"""

from __future__ import annotations

__all__ = [
    "DecodeError",
    "HttpError",
    "InvalidFormatError",
    "InvalidMagnitudeError",
    "NotFoundError",
    "ParseError",
    "PasteMystError",
    "TransportError",
    "UnauthorizedError",
    "ValidationError",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class PasteMystError(Exception):
    r"""Base class of all the errors raised by this package."""


class ParseError(PasteMystError, ValueError):
    r"""Raised when an expiration expression cannot be parsed.

    Args:
        expression: The expression that failed to parse.
        message: The error message.

    Example:
        ```pycon
        >>> from pastemyst.exceptions import ParseError
        >>> exc = ParseError("1q", "unknown unit 'q'")
        >>> exc.expression
        '1q'

        ```
    """

    def __init__(self, expression: str, message: str) -> None:
        super().__init__(message)
        self.expression = expression


class InvalidFormatError(ParseError):
    r"""Raised when an expression is neither ``never`` nor
    ``<magnitude><unit>``."""


class InvalidMagnitudeError(ParseError):
    r"""Raised when the numeric part of an expression is not a valid
    non-negative integer."""


class HttpError(PasteMystError):
    r"""Base class of the errors tied to a single HTTP exchange.

    Args:
        method: The HTTP method of the request (e.g. ``"GET"``).
        url: The URL of the request.
        message: The error message.
        status_code: The HTTP status code of the response, if one was
            received.
        response: The HTTP response, if one was received.

    Example:
        ```pycon
        >>> from pastemyst.exceptions import NotFoundError
        >>> exc = NotFoundError(
        ...     method="GET",
        ...     url="https://paste.myst.rs/api/v2/paste/abc",
        ...     message="paste not found",
        ...     status_code=404,
        ... )
        >>> exc.status_code
        404

        ```
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status_code: int | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.response = response


class ValidationError(HttpError):
    r"""Raised when a request payload is rejected, either locally before
    sending it or by the server with a 4xx status."""

    def __init__(
        self,
        message: str,
        method: str = "",
        url: str = "",
        status_code: int | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(
            method=method, url=url, message=message, status_code=status_code, response=response
        )


class UnauthorizedError(HttpError):
    r"""Raised when the auth token is missing, invalid, or does not own
    the requested resource (HTTP 401/403)."""


class NotFoundError(HttpError):
    r"""Raised when the requested resource does not exist (HTTP 404)."""


class DecodeError(HttpError):
    r"""Raised when a response body does not match the expected
    schema.

    The model decoders raise it without request details; the HTTP layer
    fills in ``method``, ``url`` and ``response`` before propagating it.
    """

    def __init__(
        self,
        message: str,
        method: str = "",
        url: str = "",
        status_code: int | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(
            method=method, url=url, message=message, status_code=status_code, response=response
        )


class TransportError(HttpError):
    r"""Raised on network failures (timeout, connection, DNS) and on 5xx
    server errors.

    When the failure comes from httpx, the original exception is chained
    as ``__cause__``.
    """
