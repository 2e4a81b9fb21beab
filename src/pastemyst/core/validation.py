r"""Parameter validation utilities for PasteMyst requests.

This module provides validation functions run before any request is
sent, so invalid arguments fail the same way in the blocking and the
asynchronous code paths.
"""

from __future__ import annotations

__all__ = [
    "validate_api_version",
    "validate_auth_token",
    "validate_base_url",
    "validate_identifier",
    "validate_timeout",
]

from typing import TYPE_CHECKING

from pastemyst.exceptions import UnauthorizedError

if TYPE_CHECKING:
    import httpx

SUPPORTED_API_VERSIONS = ("v1", "v2")


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from pastemyst.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(30)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_base_url(base_url: str) -> None:
    """Validate the base URL of the API.

    Args:
        base_url: The base URL. Must start with ``http://`` or
            ``https://``.

    Raises:
        ValueError: If the base URL is not an HTTP(S) URL.
    """
    if not base_url.startswith(("http://", "https://")):
        msg = f"base_url must start with 'http://' or 'https://', got {base_url!r}"
        raise ValueError(msg)


def validate_api_version(api_version: str) -> None:
    """Validate the API version.

    Args:
        api_version: The API version, one of ``"v1"`` and ``"v2"``.

    Raises:
        ValueError: If the version is not supported.
    """
    if api_version not in SUPPORTED_API_VERSIONS:
        msg = f"api_version must be one of {SUPPORTED_API_VERSIONS}, got {api_version!r}"
        raise ValueError(msg)


def validate_identifier(name: str, value: str) -> None:
    """Validate a paste identifier or a username.

    Args:
        name: The name of the argument, used in the error message.
        value: The value to check.

    Raises:
        ValueError: If the value is empty or blank.

    Example:
        ```pycon
        >>> from pastemyst.core.validation import validate_identifier
        >>> validate_identifier("paste_id", "hipfqanx")
        >>> validate_identifier("paste_id", " ")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: paste_id must not be empty

        ```
    """
    if not value or not value.strip():
        msg = f"{name} must not be empty"
        raise ValueError(msg)


def validate_auth_token(auth_token: str | None, *, method: str, url: str) -> str:
    """Validate the auth token of an operation that requires one.

    Args:
        auth_token: The token supplied by the caller.
        method: The HTTP method of the operation.
        url: The URL of the operation.

    Returns:
        The token.

    Raises:
        UnauthorizedError: If no token was supplied.
    """
    if auth_token is None or not auth_token.strip():
        raise UnauthorizedError(
            method=method,
            url=url,
            message=f"{method} request to {url} requires an auth token",
        )
    return auth_token
