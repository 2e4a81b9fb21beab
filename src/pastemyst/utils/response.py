r"""HTTP response handling utilities.

This module interprets the status code of PasteMyst responses and
decodes their JSON bodies. The same functions are used by the blocking
and the asynchronous operations, so both raise the same errors for the
same response.
"""

from __future__ import annotations

__all__ = [
    "decode_empty",
    "decode_exists",
    "decode_object",
    "decode_unix_time",
    "handle_response",
    "parse_json",
]

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pastemyst.exceptions import (
    DecodeError,
    NotFoundError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


def _server_message(response: httpx.Response) -> str | None:
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        for key in ("statusMessage", "message"):
            if isinstance(data.get(key), str):
                return data[key]
    return None


def handle_response(response: httpx.Response, url: str, method: str) -> None:
    """Raise the error matching a non-successful HTTP response.

    Mapping of the status codes:

    * 2xx: no error
    * 401, 403: ``UnauthorizedError``
    * 404: ``NotFoundError``
    * other 4xx: ``ValidationError``, with the server message if any
    * anything else (5xx, unfollowed redirects): ``TransportError``

    Args:
        response: The HTTP response object to validate.
        url: The URL that was requested, used in error messages.
        method: The HTTP method name (e.g., "GET", "POST"), used in error messages.

    Raises:
        UnauthorizedError: If the status code is 401 or 403.
        NotFoundError: If the status code is 404.
        ValidationError: If the status code is another 4xx.
        TransportError: If the status code is not 2xx nor 4xx.
    """
    status_code = response.status_code
    if 200 <= status_code < 300:
        return
    logger.debug(f"{method} request to {url} failed with status {status_code}")
    message = f"{method} request to {url} failed with status {status_code}"
    if status_code in (401, 403):
        raise UnauthorizedError(
            method=method, url=url, message=message, status_code=status_code, response=response
        )
    if status_code == 404:
        raise NotFoundError(
            method=method, url=url, message=message, status_code=status_code, response=response
        )
    if 400 <= status_code < 500:
        server_message = _server_message(response)
        if server_message:
            message = f"{message}: {server_message}"
        raise ValidationError(
            message=message, method=method, url=url, status_code=status_code, response=response
        )
    raise TransportError(
        method=method, url=url, message=message, status_code=status_code, response=response
    )


def parse_json(response: httpx.Response, url: str, method: str) -> Any:
    """Parse the JSON body of a response.

    Args:
        response: The HTTP response object.
        url: The URL that was requested, used in error messages.
        method: The HTTP method name, used in error messages.

    Returns:
        The decoded JSON value.

    Raises:
        DecodeError: If the body is not valid JSON.
    """
    try:
        return response.json()
    except ValueError as exc:
        raise DecodeError(
            message=f"{method} request to {url} returned a body that is not valid JSON: {exc}",
            method=method,
            url=url,
            status_code=response.status_code,
            response=response,
        ) from exc


def decode_object(
    from_dict: Callable[[Any], T],
) -> Callable[[httpx.Response, str, str], T]:
    """Create a decoder turning a successful response into a model
    object.

    Args:
        from_dict: The function decoding the JSON body, e.g.
            ``Paste.from_dict``. It raises ``DecodeError`` on schema
            mismatches.

    Returns:
        The decoder, called with ``(response, url, method)``.

    Example:
        ```pycon
        >>> import httpx
        >>> from pastemyst.utils.response import decode_object
        >>> decode = decode_object(lambda data: data["result"])
        >>> decode(httpx.Response(200, json={"result": 42}), "https://x/y", "GET")
        42

        ```
    """

    def decode(response: httpx.Response, url: str, method: str) -> T:
        handle_response(response, url=url, method=method)
        data = parse_json(response, url=url, method=method)
        try:
            return from_dict(data)
        except DecodeError as exc:
            raise DecodeError(
                message=f"{method} request to {url} returned an unexpected body: {exc}",
                method=method,
                url=url,
                status_code=response.status_code,
                response=response,
            ) from exc

    return decode


def decode_empty(response: httpx.Response, url: str, method: str) -> None:
    """Check a response whose body is not used.

    Raises:
        PasteMystError: If the status code is not successful.
    """
    handle_response(response, url=url, method=method)


def decode_exists(response: httpx.Response, url: str, method: str) -> bool:
    """Interpret the response of an existence check.

    Returns:
        ``True`` for a successful response, ``False`` for a 404.

    Raises:
        PasteMystError: If the status code is neither successful nor
            404.
    """
    if response.status_code == 404:
        return False
    handle_response(response, url=url, method=method)
    return True


def _unix_time_from_dict(data: Any) -> int:
    if not isinstance(data, dict):
        msg = f"time result must be a JSON object, got {type(data).__name__}"
        raise DecodeError(msg)
    result = data.get("result")
    if not isinstance(result, int) or isinstance(result, bool):
        msg = f"key 'result' must be an int, got {type(result).__name__}"
        raise DecodeError(msg)
    return result


decode_unix_time = decode_object(_unix_time_from_dict)
