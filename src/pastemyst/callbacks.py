r"""Callback types and data structures for observability.

This module lets users hook into the request lifecycle for logging,
metrics, or debugging. Two hooks are available on ``ClientConfig``:

- on_request: Called before each request is sent
- on_response: Called when a response is received

Callbacks never see the auth token, only whether one was sent.

Example:
    ```pycon
    >>> from pastemyst import get_paste
    >>> from pastemyst.callbacks import ResponseInfo
    >>> from pastemyst.core import ClientConfig
    >>> def log_response(info: ResponseInfo):
    ...     print(f"{info.method} {info.url} -> {info.status_code}")
    ...
    >>> paste = get_paste("hipfqanx", config=ClientConfig(on_response=log_response))  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = ["RequestInfo", "ResponseInfo", "invoke_on_request", "invoke_on_response"]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx


@dataclass
class RequestInfo:
    """Information passed to on_request callback.

    Attributes:
        url: The URL being requested.
        method: The HTTP method (e.g., "GET", "POST").
        authenticated: Whether an auth token is attached.
    """

    url: str
    method: str
    authenticated: bool


@dataclass
class ResponseInfo:
    """Information passed to on_response callback.

    Attributes:
        url: The URL that was requested.
        method: The HTTP method (e.g., "GET", "POST").
        status_code: The HTTP status code of the response.
        response: The HTTP response object.
        total_time: Time spent on the request (seconds).
    """

    url: str
    method: str
    status_code: int
    response: httpx.Response
    total_time: float


def invoke_on_request(
    on_request: Callable[[RequestInfo], None] | None,
    *,
    url: str,
    method: str,
    authenticated: bool,
) -> None:
    """Invoke on_request callback if provided.

    Args:
        on_request: Optional callback to invoke before the request.
        url: The URL being requested.
        method: The HTTP method (e.g., "GET", "POST").
        authenticated: Whether an auth token is attached.
    """
    if on_request is not None:
        on_request(RequestInfo(url=url, method=method, authenticated=authenticated))


def invoke_on_response(
    on_response: Callable[[ResponseInfo], None] | None,
    *,
    url: str,
    method: str,
    response: httpx.Response,
    start_time: float,
) -> None:
    """Invoke on_response callback if provided.

    Args:
        on_response: Optional callback to invoke when a response is
            received.
        url: The URL that was requested.
        method: The HTTP method (e.g., "GET", "POST").
        response: The HTTP response object.
        start_time: The timestamp when the request started.
    """
    if on_response is not None:
        on_response(
            ResponseInfo(
                url=url,
                method=method,
                status_code=response.status_code,
                response=response,
                total_time=time.time() - start_time,
            )
        )
