r"""Shared HTTP logic for sync and async operations.

Every PasteMyst operation is described by an ``ApiCall``: the request to
send and the function decoding the response. ``execute_api_call`` runs
it with an ``httpx.Client`` and ``execute_api_call_async`` with an
``httpx.AsyncClient``. Both build the request and decode the response
through the same code, so they send byte-identical requests and raise
the same errors.
"""

from __future__ import annotations

__all__ = [
    "ApiCall",
    "ApiRequest",
    "encode_json",
    "execute_api_call",
    "execute_api_call_async",
]

import json
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import httpx

from pastemyst.callbacks import invoke_on_request, invoke_on_response
from pastemyst.core.config import DEFAULT_TIMEOUT, ClientConfig
from pastemyst.core.validation import validate_timeout
from pastemyst.utils.exceptions import handle_request_error

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


def encode_json(payload: Any) -> bytes:
    """Encode a JSON request body.

    The encoding is deterministic: the same payload always gives the
    same bytes.

    Args:
        payload: The JSON-compatible value to encode.

    Returns:
        The UTF-8 encoded body.

    Example:
        ```pycon
        >>> from pastemyst.core.http_logic import encode_json
        >>> encode_json({"title": "é", "pasties": []})
        b'{"title":"\\xc3\\xa9","pasties":[]}'

        ```
    """
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


@dataclass(frozen=True)
class ApiRequest:
    """Describe a request to the PasteMyst API.

    Args:
        method: The HTTP method.
        path: The path relative to the versioned API root.
        params: The query parameters.
        body: The encoded JSON body, if any.
        auth_token: The auth token sent in the ``Authorization`` header,
            if any.
    """

    method: str
    path: str
    params: tuple[tuple[str, str], ...] = ()
    body: bytes | None = None
    auth_token: str | None = None

    def __repr__(self) -> str:
        # never leak the token in logs or tracebacks
        return (
            f"{self.__class__.__qualname__}(method={self.method!r}, path={self.path!r}, "
            f"params={self.params!r}, body={self.body!r}, "
            f"authenticated={self.auth_token is not None})"
        )

    def url(self, config: ClientConfig) -> str:
        """Return the absolute URL of the request, without query
        string."""
        return config.endpoint(self.path)

    def headers(self, config: ClientConfig) -> dict[str, str]:
        """Return the headers of the request."""
        headers = {"Accept": "application/json", "User-Agent": config.user_agent}
        if self.body is not None:
            headers["Content-Type"] = "application/json"
        if self.auth_token is not None:
            # PasteMyst expects the raw token, without scheme
            headers["Authorization"] = self.auth_token
        return headers

    def to_kwargs(self, config: ClientConfig) -> dict[str, Any]:
        """Return the keyword arguments of ``httpx.Client.request``."""
        kwargs: dict[str, Any] = {
            "method": self.method,
            "url": self.url(config),
            "headers": self.headers(config),
        }
        if self.params:
            kwargs["params"] = list(self.params)
        if self.body is not None:
            kwargs["content"] = self.body
        return kwargs


@dataclass(frozen=True)
class ApiCall(Generic[T]):
    """Pair a request with the function decoding its response.

    Args:
        request: The request to send.
        decode: The function called with ``(response, url, method)``.
            It raises the error matching the response, or returns the
            decoded value.
    """

    request: ApiRequest
    decode: Callable[[httpx.Response, str, str], T]


def execute_api_call(
    call: ApiCall[T],
    *,
    client: httpx.Client | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> T:
    """Execute an API call (synchronous).

    This is the core shared logic for all synchronous operations. It
    handles client creation, the request callbacks, and cleanup.

    Args:
        call: The API call to execute.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.
        config: An optional ClientConfig object. If None, the default
            configuration is used.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.

    Returns:
        The decoded response.

    Raises:
        PasteMystError: If the request fails or the response cannot be
            decoded.
        ValueError: If parameters are invalid.
    """
    validate_timeout(timeout)
    config = config or ClientConfig()
    url = call.request.url(config)
    method = call.request.method

    owns_client = client is None
    client = client or httpx.Client(timeout=timeout)
    try:
        invoke_on_request(
            config.on_request,
            url=url,
            method=method,
            authenticated=call.request.auth_token is not None,
        )
        logger.debug(f"Sending {method} request to {url}")
        start_time = time.time()
        try:
            response = client.request(**call.request.to_kwargs(config))
        except httpx.RequestError as exc:
            handle_request_error(exc, url=url, method=method)
        invoke_on_response(
            config.on_response, url=url, method=method, response=response, start_time=start_time
        )
        return call.decode(response, url, method)
    finally:
        if owns_client:
            client.close()


async def execute_api_call_async(
    call: ApiCall[T],
    *,
    client: httpx.AsyncClient | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> T:
    """Execute an API call (asynchronous).

    This is the core shared logic for all asynchronous operations. The
    coroutine suspends only while waiting for the response; cancelling
    the task aborts the request.

    Args:
        call: The API call to execute.
        client: An optional httpx.AsyncClient object to use for making requests.
            If None, a new client will be created and closed after use.
        config: An optional ClientConfig object. If None, the default
            configuration is used.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.

    Returns:
        The decoded response.

    Raises:
        PasteMystError: If the request fails or the response cannot be
            decoded.
        ValueError: If parameters are invalid.
    """
    validate_timeout(timeout)
    config = config or ClientConfig()
    url = call.request.url(config)
    method = call.request.method

    owns_client = client is None
    client = client or httpx.AsyncClient(timeout=timeout)
    try:
        invoke_on_request(
            config.on_request,
            url=url,
            method=method,
            authenticated=call.request.auth_token is not None,
        )
        logger.debug(f"Sending {method} request to {url}")
        start_time = time.time()
        try:
            response = await client.request(**call.request.to_kwargs(config))
        except httpx.RequestError as exc:
            handle_request_error(exc, url=url, method=method)
        invoke_on_response(
            config.on_response, url=url, method=method, response=response, start_time=start_time
        )
        return call.decode(response, url, method)
    finally:
        if owns_client:
            await client.aclose()
