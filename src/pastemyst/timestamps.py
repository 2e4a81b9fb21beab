r"""Convert paste expirations to unix time on the PasteMyst server.

``pastemyst.expiration.expires_into_unix`` computes the same value
locally; use this module when the server's answer is authoritative.
"""

from __future__ import annotations

__all__ = ["expires_in_to_unix_time"]

from typing import TYPE_CHECKING

from pastemyst.core.config import DEFAULT_TIMEOUT
from pastemyst.core.endpoints import expires_in_to_unix_time_call
from pastemyst.core.http_logic import execute_api_call

if TYPE_CHECKING:
    import httpx

    from pastemyst.core.config import ClientConfig
    from pastemyst.expiration import ExpirationSpec


def expires_in_to_unix_time(
    created_at: int,
    expires_in: str | ExpirationSpec,
    *,
    client: httpx.Client | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> int:
    r"""Ask PasteMyst when a paste created at ``created_at`` expires.

    Args:
        created_at: The unix time when the paste was created.
        expires_in: An ``ExpiresIn`` code, an expression, or a spec.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.
        config: An optional ClientConfig object.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.

    Returns:
        The deletion unix time, as computed by the server.

    Raises:
        ValidationError: If the expiration is invalid or not accepted
            by PasteMyst. Nothing is sent in that case.
        TransportError: If the request fails or the server errors.

    Example:
        ```pycon
        >>> from pastemyst import ExpiresIn, expires_in_to_unix_time
        >>> expires_in_to_unix_time(42, ExpiresIn.ONE_DAY)  # doctest: +SKIP
        86442

        ```
    """
    return execute_api_call(
        expires_in_to_unix_time_call(created_at, expires_in),
        client=client,
        config=config,
        timeout=timeout,
    )
