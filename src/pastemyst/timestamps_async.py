r"""Convert paste expirations to unix time on the PasteMyst server,
asynchronously."""

from __future__ import annotations

__all__ = ["expires_in_to_unix_time_async"]

from typing import TYPE_CHECKING

from pastemyst.core.config import DEFAULT_TIMEOUT
from pastemyst.core.endpoints import expires_in_to_unix_time_call
from pastemyst.core.http_logic import execute_api_call_async

if TYPE_CHECKING:
    import httpx

    from pastemyst.core.config import ClientConfig
    from pastemyst.expiration import ExpirationSpec


async def expires_in_to_unix_time_async(
    created_at: int,
    expires_in: str | ExpirationSpec,
    *,
    client: httpx.AsyncClient | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> int:
    r"""Ask PasteMyst when a paste created at ``created_at`` expires.

    See ``pastemyst.expires_in_to_unix_time`` for the arguments and
    errors.

    Example:
        ```pycon
        >>> import asyncio
        >>> from pastemyst import ExpiresIn, expires_in_to_unix_time_async
        >>> asyncio.run(
        ...     expires_in_to_unix_time_async(42, ExpiresIn.ONE_HOUR)
        ... )  # doctest: +SKIP
        3642

        ```
    """
    return await execute_api_call_async(
        expires_in_to_unix_time_call(created_at, expires_in),
        client=client,
        config=config,
        timeout=timeout,
    )
