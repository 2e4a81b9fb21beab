r"""Implement the asynchronous operations on users."""

from __future__ import annotations

__all__ = ["get_user_async", "user_exists_async"]

from typing import TYPE_CHECKING

from pastemyst.core.config import DEFAULT_TIMEOUT
from pastemyst.core.endpoints import get_user_call, user_exists_call
from pastemyst.core.http_logic import execute_api_call_async

if TYPE_CHECKING:
    import httpx

    from pastemyst.core.config import ClientConfig
    from pastemyst.models import User


async def get_user_async(
    username: str,
    *,
    client: httpx.AsyncClient | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> User:
    r"""Fetch the public profile of a user asynchronously.

    See ``pastemyst.get_user`` for the arguments and errors.
    """
    return await execute_api_call_async(
        get_user_call(username), client=client, config=config, timeout=timeout
    )


async def user_exists_async(
    username: str,
    *,
    client: httpx.AsyncClient | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> bool:
    r"""Check whether a user exists, asynchronously.

    See ``pastemyst.user_exists`` for the arguments and errors.
    """
    return await execute_api_call_async(
        user_exists_call(username), client=client, config=config, timeout=timeout
    )
