r"""Implement the asynchronous operations on pastes.

These coroutines mirror ``pastemyst.paste``: same arguments, same
request bodies, same errors. Each one suspends only while waiting for
the response.
"""

from __future__ import annotations

__all__ = ["create_paste_async", "delete_paste_async", "edit_paste_async", "get_paste_async"]

from typing import TYPE_CHECKING

from pastemyst.core.config import DEFAULT_TIMEOUT
from pastemyst.core.endpoints import (
    create_paste_call,
    delete_paste_call,
    edit_paste_call,
    get_paste_call,
)
from pastemyst.core.http_logic import execute_api_call_async

if TYPE_CHECKING:
    import httpx

    from pastemyst.core.config import ClientConfig
    from pastemyst.models import CreatePaste, EditPaste, Paste


async def get_paste_async(
    paste_id: str,
    *,
    auth_token: str | None = None,
    client: httpx.AsyncClient | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> Paste:
    r"""Fetch a paste asynchronously.

    See ``pastemyst.get_paste`` for the arguments and errors.

    Example:
        ```pycon
        >>> import asyncio
        >>> from pastemyst import get_paste_async
        >>> paste = asyncio.run(get_paste_async("hipfqanx"))  # doctest: +SKIP

        ```
    """
    return await execute_api_call_async(
        get_paste_call(paste_id, auth_token), client=client, config=config, timeout=timeout
    )


async def create_paste_async(
    payload: CreatePaste,
    *,
    auth_token: str | None = None,
    client: httpx.AsyncClient | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> Paste:
    r"""Create a paste asynchronously.

    See ``pastemyst.create_paste`` for the arguments and errors.
    """
    return await execute_api_call_async(
        create_paste_call(payload, auth_token), client=client, config=config, timeout=timeout
    )


async def edit_paste_async(
    paste_id: str,
    payload: EditPaste,
    *,
    auth_token: str | None = None,
    client: httpx.AsyncClient | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> Paste:
    r"""Edit a paste asynchronously.

    See ``pastemyst.edit_paste`` for the arguments and errors.
    """
    return await execute_api_call_async(
        edit_paste_call(paste_id, payload, auth_token),
        client=client,
        config=config,
        timeout=timeout,
    )


async def delete_paste_async(
    paste_id: str,
    *,
    auth_token: str | None = None,
    client: httpx.AsyncClient | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> None:
    r"""Delete a paste asynchronously.

    See ``pastemyst.delete_paste`` for the arguments and errors.
    """
    await execute_api_call_async(
        delete_paste_call(paste_id, auth_token), client=client, config=config, timeout=timeout
    )
