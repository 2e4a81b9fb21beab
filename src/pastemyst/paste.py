r"""Implement the blocking operations on pastes.

Each function sends one request and returns once the response is fully
decoded. The asynchronous twins live in ``pastemyst.paste_async``.
"""

from __future__ import annotations

__all__ = ["create_paste", "delete_paste", "edit_paste", "get_paste"]

from typing import TYPE_CHECKING

from pastemyst.core.config import DEFAULT_TIMEOUT
from pastemyst.core.endpoints import (
    create_paste_call,
    delete_paste_call,
    edit_paste_call,
    get_paste_call,
)
from pastemyst.core.http_logic import execute_api_call

if TYPE_CHECKING:
    import httpx

    from pastemyst.core.config import ClientConfig
    from pastemyst.models import CreatePaste, EditPaste, Paste


def get_paste(
    paste_id: str,
    *,
    auth_token: str | None = None,
    client: httpx.Client | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> Paste:
    r"""Fetch a paste.

    Args:
        paste_id: The identifier of the paste.
        auth_token: The token of the owner. Only needed for private
            pastes.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.
        config: An optional ClientConfig object.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.

    Returns:
        The paste.

    Raises:
        NotFoundError: If the paste does not exist, or is private and
            the token does not match its owner.
        DecodeError: If the response does not match the paste schema.
        TransportError: If the request fails or the server errors.

    Example:
        ```pycon
        >>> from pastemyst import get_paste
        >>> paste = get_paste("hipfqanx")  # doctest: +SKIP
        >>> len(paste.pasties)  # doctest: +SKIP
        2

        ```
    """
    return execute_api_call(
        get_paste_call(paste_id, auth_token), client=client, config=config, timeout=timeout
    )


def create_paste(
    payload: CreatePaste,
    *,
    auth_token: str | None = None,
    client: httpx.Client | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> Paste:
    r"""Create a paste.

    Args:
        payload: The paste to create.
        auth_token: The token of the account that will own the paste.
            Optional for unlisted pastes.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.
        config: An optional ClientConfig object.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.

    Returns:
        The created paste, with the identifiers assigned by PasteMyst.

    Raises:
        ValidationError: If the payload has no pasty or an invalid
            expiration (checked before sending), or if the server
            rejects it.
        UnauthorizedError: If a private or public paste is requested
            without token, or if the token is invalid.
        TransportError: If the request fails or the server errors.

    Example:
        ```pycon
        >>> from pastemyst import CreatePaste, Pasty, create_paste
        >>> payload = CreatePaste(
        ...     title="hello",
        ...     expires_in="1d",
        ...     pasties=[Pasty(title="main.rs", language="Rust", code="fn main() {}")],
        ... )
        >>> paste = create_paste(payload)  # doctest: +SKIP

        ```
    """
    return execute_api_call(
        create_paste_call(payload, auth_token), client=client, config=config, timeout=timeout
    )


def edit_paste(
    paste_id: str,
    payload: EditPaste,
    *,
    auth_token: str | None = None,
    client: httpx.Client | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> Paste:
    r"""Edit a paste owned by the token's account.

    Args:
        paste_id: The identifier of the paste.
        payload: The fields to change.
        auth_token: The token of the owner. Required.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.
        config: An optional ClientConfig object.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.

    Returns:
        The edited paste.

    Raises:
        UnauthorizedError: If no token is supplied or the token does
            not own the paste.
        NotFoundError: If the paste does not exist.
        ValidationError: If the payload is invalid.
        TransportError: If the request fails or the server errors.
    """
    return execute_api_call(
        edit_paste_call(paste_id, payload, auth_token),
        client=client,
        config=config,
        timeout=timeout,
    )


def delete_paste(
    paste_id: str,
    *,
    auth_token: str | None = None,
    client: httpx.Client | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> None:
    r"""Delete a paste owned by the token's account.

    The deletion is irreversible.

    Args:
        paste_id: The identifier of the paste.
        auth_token: The token of the owner. Required.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.
        config: An optional ClientConfig object.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.

    Raises:
        UnauthorizedError: If no token is supplied or the token does
            not own the paste.
        NotFoundError: If the paste does not exist.
        TransportError: If the request fails or the server errors.
    """
    execute_api_call(
        delete_paste_call(paste_id, auth_token), client=client, config=config, timeout=timeout
    )
