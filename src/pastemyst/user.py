r"""Implement the blocking operations on users."""

from __future__ import annotations

__all__ = ["get_user", "user_exists"]

from typing import TYPE_CHECKING

from pastemyst.core.config import DEFAULT_TIMEOUT
from pastemyst.core.endpoints import get_user_call, user_exists_call
from pastemyst.core.http_logic import execute_api_call

if TYPE_CHECKING:
    import httpx

    from pastemyst.core.config import ClientConfig
    from pastemyst.models import User


def get_user(
    username: str,
    *,
    client: httpx.Client | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> User:
    r"""Fetch the public profile of a user.

    Args:
        username: The username.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.
        config: An optional ClientConfig object.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.

    Returns:
        The user.

    Raises:
        NotFoundError: If the user does not exist or has no public
            profile.
        DecodeError: If the response does not match the user schema.
        TransportError: If the request fails or the server errors.

    Example:
        ```pycon
        >>> from pastemyst import get_user
        >>> user = get_user("codemyst")  # doctest: +SKIP

        ```
    """
    return execute_api_call(get_user_call(username), client=client, config=config, timeout=timeout)


def user_exists(
    username: str,
    *,
    client: httpx.Client | None = None,
    config: ClientConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> bool:
    r"""Check whether a user exists.

    A missing user is a ``False`` result, not an error.

    Args:
        username: The username.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.
        config: An optional ClientConfig object.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.

    Returns:
        ``True`` if the user exists, otherwise ``False``.

    Raises:
        TransportError: If the request fails or the server errors.
    """
    return execute_api_call(
        user_exists_call(username), client=client, config=config, timeout=timeout
    )
