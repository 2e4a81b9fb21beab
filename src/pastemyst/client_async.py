r"""Asynchronous context manager client for the PasteMyst API.

This module provides the asynchronous twin of ``PasteMystClient``. The
AsyncPasteMystClient manages the lifecycle of the underlying
httpx.AsyncClient and exposes one coroutine per PasteMyst operation.
"""

from __future__ import annotations

__all__ = ["AsyncPasteMystClient"]

from typing import TYPE_CHECKING

import httpx

from pastemyst.core.config import DEFAULT_TIMEOUT, ClientConfig
from pastemyst.language import LanguageTable
from pastemyst.paste_async import (
    create_paste_async,
    delete_paste_async,
    edit_paste_async,
    get_paste_async,
)
from pastemyst.timestamps_async import expires_in_to_unix_time_async
from pastemyst.user_async import get_user_async, user_exists_async

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from pastemyst.expiration import ExpirationSpec
    from pastemyst.language import LanguageInfo
    from pastemyst.models import CreatePaste, EditPaste, Paste, User


class AsyncPasteMystClient:
    r"""Asynchronous context manager for the PasteMyst API.

    If ``client`` is ``None``, an ``httpx.AsyncClient`` is created and
    closed when the ``async with`` block exits. A client passed in is
    never closed.

    Several operations can run concurrently on the same instance, e.g.
    with ``asyncio.gather``.

    Args:
        config: Optional ClientConfig instance. If ``None``, a default
            ClientConfig is used.
        client: Optional httpx.AsyncClient instance to use for requests.
            If ``None``, a new client is created with ``timeout``.
        timeout: Maximum seconds to wait for the server response. Only
            used if ``client`` is ``None``.
        languages: Optional language table used by the language
            lookups. If ``None``, the default table is used.

    Example:
        ```pycon
        >>> import asyncio
        >>> from pastemyst import AsyncPasteMystClient
        >>> async def main():
        ...     async with AsyncPasteMystClient() as client:
        ...         return await asyncio.gather(
        ...             client.get_paste("hipfqanx"), client.user_exists("codemyst")
        ...         )
        ...
        >>> paste, exists = asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        *,
        config: ClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
        languages: LanguageTable | None = None,
    ) -> None:
        self._config: ClientConfig = config or ClientConfig()
        self._owns_client = client is None
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(timeout=timeout)
        self._languages: LanguageTable = (
            LanguageTable.default() if languages is None else languages
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_url={self._config.base_url!r}, "
            f"api_version={self._config.api_version!r})"
        )

    async def __aenter__(self) -> Self:
        """Enter the async context manager.

        Returns:
            The AsyncPasteMystClient instance for making requests.
        """
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the async context manager and close the underlying httpx
        client if this instance created it.

        Args:
            exc_type: Exception type if an exception occurred.
            exc_val: Exception value if an exception occurred.
            exc_tb: Exception traceback if an exception occurred.
        """
        await self.aclose()

    @property
    def config(self) -> ClientConfig:
        r"""The configuration shared by all the requests."""
        return self._config

    @property
    def is_closed(self) -> bool:
        r"""``True`` if the underlying httpx client is closed."""
        return self._client.is_closed

    async def aclose(self) -> None:
        r"""Close the underlying httpx client if this instance created
        it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def get_paste(self, paste_id: str, *, auth_token: str | None = None) -> Paste:
        r"""Fetch a paste.

        See ``pastemyst.get_paste`` for the arguments and errors.
        """
        return await get_paste_async(
            paste_id, auth_token=auth_token, client=self._client, config=self._config
        )

    async def create_paste(self, payload: CreatePaste, *, auth_token: str | None = None) -> Paste:
        r"""Create a paste.

        See ``pastemyst.create_paste`` for the arguments and errors.
        """
        return await create_paste_async(
            payload, auth_token=auth_token, client=self._client, config=self._config
        )

    async def edit_paste(
        self, paste_id: str, payload: EditPaste, *, auth_token: str | None = None
    ) -> Paste:
        r"""Edit a paste.

        See ``pastemyst.edit_paste`` for the arguments and errors.
        """
        return await edit_paste_async(
            paste_id, payload, auth_token=auth_token, client=self._client, config=self._config
        )

    async def delete_paste(self, paste_id: str, *, auth_token: str | None = None) -> None:
        r"""Delete a paste.

        See ``pastemyst.delete_paste`` for the arguments and errors.
        """
        await delete_paste_async(
            paste_id, auth_token=auth_token, client=self._client, config=self._config
        )

    async def get_user(self, username: str) -> User:
        r"""Fetch a user."""
        return await get_user_async(username, client=self._client, config=self._config)

    async def user_exists(self, username: str) -> bool:
        r"""Check whether a user exists."""
        return await user_exists_async(username, client=self._client, config=self._config)

    async def expires_in_to_unix_time(
        self, created_at: int, expires_in: str | ExpirationSpec
    ) -> int:
        r"""Ask PasteMyst when a paste expires.

        See ``pastemyst.expires_in_to_unix_time`` for the arguments and
        errors.
        """
        return await expires_in_to_unix_time_async(
            created_at, expires_in, client=self._client, config=self._config
        )

    def languages(self) -> tuple[LanguageInfo, ...]:
        r"""Return all the known languages."""
        return tuple(self._languages)

    def find_language_by_name(self, name: str) -> LanguageInfo | None:
        r"""Find a language by name or alias, case-insensitively."""
        return self._languages.find_by_name(name)

    def find_language_by_extension(self, extension: str) -> LanguageInfo | None:
        r"""Find a language by file extension, case-insensitively."""
        return self._languages.find_by_extension(extension)
