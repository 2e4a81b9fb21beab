r"""Synchronous context manager client for the PasteMyst API.

This module provides a context manager-based client for sending several
requests to PasteMyst with a shared configuration and connection pool.
The PasteMystClient manages the lifecycle of the underlying httpx.Client
and exposes one method per PasteMyst operation.
"""

from __future__ import annotations

__all__ = ["PasteMystClient"]

from typing import TYPE_CHECKING

import httpx

from pastemyst.core.config import DEFAULT_TIMEOUT, ClientConfig
from pastemyst.language import LanguageTable
from pastemyst.paste import create_paste, delete_paste, edit_paste, get_paste
from pastemyst.timestamps import expires_in_to_unix_time
from pastemyst.user import get_user, user_exists

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from pastemyst.expiration import ExpirationSpec
    from pastemyst.language import LanguageInfo
    from pastemyst.models import CreatePaste, EditPaste, Paste, User


class PasteMystClient:
    r"""Synchronous context manager for the PasteMyst API.

    Two usage patterns are supported:

    **External lifecycle**: an ``httpx.Client`` is passed in and owned by
    the caller. ``PasteMystClient`` never closes it. Use this pattern to
    share one connection pool, or to configure proxies or transports.

    .. code-block:: python

        import httpx
        from pastemyst import PasteMystClient

        with httpx.Client(timeout=30) as http_client:
            with PasteMystClient(client=http_client) as client:
                paste = client.get_paste("hipfqanx")
        # http_client is closed here by the outer ``with`` block

    **Managed lifecycle**: no client is passed. ``PasteMystClient``
    creates one with the given timeout and closes it when the ``with``
    block exits, or when ``close`` is called.

    .. code-block:: python

        from pastemyst import PasteMystClient

        with PasteMystClient(timeout=30) as client:
            exists = client.user_exists("codemyst")

    The auth token is never stored: pass it to each call that needs it.

    Args:
        config: Optional ClientConfig instance. If ``None``, a default
            ClientConfig is used.
        client: Optional httpx.Client instance to use for requests.
            If ``None``, a new client is created with ``timeout``.
        timeout: Maximum seconds to wait for the server response. Only
            used if ``client`` is ``None``.
        languages: Optional language table used by the language
            lookups. If ``None``, the default table is used.

    Example:
        ```pycon
        >>> from pastemyst import PasteMystClient
        >>> with PasteMystClient() as client:
        ...     client.find_language_by_extension(".rs").name
        ...
        'Rust'

        ```
    """

    def __init__(
        self,
        *,
        config: ClientConfig | None = None,
        client: httpx.Client | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
        languages: LanguageTable | None = None,
    ) -> None:
        self._config: ClientConfig = config or ClientConfig()
        self._owns_client = client is None
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)
        self._languages: LanguageTable = (
            LanguageTable.default() if languages is None else languages
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_url={self._config.base_url!r}, "
            f"api_version={self._config.api_version!r})"
        )

    def __enter__(self) -> Self:
        """Enter the context manager.

        Returns:
            The PasteMystClient instance for making requests.
        """
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager and close the underlying httpx
        client if this instance created it.

        Args:
            exc_type: Exception type if an exception occurred.
            exc_val: Exception value if an exception occurred.
            exc_tb: Exception traceback if an exception occurred.
        """
        self.close()

    @property
    def config(self) -> ClientConfig:
        r"""The configuration shared by all the requests."""
        return self._config

    @property
    def is_closed(self) -> bool:
        r"""``True`` if the underlying httpx client is closed."""
        return self._client.is_closed

    def close(self) -> None:
        r"""Close the underlying httpx client if this instance created
        it.

        Calling ``close`` several times is allowed.
        """
        if self._owns_client and not self._client.is_closed:
            self._client.close()

    def get_paste(self, paste_id: str, *, auth_token: str | None = None) -> Paste:
        r"""Fetch a paste.

        See ``pastemyst.get_paste`` for the arguments and errors.
        """
        return get_paste(paste_id, auth_token=auth_token, client=self._client, config=self._config)

    def create_paste(self, payload: CreatePaste, *, auth_token: str | None = None) -> Paste:
        r"""Create a paste.

        See ``pastemyst.create_paste`` for the arguments and errors.

        Example:
            ```pycon
            >>> from pastemyst import CreatePaste, PasteMystClient, Pasty
            >>> with PasteMystClient() as client:  # doctest: +SKIP
            ...     paste = client.create_paste(CreatePaste(pasties=[Pasty(code="hello")]))
            ...

            ```
        """
        return create_paste(
            payload, auth_token=auth_token, client=self._client, config=self._config
        )

    def edit_paste(
        self, paste_id: str, payload: EditPaste, *, auth_token: str | None = None
    ) -> Paste:
        r"""Edit a paste.

        See ``pastemyst.edit_paste`` for the arguments and errors.
        """
        return edit_paste(
            paste_id, payload, auth_token=auth_token, client=self._client, config=self._config
        )

    def delete_paste(self, paste_id: str, *, auth_token: str | None = None) -> None:
        r"""Delete a paste.

        See ``pastemyst.delete_paste`` for the arguments and errors.
        """
        delete_paste(paste_id, auth_token=auth_token, client=self._client, config=self._config)

    def get_user(self, username: str) -> User:
        r"""Fetch a user.

        See ``pastemyst.get_user`` for the arguments and errors.
        """
        return get_user(username, client=self._client, config=self._config)

    def user_exists(self, username: str) -> bool:
        r"""Check whether a user exists.

        See ``pastemyst.user_exists`` for the arguments and errors.
        """
        return user_exists(username, client=self._client, config=self._config)

    def expires_in_to_unix_time(self, created_at: int, expires_in: str | ExpirationSpec) -> int:
        r"""Ask PasteMyst when a paste expires.

        See ``pastemyst.expires_in_to_unix_time`` for the arguments and
        errors.
        """
        return expires_in_to_unix_time(
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
