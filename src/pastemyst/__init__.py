r"""pastemyst - Typed client for the PasteMyst paste-sharing service.

This package exposes the PasteMyst HTTP API (https://paste.myst.rs) as
typed Python operations. Built on top of the httpx library, every
network operation is available as a blocking function and as an
``async`` coroutine sending the same request and raising the same
errors.

Key Features:
    - Fetch, create, edit, and delete pastes
    - Fetch users and check whether a user exists
    - Case-insensitive lookup of the languages supported by PasteMyst
    - Parsing of expiration expressions such as ``"2d"`` or ``"1M"`` and
      calendar-aware resolution into absolute timestamps
    - Context manager clients sharing one connection pool
    - Callbacks for observability (logging, metrics)

Example:
    ```pycon
    >>> from pastemyst import CreatePaste, Pasty, create_paste, get_language_by_name
    >>> get_language_by_name("rust").extensions
    frozenset({'rs'})
    >>> paste = create_paste(
    ...     CreatePaste(title="hello", pasties=[Pasty(code="print('hi')", language="Python")])
    ... )  # doctest: +SKIP
    >>> paste.url  # doctest: +SKIP
    'https://paste.myst.rs/...'

    ```
"""

from __future__ import annotations

__all__ = [
    "NEVER",
    "AsyncPasteMystClient",
    "ClientConfig",
    "CreatePaste",
    "DecodeError",
    "Duration",
    "EditHistory",
    "EditPaste",
    "EditType",
    "ExpirationPolicy",
    "ExpirationSpec",
    "ExpirationUnit",
    "ExpiresIn",
    "HttpError",
    "InvalidFormatError",
    "InvalidMagnitudeError",
    "LanguageInfo",
    "LanguageTable",
    "Never",
    "NotFoundError",
    "ParseError",
    "Paste",
    "PasteMystClient",
    "PasteMystError",
    "Pasty",
    "TransportError",
    "UnauthorizedError",
    "User",
    "UserFlag",
    "ValidationError",
    "Visibility",
    "__version__",
    "create_paste",
    "create_paste_async",
    "delete_paste",
    "delete_paste_async",
    "edit_paste",
    "edit_paste_async",
    "expires_in_to_unix_time",
    "expires_in_to_unix_time_async",
    "expires_into_unix",
    "get_language_by_extension",
    "get_language_by_name",
    "get_languages",
    "get_paste",
    "get_paste_async",
    "get_user",
    "get_user_async",
    "parse_expiration",
    "resolve",
    "user_exists",
    "user_exists_async",
]

from importlib.metadata import PackageNotFoundError, version

from pastemyst.client import PasteMystClient
from pastemyst.client_async import AsyncPasteMystClient
from pastemyst.core.config import ClientConfig
from pastemyst.exceptions import (
    DecodeError,
    HttpError,
    InvalidFormatError,
    InvalidMagnitudeError,
    NotFoundError,
    ParseError,
    PasteMystError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)
from pastemyst.expiration import (
    NEVER,
    Duration,
    ExpirationSpec,
    ExpirationUnit,
    ExpiresIn,
    Never,
    expires_into_unix,
    parse_expiration,
    resolve,
)
from pastemyst.language import (
    LanguageInfo,
    LanguageTable,
    get_language_by_extension,
    get_language_by_name,
    get_languages,
)
from pastemyst.models import (
    CreatePaste,
    EditHistory,
    EditPaste,
    EditType,
    ExpirationPolicy,
    Paste,
    Pasty,
    User,
    UserFlag,
    Visibility,
)
from pastemyst.paste import create_paste, delete_paste, edit_paste, get_paste
from pastemyst.paste_async import (
    create_paste_async,
    delete_paste_async,
    edit_paste_async,
    get_paste_async,
)
from pastemyst.timestamps import expires_in_to_unix_time
from pastemyst.timestamps_async import expires_in_to_unix_time_async
from pastemyst.user import get_user, user_exists
from pastemyst.user_async import get_user_async, user_exists_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
