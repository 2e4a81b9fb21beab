r"""Configuration dataclass and defaults for the PasteMyst client.

This module provides configuration constants and a dataclass-based
configuration object shared by the functional API and the
``PasteMystClient`` and ``AsyncPasteMystClient`` context managers.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "ClientConfig",
]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from pastemyst.core.validation import validate_api_version, validate_base_url

if TYPE_CHECKING:
    from collections.abc import Callable

    from pastemyst.callbacks import RequestInfo, ResponseInfo


# Default timeout in seconds for HTTP requests
# Only used for the httpx clients created by this package
DEFAULT_TIMEOUT = 10.0

# Root of the PasteMyst API, without version
DEFAULT_BASE_URL = "https://paste.myst.rs/api"

# v1 and v2 coexist; v2 is required for the paste, user and time payloads
DEFAULT_API_VERSION = "v2"

DEFAULT_USER_AGENT = "pastemyst-python"


@dataclass
class ClientConfig:
    """Configuration of the requests sent to PasteMyst.

    Note:
        The timeout is NOT included in this config as it is used
        directly by httpx.Client/AsyncClient. The auth token is not
        included either: it is supplied per call and never stored.

    Args:
        base_url: The root URL of the API, without version.
        api_version: The API version used in the request paths.
        user_agent: The value of the ``User-Agent`` header.
        on_request: Optional callback called before each request.
        on_response: Optional callback called when a response is
            received, whatever its status code.

    Example:
        ```pycon
        >>> from pastemyst.core.config import ClientConfig
        >>> config = ClientConfig()
        >>> config.endpoint("paste/hipfqanx")
        'https://paste.myst.rs/api/v2/paste/hipfqanx'
        >>> config.merge(base_url="http://localhost:5000/api").endpoint("paste")
        'http://localhost:5000/api/v2/paste'

        ```
    """

    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    user_agent: str = DEFAULT_USER_AGENT
    on_request: Callable[[RequestInfo], None] | None = None
    on_response: Callable[[ResponseInfo], None] | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_base_url(self.base_url)
        validate_api_version(self.api_version)

    def endpoint(self, path: str) -> str:
        """Build the absolute URL of an API path.

        Args:
            path: The path relative to the versioned API root, e.g.
                ``"paste/abc"``.

        Returns:
            The absolute URL.
        """
        return f"{self.base_url.rstrip('/')}/{self.api_version}/{path.lstrip('/')}"

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from pastemyst.core.config import ClientConfig
            >>> config = ClientConfig()
            >>> config.merge(api_version="v1").api_version
            'v1'
            >>> config.api_version  # Original unchanged
            'v2'

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the configuration parameters.
        """
        return {
            "base_url": self.base_url,
            "api_version": self.api_version,
            "user_agent": self.user_agent,
            "on_request": self.on_request,
            "on_response": self.on_response,
        }
