r"""Core shared logic for sync and async PasteMyst operations.

This module contains shared functionality used by both synchronous and
asynchronous operations, including configuration, validation, request
building, and request execution.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "ApiCall",
    "ApiRequest",
    "ClientConfig",
    "encode_json",
    "execute_api_call",
    "execute_api_call_async",
    "validate_identifier",
    "validate_timeout",
]

from pastemyst.core.config import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ClientConfig,
)
from pastemyst.core.http_logic import (
    ApiCall,
    ApiRequest,
    encode_json,
    execute_api_call,
    execute_api_call_async,
)
from pastemyst.core.validation import validate_identifier, validate_timeout
