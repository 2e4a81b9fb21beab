r"""Utility functions for PasteMyst request handling.

This package provides helper functions for interpreting HTTP status
codes, decoding response bodies, and translating transport errors.
"""

from __future__ import annotations

__all__ = [
    "decode_empty",
    "decode_exists",
    "decode_object",
    "decode_unix_time",
    "handle_request_error",
    "handle_response",
    "parse_json",
]

from pastemyst.utils.exceptions import handle_request_error
from pastemyst.utils.response import (
    decode_empty,
    decode_exists,
    decode_object,
    decode_unix_time,
    handle_response,
    parse_json,
)
