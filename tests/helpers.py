r"""Shared test helpers and fixtures for the PasteMyst operations.

This module contains the canned PasteMyst JSON objects and a recording
request handler used with ``httpx.MockTransport``.
"""

from __future__ import annotations

__all__ = [
    "API_URL",
    "PASTE_ID",
    "PASTY_LANGUAGE",
    "TOKEN",
    "USERNAME",
    "RecordingHandler",
    "create_mock_response",
    "create_paste_json",
    "create_user_json",
]

import json
from dataclasses import dataclass, field
from typing import Any

import httpx

API_URL = "https://paste.myst.rs/api/v2"
PASTE_ID = "hipfqanx"
PASTY_LANGUAGE = "Rust"
TOKEN = "s3cr3t-t0ken"
USERNAME = "codemyst"


def create_paste_json(**overrides: Any) -> dict[str, Any]:
    """Create the JSON object of a paste as returned by PasteMyst.

    The paste holds two pasties; the second one is written in
    ``PASTY_LANGUAGE``.

    Args:
        **overrides: The keys to replace.

    Returns:
        The JSON object.
    """
    data: dict[str, Any] = {
        "_id": PASTE_ID,
        "ownerId": "",
        "title": "pastemyst fixture",
        "createdAt": 1_588_441_258,
        "expiresIn": "never",
        "deletesAt": 0,
        "stars": 3,
        "isPrivate": False,
        "isPublic": False,
        "tags": [],
        "pasties": [
            {"_id": "cwy615yg", "title": "hello.py", "language": "Python", "code": "print('hi')"},
            {
                "_id": "jwbykypd",
                "title": "main.rs",
                "language": PASTY_LANGUAGE,
                "code": 'fn main() {\n    println!("hi");\n}',
            },
        ],
        "edits": [],
    }
    data.update(overrides)
    return data


def create_user_json(**overrides: Any) -> dict[str, Any]:
    """Create the JSON object of a user as returned by PasteMyst.

    Args:
        **overrides: The keys to replace.

    Returns:
        The JSON object.
    """
    data: dict[str, Any] = {
        "_id": "5ce1b8d4",
        "username": USERNAME,
        "avatarUrl": "https://paste.myst.rs/static/assets/avatars/codemyst.png",
        "defaultLang": "D",
        "publicProfile": True,
        "supporterLength": 0,
        "contributor": True,
    }
    data.update(overrides)
    return data


def create_mock_response(
    status_code: int = 200,
    json: Any = None,
    content: bytes | None = None,
    method: str = "GET",
    url: str = f"{API_URL}/paste/{PASTE_ID}",
) -> httpx.Response:
    """Create an httpx.Response bound to a request.

    Args:
        status_code: The HTTP status code.
        json: The JSON body, if any.
        content: The raw body, used when ``json`` is ``None``.
        method: The HTTP method of the request.
        url: The URL of the request.

    Returns:
        The response.
    """
    request = httpx.Request(method, url)
    if json is not None:
        return httpx.Response(status_code, json=json, request=request)
    return httpx.Response(status_code, content=content or b"", request=request)


@dataclass
class RecordingHandler:
    """Request handler for ``httpx.MockTransport`` that records the
    requests and answers with a canned response.

    Attributes:
        status_code: The status code of the response.
        json: The JSON body of the response, if any.
        content: The raw body of the response, used when ``json`` is
            ``None``.
        error: The exception raised instead of answering, if any.
        requests: The recorded requests.
    """

    status_code: int = 200
    json: Any = None
    content: bytes = b""
    error: Exception | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.json is not None:
            return httpx.Response(self.status_code, json=self.json)
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        """Return the decoded JSON body of the last request."""
        return json.loads(self.last_request.content)
