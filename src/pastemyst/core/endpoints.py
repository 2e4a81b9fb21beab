r"""Build the API calls of the PasteMyst endpoints.

Each function validates its arguments and returns an ``ApiCall``
without sending anything. The blocking and asynchronous operations are
thin wrappers running these calls, so argument validation, request
bodies, and response decoding are the same in both.
"""

from __future__ import annotations

__all__ = [
    "create_paste_call",
    "delete_paste_call",
    "edit_paste_call",
    "expires_in_to_unix_time_call",
    "get_paste_call",
    "get_user_call",
    "user_exists_call",
]

from typing import TYPE_CHECKING
from urllib.parse import quote

from pastemyst.core.config import DEFAULT_API_VERSION, DEFAULT_BASE_URL
from pastemyst.core.http_logic import ApiCall, ApiRequest, encode_json
from pastemyst.core.validation import validate_auth_token, validate_identifier
from pastemyst.exceptions import ParseError, UnauthorizedError, ValidationError
from pastemyst.expiration import coerce_expiration, to_wire
from pastemyst.models import Paste, User
from pastemyst.utils.response import (
    decode_empty,
    decode_exists,
    decode_object,
    decode_unix_time,
)

if TYPE_CHECKING:
    from pastemyst.expiration import ExpirationSpec
    from pastemyst.models import CreatePaste, EditPaste

_decode_paste = decode_object(Paste.from_dict)
_decode_user = decode_object(User.from_dict)


def _paste_path(paste_id: str) -> str:
    validate_identifier("paste_id", paste_id)
    return f"paste/{quote(paste_id.strip(), safe='')}"


def _user_path(username: str) -> str:
    validate_identifier("username", username)
    return f"user/{quote(username.strip(), safe='')}"


def _display_url(path: str) -> str:
    # used in errors raised before a config is known
    return f"{DEFAULT_BASE_URL}/{DEFAULT_API_VERSION}/{path}"


def get_paste_call(paste_id: str, auth_token: str | None = None) -> ApiCall[Paste]:
    """Build the call fetching a paste.

    Args:
        paste_id: The identifier of the paste.
        auth_token: The token of the owner, required for private pastes.

    Returns:
        The API call.

    Raises:
        ValueError: If ``paste_id`` is empty.
    """
    request = ApiRequest(method="GET", path=_paste_path(paste_id), auth_token=auth_token)
    return ApiCall(request=request, decode=_decode_paste)


def create_paste_call(payload: CreatePaste, auth_token: str | None = None) -> ApiCall[Paste]:
    """Build the call creating a paste.

    Args:
        payload: The paste to create.
        auth_token: The token of the account owning the paste. Optional
            for unlisted pastes.

    Returns:
        The API call.

    Raises:
        ValidationError: If the payload has no pasty or an invalid
            expiration.
        UnauthorizedError: If the payload asks for a private or public
            paste without token.
    """
    body = encode_json(payload.to_dict())
    if payload.requires_auth and auth_token is None:
        raise UnauthorizedError(
            method="POST",
            url=_display_url("paste"),
            message=(
                f"creating a {payload.visibility.value} paste requires an auth token; "
                "anonymous pastes must be unlisted"
            ),
        )
    request = ApiRequest(method="POST", path="paste", body=body, auth_token=auth_token)
    return ApiCall(request=request, decode=_decode_paste)


def edit_paste_call(
    paste_id: str, payload: EditPaste, auth_token: str | None = None
) -> ApiCall[Paste]:
    """Build the call editing a paste.

    Args:
        paste_id: The identifier of the paste.
        payload: The fields to change.
        auth_token: The token of the owner. Required.

    Returns:
        The API call.

    Raises:
        ValueError: If ``paste_id`` is empty.
        UnauthorizedError: If no token is supplied.
        ValidationError: If the payload is invalid.
    """
    path = _paste_path(paste_id)
    token = validate_auth_token(auth_token, method="PATCH", url=_display_url(path))
    body = encode_json(payload.to_dict())
    request = ApiRequest(method="PATCH", path=path, body=body, auth_token=token)
    return ApiCall(request=request, decode=_decode_paste)


def delete_paste_call(paste_id: str, auth_token: str | None = None) -> ApiCall[None]:
    """Build the call deleting a paste.

    Args:
        paste_id: The identifier of the paste.
        auth_token: The token of the owner. Required.

    Returns:
        The API call.

    Raises:
        ValueError: If ``paste_id`` is empty.
        UnauthorizedError: If no token is supplied.
    """
    path = _paste_path(paste_id)
    token = validate_auth_token(auth_token, method="DELETE", url=_display_url(path))
    request = ApiRequest(method="DELETE", path=path, auth_token=token)
    return ApiCall(request=request, decode=decode_empty)


def get_user_call(username: str) -> ApiCall[User]:
    """Build the call fetching a user.

    Raises:
        ValueError: If ``username`` is empty.
    """
    request = ApiRequest(method="GET", path=_user_path(username))
    return ApiCall(request=request, decode=_decode_user)


def user_exists_call(username: str) -> ApiCall[bool]:
    """Build the call checking whether a user exists.

    Raises:
        ValueError: If ``username`` is empty.
    """
    request = ApiRequest(method="GET", path=f"{_user_path(username)}/exists")
    return ApiCall(request=request, decode=decode_exists)


def expires_in_to_unix_time_call(
    created_at: int, expires_in: str | ExpirationSpec
) -> ApiCall[int]:
    """Build the call converting an expiration to unix time on the
    server.

    Args:
        created_at: The unix time when the paste was created.
        expires_in: A wire code, an expression, or a spec.

    Returns:
        The API call.

    Raises:
        ValueError: If ``created_at`` is negative.
        ValidationError: If the expiration is invalid or not accepted
            by PasteMyst.
    """
    if created_at < 0:
        msg = f"created_at must be >= 0, got {created_at}"
        raise ValueError(msg)
    try:
        code = to_wire(coerce_expiration(expires_in))
    except ParseError as exc:
        raise ValidationError(str(exc)) from exc
    request = ApiRequest(
        method="GET",
        path="time/expiresInToUnixTime",
        params=(("createdAt", str(created_at)), ("expiresIn", code)),
    )
    return ApiCall(request=request, decode=decode_unix_time)
