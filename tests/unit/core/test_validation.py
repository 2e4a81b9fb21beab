r"""Unit tests for the validation functions."""

from __future__ import annotations

import httpx
import pytest

from pastemyst.core.validation import (
    validate_api_version,
    validate_auth_token,
    validate_base_url,
    validate_identifier,
    validate_timeout,
)
from pastemyst.exceptions import UnauthorizedError

TEST_URL = "https://paste.myst.rs/api/v2/paste/hipfqanx"


######################################
#     Tests for validate_timeout     #
######################################


@pytest.mark.parametrize("timeout", [0.1, 1, 10.0, httpx.Timeout(5.0)])
def test_validate_timeout_valid(timeout: float | httpx.Timeout) -> None:
    validate_timeout(timeout)


@pytest.mark.parametrize("timeout", [0, 0.0, -1, -0.5])
def test_validate_timeout_invalid(timeout: float) -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        validate_timeout(timeout)


###########################################
#     Tests for validate_base_url etc     #
###########################################


def test_validate_base_url_valid() -> None:
    validate_base_url("https://paste.myst.rs/api")
    validate_base_url("http://localhost/api")


def test_validate_base_url_invalid() -> None:
    with pytest.raises(ValueError, match=r"base_url must start with"):
        validate_base_url("paste.myst.rs")


@pytest.mark.parametrize("api_version", ["v1", "v2"])
def test_validate_api_version_valid(api_version: str) -> None:
    validate_api_version(api_version)


@pytest.mark.parametrize("api_version", ["", "v3", "V2", "2"])
def test_validate_api_version_invalid(api_version: str) -> None:
    with pytest.raises(ValueError, match=r"api_version must be one of"):
        validate_api_version(api_version)


#########################################
#     Tests for validate_identifier     #
#########################################


def test_validate_identifier_valid() -> None:
    validate_identifier("paste_id", "hipfqanx")


@pytest.mark.parametrize("value", ["", " ", "\t\n"])
def test_validate_identifier_empty(value: str) -> None:
    with pytest.raises(ValueError, match=r"paste_id must not be empty"):
        validate_identifier("paste_id", value)


#########################################
#     Tests for validate_auth_token     #
#########################################


def test_validate_auth_token_valid() -> None:
    assert validate_auth_token("token", method="DELETE", url=TEST_URL) == "token"


@pytest.mark.parametrize("auth_token", [None, "", "   "])
def test_validate_auth_token_missing(auth_token: str | None) -> None:
    with pytest.raises(UnauthorizedError, match=r"requires an auth token") as exc_info:
        validate_auth_token(auth_token, method="DELETE", url=TEST_URL)
    assert exc_info.value.method == "DELETE"
    assert exc_info.value.url == TEST_URL
    assert exc_info.value.status_code is None
