r"""Unit tests for the callback helpers."""

from __future__ import annotations

from unittest.mock import Mock, patch

from pastemyst.callbacks import (
    RequestInfo,
    ResponseInfo,
    invoke_on_request,
    invoke_on_response,
)
from tests.helpers import create_mock_response

TEST_URL = "https://paste.myst.rs/api/v2/paste/hipfqanx"


#######################################
#     Tests for invoke_on_request     #
#######################################


def test_invoke_on_request_none() -> None:
    invoke_on_request(None, url=TEST_URL, method="GET", authenticated=False)


def test_invoke_on_request(mock_callback: Mock) -> None:
    invoke_on_request(mock_callback, url=TEST_URL, method="GET", authenticated=True)
    mock_callback.assert_called_once_with(
        RequestInfo(url=TEST_URL, method="GET", authenticated=True)
    )


########################################
#     Tests for invoke_on_response     #
########################################


def test_invoke_on_response_none() -> None:
    invoke_on_response(
        None, url=TEST_URL, method="GET", response=create_mock_response(), start_time=0.0
    )


def test_invoke_on_response(mock_callback: Mock) -> None:
    response = create_mock_response(status_code=404)
    with patch("time.time", return_value=12.5):
        invoke_on_response(
            mock_callback, url=TEST_URL, method="GET", response=response, start_time=10.0
        )
    mock_callback.assert_called_once_with(
        ResponseInfo(
            url=TEST_URL, method="GET", status_code=404, response=response, total_time=2.5
        )
    )
