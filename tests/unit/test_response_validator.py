"""Unit tests for response validation."""

import pytest

from lokalebasen_client.application.services.response_validator import (
    HTML_ERROR_MESSAGE,
    check_response,
)
from lokalebasen_client.domain.entities import ApiResponse, Resource
from lokalebasen_client.domain.exceptions import RequestError, ServerError


@pytest.mark.parametrize("status", [200, 201, 204, 302, 399])
def test_success_returns_body_unchanged(status: int):
    body = Resource(fields={"external_key": "L1"})
    assert check_response(ApiResponse(status, body)) is body


def test_success_without_body_returns_none():
    assert check_response(ApiResponse(204)) is None


@pytest.mark.parametrize("status", [400, 404, 422, 499])
def test_client_error_carries_server_message(status: int):
    body = Resource(fields={"message": "Title can't be blank"})

    with pytest.raises(RequestError) as exc_info:
        check_response(ApiResponse(status, body))

    assert exc_info.value.status_code == status
    assert exc_info.value.message == "Title can't be blank"


def test_client_error_without_message_uses_generic_text():
    with pytest.raises(RequestError) as exc_info:
        check_response(ApiResponse(403, "Forbidden", "Forbidden"))

    assert exc_info.value.message == "Request failed with status 403"


def test_server_error_html_body_is_replaced():
    page = "<!DOCTYPE html><html><body>Internal Server Error</body></html>"

    with pytest.raises(ServerError) as exc_info:
        check_response(ApiResponse(502, page, page))

    assert exc_info.value.message == HTML_ERROR_MESSAGE


def test_server_error_html_marker_applies_to_any_body_mentioning_html():
    text = '{"error": "template.html missing"}'

    with pytest.raises(ServerError) as exc_info:
        check_response(ApiResponse(500, None, text))

    assert exc_info.value.message == HTML_ERROR_MESSAGE


@pytest.mark.parametrize("status", [500, 503, 599])
def test_server_error_keeps_plain_body(status: int):
    with pytest.raises(ServerError) as exc_info:
        check_response(ApiResponse(status, "database unavailable", "database unavailable"))

    assert exc_info.value.status_code == status
    assert exc_info.value.message == "database unavailable"
