"""Response validation — classify a provider API response by status code."""

from typing import Any, Mapping

from lokalebasen_client.domain.entities import ApiResponse, Resource
from lokalebasen_client.domain.exceptions import RequestError, ServerError

HTML_ERROR_MESSAGE = "Server returned HTML in error"


def check_response(response: ApiResponse) -> Any:
    """Return the response body, or raise on a 4xx/5xx status.

    Raises:
        RequestError: status 400–499, carrying the server's ``message`` field.
        ServerError: status 500–599; HTML error pages are replaced by a fixed
            marker message.
    """
    status = response.status
    if 400 <= status <= 499:
        raise RequestError(status, _client_error_message(response))
    if 500 <= status <= 599:
        raise ServerError(status, _server_error_message(response))
    return response.data


def _client_error_message(response: ApiResponse) -> str:
    data = response.data
    if isinstance(data, (Resource, Mapping)):
        message = data.get("message")
        if message:
            return str(message)
    return f"Request failed with status {response.status}"


def _server_error_message(response: ApiResponse) -> str:
    body = response.text or ("" if response.data is None else str(response.data))
    if "html" in body:
        return HTML_ERROR_MESSAGE
    return body
