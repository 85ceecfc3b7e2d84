"""Unit tests for the HttpxHypermediaAgent."""

import json

import httpx
import pytest

from lokalebasen_client.domain.entities import Relation, Resource
from lokalebasen_client.domain.exceptions import ConfigurationError
from lokalebasen_client.infrastructure.http.httpx_agent import HttpxHypermediaAgent

SERVICE_URL = "http://api.test/api/provider"


# ── Helpers ──


def _make_mock_transport(
    response_data: dict | None = None,
    status_code: int = 200,
    text: str | None = None,
    seen: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Create a mock transport that returns a fixed response."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if text is not None:
            return httpx.Response(status_code, text=text)
        if response_data is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=response_data)

    return httpx.MockTransport(handler)


def _agent(transport: httpx.MockTransport, api_key: str = "test-key") -> HttpxHypermediaAgent:
    return HttpxHypermediaAgent(
        api_key=api_key,
        service_url=SERVICE_URL,
        http_client=httpx.Client(transport=transport),
    )


# ── Tests ──


def test_start_fetches_root_with_api_key_header():
    seen: list[httpx.Request] = []
    transport = _make_mock_transport(
        {"_links": {"locations": {"href": "/api/provider/locations"}}}, seen=seen
    )

    response = _agent(transport).start()

    assert response.status == 200
    assert isinstance(response.data, Resource)
    assert response.data.rel("locations").href == f"{SERVICE_URL}/locations"
    assert str(seen[0].url) == SERVICE_URL
    assert seen[0].headers["Api-Key"] == "test-key"
    assert seen[0].headers["Content-Type"] == "application/json"


def test_call_sends_method_and_json_payload():
    seen: list[httpx.Request] = []
    transport = _make_mock_transport({"job": {"state": "enqueued"}}, status_code=201, seen=seen)
    relation = Relation("photos", f"{SERVICE_URL}/locations/L1/photos")

    response = _agent(transport).call(relation, "POST", {"photo": {"external_key": "P1"}})

    assert response.status == 201
    assert response.data["job"]["state"] == "enqueued"
    assert seen[0].method == "POST"
    assert json.loads(seen[0].content) == {"photo": {"external_key": "P1"}}


def test_call_does_not_enforce_statuses():
    transport = _make_mock_transport({"message": "Not found"}, status_code=404)

    response = _agent(transport).call(Relation("self", f"{SERVICE_URL}/x"), "GET")

    assert response.status == 404
    assert response.data["message"] == "Not found"


def test_non_json_body_is_kept_as_text():
    transport = _make_mock_transport(status_code=500, text="<html>oops</html>")

    response = _agent(transport).start()

    assert response.status == 500
    assert response.data == "<html>oops</html>"
    assert response.text == "<html>oops</html>"


def test_empty_body():
    response = _agent(_make_mock_transport(status_code=204)).call(
        Relation("self", f"{SERVICE_URL}/photos/P1"), "DELETE"
    )

    assert response.status == 204
    assert response.data is None


@pytest.mark.parametrize("api_key,service_url", [("", SERVICE_URL), ("key", ""), (None, SERVICE_URL)])
def test_missing_configuration(api_key, service_url):
    with pytest.raises(ConfigurationError):
        HttpxHypermediaAgent(api_key=api_key, service_url=service_url)


# ── Client lifecycle ──


def test_owned_client_is_reused_across_requests(monkeypatch):
    created: list[httpx.Client] = []
    real_client = httpx.Client
    transport = _make_mock_transport({"_links": {}})

    def make_client(**kwargs) -> httpx.Client:
        created.append(real_client(transport=transport, **kwargs))
        return created[-1]

    monkeypatch.setattr(httpx, "Client", make_client)
    agent = HttpxHypermediaAgent(api_key="key", service_url=SERVICE_URL)

    agent.start()
    agent.call(Relation("self", f"{SERVICE_URL}/x"), "GET")
    agent.start()

    assert len(created) == 1
    assert not created[0].is_closed

    agent.close()

    assert created[0].is_closed


def test_close_leaves_injected_client_open():
    http_client = httpx.Client(transport=_make_mock_transport({"_links": {}}))
    agent = HttpxHypermediaAgent(api_key="key", service_url=SERVICE_URL, http_client=http_client)

    agent.start()
    agent.close()

    assert not http_client.is_closed
    assert agent.start().status == 200
    http_client.close()


def test_close_before_first_request_is_harmless():
    agent = HttpxHypermediaAgent(api_key="key", service_url=SERVICE_URL)

    agent.close()
    agent.close()
