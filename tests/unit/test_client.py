"""Unit tests for LokalebasenClient construction and wiring."""

import httpx
import pytest

from lokalebasen_client import ConfigurationError, LokalebasenClient, client
from lokalebasen_client.config import Settings
from lokalebasen_client.infrastructure.http import HttpxHypermediaAgent
from tests.unit.fakes import FakeAgent, resource


@pytest.mark.parametrize(
    "api_key,service_url,expected",
    [
        (None, "http://api.test", "api_key required"),
        ("", "http://api.test", "api_key required"),
        ("key", None, "service_url required"),
        ("key", "", "service_url required"),
    ],
)
def test_missing_configuration_is_fatal(api_key, service_url, expected):
    with pytest.raises(ConfigurationError, match=expected):
        LokalebasenClient(api_key, service_url)


def test_default_agent_is_httpx():
    built = LokalebasenClient("key", "http://api.test/api/provider")
    assert isinstance(built.agent, HttpxHypermediaAgent)
    assert built.agent.service_url == "http://api.test/api/provider"


def test_client_factory_reads_credentials():
    built = client({"api_key": "key"}, "http://api.test/api/provider")
    assert isinstance(built, LokalebasenClient)

    with pytest.raises(ConfigurationError):
        client({}, "http://api.test/api/provider")


def test_from_settings():
    settings = Settings(
        lokalebasen_api_key="key",
        lokalebasen_service_url="http://api.test/api/provider",
        lokalebasen_timeout_seconds=5,
    )
    built = LokalebasenClient.from_settings(settings, http_client=httpx.Client())
    assert built.agent.service_url == "http://api.test/api/provider"


def test_from_settings_without_key_is_fatal():
    with pytest.raises(ConfigurationError):
        LokalebasenClient.from_settings(Settings(lokalebasen_api_key="", lokalebasen_service_url=""))


def test_injected_agent_is_used():
    agent = FakeAgent(resource({"contacts": "http://api.test/contacts"}))
    agent.route("GET", "http://api.test/contacts", resource(contacts=[resource(name="Jane")]))

    built = LokalebasenClient("key", "http://api.test", agent=agent)

    assert [c["name"] for c in built.contacts()] == ["Jane"]


def test_context_manager_closes_agent():
    agent = FakeAgent(resource())
    closed: list[bool] = []
    agent.close = lambda: closed.append(True)

    with LokalebasenClient("key", "http://api.test", agent=agent) as built:
        assert built.agent is agent

    assert closed == [True]


def test_close_keeps_injected_http_client_open():
    http_client = httpx.Client()

    with LokalebasenClient("key", "http://api.test", http_client=http_client):
        pass

    assert not http_client.is_closed
    http_client.close()
