"""Provider API client — wires the httpx agent to the navigation services."""

from typing import Any, Mapping

import httpx

from lokalebasen_client.application.interfaces import HypermediaAgent
from lokalebasen_client.application.services import (
    ContactService,
    HypermediaNavigator,
    LocationService,
    SubscriptionService,
)
from lokalebasen_client.config import Settings, get_settings
from lokalebasen_client.domain.entities import NormalizedRecord, Resource
from lokalebasen_client.domain.exceptions import ConfigurationError
from lokalebasen_client.infrastructure.http import HttpxHypermediaAgent


class LokalebasenClient:
    """Entry point for the Lokalebasen provider API.

    Each operation re-reads the root document and walks the relations it
    needs, so no state is carried between calls beyond the agent's fixed
    configuration.

    Args:
        api_key: Sent in the ``Api-Key`` header on every request.
        service_url: URL of the service root, e.g.
            ``http://example.com/api/provider``.
        agent: Transport to use instead of the default httpx agent.
        http_client: httpx.Client for the default agent (tests inject one
            with a MockTransport).
    """

    def __init__(
        self,
        api_key: str | None,
        service_url: str | None,
        agent: HypermediaAgent | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = 30.0,
    ):
        if not api_key:
            raise ConfigurationError("api_key required")
        if not service_url:
            raise ConfigurationError("service_url required")
        self._agent = agent or HttpxHypermediaAgent(
            api_key, service_url, http_client=http_client, timeout=timeout
        )
        self._navigator = HypermediaNavigator(self._agent)
        self._locations = LocationService(self._navigator)
        self._subscriptions = SubscriptionService(self._navigator, self._locations)
        self._contacts = ContactService(self._navigator)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        http_client: httpx.Client | None = None,
    ) -> "LokalebasenClient":
        settings = settings or get_settings()
        return cls(
            settings.lokalebasen_api_key,
            settings.lokalebasen_service_url,
            http_client=http_client,
            timeout=settings.lokalebasen_timeout_seconds,
        )

    @property
    def agent(self) -> HypermediaAgent:
        return self._agent

    @property
    def navigator(self) -> HypermediaNavigator:
        return self._navigator

    def close(self) -> None:
        """Close the agent's connections. Injected httpx clients stay open."""
        self._agent.close()

    def __enter__(self) -> "LokalebasenClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ── Locations ──

    def locations(self) -> list[NormalizedRecord]:
        return self._locations.locations()

    def location(self, location_ext_key: str) -> NormalizedRecord:
        return self._locations.location(location_ext_key)

    def exists(self, location_ext_key: str) -> bool:
        return self._locations.exists(location_ext_key)

    def create_location(self, location: Mapping[str, Any]) -> NormalizedRecord:
        return self._locations.create_location(location)

    def update_location(self, location: Mapping[str, Any]) -> NormalizedRecord:
        return self._locations.update_location(location)

    def activate(self, location_ext_key: str) -> NormalizedRecord | None:
        return self._locations.activate(location_ext_key)

    def deactivate(self, location_ext_key: str) -> NormalizedRecord | None:
        return self._locations.deactivate(location_ext_key)

    def set_state(self, relation_type: str, resource: Resource) -> Any:
        return self._locations.set_state(relation_type, resource)

    # ── Assets ──

    def create_photo(
        self, photo_url: str, photo_ext_key: str, location_ext_key: str
    ) -> NormalizedRecord:
        return self._locations.create_photo(photo_url, photo_ext_key, location_ext_key)

    def delete_photo(self, photo_ext_key: str, location_ext_key: str) -> None:
        self._locations.delete_photo(photo_ext_key, location_ext_key)

    def create_floorplan(
        self, floorplan_url: str, floorplan_ext_key: str, location_ext_key: str
    ) -> NormalizedRecord:
        return self._locations.create_floorplan(
            floorplan_url, floorplan_ext_key, location_ext_key
        )

    def delete_floorplan(self, floorplan_ext_key: str, location_ext_key: str) -> None:
        self._locations.delete_floorplan(floorplan_ext_key, location_ext_key)

    def create_prospectus(
        self, prospectus_url: str, prospectus_ext_key: str, location_ext_key: str
    ) -> NormalizedRecord:
        return self._locations.create_prospectus(
            prospectus_url, prospectus_ext_key, location_ext_key
        )

    def delete_prospectus(self, prospectus_ext_key: str, location_ext_key: str) -> None:
        self._locations.delete_prospectus(prospectus_ext_key, location_ext_key)

    def delete_resource(self, resource: Resource) -> None:
        self._locations.delete_resource(resource)

    # ── Subscriptions & contacts ──

    def subscriptions(self, location_ext_key: str) -> list[NormalizedRecord]:
        return self._subscriptions.subscriptions(location_ext_key)

    def create_subscription(
        self, location_ext_key: str, subscription: Mapping[str, Any]
    ) -> NormalizedRecord:
        return self._subscriptions.create_subscription(location_ext_key, subscription)

    def delete_subscription(self, subscription: Resource | NormalizedRecord) -> int:
        return self._subscriptions.delete_subscription(subscription)

    def contacts(self) -> list[NormalizedRecord]:
        return self._contacts.contacts()


def client(
    credentials: Mapping[str, Any],
    service_url: str | None,
    http_client: httpx.Client | None = None,
) -> LokalebasenClient:
    """Build a client from a credentials mapping, e.g. ``{"api_key": "..."}``."""
    return LokalebasenClient(
        credentials.get("api_key"), service_url, http_client=http_client
    )
