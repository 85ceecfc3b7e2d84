"""Application service (use case) for location subscriptions."""

import logging
from typing import Any, Mapping

from lokalebasen_client.application.services.location_service import LocationService
from lokalebasen_client.application.services.navigator import HypermediaNavigator, embedded
from lokalebasen_client.application.services.normalizer import normalize, normalize_all
from lokalebasen_client.domain.entities import NormalizedRecord, Resource

logger = logging.getLogger(__name__)


class SubscriptionService:
    """Lists, creates and deletes the subscriptions of a location."""

    def __init__(self, navigator: HypermediaNavigator, locations: LocationService):
        self._navigator = navigator
        self._locations = locations

    def subscriptions(self, location_ext_key: str) -> list[NormalizedRecord]:
        location = self._location_with_subscriptions(location_ext_key)
        body = self._navigator.follow(location, "subscriptions")
        return normalize_all(embedded(body, "subscriptions"))

    def create_subscription(
        self, location_ext_key: str, subscription: Mapping[str, Any]
    ) -> NormalizedRecord:
        logger.debug("create_subscription: %r on %s", subscription, location_ext_key)
        location = self._location_with_subscriptions(location_ext_key)
        response = self._navigator.invoke(location, "subscriptions", "POST", subscription)
        return normalize(embedded(response.data, "subscription"))

    def delete_subscription(self, subscription: Resource | NormalizedRecord) -> int:
        """DELETE the subscription's ``self`` relation and return the response status."""
        resource = subscription.resource if isinstance(subscription, NormalizedRecord) else subscription
        logger.debug("delete_subscription: %s", resource.describe())
        return self._navigator.invoke(resource, "self", "DELETE").status

    def _location_with_subscriptions(self, location_ext_key: str) -> Resource:
        location = self._locations.location_resource(location_ext_key)
        if location.has_rel("subscriptions"):
            return location
        # Summary representations may omit the relation; re-read the full one.
        return embedded(self._navigator.follow(location, "self"), "location")
