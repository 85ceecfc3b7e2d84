"""Application service (use case) for provider locations and their assets."""

import logging
from typing import Any, Mapping

from lokalebasen_client.application.services.navigator import (
    Hop,
    HypermediaNavigator,
    embedded,
    find_by_external_key,
)
from lokalebasen_client.application.services.normalizer import (
    normalize,
    normalize_all,
    normalize_job,
)
from lokalebasen_client.domain.entities import NormalizedRecord, Resource
from lokalebasen_client.domain.exceptions import MissingFieldError, NotFoundError

logger = logging.getLogger(__name__)

# Asset kind -> (relation on the location, payload key)
_ASSETS = {
    "photo": ("photos", "photo"),
    "floor_plan": ("floor_plans", "floor_plan"),
    "prospectus": ("prospectuses", "prospectus"),
}


class LocationService:
    """Locations, their state transitions and their photo/floor plan/prospectus assets."""

    def __init__(self, navigator: HypermediaNavigator):
        self._navigator = navigator

    # ── Queries ──

    def locations(self) -> list[NormalizedRecord]:
        """All locations of the current provider."""
        collection = self._locations_resource()
        return normalize_all(embedded(collection, "locations"))

    def location(self, location_ext_key: str) -> NormalizedRecord:
        """The location with the given external key, fully fetched.

        Raises:
            NotFoundError: if no location has that external key.
        """
        return normalize(self.location_resource(location_ext_key))

    def exists(self, location_ext_key: str) -> bool:
        collection = self._locations_resource()
        return any(
            location.external_key == location_ext_key
            for location in embedded(collection, "locations") or ()
        )

    # ── Location mutations ──

    def create_location(self, location: Mapping[str, Any]) -> NormalizedRecord:
        logger.debug("create_location: %r", location)
        collection = self._locations_resource()
        response = self._navigator.invoke(collection, "self", "POST", location)
        return normalize(embedded(response.data, "location"))

    def update_location(self, location: Mapping[str, Any]) -> NormalizedRecord:
        logger.debug("update_location: %r", location)
        try:
            location_ext_key = location["location"]["external_key"]
        except (KeyError, TypeError):
            raise MissingFieldError("location.external_key", "update payload") from None
        resource = self.location_resource(location_ext_key)
        response = self._navigator.invoke(resource, "self", "PUT", location)
        return normalize(embedded(response.data, "location"))

    def activate(self, location_ext_key: str) -> NormalizedRecord | None:
        """Activate the location; returns None when activation is not offered."""
        logger.debug("activate: %s", location_ext_key)
        return self._transition("activation", location_ext_key)

    def deactivate(self, location_ext_key: str) -> NormalizedRecord | None:
        """Deactivate the location; returns None when deactivation is not offered."""
        logger.debug("deactivate: %s", location_ext_key)
        return self._transition("deactivation", location_ext_key)

    def set_state(self, relation_type: str, resource: Resource) -> Any:
        """POST to the state relation ``relation_type`` of ``resource``.

        E.g. ``set_state("deactivation", location)``. Returns the response body.
        """
        return self._navigator.invoke(resource, relation_type, "POST").data

    # ── Assets ──

    def create_photo(
        self, photo_url: str, photo_ext_key: str, location_ext_key: str
    ) -> NormalizedRecord:
        """Start a background job creating a photo on the location."""
        return self._create_asset("photo", photo_url, photo_ext_key, location_ext_key)

    def delete_photo(self, photo_ext_key: str, location_ext_key: str) -> None:
        self.delete_resource(self.photo(photo_ext_key, location_ext_key))

    def create_floorplan(
        self, floorplan_url: str, floorplan_ext_key: str, location_ext_key: str
    ) -> NormalizedRecord:
        """Start a background job creating a floor plan on the location."""
        return self._create_asset(
            "floor_plan", floorplan_url, floorplan_ext_key, location_ext_key
        )

    def delete_floorplan(self, floorplan_ext_key: str, location_ext_key: str) -> None:
        self.delete_resource(self.floorplan(floorplan_ext_key, location_ext_key))

    def create_prospectus(
        self, prospectus_url: str, prospectus_ext_key: str, location_ext_key: str
    ) -> NormalizedRecord:
        """Start a background job creating a prospectus on the location."""
        return self._create_asset(
            "prospectus", prospectus_url, prospectus_ext_key, location_ext_key
        )

    def delete_prospectus(self, prospectus_ext_key: str, location_ext_key: str) -> None:
        self.delete_resource(self.prospectus(prospectus_ext_key, location_ext_key))

    def delete_resource(self, resource: Resource) -> None:
        """DELETE the ``self`` relation of ``resource``."""
        logger.debug("delete_resource: %s", resource.describe())
        self._navigator.invoke(resource, "self", "DELETE")

    def photo(self, photo_ext_key: str, location_ext_key: str) -> Resource:
        location = self.location_resource(location_ext_key)
        return find_by_external_key(
            location.get("photos"), photo_ext_key, "Photo", location_ext_key
        )

    def floorplan(self, floorplan_ext_key: str, location_ext_key: str) -> Resource:
        location = self.location_resource(location_ext_key)
        return find_by_external_key(
            location.get("floor_plans"), floorplan_ext_key, "Floorplan", location_ext_key
        )

    def prospectus(self, prospectus_ext_key: str, location_ext_key: str) -> Resource:
        location = self.location_resource(location_ext_key)
        prospectus = location.get("prospectus")
        if not isinstance(prospectus, Resource) or prospectus.external_key != prospectus_ext_key:
            raise NotFoundError("Prospectus", prospectus_ext_key, location_ext_key)
        return prospectus

    # ── Navigation ──

    def location_resource(self, location_ext_key: str) -> Resource:
        """Root → locations → the matching location → its full representation."""
        return self._navigator.resolve(
            [
                Hop(
                    "locations",
                    embedded="locations",
                    external_key=location_ext_key,
                    entity_type="Location",
                ),
                Hop("self", embedded="location"),
            ]
        )

    def _locations_resource(self) -> Resource:
        return self._navigator.resolve([Hop("locations")])

    def _transition(self, relation_type: str, location_ext_key: str) -> NormalizedRecord | None:
        resource = self.location_resource(location_ext_key)
        if not resource.has_rel(relation_type):
            logger.debug(
                "Location '%s' offers no %s relation; nothing to do",
                location_ext_key,
                relation_type,
            )
            return None
        data = self.set_state(relation_type, resource)
        return normalize(embedded(data, "location"))

    def _create_asset(
        self, kind: str, url: str, ext_key: str, location_ext_key: str
    ) -> NormalizedRecord:
        rel, payload_key = _ASSETS[kind]
        logger.debug("create_%s: %s on %s", payload_key, ext_key, location_ext_key)
        location = self.location_resource(location_ext_key)
        payload = {payload_key: {"external_key": ext_key, "url": url}}
        response = self._navigator.invoke(location, rel, "POST", payload)
        return normalize_job(embedded(response.data, "job"))
