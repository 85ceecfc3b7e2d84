"""Application service (use case) for provider contacts."""

from lokalebasen_client.application.services.navigator import HypermediaNavigator, embedded
from lokalebasen_client.application.services.normalizer import normalize_all
from lokalebasen_client.domain.entities import NormalizedRecord


class ContactService:
    def __init__(self, navigator: HypermediaNavigator):
        self._navigator = navigator

    def contacts(self) -> list[NormalizedRecord]:
        """All contacts of the current provider."""
        body = self._navigator.follow(self._navigator.root(), "contacts")
        return normalize_all(embedded(body, "contacts"))
