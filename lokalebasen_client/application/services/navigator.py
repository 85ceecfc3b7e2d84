"""Hypermedia navigator — resolves resources by walking named relations.

Every call starts again from the root document; nothing is cached between
operations, so each one sees the server's current state and never acts on a
relation that a previous mutation made stale.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Mapping

from lokalebasen_client.application.interfaces import HypermediaAgent
from lokalebasen_client.application.services.permissions import permit
from lokalebasen_client.application.services.response_validator import check_response
from lokalebasen_client.domain.entities import ApiResponse, Relation, Resource
from lokalebasen_client.domain.exceptions import (
    MethodNotPermittedError,
    MissingFieldError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Hop:
    """One step of a navigation path.

    Follow ``rel`` with GET, then optionally unwrap the ``embedded`` field of
    the body. When ``external_key`` is set, the unwrapped value must be a
    collection and the item with exactly that external key is selected.
    """

    rel: str
    embedded: str | None = None
    external_key: str | None = None
    entity_type: str = "Resource"


class HypermediaNavigator:
    """Resolves chains of relations into resources. Depends on the agent port (DI)."""

    def __init__(self, agent: HypermediaAgent):
        self._agent = agent

    def root(self) -> Resource:
        """Fetch and validate the root document."""
        data = check_response(self._agent.start())
        if not isinstance(data, Resource):
            raise MissingFieldError("_links", "root document")
        return data

    def request(
        self,
        relation: Relation,
        method: str = "GET",
        payload: Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        """Invoke ``method`` on a relation and validate the response."""
        verb = method.upper()
        if not relation.allows(verb):
            raise MethodNotPermittedError(relation.name, verb, relation.allowed_methods)
        logger.debug("%s %s (rel=%s)", verb, relation.href, relation.name)
        response = self._agent.call(relation, verb, payload)
        check_response(response)
        return response

    def follow(self, resource: Resource, rel: str) -> Any:
        """GET the named relation of ``resource`` and return the validated body."""
        return self.request(resource.require_rel(rel)).data

    def invoke(
        self,
        resource: Resource,
        rel: str,
        method: str,
        payload: Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        """Permission-patch the named relation for ``method`` and invoke it."""
        relation = permit(resource.require_rel(rel), method)
        return self.request(relation, method, payload)

    def resolve(self, path: Sequence[Hop], start: Resource | None = None) -> Resource:
        """Walk ``path`` from ``start`` (the root document by default)."""
        current = start if start is not None else self.root()
        for hop in path:
            container_key = current.external_key
            target = self.follow(current, hop.rel)
            if hop.embedded is not None:
                target = embedded(target, hop.embedded)
            if hop.external_key is not None:
                target = find_by_external_key(
                    target, hop.external_key, hop.entity_type, container_key
                )
            if not isinstance(target, Resource):
                raise MissingFieldError(hop.embedded or hop.rel, f"'{hop.rel}' response")
            current = target
        return current


def embedded(body: Any, field: str) -> Any:
    """Return ``body[field]`` or raise MissingFieldError."""
    if not isinstance(body, Resource) or field not in body:
        raise MissingFieldError(field)
    return body[field]


def find_by_external_key(
    items: Iterable[Resource] | None,
    external_key: str,
    entity_type: str = "Resource",
    container_key: str | None = None,
) -> Resource:
    """Linear scan for the item whose external key equals ``external_key``.

    The API has no filter-by-key endpoint, so whole collections are fetched
    and scanned. Matching is exact and case-sensitive.
    """
    for item in items or ():
        if isinstance(item, Resource) and item.external_key == external_key:
            return item
    raise NotFoundError(entity_type, external_key, container_key)
