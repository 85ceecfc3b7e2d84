"""In-memory fakes of the client's ports for unit testing."""

from typing import Any, Mapping

from lokalebasen_client.application.interfaces import HypermediaAgent
from lokalebasen_client.domain.entities import ApiResponse, Relation, Resource

ROOT_HREF = "http://api.test/api/provider"


def rel(name: str, href: str, *methods: str) -> Relation:
    return Relation(
        name=name,
        href=href,
        advertised_methods=frozenset(methods or ("GET",)),
    )


def resource(rels: Mapping[str, str] | None = None, **fields: Any) -> Resource:
    """Build a Resource whose relations are GET-only, as the API advertises them."""
    return Resource(
        fields=fields,
        rels={name: rel(name, href) for name, href in (rels or {}).items()},
    )


class FakeAgent(HypermediaAgent):
    """Routes (method, href) to canned responses and records every call."""

    def __init__(self, root: Resource | ApiResponse):
        self._root = root if isinstance(root, ApiResponse) else ApiResponse(200, root)
        self._routes: dict[tuple[str, str], ApiResponse] = {}
        self.calls: list[tuple[str, str, Mapping[str, Any] | None]] = []

    def route(self, method: str, href: str, data: Any = None, status: int = 200, text: str = "") -> None:
        self._routes[(method, href)] = ApiResponse(status, data, text)

    def start(self) -> ApiResponse:
        self.calls.append(("GET", ROOT_HREF, None))
        return self._root

    def call(
        self,
        relation: Relation,
        method: str,
        payload: Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        self.calls.append((method, relation.href, payload))
        try:
            return self._routes[(method, relation.href)]
        except KeyError:
            return ApiResponse(404, {"message": f"No route for {method} {relation.href}"})
