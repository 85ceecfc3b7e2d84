"""Domain entities for hypermedia navigation — relations, resources and responses.

A *Resource* is an immutable snapshot of one server response: a set of fields
and a set of named relations. Relations carry the verbs the server advertised
plus any verbs the client has explicitly permitted on top of them.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

from lokalebasen_client.domain.exceptions import MissingRelationError

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})


@dataclass(frozen=True)
class Relation:
    """A named link with the method set advertised by the server.

    ``permitted_methods`` holds client-side overrides and is kept apart from
    ``advertised_methods`` so the server's view is never rewritten.
    """

    name: str
    href: str
    advertised_methods: frozenset[str] = frozenset({"GET"})
    permitted_methods: frozenset[str] = frozenset()

    @property
    def allowed_methods(self) -> frozenset[str]:
        return self.advertised_methods | self.permitted_methods

    @property
    def is_patched(self) -> bool:
        return bool(self.permitted_methods - self.advertised_methods)

    def allows(self, method: str) -> bool:
        return method.upper() in self.allowed_methods

    def with_method(self, method: str) -> "Relation":
        """Return a copy of this relation that also allows ``method``."""
        return replace(
            self, permitted_methods=self.permitted_methods | {method.upper()}
        )


@dataclass(frozen=True)
class Resource:
    """An immutable snapshot of an entity returned by the provider API."""

    fields: Mapping[str, Any] = field(default_factory=dict)
    rels: Mapping[str, Relation] = field(default_factory=dict)

    # Fields are held in mappingproxies, which cannot be hashed.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "fields",
            MappingProxyType({name: _freeze(value) for name, value in self.fields.items()}),
        )
        object.__setattr__(self, "rels", MappingProxyType(dict(self.rels)))

    def __getitem__(self, name: str) -> Any:
        return self.fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)

    @property
    def external_key(self) -> str | None:
        return self.fields.get("external_key")

    def rel(self, name: str) -> Relation | None:
        return self.rels.get(name)

    def has_rel(self, name: str) -> bool:
        return name in self.rels

    def require_rel(self, name: str, context: str | None = None) -> Relation:
        """Return the named relation or raise MissingRelationError."""
        relation = self.rels.get(name)
        if relation is None:
            raise MissingRelationError(name, context or self.describe())
        return relation

    def describe(self) -> str:
        if self.external_key is not None:
            return f"resource '{self.external_key}'"
        self_rel = self.rels.get("self")
        if self_rel is not None:
            return f"resource at {self_rel.href}"
        return "resource"

    def to_dict(self) -> dict[str, Any]:
        """Plain field data with every nested resource converted to a dict."""
        return {name: _plain(value) for name, value in self.fields.items()}


def _freeze(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, Mapping) and not isinstance(value, MappingProxyType):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    return value


def _plain(value: Any) -> Any:
    if isinstance(value, Resource):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    return value


@dataclass(frozen=True)
class ApiResponse:
    """Status code plus parsed body (a Resource, a list, or raw text)."""

    status: int
    data: Any = None
    text: str = ""
