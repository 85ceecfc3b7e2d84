"""The flattened, generic record handed back to callers of the provider API."""

from typing import Any, Mapping

from lokalebasen_client.domain.entities.hypermedia import Resource


class NormalizedRecord(dict[str, Any]):
    """Plain string-keyed mapping of an entity's fields.

    The originating :class:`Resource` is kept on the ``resource`` attribute,
    outside the mapping, so it never shadows a payload field of the same name
    and callers can still act on its relations (``self``, ``activation``, ...).
    """

    def __init__(
        self, fields: Mapping[str, Any] = (), resource: Resource | None = None
    ):
        super().__init__(fields)
        self._resource = resource

    @property
    def resource(self) -> Resource | None:
        return self._resource

    @property
    def external_key(self) -> str | None:
        return self.get("external_key")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NormalizedRecord):
            return dict.__eq__(self, other) and self._resource == other._resource
        return dict.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None  # type: ignore[assignment]

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None
