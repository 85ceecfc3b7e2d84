"""Domain-specific exceptions — transport-independent."""

from collections.abc import Iterable


class LokalebasenError(Exception):
    """Base class for every error raised by the provider API client."""


class ConfigurationError(LokalebasenError):
    """Raised when the client is built without an API key or service url."""


class RequestError(LokalebasenError):
    """Raised when the provider API rejects a request (status 400–499)."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"Error occurred -> {status_code}: {message}")


class ServerError(LokalebasenError):
    """Raised when the provider API fails on its side (status 500–599)."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"Server error -> {status_code}: {message}")


class NotFoundError(LokalebasenError):
    """Raised when an entity identified by external key is not in its container."""

    def __init__(
        self,
        entity_type: str,
        external_key: str,
        container_key: str | None = None,
    ):
        self.entity_type = entity_type
        self.external_key = external_key
        self.container_key = container_key
        message = f"{entity_type} with external_key '{external_key}' not found"
        if container_key is not None:
            message += f" on location '{container_key}'"
        super().__init__(message)


class MissingRelationError(LokalebasenError):
    """Raised when a resource does not expose a hypermedia relation we need."""

    def __init__(self, relation: str, context: str = "resource"):
        self.relation = relation
        self.context = context
        super().__init__(f"Relation '{relation}' missing on {context}")


class MissingFieldError(LokalebasenError):
    """Raised when a response body lacks a field the client reads."""

    def __init__(self, field: str, context: str = "response"):
        self.field = field
        self.context = context
        super().__init__(f"Field '{field}' missing on {context}")


class MethodNotPermittedError(LokalebasenError):
    """Raised when a relation is invoked with a verb outside its allowed set."""

    def __init__(self, relation: str, method: str, allowed: Iterable[str]):
        self.relation = relation
        self.method = method
        self.allowed = frozenset(allowed)
        super().__init__(
            f"Method {method} not permitted on relation '{relation}' "
            f"(allowed: {', '.join(sorted(self.allowed))})"
        )
