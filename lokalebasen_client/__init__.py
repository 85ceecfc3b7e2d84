"""Client for the Lokalebasen provider API."""

from .client import LokalebasenClient, client
from .domain.entities import NormalizedRecord, Relation, Resource
from .domain.exceptions import (
    ConfigurationError,
    LokalebasenError,
    MethodNotPermittedError,
    MissingFieldError,
    MissingRelationError,
    NotFoundError,
    RequestError,
    ServerError,
)

__all__ = [
    "LokalebasenClient",
    "client",
    "NormalizedRecord",
    "Relation",
    "Resource",
    "ConfigurationError",
    "LokalebasenError",
    "MethodNotPermittedError",
    "MissingFieldError",
    "MissingRelationError",
    "NotFoundError",
    "RequestError",
    "ServerError",
]
