from .hypermedia import HTTP_METHODS, ApiResponse, Relation, Resource
from .record import NormalizedRecord

__all__ = [
    "HTTP_METHODS",
    "ApiResponse",
    "Relation",
    "Resource",
    "NormalizedRecord",
]
