from .hal_parser import parse_body, parse_resource
from .httpx_agent import HttpxHypermediaAgent

__all__ = [
    "parse_body",
    "parse_resource",
    "HttpxHypermediaAgent",
]
