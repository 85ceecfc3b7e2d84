from .hypermedia_agent import HypermediaAgent

__all__ = [
    "HypermediaAgent",
]
