"""Parse provider API JSON bodies into Resources.

Relations are read from HAL-style ``_links``::

    {"_links": {"self": {"href": "/api/provider/locations/1", "method": "get"}}}

``method`` may be a comma-separated string or a list (``methods`` is accepted
too); when absent the relation is GET-only. Embedded objects become nested
Resources and arrays of objects become lists of Resources.
"""

from typing import Any, Mapping
from urllib.parse import urljoin

from lokalebasen_client.domain.entities import Relation, Resource

LINKS_KEY = "_links"


def parse_body(payload: Any, base_url: str = "") -> Any:
    """Convert decoded JSON into Resources, lists and scalars."""
    if isinstance(payload, Mapping):
        return parse_resource(payload, base_url)
    if isinstance(payload, list):
        return [parse_body(item, base_url) for item in payload]
    return payload


def parse_resource(payload: Mapping[str, Any], base_url: str = "") -> Resource:
    fields = {
        name: parse_body(value, base_url)
        for name, value in payload.items()
        if name != LINKS_KEY
    }
    return Resource(fields=fields, rels=parse_links(payload.get(LINKS_KEY), base_url))


def parse_links(links: Any, base_url: str = "") -> dict[str, Relation]:
    if not isinstance(links, Mapping):
        return {}
    rels: dict[str, Relation] = {}
    for name, link in links.items():
        if isinstance(link, str):
            link = {"href": link}
        if not isinstance(link, Mapping) or "href" not in link:
            continue
        rels[name] = Relation(
            name=name,
            href=urljoin(base_url, str(link["href"])) if base_url else str(link["href"]),
            advertised_methods=parse_methods(link.get("method", link.get("methods"))),
        )
    return rels


def parse_methods(raw: Any) -> frozenset[str]:
    if raw is None:
        return frozenset({"GET"})
    if isinstance(raw, str):
        raw = raw.split(",")
    methods = frozenset(str(method).strip().upper() for method in raw if str(method).strip())
    return methods or frozenset({"GET"})
