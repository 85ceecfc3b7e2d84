"""Resource normalizer — flatten typed resources into plain records.

Records are built fresh from the source fields and never share structure with
the resource they came from, which is attached separately as the record's
``resource`` attribute.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from lokalebasen_client.domain.entities import NormalizedRecord, Resource

# Fields holding lists of nested resources on a location.
NESTED_LIST_FIELDS = ("photos", "floor_plans")


def normalize(resource: Resource) -> NormalizedRecord:
    """Convert a resource into a NormalizedRecord.

    Nested resources (``photos``, ``floor_plans``, an embedded ``prospectus``
    and the like) become plain dicts. The original resource is attached as
    the back-reference, and is not modified.
    """
    fields: dict[str, Any] = {}
    for name, value in resource.fields.items():
        if name in NESTED_LIST_FIELDS and value is not None:
            fields[name] = [_flatten(item) for item in value]
        else:
            fields[name] = _flatten(value)

    return NormalizedRecord(fields, resource=resource)


def normalize_job(job: Resource) -> NormalizedRecord:
    """Normalize a background job and add its ``url`` from the ``self`` relation."""
    record = normalize(job)
    record["url"] = job.require_rel("self", "job").href
    return record


def normalize_all(resources: Iterable[Resource] | None) -> list[NormalizedRecord]:
    return [normalize(resource) for resource in resources or ()]


def _flatten(value: Any) -> Any:
    if isinstance(value, Resource):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_flatten(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _flatten(item) for key, item in value.items()}
    return value
