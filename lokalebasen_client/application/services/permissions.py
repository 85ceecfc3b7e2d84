"""Relation permission patch.

The provider API never lists POST, PUT or DELETE in its relation metadata,
even where it accepts them. ``permit`` widens one relation's allowed-method
set so the client can still invoke those verbs on the advertised address.
"""

import logging

from lokalebasen_client.domain.entities import HTTP_METHODS, Relation

logger = logging.getLogger(__name__)


def permit(relation: Relation | None, method: str) -> Relation:
    """Return ``relation`` with ``method`` added to its allowed methods.

    The advertised method set is left untouched; the verb is recorded as a
    client-side override on a new Relation.

    Raises:
        ValueError: if ``relation`` is None or ``method`` is not an HTTP verb
            this client issues.
    """
    if relation is None:
        raise ValueError("Cannot permit a method on a missing relation")
    verb = method.upper()
    if verb not in HTTP_METHODS:
        raise ValueError(f"Unsupported HTTP method: {method}")
    if relation.allows(verb):
        return relation
    logger.debug("Permitting %s on relation '%s' (%s)", verb, relation.name, relation.href)
    return relation.with_method(verb)
