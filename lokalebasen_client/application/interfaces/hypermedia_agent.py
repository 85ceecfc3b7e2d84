"""Abstract hypermedia agent — port for the transport that talks to the provider API.

The navigation layer depends only on this interface: fetch the root document
and issue a verb on a relation, getting back a status and a parsed body.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from lokalebasen_client.domain.entities import ApiResponse, Relation


class HypermediaAgent(ABC):
    """Port — what the navigator needs from any HTTP transport."""

    @abstractmethod
    def start(self) -> ApiResponse:
        """GET the root document of the service.

        Returns:
            An ApiResponse whose ``data`` is the root Resource on success.
        """
        ...

    @abstractmethod
    def call(
        self,
        relation: Relation,
        method: str,
        payload: Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        """Issue ``method`` against the relation's address.

        Args:
            relation: The relation to resolve.
            method: Upper-case HTTP verb.
            payload: Optional JSON body.

        Returns:
            An ApiResponse with the numeric status and the parsed body.
            Status codes are not interpreted here.
        """
        ...

    def close(self) -> None:
        """Release transport resources. Agents holding none need not override."""
