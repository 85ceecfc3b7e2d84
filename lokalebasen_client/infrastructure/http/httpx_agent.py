"""httpx hypermedia agent — implements the HypermediaAgent interface.

Talks to the Lokalebasen provider API over a blocking httpx.Client. Every
request carries the JSON content type and the ``Api-Key`` header; bodies are
parsed into Resources by the HAL parser.
"""

import logging
from typing import Any, Mapping

import httpx

from lokalebasen_client.application.interfaces import HypermediaAgent
from lokalebasen_client.domain.entities import ApiResponse, Relation
from lokalebasen_client.domain.exceptions import ConfigurationError
from lokalebasen_client.infrastructure.http.hal_parser import parse_body

logger = logging.getLogger(__name__)


class HttpxHypermediaAgent(HypermediaAgent):
    """Infrastructure adapter — connects to the provider API.

    The api key, service url and headers are fixed at construction. An
    injected ``http_client`` is reused across calls and left open for its
    owner to close. Otherwise the agent opens one client on first use, keeps
    it for every later hop and closes it in :meth:`close`.
    """

    def __init__(
        self,
        api_key: str,
        service_url: str,
        http_client: httpx.Client | None = None,
        timeout: float = 30.0,
    ):
        if not api_key:
            raise ConfigurationError("api_key required")
        if not service_url:
            raise ConfigurationError("service_url required")
        self._api_key = api_key
        self._service_url = service_url
        self._http_client = http_client
        self._owns_client = http_client is None
        self._timeout = timeout

    @property
    def service_url(self) -> str:
        return self._service_url

    def _get_headers(self) -> dict[str, str]:
        """Standard headers for provider API requests."""
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Api-Key": self._api_key,
        }

    def _get_client(self) -> httpx.Client:
        """Return the injected client, or the agent's own (opened on first use)."""
        if self._http_client is None or (self._owns_client and self._http_client.is_closed):
            self._http_client = httpx.Client(timeout=self._timeout)
        return self._http_client

    def close(self) -> None:
        """Close the agent's own client. An injected client is left open."""
        if self._owns_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def start(self) -> ApiResponse:
        return self._send("GET", self._service_url)

    def call(
        self,
        relation: Relation,
        method: str,
        payload: Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        return self._send(method, relation.href, payload)

    def _send(
        self, method: str, url: str, payload: Mapping[str, Any] | None = None
    ) -> ApiResponse:
        response = self._get_client().request(
            method,
            httpx.URL(self._service_url).join(url),
            headers=self._get_headers(),
            json=dict(payload) if payload is not None else None,
        )
        logger.debug("%s %s -> %d", method, response.url, response.status_code)
        return self._to_api_response(response)

    def _to_api_response(self, response: httpx.Response) -> ApiResponse:
        """Parse the body as JSON where possible, otherwise keep the raw text."""
        text = response.text
        if not response.content:
            return ApiResponse(status=response.status_code, data=None, text=text)
        try:
            data = response.json()
        except ValueError:
            return ApiResponse(status=response.status_code, data=text, text=text)
        return ApiResponse(
            status=response.status_code,
            data=parse_body(data, self._service_url),
            text=text,
        )
