"""Solr HTTP client.

Thin transport used by ``SolrQuery.execute``: one request per call, no
retries. Parsing and field mapping are handled elsewhere.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol

import requests

from SolrBuilder.config.solr import SolrConfig, default_solr_config
from SolrBuilder.utils.log import log


class HttpResponse(Protocol):
    """Protocol for a transport response."""

    def json(self) -> Any:
        """Return the parsed JSON body."""
        raise NotImplementedError


class HttpClient(Protocol):
    """Protocol for the transport used to reach Solr."""

    def get(self, url: str) -> HttpResponse:
        """Issue a GET request."""
        raise NotImplementedError

    def post(self, url: str, body: Mapping[str, Any]) -> HttpResponse:
        """Issue a POST request with a JSON body."""
        raise NotImplementedError


class SolrHttpClient:
    """Low-level HTTP client for a Solr search endpoint."""

    def __init__(self, config: SolrConfig | None = None) -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            config: Endpoint settings; built-in defaults when omitted.
        """
        self._config = config or default_solr_config()
        self._session = requests.Session()
        self._headers = {
            "User-Agent": self._config.user_agent,
            "Accept": "application/json",
        }

    def close(self) -> None:
        """Close the underlying HTTP session and release pooled connections."""
        self._session.close()

    def __enter__(self) -> SolrHttpClient:
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager and close session."""
        self.close()

    def get(self, url: str) -> requests.Response:
        """Issue a GET request to ``url`` (query string already encoded in it)."""
        log.debug("Solr GET: url=%s", url)
        resp = self._session.get(url, headers=self._headers, timeout=self._config.timeout)
        log.debug("Solr response: status=%s bytes=%s", resp.status_code, len(resp.content))
        return resp

    def post(self, url: str, body: Mapping[str, Any]) -> requests.Response:
        """Issue a POST request to ``url`` with ``body`` serialized as JSON."""
        log.debug("Solr POST: url=%s body=%s", url, body)
        resp = self._session.post(url, json=dict(body), headers=self._headers, timeout=self._config.timeout)
        log.debug("Solr response: status=%s bytes=%s", resp.status_code, len(resp.content))
        return resp
