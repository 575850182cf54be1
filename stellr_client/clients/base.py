"""Base Solr client interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import httpx

from ..config import SolrClientConfig
from ..requests import JSON_CONTENT_TYPE, SolrRequest
from ..transport import build_async_client, build_client

logger = logging.getLogger(__name__)


class BaseSolrClient(ABC):
    """
    Base class for Solr clients.

    Subclasses decide which node to talk to (live_node_url); everything
    else - URL building, HTTP client construction and the request
    helpers for classic Solr, SolrCloud and the admin API - is shared.

    Usage:
        client = DirectSolrClient("http://localhost:8983/solr")
        data = (
            client.create_get_request("techproducts/select")
            .q("*:*")
            .unstructured_call()
        )
    """

    request_config: SolrClientConfig

    @abstractmethod
    def live_node_url(self) -> str:
        """
        Base URL (scheme, host, port and context) of one Solr node.

        Computed afresh on every call.
        """
        ...

    def set_request_config(self, request_config: SolrClientConfig) -> None:
        """Replace the configuration applied to future requests."""
        self.request_config = request_config

    def build_request_url(self, path: str) -> str:
        """Join the live node URL and a path relative to the Solr context."""
        base_url = self.live_node_url()
        if base_url.endswith("/"):
            url = f"{base_url}{path.lstrip('/')}"
        else:
            url = f"{base_url}/{path.lstrip('/')}"
        logger.debug(f"Using base url: {url}")
        return url

    def build_client(self) -> httpx.Client:
        """Build a new blocking HTTP client using this client's request config."""
        return build_client(self.request_config)

    def build_async_client(self) -> httpx.AsyncClient:
        """Build a new async HTTP client using this client's request config."""
        return build_async_client(self.request_config)

    def create_get_request(self, path: str) -> SolrRequest:
        """Create a GET request against a path on a live node."""
        return SolrRequest("GET", self.build_request_url(path), self.request_config)

    def create_post_request(self, path: str) -> SolrRequest:
        """Create a POST request against a path on a live node."""
        return SolrRequest("POST", self.build_request_url(path), self.request_config)

    # SolrCloud helpers

    def select(self, collection: str) -> SolrRequest:
        """
        Create a select request for a collection (or core).

        Always uses GET.
        """
        return self.create_get_request(f"{collection}/select")

    def update(self, collection: str) -> SolrRequest:
        """Create a JSON update request for a collection (using POST)."""
        return self.create_post_request(f"{collection}/update").content_type(JSON_CONTENT_TYPE)

    # Admin helpers

    def collections(self) -> SolrRequest:
        """List SolrCloud collections (admin/collections?action=LIST)."""
        return self.create_get_request("admin/collections").param("action", "LIST")

    def admin_cores(self) -> SolrRequest:
        """Status of the cores on one node (admin/cores)."""
        return self.create_get_request("admin/cores")
