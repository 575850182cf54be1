"""Direct access to a single Solr node."""

from __future__ import annotations

from ..address import parse_address
from ..config import SolrClientConfig
from .base import BaseSolrClient


class DirectSolrClient(BaseSolrClient):
    """
    Directly access a Solr node via HTTP.

    The target is given either as a URL:

        client = DirectSolrClient("http://localhost:8983/solr")
        client.live_node_url()  # "http://localhost:8983/solr"

    or as a Solr node name:

        client = DirectSolrClient("10.23.45.6:8080_solr")
        client.live_node_url()  # "http://10.23.45.6:8080/solr"

    Raises:
        BadHostError: The address cannot be split into host/port/context
        HostParseError: The URL parser rejected the address
    """

    def __init__(
        self,
        host_address: str,
        request_config: SolrClientConfig | None = None,
    ):
        self.scheme, self.host, self.port, self.context = parse_address(host_address)
        self.request_config = request_config or SolrClientConfig()

    def live_node_url(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{self.scheme}://{host}:{self.port}{self.context}"

    def _key(self) -> tuple:
        return (self.scheme, self.host, self.port, self.context, self.request_config)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectSolrClient):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"DirectSolrClient(host={self.host!r}, port={self.port}, "
            f"context={self.context!r}, request_config={self.request_config!r})"
        )

    def __str__(self) -> str:
        return f"DirectSolrClient({self.host}:{self.port}_{self.context})"
