"""Exceptions raised by the Solr client."""

from __future__ import annotations


class SolrError(Exception):
    """Base exception for Solr client errors."""
    pass


class UnimplementedMethodError(SolrError):
    """Use of a request variant the client does not support yet."""
    pass


class BadHostError(SolrError):
    """Could not find a host, port and context in the supplied address."""
    pass


class HostParseError(BadHostError):
    """The address was rejected by the URL parser."""
    pass


class TransportError(SolrError):
    """HTTP-level failure: connection refused, timeout, TLS failure, etc."""
    pass


class PayloadNotArrayError(SolrError):
    """Supplied payload did not serialize to a JSON array."""
    pass


class ZookeeperError(SolrError):
    """Failure talking to, or reading from, the ZooKeeper ensemble."""
    pass


class NoLiveNodesError(SolrError):
    """ZooKeeper reported no live Solr nodes to choose from."""
    pass


class ResponseParseError(SolrError):
    """
    The Solr response could not be decoded into the requested type.

    The raw body and HTTP status are kept on the exception so that
    callers can see what Solr actually sent back (stack traces,
    HTML error pages, ...).
    """

    def __init__(
        self,
        message: str,
        body: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.body = body
        self.status_code = status_code
