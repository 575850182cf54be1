"""
Solr client library.

Two ways to reach Solr:

    from stellr_client import DirectSolrClient, ZkSolrClient

    client = DirectSolrClient("http://localhost:8983/solr")   # one fixed node
    cloud = ZkSolrClient("localhost:9983", "/")               # random live node via ZooKeeper

and one way to ask it things:

    from stellr_client.response_types import SolrSelectType

    result = client.select("films").rows(10).q("*:*").call(SolrSelectType[dict])
    print(result.response.numFound)

Use ``await request.acall(...)`` from async code.
"""

from .address import split_host_address
from .client import configure, get_client, select, update
from .clients import BaseSolrClient, DirectSolrClient, ZkSolrClient, ZookeeperSession
from .config import ClientSettings, SolrClientConfig
from .errors import (
    BadHostError,
    HostParseError,
    NoLiveNodesError,
    PayloadNotArrayError,
    ResponseParseError,
    SolrError,
    TransportError,
    UnimplementedMethodError,
    ZookeeperError,
)
from .requests import SolrRequest, parse_json
from .resilience import RetryConfig, RetryExhausted, retry_with_backoff

__all__ = [
    "BadHostError",
    "BaseSolrClient",
    "ClientSettings",
    "DirectSolrClient",
    "HostParseError",
    "NoLiveNodesError",
    "PayloadNotArrayError",
    "ResponseParseError",
    "RetryConfig",
    "RetryExhausted",
    "SolrClientConfig",
    "SolrError",
    "SolrRequest",
    "TransportError",
    "UnimplementedMethodError",
    "ZkSolrClient",
    "ZookeeperError",
    "ZookeeperSession",
    "configure",
    "get_client",
    "parse_json",
    "retry_with_backoff",
    "select",
    "split_host_address",
    "update",
]
