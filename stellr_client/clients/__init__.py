"""Solr clients: node resolution plus request construction."""

from .base import BaseSolrClient
from .direct import DirectSolrClient
from .zookeeper import ZkSolrClient, ZookeeperSession

__all__ = [
    "BaseSolrClient",
    "DirectSolrClient",
    "ZkSolrClient",
    "ZookeeperSession",
]
