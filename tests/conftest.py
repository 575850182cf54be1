"""Shared pytest fixtures for stellr_client tests."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from stellr_client.config import SolrClientConfig

from tests.fixtures.fake_zookeeper import FakeEnsemble
from tests.fixtures.mock_solr import MockSolrService, select_body

FILM_DOCS = [
    {
        "id": "/en/45_2006",
        "directed_by": ["Gary Lennon"],
        "genre": ["Black comedy", "Thriller"],
        "name": ".45",
    },
    {
        "id": "/en/9_2005",
        "directed_by": ["Shane Acker"],
        "genre": ["Computer Animation", "Animation"],
        "name": "9",
    },
]


@pytest.fixture
def mock_solr():
    """Mock Solr node serving a 'films' collection with 1100 matches."""
    svc = MockSolrService()
    svc.add_select("films", select_body(FILM_DOCS, num_found=1100))
    svc.collections = ["films", "techproducts"]
    with svc.patch_httpx():
        yield svc


@pytest.fixture
def ensemble():
    """Patch kazoo so ZkSolrClient talks to an in-memory ensemble."""
    fake = FakeEnsemble(live_nodes=["mock:8983_solr"])
    with patch("stellr_client.clients.zookeeper.KazooClient", side_effect=fake.factory):
        yield fake


@pytest.fixture
def request_config():
    """Factory fixture for SolrClientConfig instances."""
    def _factory(**kwargs) -> SolrClientConfig:
        return SolrClientConfig(**kwargs)
    return _factory
