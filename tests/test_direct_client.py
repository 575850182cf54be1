"""Unit tests for DirectSolrClient and the shared request construction."""

from __future__ import annotations

import pytest

from stellr_client import DirectSolrClient, split_host_address
from stellr_client.config import SolrClientConfig
from stellr_client.errors import BadHostError


class TestDirectSolrClientResolution:
    """Tests for live_node_url()."""

    def test_url_round_trip(self):
        client = DirectSolrClient("http://localhost:8983/solr")
        assert client.live_node_url() == "http://localhost:8983/solr"

    def test_node_name(self):
        client = DirectSolrClient("10.23.45.6:8080_solr")
        assert client.live_node_url() == "http://10.23.45.6:8080/solr"

    def test_node_name_without_context(self):
        client = DirectSolrClient("localhost:8983")
        assert client.live_node_url() == "http://localhost:8983/"

    def test_https_scheme_kept(self):
        client = DirectSolrClient("https://solr.example.com:8443/solr")
        assert client.live_node_url() == "https://solr.example.com:8443/solr"

    def test_ipv6_host_bracketed(self):
        client = DirectSolrClient("http://[::1]:8983/solr")
        assert client.live_node_url() == "http://[::1]:8983/solr"

    @pytest.mark.parametrize(
        "address",
        ["127.0.0.1:8080_solr", "http://localhost:8983/solr", "solr1:7574_solr_core", "localhost:8983"],
    )
    def test_matches_parsed_triple(self, address):
        host, port, context = split_host_address(address)
        client = DirectSolrClient(address)
        assert client.live_node_url() == f"http://{host}:{port}{context}"

    def test_resolution_is_idempotent(self):
        client = DirectSolrClient("solr1:8983_solr")
        urls = {client.live_node_url() for _ in range(10)}
        assert urls == {"http://solr1:8983/solr"}

    def test_bad_address_fails_at_construction(self):
        with pytest.raises(BadHostError):
            DirectSolrClient("no-port-here")


class TestDirectSolrClientEquality:
    """Clients compare and hash structurally."""

    def test_equal_clients(self):
        assert DirectSolrClient("localhost:8983_solr") == DirectSolrClient("http://localhost:8983/solr")
        assert hash(DirectSolrClient("localhost:8983_solr")) == hash(
            DirectSolrClient("http://localhost:8983/solr")
        )

    def test_config_is_part_of_identity(self):
        verbose = SolrClientConfig(verbose=True)
        assert DirectSolrClient("localhost:8983") != DirectSolrClient("localhost:8983", request_config=verbose)

    def test_usable_as_dict_key(self):
        cache = {DirectSolrClient("localhost:8983_solr"): "first"}
        cache[DirectSolrClient("localhost:8983_solr")] = "second"
        assert len(cache) == 1

    def test_str(self):
        assert str(DirectSolrClient("localhost:8983_solr")) == "DirectSolrClient(localhost:8983_/solr)"


class TestRequestConstruction:
    """Tests for build_request_url() and the request helpers."""

    def test_build_request_url(self):
        client = DirectSolrClient("http://localhost:8983/solr")
        assert client.build_request_url("films/select") == "http://localhost:8983/solr/films/select"

    def test_root_context_not_doubled(self):
        client = DirectSolrClient("localhost:8983")
        assert client.build_request_url("films/select") == "http://localhost:8983/films/select"

    def test_leading_slash_in_path(self):
        client = DirectSolrClient("http://localhost:8983/solr")
        assert client.build_request_url("/films/select") == "http://localhost:8983/solr/films/select"

    def test_select_is_get(self):
        request = DirectSolrClient("localhost:8983_solr").select("films")
        assert request.method == "GET"
        assert request.url == "http://localhost:8983/solr/films/select"

    def test_update_is_json_post(self):
        request = DirectSolrClient("localhost:8983_solr").update("films")
        assert request.method == "POST"
        assert request.url == "http://localhost:8983/solr/films/update"
        assert request.headers["Content-Type"] == "application/json"

    def test_collections_request(self):
        request = DirectSolrClient("localhost:8983_solr").collections()
        assert request.url == "http://localhost:8983/solr/admin/collections"
        assert request.params == [("action", "LIST")]

    def test_admin_cores_request(self):
        request = DirectSolrClient("localhost:8983_solr").admin_cores()
        assert request.url == "http://localhost:8983/solr/admin/cores"

    def test_request_carries_client_config(self):
        config = SolrClientConfig(timeout=3.0)
        client = DirectSolrClient("localhost:8983_solr", request_config=config)
        assert client.create_post_request("films/update").config == config

    def test_set_request_config(self):
        client = DirectSolrClient("localhost:8983_solr")
        client.set_request_config(SolrClientConfig(verbose=True))
        assert client.select("films").config.verbose is True

    def test_build_client_applies_timeout(self):
        client = DirectSolrClient("localhost:8983_solr", request_config=SolrClientConfig(timeout=7.5))
        with client.build_client() as http_client:
            assert http_client.timeout.read == 7.5
