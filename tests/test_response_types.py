"""Tests for the Solr response models."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import BaseModel

from stellr_client import parse_json
from stellr_client.errors import ResponseParseError
from stellr_client.response_types import (
    SolrAdminCoresType,
    SolrCollectionsListType,
    SolrSelectType,
    SolrUpdateType,
)

SELECT_BODY = """{
  "responseHeader": {"zkConnected": true, "status": 0, "QTime": 4, "params": {"q": "*:*", "rows": "1"}},
  "response": {"numFound": 1100, "start": 0, "maxScore": 1.0, "numFoundExact": true,
    "docs": [{"id": "/en/45_2006", "name": ".45", "genre": ["Thriller"]}]}
}"""

ADMIN_CORES_BODY = """{
  "responseHeader": {"status": 0, "QTime": 3},
  "initFailures": {},
  "status": {
    "films_shard1_replica_n1": {
      "name": "films_shard1_replica_n1",
      "instanceDir": "/var/solr/data/films_shard1_replica_n1",
      "dataDir": "/var/solr/data/films_shard1_replica_n1/data/",
      "config": "solrconfig.xml",
      "schema": "managed-schema",
      "startTime": "2024-03-01T10:15:30.123Z",
      "uptime": 86400,
      "lastPublished": "active",
      "configVersion": 0,
      "cloud": {"collection": "films", "shard": "shard1", "replica": "core_node2", "replicaType": "NRT"},
      "index": {
        "numDocs": 1100, "maxDoc": 1100, "deletedDocs": 0, "version": 42,
        "segmentCount": 1, "current": true, "hasDeletions": false,
        "directory": "org.apache.lucene.store.NRTCachingDirectory",
        "segmentsFile": "segments_2", "segmentsFileSizeInBytes": 181,
        "sizeInBytes": 329617, "size": "321.89 KB",
        "userData": {"commitCommandVer": "1792", "commitTimeMSec": "1709288130123"},
        "lastModified": "2024-03-01T10:15:30.123Z"
      }
    }
  }
}"""


class Film(BaseModel):
    id: str
    name: str
    genre: list[str] = []


class TestSelect:
    def test_untyped_docs(self):
        result = parse_json(SELECT_BODY, SolrSelectType[dict[str, Any]])
        assert result.response.numFound == 1100
        assert result.response.maxScore == 1.0
        assert result.response.docs[0]["name"] == ".45"
        assert result.responseHeader.params == {"q": "*:*", "rows": "1"}

    def test_typed_docs(self):
        result = parse_json(SELECT_BODY, SolrSelectType[Film])
        assert result.response.docs == [Film(id="/en/45_2006", name=".45", genre=["Thriller"])]

    def test_missing_required_field(self):
        with pytest.raises(ResponseParseError):
            parse_json('{"responseHeader": {"status": 0, "QTime": 1}}', SolrSelectType[Film])

    def test_body_str(self):
        result = parse_json(SELECT_BODY, SolrSelectType[dict[str, Any]])
        assert str(result.response).startswith("numFound: 1100,")


class TestUpdateAndCollections:
    def test_update(self):
        result = parse_json('{"responseHeader": {"rf": 2, "status": 0, "QTime": 7}}', SolrUpdateType)
        assert result.responseHeader.rf == 2
        assert result.debug is None

    def test_collections(self):
        body = '{"responseHeader": {"status": 0, "QTime": 0}, "collections": ["films", "techproducts"]}'
        assert parse_json(body, SolrCollectionsListType).collections == ["films", "techproducts"]


class TestAdminCores:
    def test_camel_case_fields(self):
        result = parse_json(ADMIN_CORES_BODY, SolrAdminCoresType)
        core = result.status["films_shard1_replica_n1"]

        assert result.response_header.QTime == 3
        assert result.init_failures == {}
        assert core.instance_dir == "/var/solr/data/films_shard1_replica_n1"
        assert core.schema_name == "managed-schema"
        assert core.cloud.replica_type == "NRT"
        assert core.index.num_docs == 1100
        assert core.index.segments_file_size_in_bytes == 181
        assert core.index.user_data.commit_time_msec == "1709288130123"
        assert core.start_time.year == 2024

    def test_no_cores(self):
        result = parse_json('{"responseHeader": {"status": 0, "QTime": 0}}', SolrAdminCoresType)
        assert result.status == {}
