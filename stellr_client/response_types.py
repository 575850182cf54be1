"""
Models for deserialising common Solr responses.

Pass them to SolrRequest.call():

    result = client.select("films").q("*:*").call(SolrSelectType[Film])
    print(result.response.numFound)

SolrResponseHeader is shared by every response type. Select results are
generic over the document type; use ``SolrSelectType[dict[str, Any]]``
when there is no document model. Field names follow Solr's JSON keys.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DocT = TypeVar("DocT")


class SolrResponseHeader(BaseModel):
    """The standard Solr responseHeader."""
    status: int
    QTime: int
    params: dict[str, Any] | None = None
    rf: int | None = None
    zkConnected: bool | None = None


class SolrSelectBody(BaseModel, Generic[DocT]):
    """The body of a select response, generic over the document type."""
    numFound: int
    start: int
    numFoundExact: bool | None = None
    maxScore: float | None = None
    docs: list[DocT]

    def __str__(self) -> str:
        return (
            f"numFound: {self.numFound},\nstart: {self.start},\n"
            f"maxScore: {self.maxScore}\ndocs: {self.docs!r}"
        )


class SolrSelectType(BaseModel, Generic[DocT]):
    """Full select response."""
    responseHeader: SolrResponseHeader
    response: SolrSelectBody[DocT]
    debug: dict[str, Any] | None = None


class SolrUpdateType(BaseModel):
    """Update response."""
    responseHeader: SolrResponseHeader
    debug: dict[str, Any] | None = None


class SolrCollectionsListType(BaseModel):
    """Response to admin/collections?action=LIST."""
    responseHeader: SolrResponseHeader
    collections: list[str]
    debug: dict[str, Any] | None = None


# admin/cores uses camelCase keys throughout, so map them onto snake_case


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SolrAdminCoresUserData(_CamelModel):
    commit_command_ver: str | None = None
    commit_time_msec: str | None = Field(default=None, alias="commitTimeMSec")


class SolrAdminCoresIndexInfo(_CamelModel):
    num_docs: int
    max_doc: int
    deleted_docs: int
    version: int
    segment_count: int
    current: bool
    has_deletions: bool
    directory: str
    segments_file: str
    segments_file_size_in_bytes: int
    size_in_bytes: int
    size: str
    index_heap_usage_bytes: int | None = None
    user_data: SolrAdminCoresUserData = Field(default_factory=SolrAdminCoresUserData)
    last_modified: datetime | None = None


class SolrAdminCoresCloudInfo(_CamelModel):
    collection: str
    shard: str
    replica: str
    replica_type: str


class SolrAdminCoresDetails(_CamelModel):
    name: str
    instance_dir: str
    data_dir: str
    config: str
    schema_name: str = Field(alias="schema")
    start_time: datetime
    uptime: int
    index: SolrAdminCoresIndexInfo
    last_published: str | None = None
    config_version: int | None = None
    cloud: SolrAdminCoresCloudInfo | None = None


class SolrAdminCoresType(_CamelModel):
    """Response to admin/cores."""
    response_header: SolrResponseHeader
    init_failures: dict[str, Any] = Field(default_factory=dict)
    status: dict[str, SolrAdminCoresDetails] = Field(default_factory=dict)
    debug: dict[str, Any] | None = None
