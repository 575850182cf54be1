"""Solr request builder and response decoding."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from .config import SolrClientConfig
from .errors import PayloadNotArrayError, ResponseParseError, SolrError, UnimplementedMethodError
from .transport import send_async, send_blocking

logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"

SUPPORTED_METHODS = ("GET", "POST")


@lru_cache(maxsize=128)
def _cached_adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def _type_adapter(response_type: Any) -> TypeAdapter:
    try:
        return _cached_adapter(response_type)
    except TypeError:
        # unhashable type expression
        return TypeAdapter(response_type)


def parse_json(body_text: str, response_type: Any = Any, status_code: int | None = None) -> Any:
    """
    Decode a response body into ``response_type``.

    ``response_type`` can be anything pydantic can validate against:
    a model, a dataclass, a TypedDict, ``dict[str, Any]`` or ``Any``.
    Validation is strict: ``"1100"`` is not accepted where an int is expected.

    Raises:
        ResponseParseError: Body is not JSON, or does not match the type
    """
    try:
        return _type_adapter(response_type).validate_json(body_text, strict=True)
    except ValidationError as e:
        logger.error(f"Failed to decode the response: {body_text!r}")
        raise ResponseParseError(
            f"Could not decode response as {getattr(response_type, '__name__', response_type)}: {e}",
            body=body_text,
            status_code=status_code,
        ) from e


class SolrRequest:
    """
    An in-progress request against a resolved Solr node.

    Helper methods set common Solr query parameters and return the
    request, so calls can be chained:

        result = (
            client.select("films")
            .rows(10)
            .q("*:*")
            .call(SolrSelectType[dict])
        )

    ``call()`` blocks; ``acall()`` is the coroutine version. Both send
    once, read the whole body and then decode it - there is no retry.
    """

    def __init__(
        self,
        method: str,
        url: str,
        config: SolrClientConfig | None = None,
    ):
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise UnimplementedMethodError(f"{method} requests are not supported")
        self.method = method
        self.url = url
        self.config = config or SolrClientConfig()
        self.params: list[tuple[str, str]] = []
        self.headers: dict[str, str] = {}
        self.body: bytes | None = None

    def __repr__(self) -> str:
        return f"SolrRequest({self.method} {self.url}, params={self.params!r})"

    # Query parameters

    def param(self, key: str, value: Any) -> SolrRequest:
        """Add an arbitrary query parameter (repeats are kept)."""
        if isinstance(value, bool):
            value = "true" if value else "false"
        self.params.append((key, str(value)))
        return self

    def q(self, query: str) -> SolrRequest:
        """Applies a query (q) to the request."""
        return self.param("q", query)

    def fq(self, filter_query: str) -> SolrRequest:
        """Applies a filter query (fq) to the request."""
        return self.param("fq", filter_query)

    def fl(self, field_list: str) -> SolrRequest:
        """Limit fields returned (fl) by the request."""
        return self.param("fl", field_list)

    def rows(self, row_count: int) -> SolrRequest:
        return self.param("rows", row_count)

    def start(self, offset: int) -> SolrRequest:
        return self.param("start", offset)

    def sort(self, sort_spec: str) -> SolrRequest:
        return self.param("sort", sort_spec)

    def wt(self, response_format: str) -> SolrRequest:
        """
        Specifies the response format.

        Responses are always decoded as JSON, so only use this to ask for
        json on old (pre 6) Solr versions where XML is still the default.
        """
        return self.param("wt", response_format)

    def commit(self) -> SolrRequest:
        """Mark the request to force a commit."""
        return self.param("commit", "true")

    def debug_query(self, debug: bool) -> SolrRequest:
        return self.param("debugQuery", "on" if debug else "off")

    # Headers and body

    def header(self, name: str, value: str) -> SolrRequest:
        self.headers[name] = value
        return self

    def content_type(self, content_type: str) -> SolrRequest:
        """Sets Content-Type for this request."""
        return self.header("Content-Type", content_type)

    def payload(self, documents: Any) -> SolrRequest:
        """
        Serialize a list of documents to JSON and use it as the request body.

        Documents can be dicts, dataclasses or pydantic models.

        Raises:
            PayloadNotArrayError: The payload does not serialize to a JSON array
        """
        try:
            json_payload = to_json(documents)
        except PydanticSerializationError as e:
            raise SolrError(f"Could not serialize payload: {e}") from e

        if not json_payload.lstrip().startswith(b"["):
            raise PayloadNotArrayError(
                f"Payload of type {type(documents).__name__} did not serialize to a JSON array"
            )
        self.body = json_payload
        return self

    # Execution

    def _request_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self.params:
            kwargs["params"] = list(self.params)
        if self.headers:
            kwargs["headers"] = dict(self.headers)
        if self.body is not None:
            kwargs["content"] = self.body
        return kwargs

    def call(self, response_type: type[T] | Any = Any) -> T:
        """Send the request and decode the response into ``response_type``."""
        status_code, body_text = send_blocking(
            self.config, self.method, self.url, **self._request_kwargs()
        )
        logger.debug(f"{self.method} {self.url} returned {status_code}")
        return parse_json(body_text, response_type, status_code)

    def unstructured_call(self) -> Any:
        """Send the request and decode the response into plain JSON values."""
        return self.call(Any)

    async def acall(self, response_type: type[T] | Any = Any) -> T:
        """
        Coroutine version of call().

        The node was already resolved when the request was created, and on
        a ZkSolrClient that ZooKeeper lookup blocks the event loop.
        """
        status_code, body_text = await send_async(
            self.config, self.method, self.url, **self._request_kwargs()
        )
        logger.debug(f"{self.method} {self.url} returned {status_code}")
        return parse_json(body_text, response_type, status_code)

    async def aunstructured_call(self) -> Any:
        """Coroutine version of unstructured_call()."""
        return await self.acall(Any)
