"""
HTTP transport adapters.

Both adapters build a fresh httpx client per request from a
SolrClientConfig, send once and hand back (status, body text).
Decoding is shared and lives in requests.py.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import SolrClientConfig
from .errors import TransportError

logger = logging.getLogger(__name__)


def _log_request(request: httpx.Request) -> None:
    logger.info(f"--> {request.method} {request.url}")


def _log_response(response: httpx.Response) -> None:
    request = response.request
    logger.info(f"<-- {response.status_code} {request.method} {request.url}")


async def _alog_request(request: httpx.Request) -> None:
    _log_request(request)


async def _alog_response(response: httpx.Response) -> None:
    _log_response(response)


def build_client(config: SolrClientConfig) -> httpx.Client:
    """Build a blocking httpx client configured from a SolrClientConfig."""
    event_hooks = {}
    if config.verbose:
        event_hooks = {"request": [_log_request], "response": [_log_response]}
    try:
        return httpx.Client(timeout=config.timeout, event_hooks=event_hooks)
    except (TypeError, ValueError) as e:
        raise TransportError(f"Could not build HTTP client from {config}: {e}") from e


def build_async_client(config: SolrClientConfig) -> httpx.AsyncClient:
    """Build an async httpx client configured from a SolrClientConfig."""
    event_hooks = {}
    if config.verbose:
        event_hooks = {"request": [_alog_request], "response": [_alog_response]}
    try:
        return httpx.AsyncClient(timeout=config.timeout, event_hooks=event_hooks)
    except (TypeError, ValueError) as e:
        raise TransportError(f"Could not build HTTP client from {config}: {e}") from e


def send_blocking(
    config: SolrClientConfig,
    method: str,
    url: str,
    **request_kwargs: Any,
) -> tuple[int, str]:
    """Send one request, blocking the calling thread, and return (status, body)."""
    try:
        with build_client(config) as client:
            response = client.request(method, url, **request_kwargs)
            return response.status_code, response.text
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise TransportError(f"{method} {url} failed: {e}") from e


async def send_async(
    config: SolrClientConfig,
    method: str,
    url: str,
    **request_kwargs: Any,
) -> tuple[int, str]:
    """Send one request from a coroutine and return (status, body)."""
    try:
        async with build_async_client(config) as client:
            response = await client.request(method, url, **request_kwargs)
            return response.status_code, response.text
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise TransportError(f"{method} {url} failed: {e}") from e
