"""Module-level default client and convenience functions."""

from __future__ import annotations

import threading
from pathlib import Path

from .clients import BaseSolrClient
from .config import ClientSettings
from .requests import SolrRequest

_default_client: BaseSolrClient | None = None
_default_lock = threading.Lock()


def configure(
    settings: ClientSettings | None = None,
    config_file: str | Path | None = None,
) -> BaseSolrClient:
    """
    (Re)build the default client.

    Uses the given settings, or loads them from config files and
    STELLR_* environment variables.
    """
    global _default_client
    if settings is None:
        settings = ClientSettings.load(config_file)
    client = settings.create_client()
    with _default_lock:
        _default_client = client
    return client


def get_client() -> BaseSolrClient:
    """Get or create the default client."""
    global _default_client
    with _default_lock:
        if _default_client is None:
            _default_client = ClientSettings.load().create_client()
        return _default_client


def select(collection: str) -> SolrRequest:
    """
    Create a select request on the default client.

    Usage:
        from stellr_client import select
        data = select("films").rows(10).q("*:*").unstructured_call()
    """
    return get_client().select(collection)


def update(collection: str) -> SolrRequest:
    """
    Create a JSON update request on the default client.

    Usage:
        from stellr_client import update
        update("films").payload([{"id": "1"}]).commit().call(SolrUpdateType)
    """
    return get_client().update(collection)
