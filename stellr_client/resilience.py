"""
Opt-in retry for callers.

Requests themselves never retry; wrap the build-and-call step in
retry_with_backoff() if a retry policy is wanted.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from .errors import NoLiveNodesError, TransportError, ZookeeperError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryExhausted(Exception):
    """All retry attempts failed."""
    def __init__(self, message: str, last_exception: Exception | None = None):
        super().__init__(message)
        self.last_exception = last_exception


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""
    max_retries: int = 3
    base_delay_seconds: float = 0.5
    max_delay_seconds: float = 30.0
    exponential_base: float = 2.0
    retryable_errors: tuple[type[Exception], ...] = (
        TransportError,
        ZookeeperError,
        NoLiveNodesError,
    )


def retry_with_backoff(
    func: Callable[[], T],
    config: RetryConfig | None = None,
    on_zookeeper_error: Callable[[], Any] | None = None,
) -> T:
    """
    Call ``func`` with exponential backoff retry.

    Build the request inside ``func`` so that every attempt resolves
    a fresh live node:

        retry_with_backoff(
            lambda: client.select("films").q("*:*").call(SolrSelectType[dict]),
            on_zookeeper_error=client.reset_zookeeper,
        )

    Args:
        func: Zero-argument callable doing the work
        config: Retry configuration
        on_zookeeper_error: Called after a ZookeeperError, before the next
            attempt (usually ZkSolrClient.reset_zookeeper)

    Returns:
        Result of func

    Raises:
        RetryExhausted: All attempts failed with retryable errors
        Exception: The first non-retryable error, unchanged
    """
    if config is None:
        config = RetryConfig()

    last_exception: Exception | None = None

    for attempt in range(config.max_retries + 1):
        try:
            return func()
        except config.retryable_errors as e:
            last_exception = e

            if attempt == config.max_retries:
                break

            if isinstance(e, ZookeeperError) and on_zookeeper_error is not None:
                try:
                    on_zookeeper_error()
                except config.retryable_errors as reset_error:
                    # ZooKeeper still down; back off and try again
                    last_exception = reset_error
                    logger.warning(f"ZooKeeper reset failed: {reset_error}")

            delay = min(
                config.base_delay_seconds * (config.exponential_base ** attempt),
                config.max_delay_seconds,
            )
            # Add jitter (up to 25% of delay)
            delay *= (0.75 + random.random() * 0.5)

            logger.warning(
                f"Retry {attempt + 1}/{config.max_retries} after {delay:.1f}s: {e}"
            )
            time.sleep(delay)

    raise RetryExhausted(
        f"All {config.max_retries} retries exhausted",
        last_exception=last_exception,
    )
