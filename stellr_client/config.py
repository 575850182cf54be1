"""Client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .clients.base import BaseSolrClient

# Config file search paths (in order of precedence, last wins)
CONFIG_SEARCH_PATHS = [
    Path.home() / ".stellr" / "client.yaml",  # User-level defaults
    Path(".stellr.yaml"),  # Project-level overrides
]

DEFAULT_TIMEOUT = 20.0


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


@dataclass(frozen=True, order=True)
class SolrClientConfig:
    """
    Request configuration applied to every request made by a Solr client.

    Usage:
        config = SolrClientConfig(verbose=True)
        client = DirectSolrClient("http://localhost:8983/solr", request_config=config)
    """
    # HTTP request timeout (seconds)
    timeout: float = DEFAULT_TIMEOUT

    # Log every request/response line
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout!r}")

    def with_timeout(self, timeout: float) -> SolrClientConfig:
        """Return a copy with a custom timeout."""
        return replace(self, timeout=timeout)

    def with_verbose(self, verbose: bool) -> SolrClientConfig:
        """Return a copy with verbose request logging switched on or off."""
        return replace(self, verbose=verbose)

    def __str__(self) -> str:
        return f"SolrClientConfig(timeout: {self.timeout}s, verbose: {self.verbose})"


@dataclass
class ClientSettings:
    """
    Settings used to build a Solr client.

    When ``zk_quorum`` is set a ZooKeeper-mediated client is built,
    otherwise a direct client pointing at ``solr_url``.

    Precedence (lowest to highest):
    1. Defaults
    2. Environment variables (STELLR_*)
    3. ~/.stellr/client.yaml
    4. .stellr.yaml (project root)
    5. Constructor arguments
    """
    # Direct Solr node, as a URL or a node name (host:port_context)
    solr_url: str = field(
        default_factory=lambda: os.environ.get("STELLR_SOLR_URL", "http://localhost:8983/solr")
    )

    # ZooKeeper ensemble, e.g. "zk1:2181,zk2:2181"
    zk_quorum: str | None = field(
        default_factory=lambda: os.environ.get("STELLR_ZK_QUORUM")
    )
    zk_chroot: str = field(
        default_factory=lambda: os.environ.get("STELLR_ZK_CHROOT", "/")
    )

    # ZooKeeper session connect timeout (seconds)
    zk_timeout: float = field(
        default_factory=lambda: float(os.environ.get("STELLR_ZK_TIMEOUT", str(DEFAULT_TIMEOUT)))
    )

    # Request timeout (seconds)
    timeout: float = field(
        default_factory=lambda: float(os.environ.get("STELLR_TIMEOUT", str(DEFAULT_TIMEOUT)))
    )

    verbose: bool = field(
        default_factory=lambda: _env_flag("STELLR_VERBOSE")
    )

    def request_config(self) -> SolrClientConfig:
        """Build the per-request configuration."""
        return SolrClientConfig(timeout=self.timeout, verbose=self.verbose)

    def create_client(self) -> BaseSolrClient:
        """Build a ZooKeeper client if a quorum is configured, else a direct one."""
        from .clients import DirectSolrClient, ZkSolrClient

        if self.zk_quorum:
            return ZkSolrClient(
                self.zk_quorum,
                self.zk_chroot,
                request_config=self.request_config(),
                zk_timeout=self.zk_timeout,
            )
        return DirectSolrClient(self.solr_url, request_config=self.request_config())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClientSettings:
        """Create settings from dictionary."""
        verbose = data.get("verbose")
        if verbose is None:
            verbose = _env_flag("STELLR_VERBOSE")
        elif isinstance(verbose, str):
            verbose = verbose.lower() in ("1", "true", "yes")
        return cls(
            solr_url=data.get("solr_url", os.environ.get("STELLR_SOLR_URL", "http://localhost:8983/solr")),
            zk_quorum=data.get("zk_quorum", os.environ.get("STELLR_ZK_QUORUM")),
            zk_chroot=data.get("zk_chroot", os.environ.get("STELLR_ZK_CHROOT", "/")),
            zk_timeout=float(data.get("zk_timeout", os.environ.get("STELLR_ZK_TIMEOUT", DEFAULT_TIMEOUT))),
            timeout=float(data.get("timeout", os.environ.get("STELLR_TIMEOUT", DEFAULT_TIMEOUT))),
            verbose=bool(verbose),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> ClientSettings:
        """Load settings from YAML file."""
        import yaml
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def load(cls, config_file: str | Path | None = None) -> ClientSettings:
        """
        Load settings with auto-discovery.

        Search order (last wins):
        1. ~/.stellr/client.yaml
        2. .stellr.yaml
        3. Explicit config_file argument
        4. Environment variables fill anything the files leave out
        """
        import yaml

        merged: dict[str, Any] = {}

        for path in CONFIG_SEARCH_PATHS:
            if path.exists():
                with open(path, "r") as f:
                    data = yaml.safe_load(f) or {}
                merged.update(data)

        if config_file:
            with open(config_file, "r") as f:
                data = yaml.safe_load(f) or {}
            merged.update(data)

        return cls.from_dict(merged)
