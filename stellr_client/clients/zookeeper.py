"""SolrCloud access through live_nodes information stored in ZooKeeper."""

from __future__ import annotations

import logging
import random
import threading
import weakref

from kazoo.client import KazooClient
from kazoo.exceptions import KazooException
from kazoo.handlers.threading import KazooTimeoutError

from ..config import DEFAULT_TIMEOUT, SolrClientConfig
from ..errors import NoLiveNodesError, ZookeeperError
from .base import BaseSolrClient

logger = logging.getLogger(__name__)

LIVE_NODES_PATH = "/live_nodes"


def full_zk_path(zk_quorum: str, zk_chroot: str) -> str:
    """Build the kazoo hosts string: the quorum with the chroot appended."""
    chroot = zk_chroot.strip("/")
    if not chroot:
        return zk_quorum
    return f"{zk_quorum}/{chroot}"


def zk_connection(hosts: str, timeout: float) -> KazooClient:
    """Create and start a ZooKeeper client."""
    try:
        zk = KazooClient(hosts=hosts, timeout=timeout)
    except ValueError as e:
        # kazoo rejects malformed host strings while parsing them
        raise ZookeeperError(f"Invalid ZooKeeper hosts {hosts!r}: {e}") from e
    try:
        zk.start(timeout=timeout)
    except (KazooTimeoutError, KazooException) as e:
        zk.close()
        raise ZookeeperError(f"Could not connect to ZooKeeper at {hosts}: {e}") from e
    return zk


def _stop_session(holder: list[KazooClient]) -> None:
    zk = holder[0]
    zk.stop()
    zk.close()


class ZookeeperSession:
    """
    One live ZooKeeper session behind a lock.

    Shared by every clone of a ZkSolrClient. The session is stopped by
    close(), or once the last owner has been garbage collected.
    """

    def __init__(self, hosts: str, timeout: float = DEFAULT_TIMEOUT):
        self.hosts = hosts
        self.timeout = timeout
        self._lock = threading.Lock()
        # Kept in a list so the finalizer always stops the current session
        self._holder = [zk_connection(hosts, timeout)]
        self._finalizer = weakref.finalize(self, _stop_session, self._holder)

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def get_children(self, path: str) -> list[str]:
        """
        List the children of an existing node.

        The lock is held for the whole round-trip, so a stalled ensemble
        blocks every other caller sharing this session.
        """
        with self._lock:
            zk = self._holder[0]
            try:
                if zk.exists(path) is None:
                    raise ZookeeperError(f"{path} not found in ZooKeeper at {self.hosts}")
                return zk.get_children(path)
            except (KazooTimeoutError, KazooException) as e:
                raise ZookeeperError(f"Failed to read {path} from {self.hosts}: {e}") from e

    def reset(self) -> None:
        """Replace the session with a new one; the old one is stopped afterwards."""
        with self._lock:
            if self.closed:
                raise ZookeeperError(f"Session to {self.hosts} has been closed")
            new_zk = zk_connection(self.hosts, self.timeout)
            old_zk = self._holder[0]
            self._holder[0] = new_zk
        logger.info(f"Reset ZooKeeper session to {self.hosts}")
        old_zk.stop()
        old_zk.close()

    def close(self) -> None:
        self._finalizer()


class ZkSolrClient(BaseSolrClient):
    """
    Access a Solr node using the live_nodes information in ZooKeeper.

    A live node is picked at random from the children of
    /<zk_chroot>/live_nodes on every request.

        client = ZkSolrClient("localhost:9983", "/")
        client.live_node_url()  # eg. "http://192.168.1.2:8983/solr"

    The ZooKeeper session is opened by the constructor and shared by
    clone()'d instances; constructing a new client always opens a new
    session. Dead sessions are not re-established automatically, use
    reset_zookeeper().

    Raises:
        ZookeeperError: The session could not be established
    """

    def __init__(
        self,
        zk_quorum: str,
        zk_chroot: str = "/",
        request_config: SolrClientConfig | None = None,
        zk_timeout: float = DEFAULT_TIMEOUT,
        *,
        session: ZookeeperSession | None = None,
    ):
        self.zk_quorum = zk_quorum
        self.zk_chroot = zk_chroot
        self.request_config = request_config or SolrClientConfig()
        self._session = session or ZookeeperSession(full_zk_path(zk_quorum, zk_chroot), zk_timeout)

    @property
    def session(self) -> ZookeeperSession:
        return self._session

    def clone(self) -> ZkSolrClient:
        """Copy this client, sharing its ZooKeeper session."""
        return ZkSolrClient(
            self.zk_quorum,
            self.zk_chroot,
            request_config=self.request_config,
            session=self._session,
        )

    def __copy__(self) -> ZkSolrClient:
        return self.clone()

    def live_nodes(self) -> list[str]:
        """Current live nodes, straight from ZooKeeper."""
        return self._session.get_children(LIVE_NODES_PATH)

    def pick_one_live_node(self) -> str:
        """
        Pick one live node uniformly at random.

        Raises:
            NoLiveNodesError: ZooKeeper lists no live nodes
        """
        children = self.live_nodes()
        if not children:
            raise NoLiveNodesError(f"No live Solr nodes registered in {self}")
        node = random.choice(children)
        logger.debug(f"Picked live node {node} out of {len(children)}")
        return node

    def live_node_url(self) -> str:
        return f"http://{self.pick_one_live_node().replace('_', '/')}"

    def reset_zookeeper(self) -> None:
        """
        Re-establish the shared ZooKeeper session.

        Blocks concurrent resolvers until the new session is up or has
        failed; on failure the old session is kept.
        """
        self._session.reset()

    def close(self) -> None:
        """Stop the ZooKeeper session (for this client and all its clones)."""
        self._session.close()

    def __enter__(self) -> ZkSolrClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _key(self) -> tuple:
        return (self.zk_quorum, self.zk_chroot, self.request_config)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZkSolrClient):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"ZkSolrClient(zk_quorum={self.zk_quorum!r}, zk_chroot={self.zk_chroot!r}, "
            f"request_config={self.request_config!r})"
        )

    def __str__(self) -> str:
        return f"ZkSolrClient({full_zk_path(self.zk_quorum, self.zk_chroot)})"
