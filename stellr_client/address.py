"""Split Solr addresses into (host, port, context)."""

from __future__ import annotations

import re

import httpx

from .errors import BadHostError, HostParseError

DEFAULT_PORT = 80
HTTPS_PORT = 443

_PORT_RE = re.compile(r"[0-9]+")


def split_host_address(host_address: str) -> tuple[str, int, str]:
    """
    Separate out host, port and context from a URL or a Solr node name.

    Copes with the following variants:
     * http://localhost/solr
     * http://localhost:8983
     * localhost:8080
     * 127.0.0.1:8080_solr

    Raises:
        BadHostError: The address cannot be split into host/port/context
        HostParseError: The URL parser rejected the address
    """
    _, host, port, context = parse_address(host_address)
    return host, port, context


def parse_address(host_address: str) -> tuple[str, str, int, str]:
    """Like split_host_address(), but also return the scheme (http for node names)."""
    if "://" in host_address:
        return split_url(host_address)
    return ("http", *split_node_name(host_address))


def split_url(url: str) -> tuple[str, str, int, str]:
    """
    Split apart a URL into a (scheme, host, port, context) tuple.

    Port 80 is assumed if no port is given (443 for https).
    """
    try:
        url_details = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise HostParseError(f"Could not parse {url!r}: {e}") from e

    if not url_details.host:
        raise BadHostError(f"Could not find a hostname in {url!r}")

    port = url_details.port
    if port is None:
        # httpx drops default ports, so https://host:443 also lands here
        port = HTTPS_PORT if url_details.scheme == "https" else DEFAULT_PORT
    context = url_details.path or "/"

    return url_details.scheme, url_details.host, port, context


def split_node_name(node_name: str) -> tuple[str, int, str]:
    """
    Split apart a Solr node name into a (host, port, context) tuple.

    The name is of the form host:port_context, eg. 127.0.0.1:8080_solr,
    where every further underscore becomes a path separator.
    """
    split_by_port = node_name.split(":")
    if len(split_by_port) != 2:
        # zero or several colons means we don't know where the host/port split is
        raise BadHostError(f"Ambiguous host/port split in {node_name!r}")

    host, remainder = split_by_port
    if not host:
        raise BadHostError(f"Could not find a hostname in {node_name!r}")

    split_by_context = remainder.split("_")
    port_str = split_by_context[0]
    if not _PORT_RE.fullmatch(port_str) or int(port_str) > 0xFFFF:
        raise BadHostError(f"Invalid port {port_str!r} in {node_name!r}")

    context = "/" + "/".join(split_by_context[1:])

    return host, int(port_str), context
