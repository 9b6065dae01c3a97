"""Hostname allowlist for document following.

Architecture:
    The allowlist is a plain ``frozenset`` of host strings threaded through the
    immutable fetch context. All decisions go through ``is_host_allowed`` so
    the security gate can be tested without any network code.

Design Decisions:
    - Exact matching: ``cdn.example.com`` does not match ``example.com``
    - Ports are part of the host key when written explicitly and not the
      default port of the URL scheme
    - Wildcard first: a set containing ``*`` accepts every URL, including
      URLs with no host component (``file:``, ``mailto:``, ...)
"""

from __future__ import annotations

from collections.abc import Iterable, Set

from yarl import URL

WILDCARD = "*"


def host_key(url: URL) -> str | None:
    """Return the string compared against the allowlist.

    Args:
        url: Absolute URL

    Returns:
        ``host`` or ``host:port`` when the URL names a non-default port, None
        if the URL has no host component
    """
    host = url.host
    if not host:
        return None
    if url.explicit_port is None or url.is_default_port():
        return host
    return f"{host}:{url.explicit_port}"


def is_host_allowed(allowed: Set[str], host: str | None) -> bool:
    """Decide whether a host may be contacted.

    Args:
        allowed: Allowed hosts, possibly containing ``WILDCARD``
        host: Host key from ``host_key`` (None for host-less URLs)

    Returns:
        True if following is permitted
    """
    if WILDCARD in allowed:
        return True
    return host is not None and host in allowed


def allow_hosts(allowed: frozenset[str], hosts: Iterable[str]) -> frozenset[str]:
    """Return a new allowlist with ``hosts`` added.

    Hosts are only ever added and are stored lowercased, matching the
    normalized host of parsed URLs. Any ``WILDCARD`` entry collapses the
    result to the wildcard alone.
    """
    result = set(allowed)
    for host in hosts:
        if host == WILDCARD:
            return frozenset({WILDCARD})
        result.add(host.lower())
    return frozenset(result)


def seed_origin(allowed: frozenset[str], origin: URL) -> frozenset[str]:
    """Add the origin host when the allowlist is still empty."""
    if allowed:
        return allowed
    key = host_key(origin)
    if key is None:
        return allowed
    return frozenset({key})
