"""Hostname access policy for document following."""

from .hosts import WILDCARD, allow_hosts, host_key, is_host_allowed, seed_origin

__all__ = [
    "WILDCARD",
    "allow_hosts",
    "host_key",
    "is_host_allowed",
    "seed_origin",
]
