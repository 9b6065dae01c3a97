"""Cache directive passed through to the transport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .enums import CachePolicy


@dataclass(frozen=True)
class CacheConfig:
    """Opaque cache directive forwarded with every request.

    Attributes:
        policy: Cache mode requested from the transport
        max_age: Optional freshness lifetime in seconds
        ignore_server_cache_control: Prefer ``max_age`` over server headers

    Examples:
        CacheConfig.NO_CACHE
        CacheConfig(max_age=300, ignore_server_cache_control=True)
    """

    policy: CachePolicy = CachePolicy.USE_PROTOCOL_CACHE_POLICY
    max_age: int | None = None
    ignore_server_cache_control: bool = False

    DEFAULT: ClassVar[CacheConfig]
    NO_CACHE: ClassVar[CacheConfig]
    CACHE_ONLY: ClassVar[CacheConfig]
    CACHE_ELSE_LOAD: ClassVar[CacheConfig]


CacheConfig.DEFAULT = CacheConfig()
CacheConfig.NO_CACHE = CacheConfig(policy=CachePolicy.RELOAD_IGNORING_CACHE)
CacheConfig.CACHE_ONLY = CacheConfig(policy=CachePolicy.RETURN_CACHE_DONT_LOAD)
CacheConfig.CACHE_ELSE_LOAD = CacheConfig(policy=CachePolicy.RETURN_CACHE_ELSE_LOAD)
