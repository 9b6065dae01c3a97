"""Core enumerations.

Design Decisions:
    - String enums: Allow easy serialization and logging of configuration
"""

from enum import Enum


class CachePolicy(str, Enum):
    """How a transport should treat locally cached responses.

    The values mirror the usual HTTP client cache modes. The library core
    only forwards them; interpretation belongs to the transport.
    """

    USE_PROTOCOL_CACHE_POLICY = "use_protocol_cache_policy"
    RELOAD_IGNORING_CACHE = "reload_ignoring_cache"
    RETURN_CACHE_ELSE_LOAD = "return_cache_else_load"
    RETURN_CACHE_DONT_LOAD = "return_cache_dont_load"
