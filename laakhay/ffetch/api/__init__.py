"""Public fluent API."""

from .ffetch import FFetch, FFetchMapped, ffetch

__all__ = ["FFetch", "FFetchMapped", "ffetch"]
