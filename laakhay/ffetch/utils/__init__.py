"""Utility functions."""

from .callables import MaybeAsync, call_maybe_async

__all__ = ["MaybeAsync", "call_maybe_async"]
