"""Helpers for user callables that may be sync or async."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar, Union

T = TypeVar("T")

MaybeAsync = Union[Callable[..., Awaitable[T]], Callable[..., T]]


async def call_maybe_async(fn: MaybeAsync[T], *args: Any) -> T:
    """Call ``fn`` and await the result if it is awaitable."""
    result = fn(*args)
    if inspect.isawaitable(result):
        result = await result
    return result
