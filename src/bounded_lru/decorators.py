# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Hashable, TypeVar, overload

from .cache import LRUCache
from .config import DEFAULT_CAPACITY

F = TypeVar("F", bound=Callable[..., Any])

# Separates positional from keyword arguments so f(1, a=2) != f(1, "a", 2)
_KWD_MARK = object()


def _make_key(
    args: tuple[Any, ...], kwargs: dict[str, Any], typed: bool
) -> Hashable:
    key: tuple[Any, ...] = args
    sorted_kwargs = sorted(kwargs.items())
    if sorted_kwargs:
        key += (_KWD_MARK,)
        for item in sorted_kwargs:
            key += item
    if typed:
        key += tuple(type(v) for v in args)
        key += tuple(type(v) for _, v in sorted_kwargs)
    return key


@overload
def lru_cached(capacity: F) -> F: ...


@overload
def lru_cached(
    capacity: int = DEFAULT_CAPACITY, *, typed: bool = False
) -> Callable[[F], F]: ...


def lru_cached(
    capacity: int | F = DEFAULT_CAPACITY, *, typed: bool = False
) -> F | Callable[[F], F]:
    """
    Memoize a function in an ``LRUCache``.

    Can be used bare (``@lru_cached``) or with arguments
    (``@lru_cached(256, typed=True)``). Coroutine functions are supported: the
    awaited result is cached. Exceptions are never cached.

    The wrapper exposes the backing cache as ``.cache`` and a ``.cache_clear()``
    shortcut. Arguments must be hashable.
    """
    if callable(capacity):
        return lru_cached(DEFAULT_CAPACITY, typed=typed)(capacity)

    def decorator(func: F) -> F:
        cache: LRUCache[Hashable, Any] = LRUCache(
            capacity, name=getattr(func, "__qualname__", None)
        )

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                key = _make_key(args, kwargs, typed)
                hit = cache.get(key)
                if hit is not None:
                    return hit.value
                # Concurrent misses for the same key may each await func; the
                # last one to finish wins the slot.
                result = await func(*args, **kwargs)
                cache.put(key, result)
                return result

            wrapper: Any = async_wrapper
        else:

            @functools.wraps(func)
            def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
                key = _make_key(args, kwargs, typed)
                hit = cache.get(key)
                if hit is not None:
                    return hit.value
                result = func(*args, **kwargs)
                cache.put(key, result)
                return result

            wrapper = sync_wrapper

        wrapper.cache = cache
        wrapper.cache_clear = cache.clear
        return wrapper  # type: ignore[no-any-return]

    return decorator
