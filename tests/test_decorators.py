# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.

import asyncio
import inspect
from typing import Any

import pytest

from bounded_lru import InvalidCapacityError, LRUCache, lru_cached


def test_memoizes_results() -> None:
    calls: list[int] = []

    @lru_cached(4)
    def square(x: int) -> int:
        calls.append(x)
        return x * x

    assert square(3) == 9
    assert square(3) == 9
    assert calls == [3]
    assert square.cache.stats().hits == 1  # type: ignore[attr-defined]


def test_bare_decorator_uses_default_capacity() -> None:
    @lru_cached
    def ident(x: Any) -> Any:
        return x

    assert ident(1) == 1
    assert isinstance(ident.cache, LRUCache)  # type: ignore[attr-defined]
    assert ident.cache.capacity() == 128  # type: ignore[attr-defined]
    assert ident.__name__ == "ident"


def test_least_recent_call_is_evicted() -> None:
    calls: list[int] = []

    @lru_cached(2)
    def double(x: int) -> int:
        calls.append(x)
        return 2 * x

    double(1)
    double(2)
    double(1)
    double(3)  # evicts 2
    double(1)
    double(2)

    assert calls == [1, 2, 3, 2]


def test_none_results_are_cached() -> None:
    calls = 0

    @lru_cached(2)
    def nothing() -> None:
        nonlocal calls
        calls += 1
        return None

    nothing()
    nothing()
    assert calls == 1


def test_keyword_arguments_are_part_of_key() -> None:
    calls: list[tuple[Any, ...]] = []

    @lru_cached(8)
    def join(*args: Any, **kwargs: Any) -> str:
        calls.append((args, kwargs))
        return repr((args, kwargs))

    join(1, b=2, c=3)
    join(1, c=3, b=2)
    join(1, "b", 2)

    assert len(calls) == 2


def test_typed_keys() -> None:
    calls: list[Any] = []

    @lru_cached(8, typed=True)
    def ident(x: Any) -> Any:
        calls.append(x)
        return x

    ident(1)
    ident(1.0)
    assert calls == [1, 1.0]

    @lru_cached(8)
    def loose(x: Any) -> Any:
        calls.append(x)
        return x

    calls.clear()
    loose(1)
    loose(1.0)
    assert calls == [1]


def test_exceptions_are_not_cached() -> None:
    attempts = 0

    @lru_cached(2)
    def flaky() -> str:
        nonlocal attempts
        attempts += 1
        if attempts == 1:
            raise RuntimeError("first call fails")
        return "ok"

    with pytest.raises(RuntimeError):
        flaky()
    assert flaky() == "ok"
    assert attempts == 2


def test_cache_clear() -> None:
    calls = 0

    @lru_cached(2)
    def value() -> int:
        nonlocal calls
        calls += 1
        return calls

    assert value() == 1
    value.cache_clear()  # type: ignore[attr-defined]
    assert value() == 2


def test_unhashable_argument() -> None:
    @lru_cached(2)
    def total(items: list[int]) -> int:
        return sum(items)

    with pytest.raises(TypeError):
        total([1, 2])


def test_invalid_capacity() -> None:
    with pytest.raises(InvalidCapacityError):

        @lru_cached(0)
        def never() -> None:
            pass


@pytest.mark.asyncio
async def test_async_function_result_is_cached() -> None:
    calls: list[str] = []

    @lru_cached(4)
    async def fetch(name: str) -> str:
        calls.append(name)
        await asyncio.sleep(0)
        return name.upper()

    assert await fetch("a") == "A"
    assert await fetch("a") == "A"
    assert calls == ["a"]
    assert inspect.iscoroutinefunction(fetch)


@pytest.mark.asyncio
async def test_async_exceptions_are_not_cached() -> None:
    attempts = 0

    @lru_cached(4)
    async def flaky() -> int:
        nonlocal attempts
        attempts += 1
        if attempts == 1:
            raise ValueError("nope")
        return attempts

    with pytest.raises(ValueError):
        await flaky()
    assert await flaky() == 2
    assert await flaky() == 2
