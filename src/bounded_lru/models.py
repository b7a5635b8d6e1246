# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

V = TypeVar("V")


@dataclass(frozen=True)
class CacheHit(Generic[V]):
    """
    A value found in the cache.

    Lookups return ``CacheHit`` on a hit and ``None`` on a miss, so a stored
    ``None`` (or ``0``, or ``-1``) is never confused with an absent key.
    """

    value: V


class CacheStats(BaseModel):
    """Point-in-time counters for a cache."""

    model_config = ConfigDict(frozen=True)

    capacity: int
    size: int
    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def hit_ratio(self) -> float:
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0


class CacheSnapshot(BaseModel):
    """
    Contents of a cache, ordered least-recently-used first.

    Restoring a snapshot replays ``entries`` in order, which reproduces the
    exact recency order of the source cache.
    """

    capacity: int
    entries: list[tuple[Any, Any]] = Field(default_factory=list)

    @field_validator("entries", mode="after")
    @classmethod
    def _restore_tuple_keys(cls, entries: list[tuple[Any, Any]]) -> list[tuple[Any, Any]]:
        # JSON has no tuples; keys such as memoized call arguments come back as lists
        return [(_as_hashable(key), value) for key, value in entries]


def _as_hashable(key: Any) -> Any:
    if isinstance(key, list):
        return tuple(_as_hashable(item) for item in key)
    return key
