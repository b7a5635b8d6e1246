# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel

from .errors import InvalidCapacityError

DEFAULT_CAPACITY = 128
ENV_PREFIX = "BOUNDED_LRU_"


class CacheConfig(BaseModel):
    """
    Construction parameters for an ``LRUCache``.

    Capacity is range-checked by the cache itself, so an invalid value
    surfaces as ``InvalidCapacityError`` whichever way the cache is built.
    """

    capacity: int = DEFAULT_CAPACITY
    name: str | None = None

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        environ: Mapping[str, str] | None = None,
    ) -> CacheConfig:
        """Read ``<prefix>CAPACITY`` and ``<prefix>NAME``, falling back to defaults."""
        env = os.environ if environ is None else environ

        raw_capacity = env.get(f"{prefix}CAPACITY")
        capacity = DEFAULT_CAPACITY
        if raw_capacity is not None and raw_capacity.strip():
            try:
                capacity = int(raw_capacity)
            except ValueError as exc:
                raise InvalidCapacityError(raw_capacity) from exc

        name = env.get(f"{prefix}NAME") or None
        return cls(capacity=capacity, name=name)
