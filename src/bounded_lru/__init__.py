# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.

from .cache import LRUCache
from .config import CacheConfig
from .decorators import lru_cached
from .errors import BoundedLRUError, InvalidCapacityError, SnapshotError
from .models import CacheHit, CacheSnapshot, CacheStats

__all__ = [
    "BoundedLRUError",
    "CacheConfig",
    "CacheHit",
    "CacheSnapshot",
    "CacheStats",
    "InvalidCapacityError",
    "LRUCache",
    "SnapshotError",
    "lru_cached",
]
