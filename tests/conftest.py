# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.

import pytest

from bounded_lru import LRUCache


@pytest.fixture()
def cache() -> LRUCache[int, str]:
    return LRUCache(3)


@pytest.fixture()
def pair_cache() -> LRUCache[int, str]:
    return LRUCache(2, name="pair")
