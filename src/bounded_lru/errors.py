# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.
"""Exceptions raised by bounded_lru."""

from __future__ import annotations


class BoundedLRUError(Exception):
    """Base class for all bounded_lru errors."""


class InvalidCapacityError(BoundedLRUError, ValueError):
    """Raised when a cache is constructed with a non-positive capacity."""

    def __init__(self, capacity: object) -> None:
        self.capacity = capacity
        super().__init__(f"capacity must be a positive integer, got {capacity!r}")


class SnapshotError(BoundedLRUError, ValueError):
    """Raised when a snapshot cannot be restored without breaking cache invariants."""
