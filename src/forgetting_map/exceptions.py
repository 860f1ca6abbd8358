"""Exception hierarchy for the forgetting map.

Every error is a caller-input problem detected before the map is mutated.
"""

from __future__ import annotations

from typing import Hashable


class ForgettingMapError(Exception):
    """Base class for forgetting map errors."""


class NotInitializedError(ForgettingMapError, ValueError):
    """Raised when a map is constructed with a capacity below one."""

    def __init__(self, capacity: object) -> None:
        self.capacity = capacity
        super().__init__(f"capacity must be a positive integer, got {capacity!r}")


class KeyNullError(ForgettingMapError, ValueError):
    """Raised when ``None`` is passed as a key."""

    def __init__(self) -> None:
        super().__init__("key must not be None")


class ValueNullError(ForgettingMapError, ValueError):
    """Raised when ``None`` is passed as a value."""

    def __init__(self) -> None:
        super().__init__("value must not be None")


class KeyNotFoundError(ForgettingMapError, KeyError):
    """Raised when a key is not resident, either never written or evicted."""

    def __init__(self, key: Hashable) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"key not found: {self.key!r}"
