"""Cache port: Protocol for a bounded recency cache."""

from __future__ import annotations

from typing import Hashable, Protocol, runtime_checkable


@runtime_checkable
class RecencyCachePort(Protocol):
    """Port for a bounded key-value cache with least-recently-used eviction.

    ``ForgettingMap`` satisfies it structurally, so callers can depend on
    this surface without importing the concrete class. Key and value types
    are left open here; ``ForgettingMap[K, V]`` carries them.
    """

    @property
    def capacity(self) -> int:
        """Return the fixed maximum number of entries."""
        ...

    @property
    def size(self) -> int:
        """Return the number of live entries."""
        ...

    def write(self, key: Hashable, value: object) -> None:
        """Store a value, evicting the least recently used entry if full."""
        ...

    def read(self, key: Hashable) -> object:
        """Return a stored value and mark it most recently used."""
        ...
