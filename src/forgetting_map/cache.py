"""Thread-safe forgetting map with least-recently-used eviction."""

from __future__ import annotations

import logging
import operator
from collections import OrderedDict
from threading import Lock
from typing import TYPE_CHECKING, Generic, Hashable, TypeVar

import structlog

from .exceptions import KeyNotFoundError, KeyNullError, NotInitializedError, ValueNullError

if TYPE_CHECKING:
    from .config import Settings


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

# Routed through stdlib logging; silent until the host configures it.
_stdlib_logger = logging.getLogger(__name__)
_stdlib_logger.addHandler(logging.NullHandler())
logger = structlog.wrap_logger(_stdlib_logger, wrapper_class=structlog.stdlib.BoundLogger)


class ForgettingMap(Generic[K, V]):
    """Bounded key-value map that forgets its least recently used entry.

    Entries live in a single ``OrderedDict`` whose order is the recency
    order: the first key is the least recently used, the last key the most
    recently used. Both reads and writes move a key to the end. When a new
    key arrives at full capacity the first key is evicted.

    ``write``, ``read``, ``size`` and the snapshot helpers share one lock so
    the map and its ordering can never be observed out of step.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool):
            raise NotInitializedError(capacity)
        try:
            bound = operator.index(capacity)
        except TypeError:
            raise NotInitializedError(capacity) from None
        if bound < 1:
            raise NotInitializedError(capacity)
        self._capacity = bound
        self._store: OrderedDict[K, V] = OrderedDict()
        self._lock = Lock()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ForgettingMap[K, V]:
        """Build a map sized from ``Settings.capacity``."""

        if settings is None:
            from .config import get_settings

            settings = get_settings()
        return cls(settings.capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key: object) -> bool:
        # Membership is a peek; recency is left alone.
        if key is None:
            return False
        with self._lock:
            return key in self._store

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={self.size})"

    def write(self, key: K, value: V) -> None:
        """Store ``value`` under ``key`` and mark the key most recently used.

        Raises:
            KeyNullError: ``key`` is None
            ValueNullError: ``value`` is None
        """
        if key is None:
            raise KeyNullError()
        if value is None:
            raise ValueNullError()

        evicted: K | None = None
        with self._lock:
            store = self._store
            if store and next(reversed(store)) == key:
                # Already the newest key: update in place, order unchanged.
                store[key] = value
                return
            if key in store:
                del store[key]
            elif len(store) >= self._capacity:
                evicted, _ = store.popitem(last=False)
            store[key] = value

        if evicted is not None:
            logger.debug("forgetting_map.evicted", key=evicted, capacity=self._capacity)

    def read(self, key: K) -> V:
        """Return the value for ``key`` and mark the key most recently used.

        Raises:
            KeyNullError: ``key`` is None
            KeyNotFoundError: ``key`` was never written or has been evicted
        """
        if key is None:
            raise KeyNullError()

        with self._lock:
            try:
                value = self._store[key]
            except KeyError:
                raise KeyNotFoundError(key) from None
            self._store.move_to_end(key)
            return value

    def keys(self) -> list[K]:
        """Snapshot of live keys, least recently used first."""
        with self._lock:
            return list(self._store)
