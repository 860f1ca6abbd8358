"""forgetting-map: a bounded, thread-safe least-recently-used key-value map.

Usage:
    from forgetting_map import ForgettingMap

    cache = ForgettingMap[str, int](3)
    cache.write("a", 1)
    cache.read("a")
"""

from forgetting_map.cache import ForgettingMap
from forgetting_map.exceptions import (
    ForgettingMapError,
    KeyNotFoundError,
    KeyNullError,
    NotInitializedError,
    ValueNullError,
)
from forgetting_map.port import RecencyCachePort

__all__ = [
    "ForgettingMap",
    "ForgettingMapError",
    "KeyNotFoundError",
    "KeyNullError",
    "NotInitializedError",
    "RecencyCachePort",
    "ValueNullError",
]
__version__ = "1.0.0"
