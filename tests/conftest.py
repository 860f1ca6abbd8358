"""Shared test fixtures."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest
import structlog

from forgetting_map import ForgettingMap
from forgetting_map.config import get_settings


@pytest.fixture
def abc_map() -> ForgettingMap[str, str]:
    """Capacity-3 map holding a=1, b=2, c=3 written in that order."""
    cache: ForgettingMap[str, str] = ForgettingMap(3)
    cache.write("a", "1")
    cache.write("b", "2")
    cache.write("c", "3")
    return cache


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Strip FORGETTING_MAP_* variables and the cached settings."""
    for key in list(os.environ.keys()):
        if key.startswith("FORGETTING_MAP_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Restore structlog defaults and the root log level after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    root.setLevel(level)
