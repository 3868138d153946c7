"""
Root test configuration and fixtures for the hiking project.

Note: sys.path manipulation is handled here so tests run without installing
the package.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hiking.models import Bridge, Hiker  # noqa: E402
from hiking.settings import DATA_DIR, get_settings  # noqa: E402


def _hikers(*speeds: float) -> list[Hiker]:
    """Hikers named A, B, C, ... with the given speeds, in order."""
    return [Hiker(name=chr(ord("A") + i), speed=speed) for i, speed in enumerate(speeds)]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; tests that patch the environment need a fresh load."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """configure_logging replaces root handlers; put the originals back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def ferry_hikers() -> list[Hiker]:
    """Roster where the two fastest shuttling the torch wins (speeds 10, 20, 40, 50)."""
    return _hikers(10, 20, 40, 50)


@pytest.fixture
def mixed_hikers() -> list[Hiker]:
    """Roster with one slow hiker and three fast ones (speeds 10, 120, 140, 150)."""
    return _hikers(10, 120, 140, 150)


@pytest.fixture
def escort_hikers() -> list[Hiker]:
    """Roster where the fastest escorting each slow hiker wins (speeds 100, 25, 20, 10)."""
    return _hikers(100, 25, 20, 10)


@pytest.fixture
def bridge_100() -> Bridge:
    return Bridge(name="1st", length=100)


@pytest.fixture
def event_file(tmp_path: Path):
    """Factory writing event file text to a temporary path."""

    def _write(text: str, name: str = "hike.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_hikers():
    """Factory building hikers named A, B, C, ... from speeds."""
    return _hikers
