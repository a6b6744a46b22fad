"""
Root conftest.py for shared test fixtures and configuration.
"""

import sys
from pathlib import Path

import pytest
from loguru import logger

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from focusgrid import config as focusgrid_config
from focusgrid.navigation.interfaces import Box, FocusableItem, GestureDispatcher, RepaintScheduler


# ========== Fake Collaborators ==========

class FakeItem(FocusableItem):
    """Focusable item that records the notifications it receives."""

    def __init__(self, name, inactive=False, box=None):
        self.name = name
        self.inactive = inactive
        self.box = box or Box(0, 0, 10, 2)
        self.events = []

    def gain_focus(self):
        self.events.append("focus")

    def lose_focus(self):
        self.events.append("unfocus")

    @property
    def is_inactive(self):
        return self.inactive

    @property
    def bounding_box(self):
        return self.box

    def __repr__(self):
        return f"FakeItem({self.name!r})"


class RecordingRepaintScheduler(RepaintScheduler):
    def __init__(self):
        self.calls = []

    def set_dirty(self, target, mode="fast"):
        self.calls.append((target, mode))


class RecordingGestureDispatcher(GestureDispatcher):
    def __init__(self):
        self.taps = []

    def send_tap(self, item, point):
        self.taps.append((item, point))


# ========== Fixtures ==========

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config loader at an empty temp file location for every test."""
    config_path = tmp_path / "config.toml"
    monkeypatch.setenv(focusgrid_config.CONFIG_PATH_ENV_VAR, str(config_path))
    monkeypatch.delenv("FOCUSGRID_DPAD", raising=False)
    monkeypatch.delenv("FOCUSGRID_FEW_KEYS", raising=False)
    focusgrid_config.clear_settings_cache()
    yield config_path
    focusgrid_config.clear_settings_cache()


@pytest.fixture
def make_items():
    """Create named FakeItems: make_items("A", "B") -> (A, B)."""
    def _make(*names, inactive=()):
        return tuple(FakeItem(name, inactive=name in inactive) for name in names)
    return _make


@pytest.fixture
def repaint():
    return RecordingRepaintScheduler()


@pytest.fixture
def dispatcher():
    return RecordingGestureDispatcher()


@pytest.fixture
def log_messages():
    """Capture loguru records as (level, message) tuples."""
    records = []
    handler_id = logger.add(
        lambda message: records.append((message.record["level"].name, message.record["message"])),
        level="DEBUG",
    )
    yield records
    logger.remove(handler_id)
