"""
Directional focus navigation over sparse layouts.
"""

from .focus_manager import FocusManager
from .interfaces import Box, FocusableItem, GestureDispatcher, InputCapabilities, RepaintScheduler
from .key_events import FOCUS_KEY_EVENTS, build_key_events, key_to_displacement
from .layout import FocusLayout, LayoutError

__all__ = [
    'Box',
    'FOCUS_KEY_EVENTS',
    'FocusLayout',
    'FocusManager',
    'FocusableItem',
    'GestureDispatcher',
    'InputCapabilities',
    'LayoutError',
    'RepaintScheduler',
    'build_key_events',
    'key_to_displacement',
]
