"""
Textual widgets for grid focus navigation.
"""

from .focus_container import (
    FocusContainer,
    TextualGestureDispatcher,
    TextualRepaintScheduler,
    WidgetFocusItem,
    build_widget_layout,
)

__all__ = [
    'FocusContainer',
    'TextualGestureDispatcher',
    'TextualRepaintScheduler',
    'WidgetFocusItem',
    'build_widget_layout',
]
