# focusgrid/Widgets/focus_container.py
# Textual container that moves focus over a 2D layout of its widgets
#
# Imports
from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict, Optional, Sequence, Union

# Third-party imports
from textual import events
from textual.binding import Binding
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Checkbox, RadioButton
from loguru import logger

# Local imports
from ..config import get_movement_allowed, get_setting
from ..navigation.focus_manager import FocusManager
from ..navigation.interfaces import (
    Box, FocusableItem, GestureDispatcher, InputCapabilities, RepaintScheduler,
)
from ..navigation.key_events import build_key_events, key_to_displacement
from ..navigation.layout import FocusLayout
from ..state.focus_state import Cursor, MovementAllowed
from ..Utils.input_capabilities import detect_input_capabilities

# Configure logger
logger = logger.bind(module="focus_container")


class WidgetFocusItem(FocusableItem):
    """Layout slot backed by a Textual widget."""

    FOCUSED_CLASS = "-grid-focused"

    def __init__(self, widget: Widget, inactive: Optional[bool] = None) -> None:
        self.widget = widget
        self._inactive = inactive

    def gain_focus(self) -> None:
        self.widget.add_class(self.FOCUSED_CLASS)
        if self.widget.can_focus and not self.widget.disabled:
            self.widget.focus()

    def lose_focus(self) -> None:
        self.widget.remove_class(self.FOCUSED_CLASS)

    @property
    def is_inactive(self) -> bool:
        if self._inactive is not None:
            return self._inactive
        return bool(self.widget.disabled)

    @property
    def bounding_box(self) -> Box:
        region = self.widget.region
        return Box(region.x, region.y, region.width, region.height)

    def __repr__(self) -> str:
        return f"WidgetFocusItem({self.widget!r})"


def build_widget_layout(
    rows: Union[FocusLayout, Mapping, Sequence],
    inactive: Sequence[Widget] = (),
) -> FocusLayout:
    """
    Wrap nested lists, or a {row: {column: widget}} mapping, into a FocusLayout.

    A widget that appears in several slots is wrapped once, so the slots
    share one item. Widgets listed in ``inactive`` are marked inactive.
    Entries that already are FocusableItems are kept as they are.
    """
    if isinstance(rows, FocusLayout):
        return rows
    wrapped: Dict[int, FocusableItem] = {}
    inactive_ids = {id(widget) for widget in inactive}

    def wrap(entry: Any) -> Any:
        if entry is None or isinstance(entry, FocusableItem):
            return entry
        if id(entry) not in wrapped:
            wrapped[id(entry)] = WidgetFocusItem(
                entry, inactive=True if id(entry) in inactive_ids else None
            )
        return wrapped[id(entry)]

    if isinstance(rows, Mapping):
        return FocusLayout({
            y: {x: wrap(entry) for x, entry in row.items()} if isinstance(row, Mapping) else row
            for y, row in rows.items()
        })
    return FocusLayout.from_rows([[wrap(entry) for entry in row] for row in rows])


class TextualRepaintScheduler(RepaintScheduler):
    """Repaint requests become widget refreshes."""

    def set_dirty(self, target: Any, mode: str = "fast") -> None:
        refresh = getattr(target, "refresh", None)
        if refresh is None:
            return
        # A fast repaint only redraws, anything else also redoes layout
        if mode == "fast":
            refresh()
        else:
            refresh(layout=True)


class TextualGestureDispatcher(GestureDispatcher):
    """Turns synthesized taps into TapRequested messages from the container."""

    def __init__(self, container: "FocusContainer") -> None:
        self.container = container

    def send_tap(self, item: FocusableItem, point: Box) -> None:
        self.container.post_message(FocusContainer.TapRequested(self.container, item, point))


class FocusContainer(Widget, can_focus=True):
    """
    Container that manages focus for a whole dialog.

    Arrow keys move focus over an abstract layout of the container's
    widgets. A container without a layout lets the keys bubble up to an
    ancestor FocusContainer.
    """

    DEFAULT_CSS = """
    FocusContainer {
        layout: vertical;
        height: auto;
    }
    FocusContainer .-grid-focused {
        text-style: bold;
    }
    """

    BINDINGS = [
        Binding("enter", "activate_focused", "Activate", show=False),
    ]

    class TapRequested(Message):
        """Posted when the focused item should be activated as if tapped."""

        def __init__(self, container: "FocusContainer", item: FocusableItem, point: Box) -> None:
            self.container = container
            self.item = item
            self.point = point
            super().__init__()

    def __init__(
        self,
        *children: Widget,
        layout: Optional[Union[FocusLayout, Sequence]] = None,
        inactive: Sequence[Widget] = (),
        selected: Optional[Union[Cursor, tuple]] = None,
        movement_allowed: Optional[MovementAllowed] = None,
        capabilities: Optional[InputCapabilities] = None,
        show_parent: Optional[Widget] = None,
        focus_on_mount: Optional[bool] = None,
        **kwargs,
    ) -> None:
        super().__init__(*children, **kwargs)
        self.capabilities = capabilities or detect_input_capabilities()
        self.key_events = build_key_events(self.capabilities)
        if focus_on_mount is None:
            focus_on_mount = get_setting("focus", "focus_initial_item", True)
        self.focus_on_mount = focus_on_mount
        self.focus_manager = FocusManager(
            layout=build_widget_layout(layout, inactive) if layout is not None else None,
            selected=selected,
            movement_allowed=movement_allowed or get_movement_allowed(),
            capabilities=self.capabilities,
            repaint_scheduler=TextualRepaintScheduler(),
            gesture_dispatcher=TextualGestureDispatcher(self),
            owner=self,
            show_parent=show_parent,
        )

    def set_layout(
        self,
        layout: Optional[Union[FocusLayout, Sequence]],
        inactive: Sequence[Widget] = (),
    ) -> None:
        """Replace the layout, e.g. once widgets exist after compose."""
        previous = self.focus_manager.current_item()
        if previous is not None:
            previous.lose_focus()
        self.focus_manager.layout = build_widget_layout(layout, inactive) if layout is not None else None
        self.focus_manager.reset_cursor()
        if self.focus_on_mount and self.focus_manager.is_enabled:
            self.focus_initial_item()

    def on_mount(self) -> None:
        if self.focus_on_mount and self.focus_manager.is_enabled:
            self.call_after_refresh(self.focus_initial_item)

    def focus_initial_item(self) -> None:
        self.focus_manager.focus_initial_item()
        self._keep_keyboard_focus()

    def on_key(self, event: events.Key) -> None:
        displacement = key_to_displacement(self.key_events, event.key)
        if displacement is None:
            return
        if self.focus_manager.resolve_move(*displacement):
            event.stop()
            event.prevent_default()
            self._keep_keyboard_focus()

    def _keep_keyboard_focus(self) -> None:
        # Keys must keep arriving here when the selected widget cannot be focused
        widget = self.current_widget()
        if widget is None or (widget.can_focus and not widget.disabled):
            return
        if not self.has_focus:
            self.focus()

    def action_activate_focused(self) -> None:
        if not self.focus_manager.send_tap_to_focused_item():
            logger.debug("Activate requested with no focused item")

    def on_focus_container_tap_requested(self, message: "FocusContainer.TapRequested") -> None:
        if message.container is not self:
            return
        widget = getattr(message.item, "widget", None)
        if isinstance(widget, Button):
            widget.press()
        elif isinstance(widget, (Checkbox, RadioButton)):
            widget.toggle()

    # --- Accessors ---

    def current_item(self) -> Optional[FocusableItem]:
        return self.focus_manager.current_item()

    def current_widget(self) -> Optional[Widget]:
        return getattr(self.current_item(), "widget", None)

    def send_tap_to_focused_item(self) -> bool:
        return self.focus_manager.send_tap_to_focused_item()

    # --- Composition ---

    def merge_layout_vertically(self, child: "FocusContainer") -> None:
        self.focus_manager.merge_layout_vertically(child.focus_manager)

    def merge_layout_horizontally(self, child: "FocusContainer") -> None:
        self.focus_manager.merge_layout_horizontally(child.focus_manager)

    def disable_focus_management(self) -> None:
        self.focus_manager.disable()

#
# End of focus_container.py
#######################################################################################################################
