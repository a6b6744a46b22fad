"""
Focus manager for two-dimensional layouts of focusable items.

Navigates an abstract ``FocusLayout`` by trying to avoid empty slots, with
a simple wrap around at the borders. The layout does not place anything on
screen, it only says which item is next to which.
"""

from collections.abc import Mapping
from typing import Any, Optional, Sequence, Union

from loguru import logger

from ..state.focus_state import Cursor, MovementAllowed
from .interfaces import Box, FocusableItem, GestureDispatcher, InputCapabilities, RepaintScheduler
from .layout import FocusLayout

logger = logger.bind(module="focus_manager")


class FocusManager:
    """
    Keeps a cursor on a sparse grid of focusable items and resolves
    directional moves into a new selection.

    A manager without a layout does not handle moves, so an ancestor
    manager can take them instead.
    """

    def __init__(
        self,
        layout: Optional[Union[FocusLayout, Mapping, Sequence]] = None,
        selected: Optional[Union[Cursor, tuple]] = None,
        movement_allowed: Optional[MovementAllowed] = None,
        capabilities: Optional[InputCapabilities] = None,
        repaint_scheduler: Optional[RepaintScheduler] = None,
        gesture_dispatcher: Optional[GestureDispatcher] = None,
        owner: Any = None,
        show_parent: Any = None,
        log: Any = None,
    ):
        """
        Args:
            layout: The grid, a {row: {column: item}} mapping, or nested lists
                with None for holes.
            selected: Initial cursor, defaults to (1, 1).
            movement_allowed: Per-axis gates, both open by default.
            capabilities: Input device capabilities.
            repaint_scheduler: Receives a fast repaint request after each move.
            gesture_dispatcher: Receives synthesized taps.
            owner: Region repainted after a move, defaults to the manager itself.
            show_parent: Surrogate region repainted instead of ``owner``.
            log: Diagnostics sink, defaults to the module logger.
        """
        if isinstance(layout, Mapping):
            layout = FocusLayout(layout)
        elif layout is not None and not isinstance(layout, FocusLayout):
            layout = FocusLayout.from_rows(layout)
        self.layout: Optional[FocusLayout] = layout
        if selected is None:
            self.selected = Cursor()
        elif isinstance(selected, Cursor):
            self.selected = selected.copy()
        else:
            self.selected = Cursor(*selected)
        self._initial_selected = self.selected.copy()
        self.movement_allowed = movement_allowed or MovementAllowed()
        self.capabilities = capabilities or InputCapabilities()
        self.repaint_scheduler = repaint_scheduler
        self.gesture_dispatcher = gesture_dispatcher
        self.owner = owner
        self.show_parent = show_parent
        self.logger = log if log is not None else logger

    @property
    def is_enabled(self) -> bool:
        return self.layout is not None

    @property
    def cursor(self) -> Cursor:
        """Copy of the current cursor."""
        return self.selected.copy()

    # --- Moves ---

    def resolve_move(self, dx: int, dy: int) -> bool:
        """
        Move the selection by (dx, dy).

        Returns:
            False when there is no layout, so the move belongs to an ancestor.
            True otherwise, whether or not the selection changed.
        """
        if self.layout is None:
            return False

        if not self.movement_allowed.allows(dx, dy):
            return True

        current_item = self.layout.get(self.selected.x, self.selected.y)
        if current_item is None:
            return True

        start = self.selected.copy()
        visited = set()
        while True:
            if not self.layout.has_row(self.selected.y + dy):
                # horizontal border, try to wrap around
                moved = self._wrap_around_y(dy)
            elif not self.layout.has_slot(self.selected.x, self.selected.y + dy):
                # inner horizontal border, step to the closest item on that row
                moved = self._vertical_step(dy)
            elif not self.layout.has_slot(self.selected.x + dx, self.selected.y + dy):
                # vertical border, try to wrap around
                moved = self._wrap_around_x(dx)
            else:
                self.selected.move_to(self.selected.x + dx, self.selected.y + dy)
                moved = True

            position = self.selected.as_tuple()
            if not moved or position in visited:
                self.selected.move_to(start.x, start.y)
                break
            visited.add(position)
            self.logger.debug(f"Cursor position : {self.selected.y} : {self.selected.x}")

            new_item = self.layout.get(*position)
            if new_item is not current_item or not new_item.is_inactive:
                self._switch_focus(current_item, new_item)
                break
        return True

    def _switch_focus(self, previous: FocusableItem, item: FocusableItem) -> None:
        if previous is not item:
            previous.lose_focus()
        item.gain_focus()
        # Fast repaint of the whole owner: the item's own region may not be known
        if self.repaint_scheduler is not None:
            self.repaint_scheduler.set_dirty(self._repaint_target(), "fast")

    def _repaint_target(self) -> Any:
        if self.show_parent is not None:
            return self.show_parent
        if self.owner is not None:
            return self.owner
        return self

    def _wrap_around_x(self, dx: int) -> bool:
        """Go to the far end of the current row. False if already there."""
        y = self.selected.y
        x = 1 if dx > 0 else self.layout.last_column(y)
        if dx == 0 or x == self.selected.x:
            return False
        self.selected.x = x
        if not self.layout.has_slot(x, y):
            # search the current row for the closest item
            return self._vertical_step(0)
        return True

    def _wrap_around_y(self, dy: int) -> bool:
        """Go to the last row in the opposite direction. False if there is none."""
        if dy == 0:
            return False
        y = self.selected.y
        while self.layout.has_row(y - dy):
            y -= dy
        if y == self.selected.y:
            return False
        self.selected.y = y
        if not self.layout.has_slot(self.selected.x, y):
            return self._vertical_step(0)
        return True

    def _vertical_step(self, dy: int) -> bool:
        """
        Move to row ``y + dy``, on the occupied column closest to ``x``.

        Columns to the left are searched first, then columns to the right.
        """
        target_y = self.selected.y + dy
        row = self.layout.row(target_y)
        if not isinstance(row, Mapping) or not row:
            self.logger.error("[FocusManager] : Malformed layout")
            return False

        x = self.selected.x
        while x >= 1 and row.get(x) is None:
            x -= 1
        if x < 1:
            # not on the left, must be on the right
            x = self.selected.x
            last = max(row)
            while x <= last and row.get(x) is None:
                x += 1
            if x > last:
                self.logger.error("[FocusManager] : Malformed layout")
                return False

        self.selected.move_to(x, target_y)
        return True

    def focus_initial_item(self) -> None:
        """Containers call this after init to render the first item focused."""
        if self.capabilities.has_dpad:
            self.resolve_move(0, 0)

    def reset_cursor(self) -> None:
        """Put the cursor back where it started, without notifying anyone."""
        self.selected = self._initial_selected.copy()

    # --- Accessors ---

    def current_item(self) -> Optional[FocusableItem]:
        if self.layout is None:
            return None
        return self.layout.get(self.selected.x, self.selected.y)

    def send_tap_to_focused_item(self) -> bool:
        """Synthesize a tap on the center of the focused item."""
        item = self.current_item()
        if item is None:
            return False
        box = item.bounding_box
        point = Box(*box).center()
        if self.gesture_dispatcher is not None:
            self.gesture_dispatcher.send_tap(item, point)
        else:
            self.logger.warning(f"No gesture dispatcher, dropping tap at ({point.x}, {point.y})")
        return True

    # --- Composition ---

    def merge_layout_vertically(self, child: "FocusManager") -> None:
        """Append the child's rows below ours and switch the child off."""
        if child.layout is None:
            return
        if self.layout is None:
            self.layout = FocusLayout()
        self.layout.append_rows(child.layout)
        child.disable()

    def merge_layout_horizontally(self, child: "FocusManager") -> None:
        """Append the child's columns to the right of our rows and switch the child off."""
        if child.layout is None:
            return
        if self.layout is None:
            self.layout = FocusLayout()
        self.layout.extend_rows(child.layout)
        child.disable()

    def disable(self) -> None:
        """Turn off focus management for good; moves go to an ancestor from now on."""
        self.layout = None
