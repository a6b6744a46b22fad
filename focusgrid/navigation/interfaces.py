# focusgrid/navigation/interfaces.py
# Description: Collaborator interfaces for the focus navigator
#
# Imports
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, NamedTuple
#
#######################################################################################################################
#
# Classes:


class Box(NamedTuple):
    """Screen rectangle of a focusable item. A point is a zero-size box."""
    x: float
    y: float
    width: float = 0
    height: float = 0

    def center(self) -> "Box":
        """Return the zero-size box at the center of this one."""
        return Box(self.x + self.width / 2, self.y + self.height / 2, 0, 0)


class FocusableItem(ABC):
    """
    Something that can sit in a focus layout slot.

    Items are owned by the surrounding widget tree; layouts only hold
    references to them.
    """

    @abstractmethod
    def gain_focus(self) -> None:
        """Called when the navigator selects this item."""

    @abstractmethod
    def lose_focus(self) -> None:
        """Called when the navigator moves away from this item."""

    @property
    def is_inactive(self) -> bool:
        """Inactive items are passed over when the cursor lands on them again."""
        return False

    @property
    @abstractmethod
    def bounding_box(self) -> Box:
        """Current screen rectangle of the item."""


class RepaintScheduler(ABC):
    """Accepts requests to redraw a region of the UI."""

    @abstractmethod
    def set_dirty(self, target: Any, mode: str = "fast") -> None:
        """Mark ``target`` for repaint. ``fast`` repaints must not flash."""


class GestureDispatcher(ABC):
    """Delivers synthesized pointer gestures to the presentation layer."""

    @abstractmethod
    def send_tap(self, item: FocusableItem, point: Box) -> None:
        """Request a tap at ``point`` on ``item``."""


@dataclass(frozen=True)
class InputCapabilities:
    """What the input device can do, as far as focus navigation cares."""
    has_dpad: bool = True
    has_few_keys: bool = False

#
# End of interfaces.py
#######################################################################################################################
