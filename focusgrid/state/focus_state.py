"""
Focus cursor state.
"""

from dataclasses import dataclass


@dataclass
class Cursor:
    """1-based position of the selected slot in a focus layout."""

    x: int = 1
    y: int = 1

    def move_to(self, x: int, y: int) -> None:
        """Move the cursor to an absolute position."""
        self.x = x
        self.y = y

    def as_tuple(self) -> tuple:
        return (self.x, self.y)

    def copy(self) -> "Cursor":
        return Cursor(self.x, self.y)


@dataclass
class MovementAllowed:
    """Per-axis gates for directional moves."""

    x: bool = True
    y: bool = True

    def allows(self, dx: int, dy: int) -> bool:
        """Check whether a displacement is permitted on its axis."""
        if dx != 0 and not self.x:
            return False
        if dy != 0 and not self.y:
            return False
        return True
