"""
focusgrid - directional focus navigation for sparse grids of widgets

Describe a dialog as an abstract 2D layout of focusable items with holes,
and resolve up/down/left/right moves into a new selection, with wrap
around at the edges. Ships a Textual container that drives it from the
arrow keys.
"""

__version__ = "0.1.0"
__license__ = "AGPLv3+"

# Version tuple for programmatic comparison
VERSION_TUPLE = (0, 1, 0)

from .navigation import (
    Box,
    FocusLayout,
    FocusManager,
    FocusableItem,
    InputCapabilities,
    LayoutError,
)
from .state import Cursor, MovementAllowed

# Export key components when package is imported
__all__ = [
    "__version__",
    "__license__",
    "VERSION_TUPLE",
    "Box",
    "Cursor",
    "FocusLayout",
    "FocusManager",
    "FocusableItem",
    "InputCapabilities",
    "LayoutError",
    "MovementAllowed",
]
