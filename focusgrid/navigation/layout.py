# focusgrid/navigation/layout.py
# Description: Sparse two-dimensional layout of focusable items
#
# Imports
from collections.abc import Mapping, Sequence
from typing import Any, Dict, Iterator, List, Optional, Tuple
#
#######################################################################################################################
#
# Classes:


class LayoutError(ValueError):
    """Raised when a layout description cannot be turned into a grid."""


class FocusLayout:
    """
    Abstract layout of focusable items.

    Rows and columns are 1-based. A missing entry means there is no
    focusable item at that position, e.g.::

        FocusLayout.from_rows([
            [text_input, text_input,    item],
            [ok_button,  cancel_button, item],
            [None,       item,          None],
        ])

    This does not lay out widgets on screen, it only describes which item
    is next to which. Slot (1, 1) must hold an item so the cursor never
    starts somewhere it cannot leave.
    """

    def __init__(self, rows: Optional[Mapping] = None):
        self._rows: Dict[int, Dict[int, Any]] = {}
        if rows is None:
            return
        if not isinstance(rows, Mapping):
            raise LayoutError(f"Layout rows must be a mapping, got {type(rows).__name__}")
        for y, row in rows.items():
            if not isinstance(row, Mapping):
                raise LayoutError(f"Row {y} must be a mapping, got {type(row).__name__}")
            self._rows[int(y)] = {int(x): item for x, item in row.items() if item is not None}

    @classmethod
    def from_rows(cls, rows: Sequence) -> "FocusLayout":
        """Build a layout from nested sequences, using ``None`` for holes."""
        if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
            raise LayoutError(f"Layout must be a sequence of rows, got {type(rows).__name__}")
        layout = cls()
        for y, row in enumerate(rows, start=1):
            if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
                raise LayoutError(f"Row {y} must be a sequence, got {type(row).__name__}")
            layout._rows[y] = {x: item for x, item in enumerate(row, start=1) if item is not None}
        return layout

    # --- Lookup ---

    def has_row(self, y: int) -> bool:
        return y in self._rows

    def row(self, y: int) -> Optional[Dict[int, Any]]:
        """Return the column mapping of row ``y`` or None if it does not exist."""
        return self._rows.get(y)

    def get(self, x: int, y: int) -> Any:
        """Return the item at (x, y) or None for an empty slot."""
        row = self._rows.get(y)
        if not isinstance(row, Mapping):
            return None
        return row.get(x)

    def has_slot(self, x: int, y: int) -> bool:
        return self.get(x, y) is not None

    def last_column(self, y: int) -> int:
        """Highest occupied column of row ``y``, 0 when the row is empty or missing."""
        row = self._rows.get(y)
        if not row:
            return 0
        return max(row)

    def last_row(self) -> int:
        return max(self._rows) if self._rows else 0

    def rows(self) -> Iterator[Tuple[int, Dict[int, Any]]]:
        """Iterate ``(y, row)`` pairs in row order."""
        for y in sorted(self._rows):
            yield y, self._rows[y]

    # --- Mutation ---

    def set(self, x: int, y: int, item: Any) -> None:
        """Place ``item`` at (x, y), creating the row if needed. None clears the slot."""
        row = self._rows.setdefault(y, {})
        if item is None:
            row.pop(x, None)
        else:
            row[x] = item

    def append_rows(self, other: "FocusLayout") -> None:
        """Append every row of ``other`` below the last row of this layout."""
        next_y = self.last_row()
        for _, row in other.rows():
            next_y += 1
            self._rows[next_y] = dict(row)

    def extend_rows(self, other: "FocusLayout") -> None:
        """
        Append the columns of each row of ``other`` to the right end of the
        row with the same index here. Column order and gaps are kept.
        """
        for y, row in other.rows():
            offset = self.last_column(y)
            target = self._rows.setdefault(y, {})
            for x in sorted(row):
                target[offset + x] = row[x]

    # --- Helpers ---

    def to_rows(self) -> List[List[Any]]:
        """Dense list-of-lists view with None for holes, rows 1..last_row."""
        result = []
        for y in range(1, self.last_row() + 1):
            width = self.last_column(y)
            result.append([self.get(x, y) for x in range(1, width + 1)])
        return result

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, item: Any) -> bool:
        return any(item in row.values() for row in self._rows.values())

    def __repr__(self) -> str:
        return f"FocusLayout({self.to_rows()!r})"

#
# End of layout.py
#######################################################################################################################
