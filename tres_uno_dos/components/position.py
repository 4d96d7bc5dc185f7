"""Position component.

Immutable 1-based grid coordinates. ``x`` is the column and ``y`` the row, so
``Position(1, 4)`` is the bottom-left cell of the 4x4 board.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (1 at left).
        y: Row index (1 at top).
    """

    x: int
    y: int

    def __str__(self) -> str:
        return f"[{self.x},{self.y}]"
