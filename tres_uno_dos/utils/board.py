"""Read-only board queries.

Helpers the renderer and the CLI use to inspect a :class:`State` without
reaching into its position sets directly. All functions are pure.
"""

from typing import List, Optional

from tres_uno_dos.components import Position
from tres_uno_dos.state import State
from tres_uno_dos.types import Actor


def owner_at(state: State, pos: Position) -> Optional[Actor]:
    """Return the placing player holding ``pos``, or None if the cell is free."""
    if state.uno.contains(pos):
        return Actor.UNO
    if state.tres.contains(pos):
        return Actor.TRES
    return None


def available_positions(state: State) -> List[Position]:
    """Free cells, i.e. legal placement targets."""
    return state.free.sorted()


def removable_positions(state: State) -> List[Position]:
    """Occupied cells (Uno's and Tres's), i.e. legal removal targets."""
    return sorted(
        list(state.uno) + list(state.tres), key=lambda p: (p.y, p.x)
    )


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies on the board."""
    return 1 <= pos.x <= state.size and 1 <= pos.y <= state.size
