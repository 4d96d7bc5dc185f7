"""Placement system.

Moves a free cell into the set of whichever placing player is active. Does
not advance the phase; the reducer in :mod:`tres_uno_dos.step` does that once
the move is known to be accepted.
"""

from dataclasses import replace

from tres_uno_dos.components import Position
from tres_uno_dos.state import State
from tres_uno_dos.types import Phase


def placement_system(state: State, pos: Position) -> State:
    """Place the active player's marker on ``pos``.

    Args:
        state (State): Current state; ``phase`` must be a placing phase.
        pos (Position): Target cell.

    Returns:
        State: New state with ``pos`` moved from ``free`` into ``uno`` or
            ``tres``. The input object is returned unchanged if ``pos`` is not
            free or no placing phase is active.
    """
    if not state.free.contains(pos):
        return state
    if state.phase == Phase.UNO_PLACING:
        return replace(state, uno=state.uno.insert(pos), free=state.free.remove(pos))
    if state.phase == Phase.TRES_PLACING:
        return replace(
            state, tres=state.tres.insert(pos), free=state.free.remove(pos)
        )
    return state
