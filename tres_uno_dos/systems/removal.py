"""Removal system.

Dos takes a marker off the board, whoever owns it, and the cell becomes free
again.
"""

from dataclasses import replace

from tres_uno_dos.components import Position
from tres_uno_dos.state import State


def removal_system(state: State, pos: Position) -> State:
    """Remove the marker on ``pos`` and return the cell to ``free``.

    Ownership is checked against both placing players independently; under the
    partition invariant at most one of them can hold ``pos``.

    Returns:
        State: New state, or the input object unchanged if ``pos`` is free.
    """
    in_uno = state.uno.contains(pos)
    in_tres = state.tres.contains(pos)
    if not (in_uno or in_tres):
        return state

    uno = state.uno.remove(pos) if in_uno else state.uno
    tres = state.tres.remove(pos) if in_tres else state.tres
    return replace(state, uno=uno, tres=tres, free=state.free.insert(pos))
