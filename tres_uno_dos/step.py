"""State reducer and move orchestration.

This module wires the placement, removal and terminal systems into the two
public transitions:

* :func:`apply_move` validates a target cell against the active phase and,
  if accepted, applies it and advances the phase.
* :func:`step` is ``apply_move`` followed by
  :func:`tres_uno_dos.systems.terminal.check_game_over`, i.e. one full turn
  of the driver loop.

Both are pure: they return a *new* :class:`State`, or the very same object
when the move is refused. A refused move is an expected outcome, never an
exception.

Phase cycle (``PHASE_TRANSITIONS``)::

    UNO_PLACING --place on free--> DOS_REMOVING --remove occupied--> TRES_PLACING
         ^                                                                |
         +----------------------------place on free-----------------------+
"""

import logging
from dataclasses import replace
from typing import Callable, Dict, Optional

from tres_uno_dos.components import Position
from tres_uno_dos.state import Move, State
from tres_uno_dos.systems.placement import placement_system
from tres_uno_dos.systems.removal import removal_system
from tres_uno_dos.systems.terminal import check_game_over
from tres_uno_dos.types import Actor, MoveRejection, Phase
from tres_uno_dos.utils.terminal import is_terminal_state

logger = logging.getLogger(__name__)

MoveSystem = Callable[[State, Position], State]

PHASE_TRANSITIONS: Dict[Phase, Phase] = {
    Phase.UNO_PLACING: Phase.DOS_REMOVING,
    Phase.DOS_REMOVING: Phase.TRES_PLACING,
    Phase.TRES_PLACING: Phase.UNO_PLACING,
}

PHASE_SYSTEMS: Dict[Phase, MoveSystem] = {
    Phase.UNO_PLACING: placement_system,
    Phase.DOS_REMOVING: removal_system,
    Phase.TRES_PLACING: placement_system,
}


def validate_move(
    state: State, pos: Position, actor: Optional[Actor] = None
) -> Optional[MoveRejection]:
    """Return why ``pos`` would be refused, or ``None`` if it is legal.

    Args:
        state (State): Current state.
        pos (Position): Target cell. Bounds are the caller's concern; an
            off-board position is simply never a member of any set.
        actor (Actor | None): Optional claim of who is moving. When given it
            must match the active phase.
    """
    if is_terminal_state(state):
        return MoveRejection.GAME_OVER
    if actor is not None and actor != state.active_actor:
        return MoveRejection.WRONG_ACTOR
    if state.phase == Phase.DOS_REMOVING:
        if not (state.uno.contains(pos) or state.tres.contains(pos)):
            return MoveRejection.CELL_EMPTY
    elif not state.free.contains(pos):
        return MoveRejection.CELL_OCCUPIED
    return None


def apply_move(state: State, pos: Position, actor: Optional[Actor] = None) -> State:
    """Apply one move for the active phase.

    Args:
        state (State): Previous immutable state.
        pos (Position): Target cell.
        actor (Actor | None): Optional claim of who is moving.

    Returns:
        State: Next state with the cell moved between sets, the phase advanced
            and ``turn`` incremented. If the move is refused the input object
            is returned unchanged.
    """
    rejection = validate_move(state, pos, actor)
    if rejection is not None:
        logger.debug(
            "Rejected %s at %s during %s: %s", actor or "move", pos, state.phase, rejection
        )
        return state

    mover = state.active_actor
    state = PHASE_SYSTEMS[state.phase](state, pos)
    state = replace(
        state,
        phase=PHASE_TRANSITIONS[state.phase],
        turn=state.turn + 1,
        last_move=Move(actor=mover, position=pos),
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Applied %s at %s: %s", mover, pos, dict(state.description))
    return state


def step(state: State, pos: Position, actor: Optional[Actor] = None) -> State:
    """Apply a move and evaluate the terminal condition.

    Returns:
        State: Next state. The same object if the move was refused (terminal
            evaluation only runs after accepted moves).
    """
    next_state = apply_move(state, pos, actor)
    if next_state is state:
        return state
    return check_game_over(next_state)
