"""Common type aliases and enumerations.

``Phase`` is the explicit three-state turn cycle that drives move validation;
``Actor`` names the three participants; ``MoveRejection`` is the diagnostic
reason attached to a refused move. None of these carry behavior.
"""

from enum import StrEnum, auto
from typing import Tuple, TYPE_CHECKING


# Forward declaration to avoid circular imports:
if TYPE_CHECKING:
    from tres_uno_dos.components import Position

BOARD_SIZE = 4
"""Side length of the board. Also bounds the live-piece capacity (N*N)."""

WinPattern = Tuple["Position", "Position", "Position", "Position"]
PatternList = Tuple[WinPattern, ...]


class Actor(StrEnum):
    """Game participants. Uno and Tres place markers, Dos removes them."""

    UNO = auto()
    DOS = auto()
    TRES = auto()


class Phase(StrEnum):
    """Active turn phase.

    The cycle is ``UNO_PLACING -> DOS_REMOVING -> TRES_PLACING -> UNO_PLACING``;
    see :data:`tres_uno_dos.step.PHASE_TRANSITIONS`.
    """

    UNO_PLACING = auto()
    DOS_REMOVING = auto()
    TRES_PLACING = auto()


PHASE_ACTOR = {
    Phase.UNO_PLACING: Actor.UNO,
    Phase.DOS_REMOVING: Actor.DOS,
    Phase.TRES_PLACING: Actor.TRES,
}


class MoveRejection(StrEnum):
    """Why a move was refused (diagnostics only, never alters state)."""

    GAME_OVER = auto()
    WRONG_ACTOR = auto()
    CELL_OCCUPIED = auto()
    CELL_EMPTY = auto()
