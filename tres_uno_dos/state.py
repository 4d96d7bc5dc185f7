"""Core immutable game ``State`` dataclass.

This module defines the frozen :class:`State` object that represents a whole
game snapshot between two moves. Every transition is a pure function that
takes a previous ``State`` plus a target :class:`Position` and returns a *new*
``State``; nothing is mutated in place. A refused move simply returns the
input object unchanged, which makes "no state change on rejection" trivially
checkable.

Design notes:

* The three position sets ``uno``, ``tres`` and ``free`` partition the board.
  Every transition moves exactly one cell between two of them.
* ``phase`` is an explicit enumeration of the three-step turn cycle. The two
  legacy booleans (``turn_phase`` and ``active_placer``) are exposed as
  derived read-only properties for renderers that think in those terms.
* ``over`` is a monotonic terminal marker; the reducer short-circuits on
  terminal states.

See :mod:`tres_uno_dos.step` for how the reducer orchestrates the systems.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from tres_uno_dos.components import Position, PositionSet
from tres_uno_dos.patterns import DEFAULT_PATTERNS
from tres_uno_dos.types import BOARD_SIZE, PHASE_ACTOR, Actor, PatternList, Phase


@dataclass(frozen=True)
class Move:
    """Record of an accepted move."""

    actor: Actor
    position: Position


@dataclass(frozen=True)
class State:
    """Immutable game state.

    Attributes:
        size (int): Board side length.
        patterns (PatternList): Winning patterns evaluated by the terminal system.
        uno (PositionSet): Cells holding Uno's markers.
        tres (PositionSet): Cells holding Tres's markers.
        free (PositionSet): Empty cells.
        phase (Phase): Whose turn it is.
        over (bool): True once a pattern is completed or the board is full.
        turn (int): Number of accepted moves so far.
        last_move (Move | None): Most recent accepted move.
        message (str | None): Optional informational / terminal message.
    """

    # Board
    size: int = BOARD_SIZE
    patterns: PatternList = DEFAULT_PATTERNS

    # Position sets
    uno: PositionSet = PositionSet()
    tres: PositionSet = PositionSet()
    free: PositionSet = PositionSet.full_board()

    # Status
    phase: Phase = Phase.UNO_PLACING
    over: bool = False
    turn: int = 0
    last_move: Optional[Move] = None
    message: Optional[str] = None

    @property
    def active_actor(self) -> Actor:
        return PHASE_ACTOR[self.phase]

    @property
    def turn_phase(self) -> bool:
        """True while one of the placing players is to move."""
        return self.phase != Phase.DOS_REMOVING

    @property
    def active_placer(self) -> bool:
        """True when Uno's placement is (or, after the removal, would be) active.

        Matches the two-boolean encoding: it is False from Uno's placement
        until Tres has placed.
        """
        return self.phase == Phase.UNO_PLACING

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Position sets are rendered as sorted lists of ``(x, y)`` tuples;
        empty sets and ``None`` values are skipped to keep output concise.
        Useful for logging and debugging.

        Returns:
            PMap[str, Any]: Persistent map of field name to value for all
            populated fields.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            if field == "patterns":
                continue
            value = getattr(self, field)
            if isinstance(value, PositionSet):
                if value.is_empty():
                    continue
                value = [(p.x, p.y) for p in value.sorted()]
            elif value is None:
                continue
            description = description.set(field, value)
        return description
