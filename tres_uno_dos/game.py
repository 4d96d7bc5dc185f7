"""Game construction and the mutable session wrapper.

:func:`new_game` builds the initial immutable :class:`State`. :class:`Game`
holds the current state for a driver loop and exposes the boolean
``apply_move`` / ``check_game_over`` contract on top of the pure reducer, in
the same way an environment object wraps ``step``.

Usage::

    game = Game()
    if game.apply_move(Position(1, 1)):
        game.check_game_over()
"""

import logging
from typing import List, Optional

from tres_uno_dos.components import Position, PositionSet
from tres_uno_dos.config import GameConfig
from tres_uno_dos.patterns import DEFAULT_PATTERNS
from tres_uno_dos.state import State
from tres_uno_dos.step import apply_move, validate_move
from tres_uno_dos.systems import terminal
from tres_uno_dos.types import BOARD_SIZE, Actor, MoveRejection, PatternList, Phase
from tres_uno_dos.utils.board import available_positions, removable_positions

logger = logging.getLogger(__name__)


def new_game(patterns: PatternList = DEFAULT_PATTERNS) -> State:
    """Initial state: every cell free, Uno to place first."""
    if not patterns:
        raise ValueError("At least one winning pattern is required")
    return State(
        size=BOARD_SIZE,
        patterns=tuple(patterns),
        free=PositionSet.full_board(BOARD_SIZE),
        phase=Phase.UNO_PLACING,
    )


def new_game_from_config(config: GameConfig) -> State:
    return new_game(config.pattern_list)


class Game:
    """A single play session.

    Attributes:
        state (State): Current immutable snapshot. Replaced, never mutated.
        last_rejection (MoveRejection | None): Reason the latest refused move
            was refused; cleared by the next accepted move.
    """

    def __init__(
        self, patterns: PatternList = DEFAULT_PATTERNS, state: Optional[State] = None
    ):
        self.state: State = state if state is not None else new_game(patterns)
        self.last_rejection: Optional[MoveRejection] = None

    @classmethod
    def from_config(cls, config: GameConfig) -> "Game":
        return cls(state=new_game_from_config(config))

    def apply_move(self, pos: Position, actor: Optional[Actor] = None) -> bool:
        """Apply a move for the active phase.

        Returns:
            bool: True if accepted. On False the state is untouched and
                ``last_rejection`` says why.
        """
        rejection = validate_move(self.state, pos, actor)
        if rejection is not None:
            self.last_rejection = rejection
            logger.debug("Move %s refused: %s", pos, rejection)
            return False
        self.state = apply_move(self.state, pos, actor)
        self.last_rejection = None
        return True

    def check_game_over(self) -> bool:
        """Evaluate the terminal condition; returns the (monotonic) ``over`` flag."""
        self.state = terminal.check_game_over(self.state)
        return self.state.over

    def reset(self) -> State:
        self.state = new_game(self.state.patterns)
        self.last_rejection = None
        return self.state

    def winner(self) -> Optional[Actor]:
        return terminal.winner(self.state)

    @property
    def over(self) -> bool:
        return self.state.over

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def turn_phase(self) -> bool:
        return self.state.turn_phase

    @property
    def active_placer(self) -> bool:
        return self.state.active_placer

    def available_positions(self) -> List[Position]:
        return available_positions(self.state)

    def removable_positions(self) -> List[Position]:
        return removable_positions(self.state)

    def with_state(self, state: State) -> "Game":
        """Swap in an arbitrary state (tests, replays)."""
        self.state = state
        return self
