"""Terminal condition systems.

Evaluates the end of the game and sets ``state.over`` exactly once, when a
placing player covers a winning pattern or the board runs out of free cells.
The flag is never cleared; the reducer refuses every move afterwards.

Winner attribution is derived, not stored: Uno first, then Tres, and a full
board without any pattern is a draw credited to Dos.
"""

import logging
from dataclasses import replace
from typing import Optional

from tres_uno_dos.patterns import has_winning_pattern
from tres_uno_dos.state import State
from tres_uno_dos.types import Actor
from tres_uno_dos.utils.terminal import is_board_full, is_terminal_state

logger = logging.getLogger(__name__)


def check_game_over(state: State) -> State:
    """Set ``over`` if a pattern is complete or the board is full (idempotent)."""
    if is_terminal_state(state):
        return state

    if (
        has_winning_pattern(state.uno, state.patterns)
        or has_winning_pattern(state.tres, state.patterns)
        or is_board_full(state)
    ):
        message = terminal_message(final_winner(state))
        logger.info("Game over after %d moves: %s", state.turn, message)
        return replace(state, over=True, message=message)
    return state


def winner(state: State) -> Optional[Actor]:
    """Who won a finished game; ``None`` while the game is still running.

    Uno takes priority if both placing players somehow hold a pattern.
    """
    if not state.over:
        return None
    return final_winner(state)


def final_winner(state: State) -> Actor:
    """Winner attribution for a position the game has ended on.

    Does not look at ``over``; callers use it once the terminal condition
    holds.
    """
    if has_winning_pattern(state.uno, state.patterns):
        return Actor.UNO
    if has_winning_pattern(state.tres, state.patterns):
        return Actor.TRES
    return Actor.DOS


def terminal_message(result: Actor) -> str:
    """Human readable outcome line."""
    return f"{result.name.capitalize()} Wins!"
