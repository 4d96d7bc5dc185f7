"""Terminal condition helper predicates."""

from tres_uno_dos.state import State


def is_terminal_state(state: State) -> bool:
    """Return True if the game has already ended."""
    return state.over


def is_board_full(state: State) -> bool:
    """Return True if no free cell remains."""
    return state.free.is_empty()
