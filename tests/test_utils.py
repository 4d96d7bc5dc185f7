from typing import Iterable, List, Optional, Sequence, Tuple

from tres_uno_dos.components import Position, PositionSet
from tres_uno_dos.game import new_game
from tres_uno_dos.patterns import DEFAULT_PATTERNS
from tres_uno_dos.state import State
from tres_uno_dos.step import step
from tres_uno_dos.types import BOARD_SIZE, PatternList, Phase

Cell = Tuple[int, int]


def positions(cells: Iterable[Cell]) -> List[Position]:
    return [Position(x, y) for x, y in cells]


def make_state(
    uno: Iterable[Cell] = (),
    tres: Iterable[Cell] = (),
    phase: Phase = Phase.UNO_PLACING,
    over: bool = False,
    patterns: PatternList = DEFAULT_PATTERNS,
) -> State:
    """State with the given markers; every other cell is free."""
    uno_set = PositionSet.of(positions(uno))
    tres_set = PositionSet.of(positions(tres))
    free = PositionSet.full_board()
    for pos in list(uno_set) + list(tres_set):
        free = free.remove(pos)
    return State(
        patterns=patterns,
        uno=uno_set,
        tres=tres_set,
        free=free,
        phase=phase,
        over=over,
    )


def play(moves: Sequence[Cell], state: Optional[State] = None) -> State:
    """Run ``moves`` through ``step``, asserting every one is accepted."""
    state = state if state is not None else new_game()
    for x, y in moves:
        next_state = step(state, Position(x, y))
        assert next_state is not state, f"move {(x, y)} refused in {state.phase}"
        state = next_state
    return state


def assert_partition(state: State) -> None:
    uno, tres, free = set(state.uno), set(state.tres), set(state.free)
    assert not (uno & tres)
    assert not (uno & free)
    assert not (tres & free)
    assert len(uno) + len(tres) + len(free) == BOARD_SIZE * BOARD_SIZE
    assert uno | tres | free == set(PositionSet.full_board())


def set_contents(state: State) -> Tuple[frozenset, frozenset, frozenset]:
    return frozenset(state.uno), frozenset(state.tres), frozenset(state.free)
