# tests/unit/test_position_set.py

import pytest

from tres_uno_dos.components import Position, PositionSet, PositionSetFull


def test_empty_set() -> None:
    s = PositionSet()
    assert len(s) == 0
    assert s.is_empty()
    assert not s.contains(Position(1, 1))


def test_insert_adds_and_leaves_receiver_untouched() -> None:
    s = PositionSet()
    t = s.insert(Position(2, 3))
    assert t.contains(Position(2, 3))
    assert Position(2, 3) in t
    assert len(t) == 1
    assert len(s) == 0


def test_insert_existing_is_noop() -> None:
    s = PositionSet().insert(Position(1, 1))
    assert s.insert(Position(1, 1)) is s
    assert len(s) == 1


def test_remove_present_and_absent() -> None:
    s = PositionSet.of([Position(1, 1), Position(4, 4)])
    t = s.remove(Position(1, 1))
    assert not t.contains(Position(1, 1))
    assert t.contains(Position(4, 4))
    assert len(t) == 1
    assert t.remove(Position(3, 3)) is t


def test_equality_is_by_value() -> None:
    assert Position(2, 1) == Position(2, 1)
    assert Position(2, 1) != Position(1, 2)
    a = PositionSet.of([Position(1, 2), Position(2, 1)])
    b = PositionSet.of([Position(2, 1), Position(1, 2)])
    assert a == b


def test_full_board_enumerates_every_cell() -> None:
    board = PositionSet.full_board()
    assert len(board) == 16
    assert all(board.contains(Position(x, y)) for x in range(1, 5) for y in range(1, 5))
    assert not board.contains(Position(0, 1))
    assert not board.contains(Position(5, 5))


def test_capacity_overflow_raises() -> None:
    board = PositionSet.full_board()
    with pytest.raises(PositionSetFull):
        board.insert(Position(5, 5))
    # Re-inserting an existing element at capacity is still a no-op.
    assert board.insert(Position(1, 1)) is board


def test_capacity_overflow_is_an_assertion_failure() -> None:
    small = PositionSet.of([Position(1, 1)], capacity=1)
    with pytest.raises(AssertionError):
        small.insert(Position(1, 2))


def test_sorted_is_row_major() -> None:
    s = PositionSet.of([Position(2, 2), Position(1, 2), Position(4, 1)])
    assert s.sorted() == [Position(4, 1), Position(1, 2), Position(2, 2)]
