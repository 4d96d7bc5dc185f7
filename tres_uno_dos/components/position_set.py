"""PositionSet component.

A small, capacity-bounded collection of unique :class:`Position` values backed
by a persistent ``pyrsistent.PSet``. Like every other piece of engine state it
is a value object: ``insert`` and ``remove`` return a new set and leave the
receiver untouched.

The capacity equals the number of board cells. Under the engine's partition
invariant (every cell is in exactly one of Uno / Tres / Free) no set can ever
exceed it, so overflowing is reported as an assertion failure rather than a
regular error.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List

from pyrsistent import pset
from pyrsistent.typing import PSet

from tres_uno_dos.components.position import Position
from tres_uno_dos.types import BOARD_SIZE


class PositionSetFull(AssertionError):
    """Raised when an insert would exceed the set's capacity."""


@dataclass(frozen=True)
class PositionSet:
    """Unordered set of positions with a hard capacity.

    Attributes:
        positions (PSet[Position]): Stored elements.
        capacity (int): Maximum number of live elements.
    """

    positions: PSet[Position] = pset()
    capacity: int = BOARD_SIZE * BOARD_SIZE

    @classmethod
    def of(
        cls, positions: Iterable[Position], capacity: int = BOARD_SIZE * BOARD_SIZE
    ) -> "PositionSet":
        """Build a set from any iterable, enforcing the capacity."""
        result = cls(capacity=capacity)
        for pos in positions:
            result = result.insert(pos)
        return result

    @classmethod
    def full_board(cls, size: int = BOARD_SIZE) -> "PositionSet":
        """Every cell of a ``size`` x ``size`` board."""
        return cls.of(
            (Position(x, y) for x in range(1, size + 1) for y in range(1, size + 1)),
            capacity=size * size,
        )

    def contains(self, pos: Position) -> bool:
        return pos in self.positions

    def insert(self, pos: Position) -> "PositionSet":
        """Return a set that also holds ``pos`` (no-op if already present).

        Raises:
            PositionSetFull: If ``pos`` is new and the set is at capacity.
        """
        if pos in self.positions:
            return self
        if len(self.positions) >= self.capacity:
            raise PositionSetFull(
                f"Cannot insert {pos}: set already holds {self.capacity} positions"
            )
        return replace(self, positions=self.positions.add(pos))

    def remove(self, pos: Position) -> "PositionSet":
        """Return a set without ``pos`` (no-op if absent)."""
        if pos not in self.positions:
            return self
        return replace(self, positions=self.positions.remove(pos))

    def sorted(self) -> List[Position]:
        """Elements in row-major board order (top row first, left to right)."""
        return sorted(self.positions, key=lambda p: (p.y, p.x))

    def is_empty(self) -> bool:
        return len(self.positions) == 0

    def __contains__(self, pos: object) -> bool:
        return pos in self.positions

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)
