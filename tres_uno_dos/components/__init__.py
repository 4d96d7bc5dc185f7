"""tres_uno_dos.components
=========================

Aggregate import surface for the board value types.

``Position`` is a single grid coordinate; ``PositionSet`` is the persistent,
capacity-bounded collection the engine keeps one of per owner (Uno, Tres and
the free cells)::

    from tres_uno_dos.components import Position, PositionSet

Both are frozen dataclasses with no behavior beyond their own bookkeeping;
game rules live in the ``systems`` package.
"""

from .position import Position
from .position_set import PositionSet, PositionSetFull

__all__ = [
    "Position",
    "PositionSet",
    "PositionSetFull",
]
