"""Winning patterns and their evaluation.

A *winning pattern* is an ordered tuple of four cells; a placing player wins
as soon as their set contains every cell of any configured pattern. The list
of patterns is configuration: it is stored on the :class:`State` at
construction time and looked up by name through :data:`PATTERN_REGISTRY`.

Two lists ship with the game. ``CLASSIC_PATTERNS`` is the first
three-pattern table (left column, anti-diagonal, right column);
``DEFAULT_PATTERNS`` adds the main diagonal so both diagonals count.
"""

from typing import Dict, Iterable, Optional

from tres_uno_dos.components import Position, PositionSet
from tres_uno_dos.types import PatternList, WinPattern


def _pattern(*cells: tuple[int, int]) -> WinPattern:
    a, b, c, d = (Position(x, y) for x, y in cells)
    return (a, b, c, d)


LEFT_COLUMN = _pattern((1, 1), (1, 2), (1, 3), (1, 4))
ANTI_DIAGONAL = _pattern((1, 4), (2, 3), (3, 2), (4, 1))
RIGHT_COLUMN = _pattern((4, 1), (4, 2), (4, 3), (4, 4))
MAIN_DIAGONAL = _pattern((1, 1), (2, 2), (3, 3), (4, 4))

CLASSIC_PATTERNS: PatternList = (LEFT_COLUMN, ANTI_DIAGONAL, RIGHT_COLUMN)
DEFAULT_PATTERNS: PatternList = CLASSIC_PATTERNS + (MAIN_DIAGONAL,)


def find_winning_pattern(
    positions: PositionSet, patterns: Iterable[WinPattern] = DEFAULT_PATTERNS
) -> Optional[WinPattern]:
    """Return the first pattern fully covered by ``positions``, if any."""
    for pattern in patterns:
        if all(positions.contains(cell) for cell in pattern):
            return pattern
    return None


def has_winning_pattern(
    positions: PositionSet, patterns: Iterable[WinPattern] = DEFAULT_PATTERNS
) -> bool:
    """True if ``positions`` covers at least one pattern (short-circuits)."""
    return find_winning_pattern(positions, patterns) is not None


PATTERN_REGISTRY: Dict[str, PatternList] = {
    "default": DEFAULT_PATTERNS,
    "classic": CLASSIC_PATTERNS,
}
"""Name → pattern list mapping for game configuration."""


def get_patterns(name: str) -> PatternList:
    """Look up a registered pattern list.

    Raises:
        ValueError: If ``name`` is not registered.
    """
    try:
        return PATTERN_REGISTRY[name]
    except KeyError:
        raise ValueError(
            f"Unknown pattern list '{name}' (expected one of {sorted(PATTERN_REGISTRY)})"
        ) from None
