"""Game configuration.

``GameConfig`` is a frozen value object collected by the CLI (or built by
hand) and turned into an initial :class:`State` by
:func:`tres_uno_dos.game.new_game_from_config`.
"""

from dataclasses import dataclass

from tres_uno_dos.patterns import get_patterns
from tres_uno_dos.types import PatternList


@dataclass(frozen=True)
class GameConfig:
    """Session settings.

    Attributes:
        patterns (str): Key into :data:`tres_uno_dos.patterns.PATTERN_REGISTRY`.
        color (bool): Emit ANSI colors when rendering the board.
    """

    patterns: str = "default"
    color: bool = True

    def __post_init__(self) -> None:
        get_patterns(self.patterns)  # raises ValueError on unknown names

    @property
    def pattern_list(self) -> PatternList:
        return get_patterns(self.patterns)
