"""Text renderer.

Draws the board as a grid of ``[U]`` / ``[T]`` / ``[ ]`` cells under a
column ruler, followed by a status line and the cells the active actor may
target (free cells while placing, occupied cells while Dos removes). Colors
are ANSI styles from ``click`` and can be switched off for plain output.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

import click

from tres_uno_dos.components import Position
from tres_uno_dos.state import State
from tres_uno_dos.systems.terminal import final_winner, terminal_message
from tres_uno_dos.types import Actor, Phase
from tres_uno_dos.utils.board import (
    available_positions,
    owner_at,
    removable_positions,
)

ACTOR_COLORS: Dict[Actor, str] = {
    Actor.UNO: "bright_magenta",
    Actor.TRES: "bright_blue",
    Actor.DOS: "bright_red",
}

CELL_GLYPHS: Dict[Optional[Actor], str] = {
    Actor.UNO: "[U]",
    Actor.TRES: "[T]",
    None: "[ ]",
}

PHASE_PROMPTS: Dict[Phase, str] = {
    Phase.UNO_PLACING: "Uno's Turn (Place a piece)",
    Phase.TRES_PLACING: "Tres's Turn (Place a piece)",
    Phase.DOS_REMOVING: "Dos' Turn (Remove a U or T piece)",
}

POSITIONS_PER_LINE = 8


@dataclass(frozen=True)
class TextRenderer:
    """Plain-text board renderer.

    Attributes:
        color: Wrap player glyphs and status lines in ANSI styles.
    """

    color: bool = True

    def render(self, state: State) -> str:
        lines: List[str] = ["      GAME GRID", ""]
        lines.extend(self.board_lines(state))
        lines.append("")
        lines.append("Game Status: " + self.status_line(state))
        targets = self.target_lines(state)
        if targets:
            lines.append("")
            lines.extend(targets)
        return "\n".join(lines)

    def board_lines(self, state: State) -> List[str]:
        lines = ["    " + "".join(f"{x}   " for x in range(1, state.size + 1)).rstrip()]
        for y in range(1, state.size + 1):
            cells = []
            for x in range(1, state.size + 1):
                owner = owner_at(state, Position(x, y))
                glyph = CELL_GLYPHS[owner]
                if owner is not None:
                    glyph = self._style(glyph, owner)
                cells.append(glyph)
            lines.append(f"{y}  " + " ".join(cells))
            lines.append("")
        return lines

    def status_line(self, state: State) -> str:
        if state.over:
            return "Game Over - " + terminal_message(final_winner(state))
        return self._style(PHASE_PROMPTS[state.phase], state.active_actor)

    def target_lines(self, state: State) -> List[str]:
        """Legal targets for the active actor; empty once the game is over."""
        if state.over:
            return []
        if state.phase == Phase.DOS_REMOVING:
            removable = removable_positions(state)
            listing = " ".join(str(p) for p in removable) if removable else "None"
            return ["Removable positions: " + listing]
        available = available_positions(state)
        lines = ["Available positions: "]
        for start in range(0, len(available), POSITIONS_PER_LINE):
            chunk = available[start : start + POSITIONS_PER_LINE]
            lines.append(" ".join(str(p) for p in chunk))
        return lines

    def _style(self, text: str, actor: Actor) -> str:
        if not self.color:
            return text
        return click.style(text, fg=ACTOR_COLORS[actor], bold=True)


def render(state: State, color: bool = True) -> str:
    """Render ``state`` with a default :class:`TextRenderer`."""
    return TextRenderer(color=color).render(state)
