"""
Command-line driver for Tres, Uno, Dos.

Runs the interactive loop around the engine: render the board, read a
coordinate pair, submit it, and evaluate the terminal condition after every
accepted move. Input that is malformed or off the board is rejected here and
never reaches the engine.
"""

import logging
import re
from typing import Optional

import click

from tres_uno_dos.components import Position
from tres_uno_dos.config import GameConfig
from tres_uno_dos.game import Game
from tres_uno_dos.patterns import PATTERN_REGISTRY
from tres_uno_dos.renderer import TextRenderer
from tres_uno_dos.renderer.text import ACTOR_COLORS
from tres_uno_dos.state import State
from tres_uno_dos.types import Actor
from tres_uno_dos.utils.board import is_in_bounds

logger = logging.getLogger(__name__)

QUIT_WORDS = {"q", "quit", "exit"}
TITLE_ORDER = (Actor.TRES, Actor.UNO, Actor.DOS)
INPUT_ERROR = "Invalid input! Please enter coordinates as two numbers (e.g., 1 2)."
MOVE_ERROR = "Invalid move! Try again."


def setup_logging(verbose: bool = False, quiet: bool = False):
    """Setup logging configuration."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def parse_coordinates(text: str, state: State) -> Position:
    """Parse ``"x y"`` (or ``"x,y"``) into a :class:`Position` on ``state``'s board.

    Raises:
        ValueError: With a user-facing message if the text is not two integers
            or the position lies outside the board.
    """
    parts = [p for p in re.split(r"[\s,]+", text.strip()) if p]
    if len(parts) != 2:
        raise ValueError(INPUT_ERROR)
    try:
        pos = Position(int(parts[0]), int(parts[1]))
    except ValueError:
        raise ValueError(INPUT_ERROR) from None
    if not is_in_bounds(state, pos):
        raise ValueError(
            f"Invalid position! Coordinates must be between 1 and {state.size}."
        )
    return pos


def show_title(renderer: TextRenderer) -> None:
    """Title screen, held until the player presses Enter."""
    click.clear()
    names = [actor.name.capitalize() for actor in TITLE_ORDER]
    if renderer.color:
        names = [
            click.style(name, fg=ACTOR_COLORS[actor], bold=True)
            for name, actor in zip(names, TITLE_ORDER)
        ]
    title = ", ".join(names)
    click.echo("\n" + title + "\n")
    click.pause("Press Enter to Continue")


def report(renderer: TextRenderer, error: str) -> None:
    """Show an input or move error and wait before the board is redrawn."""
    click.echo(click.style(error, fg="bright_red", bold=True) if renderer.color else error)
    click.pause("Press Enter to continue...")


def play(game: Game, renderer: TextRenderer) -> Optional[str]:
    """Drive ``game`` until it ends or the player quits.

    Returns:
        The terminal message, or None if the session was abandoned.
    """
    while not game.over:
        click.clear()
        click.echo(renderer.render(game.state))

        try:
            raw = click.prompt("Enter coordinates (x y)", prompt_suffix=": ")
        except click.Abort:
            logger.info("Input closed, leaving game")
            return None
        if raw.strip().lower() in QUIT_WORDS:
            logger.info("Player quit after %d moves", game.state.turn)
            return None

        try:
            pos = parse_coordinates(raw, game.state)
        except ValueError as exc:
            report(renderer, str(exc))
            continue

        if not game.apply_move(pos):
            report(renderer, MOVE_ERROR)
            continue
        game.check_game_over()

    click.clear()
    click.echo(renderer.render(game.state))
    click.pause("Game Over! Press Enter to exit...")
    return game.state.message


@click.command(name="tres-uno-dos")
@click.option('--patterns', '-p',
              type=click.Choice(sorted(PATTERN_REGISTRY)),
              default='default', show_default=True,
              help='Winning pattern list to play with')
@click.option('--no-color', is_flag=True,
              help='Disable colored output')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True,
              help='Suppress non-essential output')
@click.version_option(version='0.1.0', prog_name='tres-uno-dos')
def cli(patterns: str, no_color: bool, verbose: bool, quiet: bool):
    """
    Tres, Uno, Dos on a 4x4 board.

    Uno and Tres place markers, Dos removes one in between. Complete a
    winning pattern to win; if the board fills up first, Dos wins.

    Enter moves as two numbers, column then row (e.g. "2 3"). Type "q" to quit.
    """
    setup_logging(verbose, quiet)
    config = GameConfig(patterns=patterns, color=not no_color)
    renderer = TextRenderer(color=config.color)
    show_title(renderer)
    result = play(Game.from_config(config), renderer)
    if result is None:
        click.echo("Game abandoned.")


if __name__ == '__main__':
    cli()
