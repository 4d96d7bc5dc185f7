import click
import pytest
from click.testing import CliRunner

from tres_uno_dos.cli import cli, parse_coordinates
from tres_uno_dos.components import Position
from tres_uno_dos.game import new_game

UNO_WIN_INPUT = "\n".join(
    [
        "1 1", "1 1", "2 1",
        "1 1", "2 1", "3 1",
        "1 2", "3 1", "2 1",
        "1 3", "2 1", "3 1",
        "1 4",
    ]
) + "\n"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 2", Position(1, 2)),
        ("  4   4 ", Position(4, 4)),
        ("3,1", Position(3, 1)),
        ("2, 3", Position(2, 3)),
    ],
)
def test_parse_coordinates(text: str, expected: Position) -> None:
    assert parse_coordinates(text, new_game()) == expected


@pytest.mark.parametrize("text", ["", "1", "1 2 3", "a b", "1 x"])
def test_parse_coordinates_rejects_malformed(text: str) -> None:
    with pytest.raises(ValueError, match="two numbers"):
        parse_coordinates(text, new_game())


@pytest.mark.parametrize("text", ["0 1", "5 1", "1 5", "-1 2"])
def test_parse_coordinates_rejects_out_of_range(text: str) -> None:
    with pytest.raises(ValueError, match="between 1 and 4"):
        parse_coordinates(text, new_game())


def test_cli_plays_to_uno_win() -> None:
    result = CliRunner().invoke(cli, ["--no-color", "-q"], input=UNO_WIN_INPUT)
    assert result.exit_code == 0
    assert "Game Over - Uno Wins!" in result.output
    assert "Game abandoned." not in result.output


def test_cli_reports_bad_input_and_refused_moves() -> None:
    result = CliRunner().invoke(
        cli, ["--no-color", "-q"], input="hello\n9 9\n1 1\n2 2\nq\n"
    )
    assert result.exit_code == 0
    assert "Invalid input!" in result.output
    assert "Invalid position! Coordinates must be between 1 and 4." in result.output
    assert "Invalid move! Try again." in result.output
    assert "Game abandoned." in result.output


def test_cli_end_of_input_abandons_game() -> None:
    result = CliRunner().invoke(cli, ["--no-color", "-q"], input="1 1\n")
    assert result.exit_code == 0
    assert "Game abandoned." in result.output


def test_cli_classic_patterns_ignore_main_diagonal() -> None:
    # Uno builds the main diagonal; only the default list counts it.
    moves = [
        "1 1", "1 1", "4 1",
        "1 1", "4 1", "3 1",
        "2 2", "3 1", "4 1",
        "3 3", "4 1", "3 1",
        "4 4",
    ]
    text = "\n".join(moves) + "\nq\n"
    default = CliRunner().invoke(cli, ["--no-color", "-q"], input=text)
    classic = CliRunner().invoke(cli, ["--no-color", "-q", "--patterns", "classic"], input=text)
    assert "Game Over - Uno Wins!" in default.output
    assert "Game Over" not in classic.output
    assert "Game abandoned." in classic.output


def test_cli_rejects_unknown_pattern_list() -> None:
    result = CliRunner().invoke(cli, ["--patterns", "rows"])
    assert result.exit_code != 0


def test_parse_coordinates_follows_board_bounds() -> None:
    state = new_game()
    for x, y in [(1, 1), (4, 4), (1, 4), (4, 1)]:
        assert parse_coordinates(f"{x} {y}", state) == Position(x, y)
    with pytest.raises(ValueError, match=f"between 1 and {state.size}"):
        parse_coordinates(f"{state.size + 1} 1", state)


def test_cli_shows_title_before_the_board() -> None:
    result = CliRunner().invoke(cli, ["--no-color", "-q"], input="q\n")
    assert result.exit_code == 0
    assert "Tres, Uno, Dos" in result.output
    assert result.output.index("Tres, Uno, Dos") < result.output.index("GAME GRID")


def test_cli_title_is_colored_by_actor() -> None:
    result = CliRunner().invoke(cli, ["-q"], input="q\n", color=True)
    assert "\x1b[" in result.output
    assert "Tres, Uno, Dos" in click.unstyle(result.output)
