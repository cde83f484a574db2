"""Text commands for driving a ChessSystem.

One command per line, words separated by whitespace::

    add_tournament 1 4 Tel aviv
    add_game 1 10 20 first 300
    end_tournament 1
    save_statistics stats.txt

Used by both the script runner and the interactive shell.
"""

# Chess System
# Copyright (C) 2025  Chess System developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from chesssystem.chess_system import ChessSystem
from chesssystem.constants import REPORT_ENCODING, SCRIPT_COMMENT_PREFIX
from chesssystem.exceptions import CommandSyntaxException, SaveFailureException
from chesssystem.models.enums import ChessResult, Winner
from chesssystem.models.outcome import ChessOutcome
from chesssystem.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class CommandSpec:
    """Shape and help text of one command."""

    name: str
    usage: str
    description: str
    min_args: int
    max_args: Optional[int]


COMMANDS: Dict[str, CommandSpec] = {
    spec.name: spec
    for spec in (
        CommandSpec(
            "add_tournament",
            "add_tournament <id> <max_games> <location...>",
            "Register a tournament",
            3,
            None,
        ),
        CommandSpec(
            "add_game",
            "add_game <tournament_id> <first> <second> <first|second|draw> <seconds>",
            "Record a game",
            5,
            5,
        ),
        CommandSpec(
            "remove_tournament",
            "remove_tournament <id>",
            "Delete a tournament",
            1,
            1,
        ),
        CommandSpec(
            "remove_player",
            "remove_player <id>",
            "Remove a player from every tournament",
            1,
            1,
        ),
        CommandSpec(
            "end_tournament",
            "end_tournament <id>",
            "Close a tournament and pick its winner",
            1,
            1,
        ),
        CommandSpec(
            "average_play_time",
            "average_play_time <player_id>",
            "Average game length of a player",
            1,
            1,
        ),
        CommandSpec(
            "save_levels",
            "save_levels <path>",
            "Write the players levels report",
            1,
            1,
        ),
        CommandSpec(
            "save_statistics",
            "save_statistics <path>",
            "Write statistics of ended tournaments",
            1,
            1,
        ),
    )
}


@dataclass(frozen=True)
class Command:
    """A parsed command line."""

    name: str
    args: Tuple[str, ...]
    line_number: int = 0


def _parse_int(value: str, what: str, line_number: int) -> int:
    try:
        return int(value)
    except ValueError:
        raise CommandSyntaxException(
            f"{what} must be an integer, got '{value}'", line_number
        ) from None


def parse_command(line: str, line_number: int = 0) -> Optional[Command]:
    """Parse one line.

    Args:
        line: Raw text of the line
        line_number: Position in the script, for error messages

    Returns:
        The command, or None for blank and comment lines

    Raises:
        CommandSyntaxException: Unknown command or wrong argument count
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(SCRIPT_COMMENT_PREFIX):
        return None

    parts = stripped.split()
    name = parts[0].lower()
    args = tuple(parts[1:])
    spec = COMMANDS.get(name)
    if spec is None:
        raise CommandSyntaxException(f"Unknown command '{parts[0]}'", line_number)
    if len(args) < spec.min_args or (
        spec.max_args is not None and len(args) > spec.max_args
    ):
        raise CommandSyntaxException(f"Usage: {spec.usage}", line_number)
    return Command(name, args, line_number)


def parse_script(lines: Iterable[str]) -> Iterator[Command]:
    """Parse every command in a script, skipping blanks and comments."""
    for line_number, line in enumerate(lines, start=1):
        command = parse_command(line, line_number)
        if command is not None:
            yield command


# ========== Execution ==========


def _run_add_tournament(chess: ChessSystem, command: Command) -> ChessOutcome:
    tournament_id = _parse_int(command.args[0], "Tournament id", command.line_number)
    max_games = _parse_int(command.args[1], "Max games", command.line_number)
    location = " ".join(command.args[2:])
    return chess.add_tournament(tournament_id, max_games, location)


def _run_add_game(chess: ChessSystem, command: Command) -> ChessOutcome:
    line = command.line_number
    tournament_id = _parse_int(command.args[0], "Tournament id", line)
    first = _parse_int(command.args[1], "First player id", line)
    second = _parse_int(command.args[2], "Second player id", line)
    try:
        winner = Winner.parse(command.args[3])
    except ValueError as e:
        raise CommandSyntaxException(str(e), line) from None
    play_time = _parse_int(command.args[4], "Play time", line)
    return chess.add_game(tournament_id, first, second, winner, play_time)


def _run_single_id(
    method: Callable[[ChessSystem, int], ChessOutcome], what: str
) -> Callable[[ChessSystem, Command], ChessOutcome]:
    def run(chess: ChessSystem, command: Command) -> ChessOutcome:
        return method(chess, _parse_int(command.args[0], what, command.line_number))

    return run


def _run_save_levels(chess: ChessSystem, command: Command) -> ChessOutcome:
    path = command.args[0]
    try:
        with open(path, "w", encoding=REPORT_ENCODING) as stream:
            return chess.save_players_levels(stream)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot open {path}: {e}")
        return ChessOutcome.failure(SaveFailureException.result, str(e))


def _run_save_statistics(chess: ChessSystem, command: Command) -> ChessOutcome:
    return chess.save_tournament_statistics(command.args[0])


_HANDLERS: Dict[str, Callable[[ChessSystem, Command], ChessOutcome]] = {
    "add_tournament": _run_add_tournament,
    "add_game": _run_add_game,
    "remove_tournament": _run_single_id(ChessSystem.remove_tournament, "Tournament id"),
    "remove_player": _run_single_id(ChessSystem.remove_player, "Player id"),
    "end_tournament": _run_single_id(ChessSystem.end_tournament, "Tournament id"),
    "average_play_time": _run_single_id(
        ChessSystem.calculate_average_play_time, "Player id"
    ),
    "save_levels": _run_save_levels,
    "save_statistics": _run_save_statistics,
}


def execute(chess: ChessSystem, command: Command) -> ChessOutcome:
    """Run one parsed command against ``chess``.

    Raises:
        CommandSyntaxException: An argument has the wrong type
    """
    outcome = _HANDLERS[command.name](chess, command)
    if not outcome:
        logger.warning(
            f"{command.name} {' '.join(command.args)} -> {outcome.result.name}"
        )
    return outcome


def format_outcome(command: Command, outcome: ChessOutcome) -> str:
    """Single line summary printed by the runner and the shell."""
    text = f"{command.name}: {outcome.result.name}"
    if outcome.ok and outcome.value is not None:
        if isinstance(outcome.value, float):
            text += f" {outcome.value:.2f}"
        else:
            text += f" {outcome.value}"
    return text


def run_script(
    chess: ChessSystem, lines: Iterable[str], stop_on_error: bool = False
) -> List[Tuple[Command, ChessOutcome]]:
    """Execute a whole script.

    Args:
        chess: System to run the commands against
        lines: Script lines
        stop_on_error: Stop at the first command that does not succeed

    Returns:
        (command, outcome) for every command that ran
    """
    results: List[Tuple[Command, ChessOutcome]] = []
    for command in parse_script(lines):
        outcome = execute(chess, command)
        results.append((command, outcome))
        if stop_on_error and outcome.result is not ChessResult.SUCCESS:
            break
    return results
