"""Interactive shell for the Chess System.

Keeps one ChessSystem alive for the whole session and runs the same
commands as a script, with autocompletion and history.
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

from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from chesssystem.chess_system import ChessSystem
from chesssystem.commands import COMMANDS, execute, format_outcome, parse_command
from chesssystem.constants import APP_NAME
from chesssystem.exceptions import CommandSyntaxException
from chesssystem.reports import format_player_levels
from chesssystem.utils import setup_logger

logger = setup_logger(__name__)

EXIT_WORDS = ("exit", "quit", "q")
PROMPT = "chess> "


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def print_banner() -> None:
    """Print the application banner."""
    print(f"{Colors.OKBLUE}{Colors.BOLD}{APP_NAME} shell{Colors.ENDC}")
    print(f"Type {Colors.BOLD}help{Colors.ENDC} to see all available commands")
    print(f"Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave\n")


def print_commands_list() -> None:
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for spec in COMMANDS.values():
        print(f"  {Colors.OKGREEN}{spec.usage:70}{Colors.ENDC} {spec.description}")
    print(f"  {Colors.OKGREEN}{'levels':70}{Colors.ENDC} Show the players levels report")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for the shell."""
    completions: dict = {name: None for name in COMMANDS}
    completions["help"] = None
    completions["levels"] = None
    for word in EXIT_WORDS:
        completions[word] = None
    return NestedCompleter.from_nested_dict(completions)


def handle_line(chess: ChessSystem, line: str) -> Optional[str]:
    """Run one shell line and return the text to show (None for nothing)."""
    stripped = line.strip()
    if stripped in ("help", "?"):
        print_commands_list()
        return None
    if stripped == "levels":
        return format_player_levels(chess.players_levels()).rstrip("\n") or "(no players)"

    try:
        command = parse_command(stripped)
        if command is None:
            return None
        outcome = execute(chess, command)
    except CommandSyntaxException as e:
        return f"{Colors.FAIL}{e}{Colors.ENDC}"

    colour = Colors.OKGREEN if outcome else Colors.WARNING
    return f"{colour}{format_outcome(command, outcome)}{Colors.ENDC}"


def run_shell(chess: Optional[ChessSystem] = None) -> int:
    """Run the interactive loop until exit or end of input."""
    if chess is None:
        chess = ChessSystem()
    print_banner()

    style = Style.from_dict({"prompt": "#00aa00 bold"})
    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    while True:
        try:
            user_input = session.prompt(PROMPT).strip()
            if not user_input:
                continue
            if user_input in EXIT_WORDS:
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break
            text = handle_line(chess, user_input)
            if text:
                print(text)
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break
    return 0
