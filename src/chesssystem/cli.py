"""Command-line interface for the Chess System.

This module provides the ``chess-system`` entry point: run a command script,
or open the interactive shell.
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

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from chesssystem.chess_system import ChessSystem
from chesssystem.commands import format_outcome, run_script
from chesssystem.constants import REPORT_ENCODING
from chesssystem.exceptions import CommandSyntaxException
from chesssystem.utils import set_log_level, setup_logger

logger = setup_logger(__name__)

EXIT_OK = 0
EXIT_COMMAND_FAILED = 1
EXIT_SYNTAX_ERROR = 2


def run_script_command(args: argparse.Namespace) -> int:
    """Run every command of a script file and print one line per command."""
    script_path = Path(args.script)
    try:
        lines = script_path.read_text(encoding=REPORT_ENCODING).splitlines()
    except OSError as e:
        print(f"Cannot read {script_path}: {e}", file=sys.stderr)
        return EXIT_SYNTAX_ERROR

    chess = ChessSystem()
    try:
        results = run_script(chess, lines, stop_on_error=args.stop_on_error)
    except CommandSyntaxException as e:
        print(f"{script_path}: {e}", file=sys.stderr)
        return EXIT_SYNTAX_ERROR

    failed = False
    for command, outcome in results:
        print(format_outcome(command, outcome))
        failed = failed or not outcome

    if failed and args.stop_on_error:
        return EXIT_COMMAND_FAILED
    return EXIT_OK


def run_shell_command(args: argparse.Namespace) -> int:
    """Start the interactive shell."""
    from chesssystem.shell import run_shell

    return run_shell()


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="chess-system",
        description="Track chess tournaments, games and player statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Replay a command script
  chess-system run season.txt

  # Stop at the first rejected command
  chess-system run season.txt --stop-on-error

  # Interactive session
  chess-system shell
        """,
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Execute a command script")
    run_parser.add_argument("script", help="Path to a script of chess commands")
    run_parser.add_argument(
        "--stop-on-error",
        action="store_true",
        help="Stop at the first command that does not succeed (exit code 1)",
    )
    run_parser.set_defaults(func=run_script_command)

    shell_parser = subparsers.add_parser("shell", help="Interactive session")
    shell_parser.set_defaults(func=run_shell_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_OK

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
