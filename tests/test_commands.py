"""
Tests for the text command layer used by scripts and the shell.
"""

import pytest

from chesssystem import ChessResult, ChessSystem, Winner
from chesssystem.commands import (
    COMMANDS,
    Command,
    execute,
    format_outcome,
    parse_command,
    parse_script,
    run_script,
)
from chesssystem.exceptions import CommandSyntaxException
from chesssystem.models import ChessOutcome


class TestParsing:
    """Tests for turning lines into commands."""

    @pytest.mark.parametrize("line", ["", "   ", "# a comment", "  # indented"])
    def test_blank_and_comment_lines(self, line):
        assert parse_command(line) is None

    def test_location_keeps_spaces(self):
        command = parse_command("add_tournament 1 4 Tel aviv")
        assert command.name == "add_tournament"
        assert command.args == ("1", "4", "Tel", "aviv")

    def test_command_name_is_case_insensitive(self):
        assert parse_command("END_TOURNAMENT 3").name == "end_tournament"

    def test_unknown_command(self):
        with pytest.raises(CommandSyntaxException, match="Unknown command 'launch'"):
            parse_command("launch 1", line_number=4)

    @pytest.mark.parametrize(
        "line",
        ["add_game 1 2 3 first", "add_game 1 2 3 first 10 11", "end_tournament", "add_tournament 1 2"],
    )
    def test_wrong_argument_count(self, line):
        with pytest.raises(CommandSyntaxException, match="Usage:"):
            parse_command(line)

    def test_error_message_has_line_number(self):
        with pytest.raises(CommandSyntaxException) as excinfo:
            parse_command("bogus", line_number=7)
        assert str(excinfo.value).startswith("line 7: ")
        assert excinfo.value.line_number == 7

    def test_parse_script_numbers_lines(self):
        lines = ["# header", "add_tournament 1 2 London", "", "end_tournament 1"]
        commands = list(parse_script(lines))
        assert [c.name for c in commands] == ["add_tournament", "end_tournament"]
        assert [c.line_number for c in commands] == [2, 4]

    def test_every_command_has_usage(self):
        for name, spec in COMMANDS.items():
            assert spec.usage.startswith(name)


class TestExecution:
    """Tests for running commands against a system."""

    def test_add_game_command(self, chess):
        execute(chess, parse_command("add_tournament 1 4 London"))
        outcome = execute(chess, parse_command("add_game 1 10 20 second 90"))
        assert outcome.value == 1
        assert chess.get_tournament(1).get_player(20).wins == 1

    def test_non_integer_argument(self, chess):
        with pytest.raises(CommandSyntaxException, match="must be an integer"):
            execute(chess, parse_command("end_tournament abc"))

    def test_bad_winner(self, chess):
        with pytest.raises(CommandSyntaxException, match="Invalid winner"):
            execute(chess, parse_command("add_game 1 2 3 white 10"))

    def test_failed_command_returns_outcome(self, chess):
        outcome = execute(chess, parse_command("remove_tournament 9"))
        assert outcome.result is ChessResult.TOURNAMENT_NOT_EXIST

    def test_save_levels_to_file(self, season, tmp_path):
        path = tmp_path / "levels.txt"
        outcome = execute(season, Command("save_levels", (str(path),)))
        assert outcome.value == 4
        assert path.read_text() == "4 6.00\n3 2.00\n1 -0.67\n2 -10.00\n"

    def test_save_levels_unwritable_path(self, season, tmp_path):
        path = tmp_path / "missing" / "levels.txt"
        outcome = execute(season, Command("save_levels", (str(path),)))
        assert outcome.result is ChessResult.SAVE_FAILURE

    def test_save_statistics_command(self, season, tmp_path):
        season.end_tournament(2)
        path = tmp_path / "stats.txt"
        outcome = execute(season, Command("save_statistics", (str(path),)))
        assert outcome.ok
        assert path.read_text() == "4\n40\n40.00\nParis\n1\n2\n"


class TestRunScript:
    """Tests for whole-script execution."""

    SCRIPT = [
        "add_tournament 1 4 London",
        "add_game 1 1 2 first 10",
        "add_game 1 1 2 draw 10",
        "end_tournament 1",
    ]

    def test_runs_every_command(self):
        chess = ChessSystem()
        results = run_script(chess, self.SCRIPT)
        assert [outcome.result for _, outcome in results] == [
            ChessResult.SUCCESS,
            ChessResult.SUCCESS,
            ChessResult.GAME_ALREADY_EXISTS,
            ChessResult.SUCCESS,
        ]
        assert chess.get_tournament(1).winner_id == 1

    def test_stop_on_error(self):
        chess = ChessSystem()
        results = run_script(chess, self.SCRIPT, stop_on_error=True)
        assert len(results) == 3
        assert not chess.get_tournament(1).ended

    def test_syntax_error_propagates(self):
        with pytest.raises(CommandSyntaxException):
            run_script(ChessSystem(), ["add_tournament 1 4 London", "oops"])


class TestFormatOutcome:
    def test_success_with_value(self):
        command = Command("add_game", ())
        assert format_outcome(command, ChessOutcome.success(3)) == "add_game: SUCCESS 3"

    def test_float_value(self):
        command = Command("average_play_time", ())
        text = format_outcome(command, ChessOutcome.success(17.5))
        assert text == "average_play_time: SUCCESS 17.50"

    def test_success_without_value(self):
        command = Command("remove_player", ())
        assert format_outcome(command, ChessOutcome.success()) == "remove_player: SUCCESS"

    def test_failure(self):
        command = Command("end_tournament", ())
        outcome = ChessOutcome.failure(ChessResult.NO_GAMES, "nothing to end")
        assert format_outcome(command, outcome) == "end_tournament: NO_GAMES"


def test_winner_words_map_to_enum():
    assert Winner.parse("second") is Winner.SECOND
