"""
Tests for the public ChessSystem API: outcomes, removal and reports.
"""

import io

import pytest

from chesssystem import ChessResult, ChessSystem, Winner


def _levels_text(chess):
    stream = io.StringIO()
    outcome = chess.save_players_levels(stream)
    assert outcome.result is ChessResult.SUCCESS
    return stream.getvalue()


# ========== add_tournament ==========


@pytest.mark.parametrize(
    "tournament_id, max_games, location, expected",
    [
        (1, 3, None, ChessResult.NULL_ARGUMENT),
        (0, 3, "London", ChessResult.INVALID_ID),
        (-4, 3, "London", ChessResult.INVALID_ID),
        (1, 3, "london", ChessResult.INVALID_LOCATION),
        (1, 0, "London", ChessResult.INVALID_MAX_GAMES),
        (1, 3, "London", ChessResult.SUCCESS),
    ],
)
def test_add_tournament_results(chess, tournament_id, max_games, location, expected):
    assert chess.add_tournament(tournament_id, max_games, location).result is expected


def test_add_tournament_twice(chess):
    assert chess.add_tournament(1, 3, "London")
    # Existence is checked before the location.
    outcome = chess.add_tournament(1, 3, "bad location")
    assert outcome.result is ChessResult.TOURNAMENT_ALREADY_EXISTS
    assert chess.tournament_ids() == [1]


def test_invalid_id_checked_before_location(chess):
    assert chess.add_tournament(0, 0, "x").result is ChessResult.INVALID_ID


# ========== add_game ==========


def test_add_game_returns_game_id(chess):
    chess.add_tournament(1, 3, "London")
    assert chess.add_game(1, 10, 20, Winner.FIRST, 30).value == 1
    assert chess.add_game(1, 10, 30, Winner.DRAW, 30).value == 2


@pytest.mark.parametrize(
    "tournament_id, first, second",
    [(0, 1, 2), (1, 0, 2), (1, 1, -2), (1, 3, 3)],
)
def test_add_game_invalid_ids(chess, tournament_id, first, second):
    chess.add_tournament(1, 3, "London")
    outcome = chess.add_game(tournament_id, first, second, Winner.FIRST, 10)
    assert outcome.result is ChessResult.INVALID_ID


def test_add_game_argument_checks(chess):
    chess.add_tournament(1, 1, "London")
    assert chess.add_game(1, 1, 2, None, 10).result is ChessResult.NULL_ARGUMENT
    assert chess.add_game(5, 1, 2, Winner.FIRST, 10).result is ChessResult.TOURNAMENT_NOT_EXIST
    assert chess.add_game(1, 1, 2, Winner.FIRST, 0).result is ChessResult.INVALID_PLAY_TIME
    assert chess.add_game(1, 1, 2, Winner.FIRST, 10)
    assert chess.add_game(1, 2, 1, Winner.FIRST, 10).result is ChessResult.GAME_ALREADY_EXISTS
    assert chess.add_game(1, 1, 3, Winner.FIRST, 10).result is ChessResult.EXCEEDED_GAMES


@pytest.mark.parametrize("winner", ["first", 0, "DRAW"])
def test_add_game_rejects_non_winner_values(chess, winner):
    chess.add_tournament(1, 3, "London")
    outcome = chess.add_game(1, 10, 20, winner, 30)
    assert outcome.result is ChessResult.NULL_ARGUMENT
    tournament = chess.get_tournament(1)
    assert tournament.total_games == 0
    assert tournament.get_player(10) is None
    assert tournament.get_player(20) is None


def test_add_game_limit_checked_before_play_time(chess):
    chess.add_tournament(1, 1, "London")
    chess.add_game(1, 10, 20, Winner.FIRST, 10)
    outcome = chess.add_game(1, 10, 30, Winner.FIRST, 0)
    assert outcome.result is ChessResult.EXCEEDED_GAMES


def test_add_game_to_ended_tournament(chess):
    chess.add_tournament(1, 3, "London")
    chess.add_game(1, 1, 2, Winner.FIRST, 10)
    assert chess.end_tournament(1)
    assert chess.add_game(1, 1, 3, Winner.FIRST, 10).result is ChessResult.TOURNAMENT_ENDED


def test_games_update_stored_tournament(chess):
    chess.add_tournament(1, 3, "London")
    chess.add_game(1, 1, 2, Winner.FIRST, 10)
    tournament = chess.get_tournament(1)
    assert tournament.total_games == 1
    assert tournament.get_player(1).wins == 1


# ========== remove_tournament ==========


def test_remove_tournament(season):
    assert season.remove_tournament(2)
    assert season.tournament_ids() == [1]
    assert season.remove_tournament(2).result is ChessResult.TOURNAMENT_NOT_EXIST
    assert season.remove_tournament(0).result is ChessResult.INVALID_ID


def test_removed_tournament_no_longer_counts(season):
    season.remove_tournament(2)
    assert season.calculate_average_play_time(4).result is ChessResult.PLAYER_NOT_EXIST
    assert season.calculate_average_play_time(1).value == pytest.approx(17.5)


# ========== end_tournament ==========


def test_end_tournament_results(chess):
    assert chess.end_tournament(0).result is ChessResult.INVALID_ID
    assert chess.end_tournament(1).result is ChessResult.TOURNAMENT_NOT_EXIST
    chess.add_tournament(1, 3, "London")
    assert chess.end_tournament(1).result is ChessResult.NO_GAMES
    chess.add_game(1, 7, 3, Winner.SECOND, 10)
    outcome = chess.end_tournament(1)
    assert outcome.result is ChessResult.SUCCESS
    assert outcome.value == 3
    assert chess.end_tournament(1).result is ChessResult.TOURNAMENT_ENDED


# ========== remove_player ==========


def test_remove_player_everywhere(season):
    assert season.remove_player(1)
    london = season.get_tournament(1)
    paris = season.get_tournament(2)
    assert london.get_player(2).wins == 1
    assert london.get_player(2).losses == 0
    assert london.get_player(3).wins == 1
    assert london.get_player(3).draws == 0
    assert paris.get_player(4).wins == 1
    assert paris.get_player(1).games_played == 0


def test_remove_player_results(season):
    assert season.remove_player(0).result is ChessResult.INVALID_ID
    assert season.remove_player(99).result is ChessResult.PLAYER_NOT_EXIST
    assert season.remove_player(2)
    assert season.remove_player(2).result is ChessResult.PLAYER_NOT_EXIST


def test_remove_player_rewrites_games_in_place(chess):
    chess.add_tournament(1, 5, "London")
    chess.add_game(1, 10, 20, Winner.FIRST, 50)
    chess.add_game(1, 20, 30, Winner.DRAW, 30)

    assert chess.remove_player(20)
    tournament = chess.get_tournament(1)
    ten, thirty = tournament.get_player(10), tournament.get_player(30)
    assert (ten.wins, ten.draws, ten.losses, ten.games_played) == (1, 0, 0, 1)
    assert (thirty.wins, thirty.draws, thirty.losses, thirty.games_played) == (1, 0, 0, 1)
    assert tournament.get_player(20).removed
    assert chess.remove_player(20).result is ChessResult.PLAYER_NOT_EXIST


def test_remove_player_from_ended_tournament_keeps_winner(chess):
    chess.add_tournament(1, 5, "London")
    chess.add_game(1, 1, 2, Winner.FIRST, 10)
    chess.end_tournament(1)
    assert chess.remove_player(1)
    tournament = chess.get_tournament(1)
    assert tournament.winner_id == 1
    assert tournament.get_player(1).games_played == 0
    assert tournament.get_player(2).losses == 1


# ========== calculate_average_play_time ==========


def test_average_play_time_across_tournaments(season):
    outcome = season.calculate_average_play_time(1)
    assert outcome.result is ChessResult.SUCCESS
    assert outcome.value == pytest.approx((10 + 25 + 40) / 3)


def test_average_play_time_failures(season):
    assert season.calculate_average_play_time(0).result is ChessResult.INVALID_ID
    assert season.calculate_average_play_time(42).result is ChessResult.PLAYER_NOT_EXIST
    season.remove_player(4)
    assert season.calculate_average_play_time(4).result is ChessResult.PLAYER_NOT_EXIST


# ========== aggregation ==========


def test_aggregate_players_sums_tournaments(season):
    merged = season.aggregate_players()
    player = merged.get(1)
    assert (player.wins, player.draws, player.losses) == (1, 1, 1)
    assert player.games_played == 3
    assert player.time_played == 75
    assert list(merged) == [1, 2, 3, 4]


def test_aggregate_players_does_not_alias_tournaments(season):
    merged = season.aggregate_players()
    merged.get(1).wins += 10
    assert season.get_tournament(1).get_player(1).wins == 1


# ========== save_players_levels ==========


def test_players_levels_report(season):
    # 1: w1 d1 l1 -> (6 + 2 - 10) / 3
    # 2: l1 -> -10, 3: d1 -> 2, 4: w1 -> 6
    assert _levels_text(season) == "4 6.00\n3 2.00\n1 -0.67\n2 -10.00\n"


def test_players_levels_ties_sorted_by_id(chess):
    chess.add_tournament(1, 2, "London")
    chess.add_game(1, 9, 5, Winner.FIRST, 10)
    chess.add_game(1, 9, 6, Winner.DRAW, 10)
    chess.add_game(1, 2, 7, Winner.FIRST, 10)
    chess.add_game(1, 2, 8, Winner.DRAW, 10)
    assert _levels_text(chess) == (
        "2 4.00\n9 4.00\n6 2.00\n8 2.00\n5 -10.00\n7 -10.00\n"
    )


def test_players_levels_skip_removed_players(season):
    season.remove_player(4)
    text = _levels_text(season)
    assert "4 " not in text.splitlines()[0]
    assert [line.split()[0] for line in text.splitlines()] == ["1", "3", "2"]


def test_players_levels_empty_system(chess):
    assert _levels_text(chess) == ""


def test_players_levels_null_stream(chess):
    assert chess.save_players_levels(None).result is ChessResult.NULL_ARGUMENT


def test_players_levels_write_failure(season):
    class BrokenStream:
        def __init__(self):
            self.lines = []

        def write(self, text):
            if self.lines:
                raise OSError("disk full")
            self.lines.append(text)

    stream = BrokenStream()
    assert season.save_players_levels(stream).result is ChessResult.SAVE_FAILURE
    # The line written before the failure is not retracted.
    assert stream.lines == ["4 6.00\n"]


# ========== save_tournament_statistics ==========


def test_tournament_statistics_report(season, tmp_path):
    season.end_tournament(1)
    path = tmp_path / "stats.txt"
    outcome = season.save_tournament_statistics(path)
    assert outcome.result is ChessResult.SUCCESS
    assert outcome.value == 1
    assert path.read_text() == "1\n25\n17.50\nLondon\n2\n3\n"


def test_tournament_statistics_in_id_order(season, tmp_path):
    season.end_tournament(2)
    season.end_tournament(1)
    path = tmp_path / "stats.txt"
    assert season.save_tournament_statistics(str(path))
    assert path.read_text().splitlines() == [
        "1", "25", "17.50", "London", "2", "3",
        "4", "40", "40.00", "Paris", "1", "2",
    ]


def test_tournament_statistics_none_ended(season, tmp_path):
    path = tmp_path / "stats.txt"
    outcome = season.save_tournament_statistics(path)
    assert outcome.result is ChessResult.NO_TOURNAMENTS_ENDED
    assert path.read_text() == ""


def test_players_levels_closed_stream(season):
    stream = io.StringIO()
    stream.close()
    assert season.save_players_levels(stream).result is ChessResult.SAVE_FAILURE


def test_tournament_statistics_failures(season, tmp_path):
    season.end_tournament(1)
    assert season.save_tournament_statistics(None).result is ChessResult.NULL_ARGUMENT
    missing = tmp_path / "missing" / "stats.txt"
    assert season.save_tournament_statistics(missing).result is ChessResult.SAVE_FAILURE


def test_statistics_after_removal_from_ended_tournament(season, tmp_path):
    season.end_tournament(1)
    season.remove_player(1)
    path = tmp_path / "stats.txt"
    season.save_tournament_statistics(path)
    # Winner, games and distinct players stay as they were at the end.
    assert path.read_text() == "1\n25\n17.50\nLondon\n2\n3\n"


# ========== outcomes ==========


def test_out_of_memory_is_reported(chess, monkeypatch):
    chess.add_tournament(1, 3, "London")
    tournament = chess.get_tournament(1)

    def fail(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(tournament, "add_game", fail)
    assert chess.add_game(1, 1, 2, Winner.FIRST, 10).result is ChessResult.OUT_OF_MEMORY


def test_failure_outcomes_carry_a_message(chess):
    outcome = chess.end_tournament(3)
    assert not outcome
    assert "3" in outcome.message


def test_new_system_is_empty():
    chess = ChessSystem()
    assert len(chess) == 0
    assert chess.tournament_ids() == []
