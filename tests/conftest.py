import pytest

from chesssystem import ChessSystem, Tournament, Winner


@pytest.fixture
def chess():
    """An empty chess system."""
    return ChessSystem()


@pytest.fixture
def removal_tournament():
    """Game 1: 10 beats 20 (50s). Game 2: 20 draws with 30 (30s)."""
    tournament = Tournament(max_games_per_player=5, location="London")
    tournament.add_game(10, 20, Winner.FIRST, 50)
    tournament.add_game(20, 30, Winner.DRAW, 30)
    return tournament


@pytest.fixture
def season(chess):
    """Two tournaments sharing player 1.

    Tournament 1 (London): 1 beats 2 (10s), 1 draws 3 (25s).
    Tournament 2 (Paris): 4 beats 1 (40s).
    """
    assert chess.add_tournament(1, 4, "London")
    assert chess.add_tournament(2, 4, "Paris")
    assert chess.add_game(1, 1, 2, Winner.FIRST, 10)
    assert chess.add_game(1, 1, 3, Winner.DRAW, 25)
    assert chess.add_game(2, 4, 1, Winner.FIRST, 40)
    return chess
