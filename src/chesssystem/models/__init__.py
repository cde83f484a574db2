from chesssystem.models.enums import ChessResult, Winner
from chesssystem.models.game import Game
from chesssystem.models.outcome import ChessOutcome
from chesssystem.models.player import Player

__all__ = [
    "ChessResult",
    "ChessOutcome",
    "Game",
    "Player",
    "Winner",
]
