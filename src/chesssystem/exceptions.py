"""Exceptions for use in the Chess System"""

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

from chesssystem.models.enums import ChessResult


# ========== Base Application Exception ==========


class ChessSystemException(Exception):
    """Base exception for all Chess System errors.

    Every subclass names the ChessResult it stands for, so the public
    ChessSystem API can turn a raised exception into an outcome without
    a lookup table.
    """

    result: ChessResult = ChessResult.NULL_ARGUMENT


class NullArgumentException(ChessSystemException):
    """Raised when a required argument is missing (None)."""

    result = ChessResult.NULL_ARGUMENT


class InvalidIdException(ChessSystemException):
    """Raised when a tournament or player id is not a positive integer."""

    result = ChessResult.INVALID_ID


# ========== Tournament Exceptions ==========


class TournamentException(ChessSystemException):
    """Base exception for tournament-related errors."""

    pass


class InvalidLocationException(TournamentException):
    """Raised when a tournament location is malformed."""

    result = ChessResult.INVALID_LOCATION


class InvalidMaxGamesException(TournamentException):
    """Raised when the games-per-player limit is not positive."""

    result = ChessResult.INVALID_MAX_GAMES


class TournamentAlreadyExistsException(TournamentException):
    """Raised when a tournament id is already registered."""

    result = ChessResult.TOURNAMENT_ALREADY_EXISTS


class TournamentNotExistException(TournamentException):
    """Raised when a requested tournament does not exist."""

    result = ChessResult.TOURNAMENT_NOT_EXIST


class TournamentEndedException(TournamentException):
    """Raised when tournament has ended and the operation needs it running."""

    result = ChessResult.TOURNAMENT_ENDED


class NoGamesException(TournamentException):
    """Raised when a tournament cannot be ended because nobody played."""

    result = ChessResult.NO_GAMES


class NoTournamentsEndedException(TournamentException):
    """Raised when statistics are requested but no tournament has ended."""

    result = ChessResult.NO_TOURNAMENTS_ENDED


# ========== Game Exceptions ==========


class GameException(ChessSystemException):
    """Base exception for game recording errors."""

    pass


class GameAlreadyExistsException(GameException):
    """Raised when the two players already have a game in the tournament."""

    result = ChessResult.GAME_ALREADY_EXISTS


class InvalidPlayTimeException(GameException):
    """Raised when a game's play time is not positive."""

    result = ChessResult.INVALID_PLAY_TIME


class ExceededGamesException(GameException):
    """Raised when a player has already played the maximum number of games."""

    result = ChessResult.EXCEEDED_GAMES


# ========== Player Exceptions ==========


class PlayerNotExistException(ChessSystemException):
    """Raised when a requested player cannot be found (or was removed)."""

    result = ChessResult.PLAYER_NOT_EXIST


# ========== File/Resource Exceptions ==========


class SaveFailureException(ChessSystemException):
    """Raised when a report cannot be written."""

    result = ChessResult.SAVE_FAILURE


# ========== Command Script Exceptions ==========


class CommandSyntaxException(ChessSystemException):
    """Raised when a command line cannot be parsed.

    Attributes:
        line_number: 1-based line of the offending command, if known
    """

    def __init__(self, message: str, line_number: int = 0) -> None:
        if line_number:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


# ========== Container Exceptions ==========


class MapException(Exception):
    """Base exception for OrderedMap misuse.

    These indicate programming errors rather than rejected commands and are
    not converted into ChessResult outcomes.
    """

    pass


class MapNullArgumentException(MapException):
    """Raised when None is used as a map key."""

    pass


class MapItemDoesNotExistException(MapException, KeyError):
    """Raised when removing a key that is not in the map."""

    pass
