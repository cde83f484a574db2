"""Enumerations shared across the chess system."""

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

from enum import Enum


class Winner(Enum):
    """Outcome of a single game, seen from the game record."""

    FIRST = "first"
    SECOND = "second"
    DRAW = "draw"

    @property
    def other_side(self) -> "Winner":
        """The opposite seat. A draw has no opposite and returns itself."""
        if self is Winner.FIRST:
            return Winner.SECOND
        if self is Winner.SECOND:
            return Winner.FIRST
        return Winner.DRAW

    @classmethod
    def parse(cls, value: str) -> "Winner":
        """Parse a case-insensitive winner name ("first", "SECOND", "draw")."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Invalid winner '{value}'. Use one of: first, second, draw"
            ) from None


class ChessResult(Enum):
    """Every outcome a chess system operation can report."""

    SUCCESS = "success"
    OUT_OF_MEMORY = "out_of_memory"
    NULL_ARGUMENT = "null_argument"
    INVALID_ID = "invalid_id"
    TOURNAMENT_ALREADY_EXISTS = "tournament_already_exists"
    TOURNAMENT_NOT_EXIST = "tournament_not_exist"
    GAME_ALREADY_EXISTS = "game_already_exists"
    INVALID_LOCATION = "invalid_location"
    INVALID_MAX_GAMES = "invalid_max_games"
    TOURNAMENT_ENDED = "tournament_ended"
    INVALID_PLAY_TIME = "invalid_play_time"
    NO_TOURNAMENTS_ENDED = "no_tournaments_ended"
    EXCEEDED_GAMES = "exceeded_games"
    PLAYER_NOT_EXIST = "player_not_exist"
    NO_GAMES = "no_games"
    SAVE_FAILURE = "save_failure"
