"""Single game record."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from chesssystem.models.enums import Winner


@dataclass
class Game:
    """Represents the result of a single game.

    Attributes
    ----------
    first_player_id : Optional[int]
        ID of the first player, None once that player was removed
    second_player_id : Optional[int]
        ID of the second player, None once that player was removed
    winner : Winner
        FIRST, SECOND or DRAW
    play_time : int
        Game length in seconds
    """

    first_player_id: Optional[int]
    second_player_id: Optional[int]
    winner: Winner
    play_time: int

    def is_between(self, player_a: int, player_b: int) -> bool:
        """Was this game played by exactly these two players, in any order?"""
        return {self.first_player_id, self.second_player_id} == {player_a, player_b}

    def seat_of(self, player_id: int) -> Optional[Winner]:
        """FIRST or SECOND for a participant, None for anyone else."""
        if self.first_player_id == player_id:
            return Winner.FIRST
        if self.second_player_id == player_id:
            return Winner.SECOND
        return None

    def player_at(self, seat: Winner) -> Optional[int]:
        if seat is Winner.FIRST:
            return self.first_player_id
        if seat is Winner.SECOND:
            return self.second_player_id
        return None

    def vacate(self, seat: Winner) -> None:
        """Clear a seat so pairing checks never match it again."""
        if seat is Winner.FIRST:
            self.first_player_id = None
        elif seat is Winner.SECOND:
            self.second_player_id = None

    def copy(self) -> "Game":
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize game to dictionary."""
        return {
            "first_player_id": self.first_player_id,
            "second_player_id": self.second_player_id,
            "winner": self.winner.value,
            "play_time": self.play_time,
        }
