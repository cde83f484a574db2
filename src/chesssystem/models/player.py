"""Per-tournament player statistics record."""

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
from typing import Any, Dict

from chesssystem.constants import (
    DRAW_POINTS,
    LEVEL_DRAW_WEIGHT,
    LEVEL_LOSS_WEIGHT,
    LEVEL_WIN_WEIGHT,
    LOSS_POINTS,
    WIN_POINTS,
)
from chesssystem.models.enums import Winner


@dataclass
class Player:
    """Running statistics of one player inside one tournament.

    A player is never deleted from a tournament. Removal zeroes the
    counters and sets ``removed`` (a tombstone), which keeps repeat
    removals idempotent.

    Attributes:
        wins: Games won
        draws: Games drawn
        losses: Games lost
        games_played: Games recorded for this player
        time_played: Total seconds over all recorded games
        removed: Tombstone flag set by reset()
    """

    wins: int = 0
    draws: int = 0
    losses: int = 0
    games_played: int = 0
    time_played: int = 0
    removed: bool = False

    @property
    def points(self) -> int:
        """Tournament points: two per win, one per draw."""
        return (
            WIN_POINTS * self.wins
            + DRAW_POINTS * self.draws
            + LOSS_POINTS * self.losses
        )

    @property
    def level_score(self) -> int:
        """Level numerator (not yet divided by games played)."""
        return (
            LEVEL_WIN_WEIGHT * self.wins
            + LEVEL_LOSS_WEIGHT * self.losses
            + LEVEL_DRAW_WEIGHT * self.draws
        )

    @property
    def has_games(self) -> bool:
        return self.games_played > 0

    def record_game(self, play_time: int, seat: Winner, winner: Winner) -> None:
        """Apply one game's outcome to this player.

        Args:
            play_time: Game length in seconds
            seat: Which side of the game this player sat on (FIRST or SECOND)
            winner: The game's winner
        """
        self.games_played += 1
        self.time_played += play_time
        if winner is Winner.DRAW:
            self.draws += 1
        elif winner is seat:
            self.wins += 1
        else:
            self.losses += 1
        self.removed = False

    def convert_to_forfeit_win(self, seat: Winner, winner: Winner) -> None:
        """Turn a recorded game into a win after the opponent left.

        Whatever the game contributed before (a draw or a loss) is taken
        back, and a win is credited unless the game was already won.

        Args:
            seat: Which side of the game this player sat on
            winner: The game's outcome before the rewrite
        """
        if winner is Winner.DRAW:
            self.draws -= 1
        elif winner is seat.other_side:
            self.losses -= 1
        if winner is not seat:
            self.wins += 1

    def merge(self, other: "Player") -> None:
        """Add another record's counters to this one (cross-tournament totals)."""
        self.wins += other.wins
        self.draws += other.draws
        self.losses += other.losses
        self.games_played += other.games_played
        self.time_played += other.time_played

    def reset(self) -> None:
        """Zero every counter and tombstone the record."""
        self.wins = 0
        self.draws = 0
        self.losses = 0
        self.games_played = 0
        self.time_played = 0
        self.removed = True

    def copy(self) -> "Player":
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player statistics to dictionary."""
        return {
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
            "games_played": self.games_played,
            "time_played": self.time_played,
            "removed": self.removed,
        }
