"""Report building and formatting.

Both reports are flat text and must stay byte-for-byte stable:

- players levels: ``"<id> <level>\\n"`` per player, level with two decimals,
  sorted by descending level then ascending id;
- tournament statistics: six lines per ended tournament (winner id, longest
  game, average game time with two decimals, location, total games,
  distinct players).
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

from dataclasses import dataclass
from typing import Iterable, List, TextIO

from chesssystem.constants import PLAYER_LEVEL_LINE, REPORT_FLOAT_PRECISION
from chesssystem.containers import OrderedMap
from chesssystem.models.player import Player
from chesssystem.tournament import Tournament


@dataclass(frozen=True)
class PlayerLevel:
    """One row of the players levels report."""

    player_id: int
    level: float

    def format(self) -> str:
        return PLAYER_LEVEL_LINE.format(player_id=self.player_id, level=self.level)


def compute_player_levels(merged_players: OrderedMap[int, Player]) -> List[PlayerLevel]:
    """Turn merged player records into sorted report rows.

    Players without games (tombstoned everywhere) are left out.

    Args:
        merged_players: Cross-tournament totals keyed by player id

    Returns:
        Rows sorted by descending level, ties by ascending id
    """
    rows = [
        PlayerLevel(player_id, player.level_score / player.games_played)
        for player_id, player in merged_players.items()
        if player.has_games
    ]
    rows.sort(key=lambda row: (-row.level, row.player_id))
    return rows


def format_player_levels(rows: Iterable[PlayerLevel]) -> str:
    return "".join(row.format() for row in rows)


def format_tournament_statistics(tournament: Tournament) -> str:
    """The six statistics lines of one ended tournament."""
    lines = [
        str(tournament.winner_id),
        str(tournament.longest_game_time),
        f"{tournament.average_game_time:.{REPORT_FLOAT_PRECISION}f}",
        tournament.location,
        str(tournament.total_games),
        str(tournament.number_of_players),
    ]
    return "".join(f"{line}\n" for line in lines)


def write_player_levels(stream: TextIO, rows: Iterable[PlayerLevel]) -> int:
    """Write rows one line at a time.

    Lines already written stay written if a later write fails.

    Returns:
        Number of lines written
    """
    count = 0
    for row in rows:
        stream.write(row.format())
        count += 1
    return count
