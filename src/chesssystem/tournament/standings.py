"""Tournament winner selection.

This module ranks the players of a single tournament to find its winner.
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

from typing import Optional, Tuple

from chesssystem.containers import OrderedMap
from chesssystem.models.player import Player


def compare_players(first: Player, second: Player) -> int:
    """Compare two players for first place.

    Logic: most points, then fewest losses, then most wins. Players equal on
    all three compare as 0; the caller decides those by id.

    Returns:
        Positive if ``first`` ranks higher, negative if ``second`` does, 0 on a tie
    """
    if first.points != second.points:
        return first.points - second.points
    if first.losses != second.losses:
        return second.losses - first.losses
    if first.wins != second.wins:
        return first.wins - second.wins
    return 0


def select_winner(players: OrderedMap[int, Player]) -> Optional[Tuple[int, Player]]:
    """Pick the best player of a tournament in one pass.

    A challenger takes over only when it compares strictly better. On a full
    tie the smaller id is kept, which with ascending traversal is always the
    player already leading.

    Args:
        players: Tournament player map (id -> Player)

    Returns:
        (winner_id, borrowed Player), or None if the map is empty
    """
    best_id: Optional[int] = None
    best: Optional[Player] = None

    for player_id, player in players.items():
        if best is None:
            best_id, best = player_id, player
            continue
        order = compare_players(best, player)
        if order < 0 or (order == 0 and player_id < best_id):
            best_id, best = player_id, player

    if best is None:
        return None
    return best_id, best
