"""A single chess tournament: its games, its players and their statistics."""

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

from typing import Any, Dict, Iterator, Optional, Tuple

from chesssystem.constants import NO_TIME
from chesssystem.containers import OrderedMap
from chesssystem.exceptions import (
    ExceededGamesException,
    GameAlreadyExistsException,
    InvalidIdException,
    NoGamesException,
    TournamentEndedException,
)
from chesssystem.models.enums import Winner
from chesssystem.models.game import Game
from chesssystem.models.player import Player
from chesssystem.tournament.standings import select_winner
from chesssystem.utils import setup_logger
from chesssystem.utils.validation import (
    require_id,
    require_location,
    require_max_games,
    require_play_time,
    require_winner,
)

logger = setup_logger(__name__)


class Tournament:
    """Main tournament bookkeeping class.

    The tournament owns two ordered maps, games by sequential id and
    players by player id, and keeps aggregate statistics up to date as
    games come in. Once ended, its games, players and winner are frozen for
    scoring.
    """

    def __init__(self, max_games_per_player: int, location: str) -> None:
        """Initialize a new tournament.

        Args
        ----
        max_games_per_player: Most games any one player may play here
        location: Where the tournament is held ("London", "Tel aviv")

        Raises
        ------
        InvalidLocationException: location is malformed
        InvalidMaxGamesException: max_games_per_player is not positive
        """
        require_location(location)
        require_max_games(max_games_per_player)

        self._max_games_per_player = max_games_per_player
        self._location = location
        self.games: OrderedMap[int, Game] = OrderedMap(copy_value=Game.copy)
        self.players: OrderedMap[int, Player] = OrderedMap(copy_value=Player.copy)

        self.longest_game_time: int = NO_TIME
        self.average_game_time: float = float(NO_TIME)
        self.winner_id: Optional[int] = None
        self.ended: bool = False
        self.number_of_players: int = 0

    # ========== Properties ==========

    @property
    def max_games_per_player(self) -> int:
        return self._max_games_per_player

    @property
    def location(self) -> str:
        return self._location

    @property
    def total_games(self) -> int:
        return len(self.games)

    def get_player(self, player_id: int) -> Optional[Player]:
        """Borrowed player record, or None if the id never played here."""
        return self.players.get(player_id)

    def iter_games(self) -> Iterator[Tuple[int, Game]]:
        return self.games.items()

    # ========== Games ==========

    def has_game_between(self, player_a: int, player_b: int) -> bool:
        """Linear scan for an earlier game between the two players."""
        return any(game.is_between(player_a, player_b) for game in self.games.values())

    def _check_new_game(
        self, first_player: int, second_player: int, winner: Winner, play_time: int
    ) -> None:
        require_winner(winner)
        if self.ended:
            raise TournamentEndedException("Tournament has already ended")
        require_id(first_player, "first player id")
        require_id(second_player, "second player id")
        if first_player == second_player:
            raise InvalidIdException("A player cannot play against himself")
        if self.has_game_between(first_player, second_player):
            raise GameAlreadyExistsException(
                f"Players {first_player} and {second_player} already played"
            )
        for player_id in (first_player, second_player):
            player = self.players.get(player_id)
            if player is not None and player.games_played >= self._max_games_per_player:
                raise ExceededGamesException(
                    f"Player {player_id} already played "
                    f"{self._max_games_per_player} games"
                )
        require_play_time(play_time)

    def add_game(
        self, first_player: int, second_player: int, winner: Winner, play_time: int
    ) -> int:
        """Record a game and update every derived statistic.

        All checks run before anything is changed.

        Args:
            first_player: First player's id
            second_player: Second player's id
            winner: FIRST, SECOND or DRAW
            play_time: Game length in seconds

        Returns:
            The new game's id

        Raises:
            NullArgumentException, TournamentEndedException, InvalidIdException,
            GameAlreadyExistsException, InvalidPlayTimeException,
            ExceededGamesException
        """
        self._check_new_game(first_player, second_player, winner, play_time)

        game_id = len(self.games) + 1
        self.games.put(game_id, Game(first_player, second_player, winner, play_time))

        game_count = len(self.games)
        self.longest_game_time = max(self.longest_game_time, play_time)
        self.average_game_time = (
            self.average_game_time * (game_count - 1) + play_time
        ) / game_count

        for player_id, seat in ((first_player, Winner.FIRST), (second_player, Winner.SECOND)):
            stored = self.players.get(player_id)
            if stored is None:
                working = Player()
                self.number_of_players += 1
            else:
                working = stored.copy()
            working.record_game(play_time, seat, winner)
            self.players.put(player_id, working)

        logger.debug(
            f"Game {game_id}: {first_player} vs {second_player}, "
            f"winner={winner.value}, time={play_time}"
        )
        return game_id

    # ========== Ending ==========

    def end(self) -> int:
        """Pick the winner and close the tournament.

        Returns:
            The winner's id

        Raises:
            TournamentEndedException: Tournament was already ended
            NoGamesException: Nobody (still) has a game in this tournament
        """
        if self.ended:
            raise TournamentEndedException("Tournament has already ended")

        best = select_winner(self.players)
        if best is None:
            raise NoGamesException("Tournament has no players")
        winner_id, winner = best
        if not winner.has_games:
            raise NoGamesException("Tournament has no games left to score")

        self.winner_id = winner_id
        self.ended = True
        return winner_id

    # ========== Player removal ==========

    def _forfeit_game(self, game: Game, player_id: int) -> None:
        """Rewrite one game as a forfeit win for the removed player's opponent."""
        removed_seat = game.seat_of(player_id)
        if removed_seat is None:
            return
        opponent_seat = removed_seat.other_side
        opponent_id = game.player_at(opponent_seat)

        if opponent_id is None:
            # Both players are gone; only the seat needs clearing.
            game.vacate(removed_seat)
            return

        opponent = self.players.get(opponent_id)
        if opponent is not None and opponent.has_games:
            opponent.convert_to_forfeit_win(opponent_seat, game.winner)
        game.vacate(removed_seat)
        game.winner = opponent_seat

    def remove_player(self, player_id: int) -> bool:
        """Remove a player from this tournament.

        An ongoing tournament gives every game of the player to the opponent
        as a forfeit. An ended tournament keeps its games as they are. Either
        way the player's own record is zeroed and tombstoned.

        Args:
            player_id: Player to remove

        Returns:
            True if the player had games here, False if there was nothing to do
        """
        player = self.players.get(player_id)
        if player is None or not player.has_games:
            return False

        if not self.ended:
            for game in self.games.values():
                self._forfeit_game(game, player_id)

        player.reset()
        return True

    # ========== Copy / serialization ==========

    def copy(self) -> "Tournament":
        """Return a deep copy, games and players included."""
        clone = Tournament(self._max_games_per_player, self._location)
        clone.games = self.games.copy()
        clone.players = self.players.copy()
        clone.longest_game_time = self.longest_game_time
        clone.average_game_time = self.average_game_time
        clone.winner_id = self.winner_id
        clone.ended = self.ended
        clone.number_of_players = self.number_of_players
        return clone

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament summary to dictionary."""
        return {
            "max_games_per_player": self._max_games_per_player,
            "location": self._location,
            "longest_game_time": self.longest_game_time,
            "average_game_time": self.average_game_time,
            "winner_id": self.winner_id,
            "ended": self.ended,
            "total_games": self.total_games,
            "number_of_players": self.number_of_players,
        }

    def __repr__(self) -> str:
        state = "ended" if self.ended else "ongoing"
        return (
            f"Tournament(location='{self._location}', games={self.total_games}, "
            f"players={self.number_of_players}, {state})"
        )
