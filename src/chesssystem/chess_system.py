"""Chess system: the registry of tournaments and the public API.

Every public method returns a :class:`ChessOutcome` instead of raising for
rejected commands. Internally the tournament layer raises exceptions from
:mod:`chesssystem.exceptions`; the ``_as_outcome`` decorator converts them at
this boundary.
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

import functools
from pathlib import Path
from typing import Any, Callable, List, Optional, TextIO, Union

from chesssystem.constants import REPORT_ENCODING
from chesssystem.containers import OrderedMap
from chesssystem.exceptions import (
    ChessSystemException,
    InvalidIdException,
    NoTournamentsEndedException,
    PlayerNotExistException,
    SaveFailureException,
    TournamentAlreadyExistsException,
    TournamentEndedException,
    TournamentNotExistException,
)
from chesssystem.models.enums import ChessResult, Winner
from chesssystem.models.outcome import ChessOutcome
from chesssystem.models.player import Player
from chesssystem.reports import (
    PlayerLevel,
    compute_player_levels,
    format_tournament_statistics,
    write_player_levels,
)
from chesssystem.tournament import Tournament
from chesssystem.utils import setup_logger
from chesssystem.utils.validation import require, require_id, require_winner

logger = setup_logger(__name__)


def _as_outcome(method: Callable[..., Any]) -> Callable[..., ChessOutcome]:
    """Convert a method's return value or exception into a ChessOutcome."""

    @functools.wraps(method)
    def wrapper(self: "ChessSystem", *args: Any, **kwargs: Any) -> ChessOutcome:
        try:
            return ChessOutcome.success(method(self, *args, **kwargs))
        except ChessSystemException as e:
            logger.debug(f"{method.__name__} rejected: {e.result.name} ({e})")
            return ChessOutcome.failure(e.result, str(e) or None)
        except MemoryError:
            logger.error(f"{method.__name__} ran out of memory")
            return ChessOutcome.failure(ChessResult.OUT_OF_MEMORY)

    return wrapper


class ChessSystem:
    """All tournaments of one session.

    Tournaments are stored by value in an ordered map keyed by tournament
    id; lookups hand out borrowed references that are updated in place.
    """

    def __init__(self) -> None:
        self._tournaments: OrderedMap[int, Tournament] = OrderedMap(
            copy_value=Tournament.copy
        )

    # ========== Lookup helpers ==========

    def _get_tournament(self, tournament_id: int) -> Tournament:
        require_id(tournament_id, "tournament id")
        tournament = self._tournaments.get(tournament_id)
        if tournament is None:
            raise TournamentNotExistException(f"No tournament {tournament_id}")
        return tournament

    def get_tournament(self, tournament_id: int) -> Optional[Tournament]:
        """Borrowed tournament for read access, or None."""
        return self._tournaments.get(tournament_id)

    def tournament_ids(self) -> List[int]:
        return list(self._tournaments)

    def __len__(self) -> int:
        return len(self._tournaments)

    # ========== Commands ==========

    @_as_outcome
    def add_tournament(
        self, tournament_id: int, max_games_per_player: int, location: str
    ) -> None:
        """Register a new tournament.

        Results: NULL_ARGUMENT, INVALID_ID, TOURNAMENT_ALREADY_EXISTS,
        INVALID_LOCATION, INVALID_MAX_GAMES, OUT_OF_MEMORY, SUCCESS.
        """
        require(location, "location")
        require_id(tournament_id, "tournament id")
        if tournament_id in self._tournaments:
            raise TournamentAlreadyExistsException(
                f"Tournament {tournament_id} already exists"
            )
        self._tournaments.put(tournament_id, Tournament(max_games_per_player, location))
        logger.info(f"Added tournament {tournament_id} in {location}")

    @_as_outcome
    def add_game(
        self,
        tournament_id: int,
        first_player: int,
        second_player: int,
        winner: Winner,
        play_time: int,
    ) -> int:
        """Record a game; the outcome's value is the new game id.

        Results: NULL_ARGUMENT, INVALID_ID, TOURNAMENT_NOT_EXIST,
        TOURNAMENT_ENDED, GAME_ALREADY_EXISTS, INVALID_PLAY_TIME,
        EXCEEDED_GAMES, OUT_OF_MEMORY, SUCCESS.
        """
        require_winner(winner)
        require_id(tournament_id, "tournament id")
        require_id(first_player, "first player id")
        require_id(second_player, "second player id")
        if first_player == second_player:
            raise InvalidIdException("A player cannot play against himself")
        tournament = self._get_tournament(tournament_id)
        if tournament.ended:
            raise TournamentEndedException(f"Tournament {tournament_id} has ended")
        return tournament.add_game(first_player, second_player, winner, play_time)

    @_as_outcome
    def remove_tournament(self, tournament_id: int) -> None:
        """Forget a tournament with all its games and players."""
        self._get_tournament(tournament_id)
        self._tournaments.remove(tournament_id)
        logger.info(f"Removed tournament {tournament_id}")

    @_as_outcome
    def remove_player(self, player_id: int) -> None:
        """Remove a player from every tournament it took part in.

        Ongoing tournaments turn the player's games into forfeit wins for
        the opponents. Ended tournaments only zero the player's record; their
        winner is not recomputed.

        Results: INVALID_ID, PLAYER_NOT_EXIST, SUCCESS.
        """
        require_id(player_id, "player id")
        found = False
        for tournament_id, tournament in self._tournaments.items():
            if tournament.remove_player(player_id):
                found = True
                logger.info(f"Removed player {player_id} from tournament {tournament_id}")
        if not found:
            raise PlayerNotExistException(f"No active player {player_id}")

    @_as_outcome
    def end_tournament(self, tournament_id: int) -> int:
        """Close a tournament; the outcome's value is the winner id.

        Results: INVALID_ID, TOURNAMENT_NOT_EXIST, TOURNAMENT_ENDED,
        NO_GAMES, SUCCESS.
        """
        winner_id = self._get_tournament(tournament_id).end()
        logger.info(f"Tournament {tournament_id} ended, winner {winner_id}")
        return winner_id

    # ========== Queries ==========

    @_as_outcome
    def calculate_average_play_time(self, player_id: int) -> float:
        """Average game length of a player over all tournaments.

        Results: INVALID_ID, PLAYER_NOT_EXIST, SUCCESS (value is the average).
        """
        require_id(player_id, "player id")
        total_time = 0
        total_games = 0
        for tournament in self._tournaments.values():
            player = tournament.get_player(player_id)
            if player is None:
                continue
            total_time += player.time_played
            total_games += player.games_played
        if total_games == 0:
            raise PlayerNotExistException(f"Player {player_id} has no games")
        return total_time / total_games

    def aggregate_players(self) -> OrderedMap[int, Player]:
        """Merge every tournament's player records by player id.

        The first record seen for an id seeds the entry; later ones are added
        field by field. The result is a new map and does not alias any
        tournament's players.
        """
        merged: OrderedMap[int, Player] = OrderedMap(copy_value=Player.copy)
        for tournament in self._tournaments.values():
            for player_id, player in tournament.players.items():
                total = merged.get(player_id)
                if total is None:
                    merged.put(player_id, player)
                else:
                    total.merge(player)
        return merged

    def players_levels(self) -> List[PlayerLevel]:
        """Rows of the players levels report, already sorted."""
        return compute_player_levels(self.aggregate_players())

    # ========== Reports ==========

    @_as_outcome
    def save_players_levels(self, stream: TextIO) -> int:
        """Write the players levels report to an open text stream.

        Results: NULL_ARGUMENT, SAVE_FAILURE, SUCCESS (value is lines written).
        """
        require(stream, "stream")
        rows = self.players_levels()
        try:
            written = write_player_levels(stream, rows)
        except (OSError, ValueError) as e:
            logger.error(f"Failed writing players levels: {e}")
            raise SaveFailureException(str(e)) from e
        logger.info(f"Saved levels of {written} players")
        return written

    @_as_outcome
    def save_tournament_statistics(self, path: Union[str, Path]) -> int:
        """Write statistics of every ended tournament to ``path``.

        The file is created (or truncated) even when no tournament has
        ended; in that case nothing is written into it.

        Results: NULL_ARGUMENT, SAVE_FAILURE, NO_TOURNAMENTS_ENDED,
        SUCCESS (value is the number of tournaments written).
        """
        require(path, "path")
        written = 0
        try:
            with open(path, "w", encoding=REPORT_ENCODING) as file:
                for tournament in self._tournaments.values():
                    if not tournament.ended:
                        continue
                    file.write(format_tournament_statistics(tournament))
                    written += 1
        except (OSError, ValueError) as e:
            logger.error(f"Failed writing tournament statistics to {path}: {e}")
            raise SaveFailureException(str(e)) from e

        if written == 0:
            raise NoTournamentsEndedException("No tournament has ended yet")
        logger.info(f"Saved statistics of {written} tournaments to {path}")
        return written
