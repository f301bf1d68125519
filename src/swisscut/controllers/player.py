"""Player registration and withdrawal."""

# Swiss Cut
# Copyright (C) 2025  Swiss Cut developers
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

from swisscut.exceptions import (
    AlreadyDroppedError,
    DuplicateNameError,
    InvalidNameError,
    InvalidPhaseError,
    UnknownPlayerError,
)
from swisscut.models.player import Player
from swisscut.models.tournament import TournamentPhase, TournamentState
from swisscut.utils import setup_logger

logger = setup_logger(__name__)


class PlayerRegistry:
    """Adds, removes and drops players of a tournament state.

    Every check happens before the state is touched, so a rejected call
    leaves the state exactly as it was.
    """

    @staticmethod
    def normalize_name(name: str) -> str:
        """Trim a name and reject it if nothing is left."""
        trimmed = (name or "").strip()
        if not trimmed:
            raise InvalidNameError("Player name cannot be empty")
        return trimmed

    def get_player(self, state: TournamentState, player_id: str) -> Player:
        player = state.players.get(player_id)
        if player is None:
            raise UnknownPlayerError(f"No player with id {player_id!r}")
        return player

    def add_player(self, state: TournamentState, name: str) -> Player:
        """Register a new player with zeroed counters.

        Args:
            state: Tournament state, must be in setup
            name: Player name; surrounding whitespace is ignored

        Returns:
            The new Player

        Raises:
            InvalidPhaseError: If the tournament has already started
            InvalidNameError: If the trimmed name is empty
            DuplicateNameError: If any entrant already has this name
        """
        if state.phase is not TournamentPhase.SETUP:
            raise InvalidPhaseError(
                f"Players can only be added during setup (phase: {state.phase.value})"
            )
        trimmed = self.normalize_name(name)
        if state.get_player_by_name(trimmed) is not None:
            raise DuplicateNameError(f"A player named {trimmed!r} is already registered")

        player = Player(name=trimmed)
        state.players[player.id] = player
        logger.info("Added player: %s (%s)", player.name, player.id)
        return player

    def remove_player(self, state: TournamentState, player_id: str) -> Player:
        """Remove a player entirely; only allowed during setup."""
        if state.phase is not TournamentPhase.SETUP:
            raise InvalidPhaseError(
                "Players can only be removed during setup; drop them instead"
            )
        self.get_player(state, player_id)
        player = state.players.pop(player_id)
        logger.info("Removed player: %s (%s)", player.name, player_id)
        return player

    def drop_player(self, state: TournamentState, player_id: str) -> Player:
        """Withdraw a player from future rounds, keeping their record."""
        if state.phase is not TournamentPhase.IN_PROGRESS:
            raise InvalidPhaseError(
                f"Players can only be dropped while in progress (phase: {state.phase.value})"
            )
        player = self.get_player(state, player_id)
        if player.dropped:
            raise AlreadyDroppedError(f"{player.name} has already dropped")
        player.dropped = True
        logger.info("Dropped player: %s (%s)", player.name, player_id)
        return player
