"""Round management for tournaments.

This module handles round generation: asking the pairing system for the
next round, applying the bye at pairing time and archiving the previous
round's matches.
"""

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

import random
from typing import Callable, List, Optional

from swisscut.constants import DEFAULT_MAX_PAIRING_SEARCH_STEPS
from swisscut.models.pairing import PairingResult
from swisscut.models.player import Player
from swisscut.models.tournament import TournamentState
from swisscut.pairing import create_swiss_cut_pairings, get_pairing_candidates
from swisscut.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Generates rounds and keeps the round bookkeeping of a state.

    This class is responsible for:
    - Calling the pairing system with the candidates of the round
    - Awarding the bye win as soon as the round is paired
    - Moving finished rounds into the match archive
    - Reporting degraded pairings (rematches, repeat byes)
    """

    def __init__(
        self,
        rng: random.Random,
        elimination_threshold: Optional[int],
        max_search_steps: int = DEFAULT_MAX_PAIRING_SEARCH_STEPS,
        warning_callback: Optional[Callable[[str], None]] = None,
    ):
        """Initialize the round manager.

        Args:
            rng: Random source for the pairing shuffle
            elimination_threshold: Losses at which players leave the draw, or None
            max_search_steps: Budget for the no-rematch search
            warning_callback: Called with a message for each degraded pairing
        """
        self.rng = rng
        self.elimination_threshold = elimination_threshold
        self.max_search_steps = max_search_steps
        self.warning_callback = warning_callback

    def candidates(self, state: TournamentState) -> List[Player]:
        """Players who would be paired if a round were created now."""
        return get_pairing_candidates(state.players.values(), self.elimination_threshold)

    def create_round(self, state: TournamentState, round_number: int) -> PairingResult:
        """Pair ``round_number`` and install it as the current round.

        When the pairing system reports the tournament complete the state
        is left untouched.

        Returns:
            The PairingResult from the pairing system
        """
        result = create_swiss_cut_pairings(
            list(state.players.values()),
            round_number,
            rng=self.rng,
            elimination_threshold=self.elimination_threshold,
            max_search_steps=self.max_search_steps,
        )
        if result.is_complete:
            return result

        if result.bye_player_id is not None:
            bye_player = state.players[result.bye_player_id]
            bye_player.wins += 1
            bye_player.had_bye = True
            logger.info("Bye for %s in round %s", bye_player.name, round_number)

        state.past_matches.extend(state.matches)
        state.matches = list(result.matches)
        state.current_round = round_number

        logger.info(
            "Created round %s: %s matches", round_number, len(state.matches)
        )

        # The round is fully installed before anyone is told about it
        if result.repeat_bye:
            self._warn(
                f"Round {round_number}: every player has already had a bye, "
                f"{state.players[result.bye_player_id].name} receives a second one."
            )
        for player1_id, player2_id in result.rematches:
            self._warn(
                f"Round {round_number}: {state.players[player1_id].name} and "
                f"{state.players[player2_id].name} meet again, "
                "no unplayed opponent was available."
            )
        return result

    def _warn(self, message: str) -> None:
        """Report a degraded pairing through the callback, or log it without one."""
        if self.warning_callback is not None:
            self.warning_callback(message)
        else:
            logger.warning(message)
