"""Result recording and reversal for tournaments.

This module applies match outcomes to player records and takes them back
again, with every check done before anything is written.
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

from typing import List, Optional, Tuple, Union

from swisscut.exceptions import (
    AlreadyDecidedError,
    HistoryMismatchError,
    ImmutableByeError,
    InvalidOutcomeError,
    NotDecidedError,
    UnknownMatchError,
    UnknownPlayerError,
)
from swisscut.models.player import Player
from swisscut.models.tournament import (
    RECORDABLE_OUTCOMES,
    Match,
    MatchOutcome,
    TournamentState,
)
from swisscut.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and undoing match results.

    This class is responsible for:
    - Validating outcomes and match state
    - Updating wins, losses and opponent history of both players at once
    - Applying the elimination threshold
    - Reversing a result exactly
    """

    def __init__(self, elimination_threshold: Optional[int]) -> None:
        """Initialize the recorder.

        Args:
            elimination_threshold: Losses at which a player is eliminated,
                or None to never eliminate
        """
        self.elimination_threshold = elimination_threshold

    @staticmethod
    def parse_outcome(outcome: Union[MatchOutcome, str]) -> MatchOutcome:
        """Accept a MatchOutcome or its string value; only recordable outcomes pass."""
        try:
            parsed = MatchOutcome(outcome)
        except ValueError:
            raise InvalidOutcomeError(f"Unknown outcome: {outcome!r}") from None
        if parsed not in RECORDABLE_OUTCOMES:
            raise InvalidOutcomeError(
                f"Outcome {parsed.value!r} cannot be recorded; "
                "use player1Win, player2Win or doubleLoss"
            )
        return parsed

    def find_match(self, state: TournamentState, match_id: str) -> Match:
        match = state.get_match(match_id)
        if match is None:
            raise UnknownMatchError(f"No match with id {match_id!r} in the current round")
        return match

    def _match_players(self, state: TournamentState, match: Match) -> Tuple[Player, Player]:
        try:
            return state.players[match.player1_id], state.players[match.player2_id]
        except KeyError as e:
            raise UnknownPlayerError(f"Match {match.id} refers to unknown player {e}") from None

    @staticmethod
    def _split(
        outcome: MatchOutcome, player1: Player, player2: Player
    ) -> Tuple[Optional[Player], List[Player]]:
        """Winner (None on a double loss) and losers for an outcome."""
        if outcome is MatchOutcome.PLAYER1_WIN:
            return player1, [player2]
        if outcome is MatchOutcome.PLAYER2_WIN:
            return player2, [player1]
        return None, [player1, player2]

    def record_result(
        self,
        state: TournamentState,
        match_id: str,
        outcome: Union[MatchOutcome, str],
    ) -> Match:
        """Record the outcome of a pending match.

        Args:
            state: Tournament state holding the current round
            match_id: ID of a match of the current round
            outcome: player1Win, player2Win or doubleLoss

        Returns:
            The updated Match

        Raises:
            InvalidOutcomeError: If the outcome cannot be recorded
            UnknownMatchError: If the match is not in the current round
            AlreadyDecidedError: If the match already has an outcome (byes included)
        """
        parsed = self.parse_outcome(outcome)
        match = self.find_match(state, match_id)
        if match.is_decided:
            raise AlreadyDecidedError(
                f"Match {match_id} already decided ({match.outcome.value}); undo it first"
            )
        player1, player2 = self._match_players(state, match)

        winner, losers = self._split(parsed, player1, player2)
        player1.opponent_ids.append(player2.id)
        player2.opponent_ids.append(player1.id)
        if winner is not None:
            winner.wins += 1
        for loser in losers:
            loser.losses += 1
            loser.update_elimination(self.elimination_threshold)
            if loser.eliminated:
                logger.info("%s eliminated with %s losses", loser.name, loser.losses)
        match.outcome = parsed

        logger.info(
            "Recorded round %s: %s vs %s -> %s",
            match.round_number,
            player1.name,
            player2.name,
            parsed.value,
        )
        return match

    def undo_result(self, state: TournamentState, match_id: str) -> Match:
        """Reverse a recorded result, returning the match to pending.

        This is the exact inverse of :meth:`record_result` for both players.

        Raises:
            UnknownMatchError: If the match is not in the current round
            ImmutableByeError: If the match is a bye
            NotDecidedError: If the match is still pending
            HistoryMismatchError: If either opponent history does not end
                with this pairing
        """
        match = self.find_match(state, match_id)
        if match.outcome is MatchOutcome.BYE:
            raise ImmutableByeError(
                "A bye can only be taken back by undoing the whole round"
            )
        if not match.is_decided:
            raise NotDecidedError(f"Match {match_id} has no result to undo")
        player1, player2 = self._match_players(state, match)
        if player1.opponent_ids[-1:] != [player2.id] or player2.opponent_ids[-1:] != [
            player1.id
        ]:
            raise HistoryMismatchError(
                f"Opponent history of {player1.name} and {player2.name} "
                "does not end with this match"
            )

        winner, losers = self._split(match.outcome, player1, player2)
        player1.opponent_ids.pop()
        player2.opponent_ids.pop()
        if winner is not None:
            winner.wins -= 1
        for loser in losers:
            loser.losses -= 1
            loser.update_elimination(self.elimination_threshold)
        previous = match.outcome
        match.outcome = MatchOutcome.PENDING

        logger.info(
            "Undid round %s: %s vs %s (was %s)",
            match.round_number,
            player1.name,
            player2.name,
            previous.value,
        )
        return match
