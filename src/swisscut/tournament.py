"""Main Tournament class - orchestrates all tournament operations.

This is the primary interface for running a Swiss Cut event, coordinating
the specialized controllers behind a single owned state and undo history.
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
from contextlib import contextmanager
from typing import Iterator, List, Optional, Union

from swisscut.constants import MIN_PLAYERS_TO_START
from swisscut.controllers import PlayerRegistry
from swisscut.controllers.tournament import (
    ResultRecorder,
    RoundManager,
    compute_standings,
    find_champion,
)
from swisscut.exceptions import (
    DuplicateNameError,
    InvalidPhaseError,
    NotEnoughPlayersError,
    RoundIncompleteError,
)
from swisscut.models.pairing import PairingResult
from swisscut.models.player import Player
from swisscut.models.tournament import (
    HistoryStack,
    Match,
    MatchOutcome,
    TournamentConfig,
    TournamentPhase,
    TournamentState,
)
from swisscut.type_hints import Notifier
from swisscut.utils import compute_total_rounds, setup_logger

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized managers:
    - PlayerRegistry: adds, removes and drops players
    - RoundManager: pairs rounds and applies byes
    - ResultRecorder: records and undoes match results

    It owns the live TournamentState and a HistoryStack of snapshots taken
    before each new round (and, if configured, before each result change).
    Callers only act through the methods below.
    """

    def __init__(
        self,
        config: Optional[TournamentConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        notifier: Optional[Notifier] = None,
        state: Optional[TournamentState] = None,
        history: Optional[HistoryStack] = None,
    ) -> None:
        """Initialize a tournament.

        Args:
            config: Tournament settings; defaults to elimination after two losses
            rng: Random source for pairing shuffles; seeded from config.seed if omitted
            notifier: Called with a message for notable, non-fatal events
            state: Existing state to resume, e.g. from a saved document
            history: Undo history belonging to ``state``
        """
        self.config = config if config is not None else TournamentConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.notifier = notifier
        self._deferred: Optional[List[str]] = None

        self.state = state if state is not None else TournamentState()
        self.history = history if history is not None else HistoryStack()

        # Specialized managers
        self.registry = PlayerRegistry()
        self.round_manager = RoundManager(
            rng=self.rng,
            elimination_threshold=self.config.elimination_threshold,
            max_search_steps=self.config.max_pairing_search_steps,
            warning_callback=self.notify,
        )
        self.result_recorder = ResultRecorder(self.config.elimination_threshold)

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @property
    def phase(self) -> TournamentPhase:
        return self.state.phase

    @property
    def current_round(self) -> int:
        return self.state.current_round

    @property
    def total_rounds(self) -> int:
        """Rounds to play; during setup, a preview for the current field."""
        if self.state.phase is TournamentPhase.SETUP:
            return compute_total_rounds(len(self.state.players))
        return self.state.total_rounds

    @property
    def matches(self) -> List[Match]:
        """Matches of the current round."""
        return list(self.state.matches)

    @property
    def players(self) -> List[Player]:
        """All players in registration order."""
        return list(self.state.players.values())

    @property
    def active_players(self) -> List[Player]:
        """Players who would be paired in the next round."""
        return self.round_manager.candidates(self.state)

    @property
    def is_round_complete(self) -> bool:
        return self.state.is_round_complete

    @property
    def can_undo(self) -> bool:
        return bool(self.history)

    @property
    def champion(self) -> Optional[Player]:
        """Winner once the tournament is finished, None before."""
        if self.state.phase is not TournamentPhase.FINISHED:
            return None
        return find_champion(self.state.players.values())

    # ========== Notifications ==========

    def notify(self, message: str) -> None:
        """Log a notable condition and pass it to the caller's hook.

        Inside an undoable operation the hook is called once the operation
        has completed and its snapshot is stored.
        """
        logger.warning(message)
        if self._deferred is not None:
            self._deferred.append(message)
        elif self.notifier is not None:
            self.notifier(message)

    @contextmanager
    def _undoable(self, enabled: bool = True) -> Iterator[None]:
        """Snapshot the state, keeping the snapshot only if the block succeeds."""
        snapshot = self.history.capture(self.state) if enabled else None
        deferred = self._deferred = []
        try:
            yield
        finally:
            self._deferred = None
        if snapshot is not None:
            self.history.commit(snapshot)
        if self.notifier is not None:
            for message in deferred:
                self.notifier(message)

    # ========== Player Management ==========

    def get_player(self, player_id: str) -> Player:
        return self.registry.get_player(self.state, player_id)

    def add_player(self, name: str) -> Player:
        """Register a player during setup.

        Args:
            name: Player name, trimmed; must be unique

        Returns:
            The new Player
        """
        try:
            return self.registry.add_player(self.state, name)
        except DuplicateNameError as e:
            self.notify(str(e))
            raise

    def remove_player(self, player_id: str) -> Player:
        """Remove a player entirely; setup only."""
        return self.registry.remove_player(self.state, player_id)

    def drop_player(self, player_id: str) -> Player:
        """Withdraw a player from future rounds; their record stays in the standings."""
        if self.state.phase is TournamentPhase.IN_PROGRESS:
            with self._undoable():
                return self.registry.drop_player(self.state, player_id)
        return self.registry.drop_player(self.state, player_id)

    # ========== Round Management ==========

    def start(self) -> PairingResult:
        """Leave setup and pair round 1.

        Returns:
            The pairing of round 1
        """
        if self.state.phase is not TournamentPhase.SETUP:
            raise InvalidPhaseError(
                f"Tournament already started (phase: {self.state.phase.value})"
            )
        player_count = len(self.state.players)
        if player_count < MIN_PLAYERS_TO_START:
            raise NotEnoughPlayersError(
                f"At least {MIN_PLAYERS_TO_START} players are needed, got {player_count}"
            )

        with self._undoable():
            self.state.total_rounds = compute_total_rounds(player_count)
            self.state.phase = TournamentPhase.IN_PROGRESS
            result = self.round_manager.create_round(self.state, 1)

        logger.info(
            "Started %s with %s players over %s rounds",
            self.name,
            player_count,
            self.state.total_rounds,
        )
        return result

    def advance_round(self) -> Optional[PairingResult]:
        """Pair the next round, or finish the tournament.

        The tournament finishes after the last scheduled round or when at
        most one player is left to pair.

        Returns:
            The new round's pairing, or None when the tournament finished
        """
        if self.state.phase is not TournamentPhase.IN_PROGRESS:
            raise InvalidPhaseError(
                f"No round to advance (phase: {self.state.phase.value})"
            )
        if not self.state.is_round_complete:
            pending = sum(1 for m in self.state.matches if not m.is_decided)
            raise RoundIncompleteError(
                f"Round {self.state.current_round} still has {pending} pending match(es)"
            )

        with self._undoable():
            if self.state.current_round >= self.state.total_rounds:
                self._finish()
                return None
            result = self.round_manager.create_round(
                self.state, self.state.current_round + 1
            )
            if result.is_complete:
                self._finish()
                return None
        return result

    def _finish(self) -> None:
        self.state.phase = TournamentPhase.FINISHED
        champion = find_champion(self.state.players.values())
        logger.info(
            "Tournament %s finished after round %s; champion: %s",
            self.name,
            self.state.current_round,
            champion.name if champion else "None",
        )

    def reset(self) -> None:
        """Return a finished tournament to an empty setup."""
        if self.state.phase is not TournamentPhase.FINISHED:
            raise InvalidPhaseError(
                f"Only a finished tournament can be reset (phase: {self.state.phase.value})"
            )
        self.state = TournamentState()
        self.history.clear()
        logger.info("Tournament %s reset", self.name)

    def round_matches(self, round_number: int) -> List[Match]:
        """Matches of any round played so far, current round included."""
        return [
            m
            for m in self.state.past_matches + self.state.matches
            if m.round_number == round_number
        ]

    # ========== Result Management ==========

    def record_result(self, match_id: str, outcome: Union[MatchOutcome, str]) -> Match:
        """Record a result for a pending match of the current round."""
        self._require_in_progress("record a result")
        with self._undoable(self.config.snapshot_results):
            return self.result_recorder.record_result(self.state, match_id, outcome)

    def undo_result(self, match_id: str) -> Match:
        """Take back a recorded result; byes cannot be undone this way."""
        self._require_in_progress("undo a result")
        with self._undoable(self.config.snapshot_results):
            return self.result_recorder.undo_result(self.state, match_id)

    def _require_in_progress(self, action: str) -> None:
        if self.state.phase is not TournamentPhase.IN_PROGRESS:
            raise InvalidPhaseError(
                f"Cannot {action} (phase: {self.state.phase.value})"
            )

    # ========== History ==========

    def undo(self) -> TournamentState:
        """Restore the most recent snapshot wholesale.

        Returns:
            The restored state
        """
        self.state = self.history.pop()
        logger.info(
            "Restored snapshot: round %s, phase %s",
            self.state.current_round,
            self.state.phase.value,
        )
        return self.state

    # ========== Standings ==========

    def get_standings(self) -> List[Player]:
        """Get current tournament standings.

        Returns:
            Every player, best first, by points, wins, then fewest losses
        """
        return compute_standings(self.state.players.values())
