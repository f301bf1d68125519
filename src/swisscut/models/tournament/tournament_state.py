"""Data model for the full state of a tournament."""

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

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from swisscut.constants import PHASE_FINISHED, PHASE_IN_PROGRESS, PHASE_SETUP
from swisscut.models.player import Player
from swisscut.models.tournament.match import Match
from swisscut.utils import compute_total_rounds


class TournamentPhase(Enum):
    """Lifecycle phase: setup -> in progress -> finished."""

    SETUP = PHASE_SETUP
    IN_PROGRESS = PHASE_IN_PROGRESS
    FINISHED = PHASE_FINISHED


@dataclass
class TournamentState:
    """Container for everything that changes while a tournament runs.

    Attributes
    ----------
    players : dict of str to Player
        All entrants keyed by id, in registration order.
    current_round : int
        Round being played (1-indexed), 0 before the start.
    matches : list of Match
        Matches of the current round.
    total_rounds : int
        Rounds to play, fixed when the tournament starts.
    phase : TournamentPhase
        Current lifecycle phase.
    past_matches : list of Match
        Matches of every earlier round, oldest first.
    """

    players: Dict[str, Player] = field(default_factory=dict)
    current_round: int = 0
    matches: List[Match] = field(default_factory=list)
    total_rounds: int = 0
    phase: TournamentPhase = TournamentPhase.SETUP
    past_matches: List[Match] = field(default_factory=list)

    def copy(self) -> "TournamentState":
        """Deep copy sharing no mutable structure with this state."""
        return copy.deepcopy(self)

    def get_match(self, match_id: str) -> Optional[Match]:
        for match in self.matches:
            if match.id == match_id:
                return match
        return None

    def get_player_by_name(self, name: str) -> Optional[Player]:
        for player in self.players.values():
            if player.name == name:
                return player
        return None

    @property
    def is_round_complete(self) -> bool:
        """All current matches are decided (vacuously True with no matches)."""
        return all(match.is_decided for match in self.matches)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize state to dictionary."""
        return {
            "players": [p.to_dict() for p in self.players.values()],
            "matches": [m.to_dict() for m in self.matches],
            "pastMatches": [m.to_dict() for m in self.past_matches],
            "currentRound": self.current_round,
            "totalRounds": self.total_rounds,
            "phase": self.phase.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentState":
        """Deserialize state from dictionary.

        ``players`` and ``currentRound`` are required; KeyError, TypeError or
        ValueError signal a malformed document. Missing or null ``matches``
        and ``pastMatches`` are empty, and a missing ``totalRounds`` after the
        start is recomputed from the number of players.
        """
        players: Dict[str, Player] = {}
        for p_data in data["players"]:
            player = Player.from_dict(p_data)
            if player.id in players:
                raise ValueError(f"duplicate player id {player.id!r}")
            players[player.id] = player

        current_round = int(data["currentRound"])
        if current_round < 0:
            raise ValueError("currentRound cannot be negative")

        if "phase" in data:
            phase = TournamentPhase(data["phase"])
        else:
            phase = (
                TournamentPhase.SETUP if current_round == 0 else TournamentPhase.IN_PROGRESS
            )

        matches = [Match.from_dict(m) for m in data.get("matches") or []]
        past_matches = [Match.from_dict(m) for m in data.get("pastMatches") or []]
        for match in matches + past_matches:
            for player_id in match.player_ids():
                if player_id not in players:
                    raise ValueError(
                        f"match {match.id!r} refers to unknown player {player_id!r}"
                    )

        # totalRounds is fixed at the start from the field size
        if data.get("totalRounds") is not None:
            total_rounds = int(data["totalRounds"])
        elif phase is TournamentPhase.SETUP:
            total_rounds = 0
        else:
            total_rounds = compute_total_rounds(len(players))

        return cls(
            players=players,
            current_round=current_round,
            matches=matches,
            total_rounds=total_rounds,
            phase=phase,
            past_matches=past_matches,
        )
