"""Match data class."""

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

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from swisscut.constants import (
    MATCH_ID_PREFIX,
    OUTCOME_BYE,
    OUTCOME_DOUBLE_LOSS,
    OUTCOME_PENDING,
    OUTCOME_PLAYER1_WIN,
    OUTCOME_PLAYER2_WIN,
)
from swisscut.utils import generate_id


class MatchOutcome(Enum):
    """Outcome of a single match."""

    PENDING = OUTCOME_PENDING
    PLAYER1_WIN = OUTCOME_PLAYER1_WIN
    PLAYER2_WIN = OUTCOME_PLAYER2_WIN
    DOUBLE_LOSS = OUTCOME_DOUBLE_LOSS
    BYE = OUTCOME_BYE


# Outcomes a caller may record through the result path
RECORDABLE_OUTCOMES = frozenset(
    {MatchOutcome.PLAYER1_WIN, MatchOutcome.PLAYER2_WIN, MatchOutcome.DOUBLE_LOSS}
)


@dataclass
class Match:
    """Represents one pairing of a round.

    Attributes
    ----------
    round_number : int
        Round the match belongs to (1-indexed).
    player1_id : str
        ID of the first player, or the bye recipient.
    player2_id : str or None
        ID of the second player, None for a bye.
    outcome : MatchOutcome
        PENDING until a result is recorded; fixed to BYE for byes.
    rematch : bool
        True when the players had met before and were paired anyway.
    id : str
        Unique match identifier.
    """

    round_number: int
    player1_id: str
    player2_id: Optional[str] = None
    outcome: MatchOutcome = MatchOutcome.PENDING
    rematch: bool = False
    id: str = field(default_factory=lambda: generate_id(MATCH_ID_PREFIX))

    @classmethod
    def bye(cls, round_number: int, player_id: str) -> "Match":
        """Create a bye match, already decided."""
        return cls(
            round_number=round_number,
            player1_id=player_id,
            player2_id=None,
            outcome=MatchOutcome.BYE,
        )

    @property
    def is_bye(self) -> bool:
        return self.player2_id is None

    @property
    def is_decided(self) -> bool:
        return self.outcome is not MatchOutcome.PENDING

    def player_ids(self):
        """IDs of everyone seated in this match."""
        if self.player2_id is None:
            return (self.player1_id,)
        return (self.player1_id, self.player2_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "round": self.round_number,
            "player1": self.player1_id,
            "player2": self.player2_id,
            "outcome": self.outcome.value,
            "rematch": self.rematch,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        player2 = data.get("player2")
        outcome = MatchOutcome(data.get("outcome", OUTCOME_PENDING))
        if (player2 is None) != (outcome is MatchOutcome.BYE):
            raise ValueError(f"match {data.get('id')!r}: bye outcome needs no player2")
        return cls(
            id=str(data["id"]),
            round_number=int(data["round"]),
            player1_id=str(data["player1"]),
            player2_id=None if player2 is None else str(player2),
            outcome=outcome,
            rematch=bool(data.get("rematch", False)),
        )
