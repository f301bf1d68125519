"""Player data class."""

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

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from swisscut.constants import PLAYER_ID_PREFIX, WIN_POINTS
from swisscut.utils import generate_id, setup_logger

logger = setup_logger(__name__)


@dataclass
class Player:
    """Represents a player in the tournament.

    Attributes
    ----------
    id : str
        Unique identifier for the player.
    name : str
        Trimmed display name, unique within the tournament.
    wins : int
        Wins, byes included.
    losses : int
        Losses, double losses included.
    opponent_ids : list of str
        One entry per decided pairing, in play order. Byes are not listed.
    had_bye : bool
        Whether the player has received a bye.
    eliminated : bool
        Set when losses reach the elimination threshold.
    dropped : bool
        Set when the player withdraws mid-tournament.
    """

    name: str
    id: str = field(default_factory=lambda: generate_id(PLAYER_ID_PREFIX))
    wins: int = 0
    losses: int = 0
    opponent_ids: List[str] = field(default_factory=list)
    had_bye: bool = False
    eliminated: bool = False
    dropped: bool = False

    @property
    def points(self) -> int:
        """Match points, always derived from wins."""
        return WIN_POINTS * self.wins

    @property
    def is_active(self) -> bool:
        """Still in contention: neither dropped nor eliminated."""
        return not (self.dropped or self.eliminated)

    def has_played(self, opponent_id: str) -> bool:
        """Check if this player has already met ``opponent_id``."""
        return opponent_id in self.opponent_ids

    def update_elimination(self, threshold: Optional[int]) -> None:
        """Recompute ``eliminated`` from losses; ``None`` disables elimination."""
        self.eliminated = threshold is not None and self.losses >= threshold

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "wins": self.wins,
            "losses": self.losses,
            "points": self.points,
            "opponentHistory": list(self.opponent_ids),
            "hadBye": self.had_bye,
            "eliminated": self.eliminated,
            "dropped": self.dropped,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary.

        ``points`` is ignored since it is derived; a disagreeing value is logged.
        """
        player = cls(
            id=str(data["id"]),
            name=str(data["name"]),
            wins=int(data.get("wins", 0)),
            losses=int(data.get("losses", 0)),
            opponent_ids=[str(o) for o in data.get("opponentHistory", [])],
            had_bye=bool(data.get("hadBye", False)),
            eliminated=bool(data.get("eliminated", False)),
            dropped=bool(data.get("dropped", False)),
        )
        if player.wins < 0 or player.losses < 0:
            raise ValueError(f"negative counters for player {player.name!r}")
        stored_points = data.get("points")
        if stored_points is not None and stored_points != player.points:
            logger.warning(
                "Stored points %s for %s disagree with %s wins; using %s",
                stored_points,
                player.name,
                player.wins,
                player.points,
            )
        return player

    def __str__(self) -> str:
        return f"{self.name} ({self.wins}W-{self.losses}L, {self.points} pts)"
