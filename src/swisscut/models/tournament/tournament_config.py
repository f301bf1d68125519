"""TournamentConfig data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from swisscut.constants import (
    DEFAULT_ELIMINATION_THRESHOLD,
    DEFAULT_MAX_PAIRING_SEARCH_STEPS,
)


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    elimination_threshold : int or None
        Losses at which a player is eliminated. None runs a points-only
        Swiss where nobody is ever eliminated.
    snapshot_results : bool
        Also take an undo snapshot before every result record or undo,
        not only before each new round.
    seed : int or None
        Seed for the shuffle step when no random generator is injected.
    max_pairing_search_steps : int
        Budget of the no-rematch search before falling back to greedy pairing.
    """

    name: str = "Untitled Tournament"
    elimination_threshold: Optional[int] = DEFAULT_ELIMINATION_THRESHOLD
    snapshot_results: bool = False
    seed: Optional[int] = None
    max_pairing_search_steps: int = DEFAULT_MAX_PAIRING_SEARCH_STEPS

    def __post_init__(self) -> None:
        if self.elimination_threshold is not None and self.elimination_threshold < 1:
            raise ValueError(
                f"elimination_threshold must be at least 1, got {self.elimination_threshold}"
            )
        if self.max_pairing_search_steps < 0:
            raise ValueError("max_pairing_search_steps cannot be negative")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "elimination_threshold": self.elimination_threshold,
            "snapshot_results": self.snapshot_results,
            "seed": self.seed,
            "max_pairing_search_steps": self.max_pairing_search_steps,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", "Untitled Tournament"),
            elimination_threshold=data.get(
                "elimination_threshold", DEFAULT_ELIMINATION_THRESHOLD
            ),
            snapshot_results=data.get("snapshot_results", False),
            seed=data.get("seed"),
            max_pairing_search_steps=data.get(
                "max_pairing_search_steps", DEFAULT_MAX_PAIRING_SEARCH_STEPS
            ),
        )
