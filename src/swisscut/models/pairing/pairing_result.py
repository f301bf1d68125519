"""PairingResult data class."""

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
from typing import List, Optional

from swisscut.models.tournament.match import Match
from swisscut.type_hints import PairingIDs


@dataclass
class PairingResult:
    """Result of a pairing computation for a single round.

    ``is_complete`` means there were too few candidates left to pair and the
    tournament should finish; ``matches`` is empty in that case.
    """

    round_number: int
    matches: List[Match] = field(default_factory=list)
    bye_player_id: Optional[str] = None
    repeat_bye: bool = False
    rematches: List[PairingIDs] = field(default_factory=list)
    is_complete: bool = False

    @property
    def pairing_ids(self) -> List[PairingIDs]:
        return [(m.player1_id, m.player2_id) for m in self.matches if not m.is_bye]


#  LocalWords:  PairingResult
