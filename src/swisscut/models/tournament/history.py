"""Undo history of tournament snapshots."""

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

from typing import Any, Dict, List

from swisscut.exceptions import EmptyHistoryError
from swisscut.models.tournament.tournament_state import TournamentState


class HistoryStack:
    """Stack of deep-copied tournament states.

    Every snapshot is a structurally independent copy: mutating the live
    state after a push never alters a stored snapshot, and a popped
    snapshot is handed over to the caller and forgotten by the stack.
    """

    def __init__(self) -> None:
        self._snapshots: List[TournamentState] = []

    def __len__(self) -> int:
        return len(self._snapshots)

    def __bool__(self) -> bool:
        return bool(self._snapshots)

    @staticmethod
    def capture(state: TournamentState) -> TournamentState:
        """Take a snapshot of ``state`` without pushing it."""
        return state.copy()

    def commit(self, snapshot: TournamentState) -> None:
        """Push a snapshot obtained from :meth:`capture`."""
        self._snapshots.append(snapshot)

    def push(self, state: TournamentState) -> None:
        """Snapshot ``state`` and push it."""
        self.commit(self.capture(state))

    def peek(self) -> TournamentState:
        """Copy of the top snapshot, leaving the stack untouched."""
        if not self._snapshots:
            raise EmptyHistoryError("No snapshot to inspect")
        return self._snapshots[-1].copy()

    def pop(self) -> TournamentState:
        """Remove and return the top snapshot."""
        if not self._snapshots:
            raise EmptyHistoryError("Nothing to undo")
        return self._snapshots.pop()

    def clear(self) -> None:
        self._snapshots.clear()

    def to_list(self) -> List[Dict[str, Any]]:
        """Serialize snapshots, oldest first."""
        return [snapshot.to_dict() for snapshot in self._snapshots]

    @classmethod
    def from_list(cls, data: List[Dict[str, Any]]) -> "HistoryStack":
        """Deserialize snapshots, oldest first."""
        history = cls()
        for snapshot_data in data:
            history.commit(TournamentState.from_dict(snapshot_data))
        return history
