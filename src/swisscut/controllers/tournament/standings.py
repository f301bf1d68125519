"""Standings for Swiss Cut tournaments."""

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

from typing import Iterable, List, Optional, Tuple

from swisscut.models.player import Player


def standings_key(player: Player) -> Tuple[int, int, int]:
    """Sort key: points desc, wins desc, losses asc."""
    return (-player.points, -player.wins, player.losses)


def compute_standings(players: Iterable[Player]) -> List[Player]:
    """Rank every player, dropped and eliminated ones included.

    ``sorted`` is stable, so players level on every criterion keep their
    registration order.
    """
    return sorted(players, key=standings_key)


def find_champion(players: Iterable[Player]) -> Optional[Player]:
    """Top of the standings, or None without players."""
    ranked = compute_standings(players)
    return ranked[0] if ranked else None
