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

import uuid


def generate_id(prefix: str = "item_") -> str:
    """Generate a unique ID."""
    return f"{prefix}{uuid.uuid4().hex[:16]}"


def compute_total_rounds(player_count: int) -> int:
    """Number of rounds for a field of ``player_count``: ceil(log2(n)).

    Computed on integers so powers of two are exact; 0 for one player or none.
    """
    if player_count <= 1:
        return 0
    return (player_count - 1).bit_length()
