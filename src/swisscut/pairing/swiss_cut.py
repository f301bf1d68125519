"""Swiss-with-cutoff Pairing System Implementation."""

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
from typing import List, Optional, Sequence, Tuple

from swisscut.constants import DEFAULT_MAX_PAIRING_SEARCH_STEPS
from swisscut.models.pairing import PairingResult
from swisscut.models.player import Player
from swisscut.models.tournament import Match
from swisscut.utils import setup_logger

logger = setup_logger(__name__)


def get_pairing_candidates(
    players: Sequence[Player], elimination_threshold: Optional[int]
) -> List[Player]:
    """Players still to be paired, in registration order.

    Dropped players never play again. Eliminated players are only left out
    while an elimination threshold is in force.
    """
    if elimination_threshold is None:
        return [p for p in players if not p.dropped]
    return [p for p in players if p.is_active]


def select_bye_player(candidates: Sequence[Player]) -> Tuple[Optional[Player], bool]:
    """Pick the bye recipient for an odd field.

    The lowest-points player who has not had a bye yet gets it; ties go to
    fewest wins, then registration order. If everyone already had a bye the
    lowest-points player gets a second one.

    Returns
    -------
    tuple of (Player or None, bool)
        The bye player (None for an even field) and whether it is a repeat bye.
    """
    if len(candidates) % 2 == 0:
        return None, False

    order = {p.id: index for index, p in enumerate(candidates)}
    eligible = [p for p in candidates if not p.had_bye]
    pool = eligible or list(candidates)
    chosen = min(pool, key=lambda p: (p.points, p.wins, order[p.id]))
    return chosen, not eligible


def _have_met(first: Player, second: Player) -> bool:
    return first.has_played(second.id) or second.has_played(first.id)


def _order_for_pairing(players: Sequence[Player], rng: random.Random) -> List[Player]:
    """Shuffle, then stable-sort by points (highest first).

    The shuffle breaks ties randomly among players on equal points.
    """
    ordered = list(players)
    rng.shuffle(ordered)
    ordered.sort(key=lambda p: p.points, reverse=True)
    return ordered


def _pair_greedy(ordered: Sequence[Player]) -> Tuple[List[Tuple[Player, Player]], List[int]]:
    """Pair front to back, preferring the first opponent not met before.

    Falls back to the first unpaired player when every remaining opponent is
    a rematch.

    Returns
    -------
    tuple
        The pairs in order and the indices (into the pair list) of rematches.
    """
    paired = [False] * len(ordered)
    pairs: List[Tuple[Player, Player]] = []
    rematch_indices: List[int] = []

    for i, player in enumerate(ordered):
        if paired[i]:
            continue
        opponent_index = None
        for j in range(i + 1, len(ordered)):
            if not paired[j] and not _have_met(player, ordered[j]):
                opponent_index = j
                break
        is_rematch = False
        if opponent_index is None:
            for j in range(i + 1, len(ordered)):
                if not paired[j]:
                    opponent_index = j
                    is_rematch = True
                    break
        if opponent_index is None:
            # Only possible for an odd input, which callers never pass
            break
        paired[i] = paired[opponent_index] = True
        if is_rematch:
            rematch_indices.append(len(pairs))
        pairs.append((player, ordered[opponent_index]))

    return pairs, rematch_indices


def _search_without_rematches(
    ordered: Sequence[Player], max_steps: int
) -> Optional[List[Tuple[Player, Player]]]:
    """Depth-first search for a pairing with no rematches.

    Explores opponents in the same order as :func:`_pair_greedy`, so the
    first branch tried is exactly the greedy pairing. Gives up (None) when
    no such pairing exists or ``max_steps`` candidate pairs have been tried.
    """
    count = len(ordered)
    if count == 0:
        return []

    paired = [False] * count
    # (i, j): ordered[i] currently paired with ordered[j]
    frames: List[Tuple[int, int]] = []
    steps = 0
    i, start = 0, 1
    paired[0] = True

    while True:
        j = start
        while j < count and (paired[j] or _have_met(ordered[i], ordered[j])):
            j += 1

        if j < count:
            steps += 1
            if steps > max_steps:
                logger.warning(
                    "No-rematch pairing search stopped after %s steps; "
                    "using greedy pairing",
                    max_steps,
                )
                return None
            paired[j] = True
            frames.append((i, j))
            k = i + 1
            while k < count and paired[k]:
                k += 1
            if k == count:
                return [(ordered[a], ordered[b]) for a, b in frames]
            paired[k] = True
            i, start = k, k + 1
        else:
            # dead end: release i and move the previous pair to its next option
            paired[i] = False
            if not frames:
                return None
            i, previous_j = frames.pop()
            paired[previous_j] = False
            start = previous_j + 1


def create_swiss_cut_pairings(
    players: Sequence[Player],
    round_number: int,
    rng: Optional[random.Random] = None,
    elimination_threshold: Optional[int] = None,
    max_search_steps: int = DEFAULT_MAX_PAIRING_SEARCH_STEPS,
) -> PairingResult:
    """Create the matches of one round.

    Player records are not modified; applying the bye is up to the caller.
    Rematches and a repeat bye are flagged on the result for the caller to
    report.

    Parameters
    ----------
    players : sequence of Player
        Every entrant, in registration order.
    round_number : int
        Round being paired (1-indexed).
    rng : random.Random, optional
        Source for the tie-breaking shuffle. Inject a seeded one for
        reproducible pairings.
    elimination_threshold : int or None
        None when nobody can be eliminated.
    max_search_steps : int
        Budget for the no-rematch search.

    Returns
    -------
    PairingResult
        The round's matches (bye last), or ``is_complete`` when at most one
        candidate remains.
    """
    if rng is None:
        rng = random.Random()

    candidates = get_pairing_candidates(players, elimination_threshold)
    if len(candidates) <= 1:
        logger.info(
            "Round %s not paired: %s candidate(s) left, tournament complete",
            round_number,
            len(candidates),
        )
        return PairingResult(round_number=round_number, is_complete=True)

    bye_player, repeat_bye = select_bye_player(candidates)
    to_pair = [p for p in candidates if bye_player is None or p.id != bye_player.id]
    ordered = _order_for_pairing(to_pair, rng)

    pairs = _search_without_rematches(ordered, max_search_steps)
    rematch_indices: List[int] = []
    if pairs is None:
        pairs, rematch_indices = _pair_greedy(ordered)

    result = PairingResult(round_number=round_number, repeat_bye=repeat_bye)
    for index, (first, second) in enumerate(pairs):
        is_rematch = index in rematch_indices
        result.matches.append(
            Match(
                round_number=round_number,
                player1_id=first.id,
                player2_id=second.id,
                rematch=is_rematch,
            )
        )
        if is_rematch:
            result.rematches.append((first.id, second.id))

    if bye_player is not None:
        result.bye_player_id = bye_player.id
        result.matches.append(Match.bye(round_number, bye_player.id))

    logger.info(
        "Round %s paired: %s games, %s rematches, bye: %s%s",
        round_number,
        len(pairs),
        len(result.rematches),
        bye_player.name if bye_player else "None",
        " (repeat)" if repeat_bye else "",
    )
    return result
