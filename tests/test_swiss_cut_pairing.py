import random

import pytest

from swisscut.models.player import Player
from swisscut.pairing import (
    create_swiss_cut_pairings,
    get_pairing_candidates,
    select_bye_player,
)


def _players(*names, **overrides):
    players = [Player(name=name, id=name) for name in names]
    for player in players:
        for field_name, value in overrides.get(player.name, {}).items():
            setattr(player, field_name, value)
    return players


def _seated_ids(result):
    seated = []
    for match in result.matches:
        seated.extend(match.player_ids())
    return seated


def test_candidates_skip_dropped_and_eliminated():
    players = _players(
        "A", "B", "C", "D", C={"eliminated": True, "losses": 2}, D={"dropped": True}
    )

    assert [p.id for p in get_pairing_candidates(players, 2)] == ["A", "B"]
    # points-only Swiss ignores the eliminated flag
    assert [p.id for p in get_pairing_candidates(players, None)] == ["A", "B", "C"]


def test_candidates_with_elimination_are_the_active_players():
    players = _players(
        "A", "B", "C", "D", B={"eliminated": True}, C={"dropped": True, "eliminated": True}
    )

    candidates = get_pairing_candidates(players, 1)

    assert candidates == [p for p in players if p.is_active]
    assert [p.id for p in candidates] == ["A", "D"]


@pytest.mark.parametrize("count", [0, 1])
def test_one_candidate_or_fewer_signals_complete(count):
    players = _players(*["A", "B", "C"][:count])

    result = create_swiss_cut_pairings(players, 3, rng=random.Random(1))

    assert result.is_complete
    assert result.matches == []
    assert result.bye_player_id is None


def test_bye_goes_to_lowest_points_then_registration_order():
    players = _players("A", "B", "C", "D", "E", A={"wins": 1}, B={"wins": 1})

    bye_player, repeat = select_bye_player(players)

    assert bye_player.id == "C"
    assert repeat is False


def test_bye_skips_players_who_already_had_one():
    players = _players("A", "B", "C", A={"had_bye": True}, B={"wins": 2}, C={"wins": 1})

    bye_player, repeat = select_bye_player(players)

    assert bye_player.id == "C"
    assert repeat is False


def test_repeat_bye_when_everyone_had_one():
    players = _players(
        "A",
        "B",
        "C",
        A={"had_bye": True, "wins": 2},
        B={"had_bye": True, "wins": 1},
        C={"had_bye": True, "wins": 1},
    )

    bye_player, repeat = select_bye_player(players)

    assert bye_player.id == "B"
    assert repeat is True


def test_no_bye_for_even_field():
    assert select_bye_player(_players("A", "B")) == (None, False)


def test_bye_match_is_decided_and_last():
    players = _players("A", "B", "C")

    result = create_swiss_cut_pairings(players, 1, rng=random.Random(4))

    bye_match = result.matches[-1]
    assert bye_match.is_bye
    assert bye_match.is_decided
    assert bye_match.player1_id == "A"
    assert result.bye_player_id == "A"
    assert all(not m.is_decided for m in result.matches[:-1])


@pytest.mark.parametrize("seed", range(20))
@pytest.mark.parametrize("size", [2, 3, 6, 7, 12])
def test_round_partitions_the_candidates(seed, size):
    names = [f"P{i}" for i in range(size)]
    rng = random.Random(seed)
    players = _players(*names)
    for player in players:
        player.wins = rng.randint(0, 3)

    result = create_swiss_cut_pairings(players, 2, rng=random.Random(seed))

    seated = _seated_ids(result)
    assert len(seated) == len(set(seated))
    assert set(seated) == set(names)
    byes = [m for m in result.matches if m.is_bye]
    assert len(byes) == size % 2


def test_higher_points_are_paired_first():
    players = _players("A", "B", "C", "D", D={"wins": 2})

    result = create_swiss_cut_pairings(players, 3, rng=random.Random(0))

    assert result.matches[0].player1_id == "D"


def test_players_are_not_modified():
    players = _players("A", "B", "C", A={"opponent_ids": ["B"]}, B={"opponent_ids": ["A"]})
    before = [p.to_dict() for p in players]

    create_swiss_cut_pairings(players, 2, rng=random.Random(9))

    assert [p.to_dict() for p in players] == before


def test_same_seed_gives_same_pairings():
    names = [f"P{i}" for i in range(10)]

    first = create_swiss_cut_pairings(_players(*names), 1, rng=random.Random(42))
    second = create_swiss_cut_pairings(_players(*names), 1, rng=random.Random(42))

    assert first.pairing_ids == second.pairing_ids


@pytest.mark.parametrize("seed", range(30))
def test_finds_the_only_pairing_without_rematches(seed):
    # A has met B and C, so A-D and B-C is the only clean pairing
    players = _players(
        "A",
        "B",
        "C",
        "D",
        A={"opponent_ids": ["B", "C"]},
        B={"opponent_ids": ["A"]},
        C={"opponent_ids": ["A"]},
    )

    result = create_swiss_cut_pairings(players, 3, rng=random.Random(seed))

    pairs = {frozenset(pair) for pair in result.pairing_ids}
    assert pairs == {frozenset({"A", "D"}), frozenset({"B", "C"})}
    assert result.rematches == []
    assert not any(m.rematch for m in result.matches)


def test_forced_rematch_is_flagged_not_raised():
    players = _players("A", "B", A={"opponent_ids": ["B"]}, B={"opponent_ids": ["A"]})

    result = create_swiss_cut_pairings(players, 2, rng=random.Random(3))

    assert len(result.matches) == 1
    assert result.matches[0].rematch
    assert len(result.rematches) == 1
    assert set(result.rematches[0]) == {"A", "B"}


def test_search_budget_falls_back_to_greedy():
    players = _players(
        "A",
        "B",
        "C",
        "D",
        A={"opponent_ids": ["B", "C"]},
        B={"opponent_ids": ["A"]},
        C={"opponent_ids": ["A"]},
    )

    result = create_swiss_cut_pairings(
        players, 3, rng=random.Random(0), max_search_steps=0
    )

    seated = _seated_ids(result)
    assert sorted(seated) == ["A", "B", "C", "D"]
    assert len(result.rematches) == sum(1 for m in result.matches if m.rematch)
