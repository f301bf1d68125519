import pytest

from swisscut.controllers.tournament import ResultRecorder
from swisscut.exceptions import (
    AlreadyDecidedError,
    HistoryMismatchError,
    ImmutableByeError,
    InvalidOutcomeError,
    NotDecidedError,
    UnknownMatchError,
)
from swisscut.models.player import Player
from swisscut.models.tournament import (
    Match,
    MatchOutcome,
    TournamentPhase,
    TournamentState,
)

RECORDABLE = [
    MatchOutcome.PLAYER1_WIN,
    MatchOutcome.PLAYER2_WIN,
    MatchOutcome.DOUBLE_LOSS,
]


def _state(**overrides):
    players = {name: Player(name=name, id=name) for name in ("A", "B", "C")}
    for name, values in overrides.items():
        for field_name, value in values.items():
            setattr(players[name], field_name, value)
    players["C"].wins = 1
    players["C"].had_bye = True
    return TournamentState(
        players=players,
        current_round=1,
        matches=[
            Match(round_number=1, player1_id="A", player2_id="B", id="m1"),
            Match.bye(1, "C"),
        ],
        total_rounds=2,
        phase=TournamentPhase.IN_PROGRESS,
    )


def _fields(state, *ids):
    return {pid: state.players[pid].to_dict() for pid in ids}


def test_player1_win_updates_both_players():
    state = _state()

    ResultRecorder(2).record_result(state, "m1", MatchOutcome.PLAYER1_WIN)

    a, b = state.players["A"], state.players["B"]
    assert (a.wins, a.losses, a.points) == (1, 0, 3)
    assert (b.wins, b.losses, b.points) == (0, 1, 0)
    assert a.opponent_ids == ["B"]
    assert b.opponent_ids == ["A"]
    assert state.get_match("m1").outcome is MatchOutcome.PLAYER1_WIN


def test_player2_win_accepts_string_outcome():
    state = _state()

    ResultRecorder(2).record_result(state, "m1", "player2Win")

    assert state.players["B"].points == 3
    assert state.players["A"].losses == 1


def test_double_loss_gives_nobody_points():
    state = _state()

    ResultRecorder(2).record_result(state, "m1", MatchOutcome.DOUBLE_LOSS)

    for pid in ("A", "B"):
        player = state.players[pid]
        assert (player.wins, player.losses, player.points) == (0, 1, 0)
    assert state.players["A"].opponent_ids == ["B"]
    assert state.players["B"].opponent_ids == ["A"]


def test_loss_at_threshold_eliminates():
    state = _state(A={"losses": 1}, B={"losses": 1})

    ResultRecorder(2).record_result(state, "m1", MatchOutcome.DOUBLE_LOSS)

    assert state.players["A"].eliminated
    assert state.players["B"].eliminated


def test_points_only_swiss_never_eliminates():
    state = _state(A={"losses": 5})

    ResultRecorder(None).record_result(state, "m1", MatchOutcome.PLAYER2_WIN)

    assert state.players["A"].losses == 6
    assert not state.players["A"].eliminated


@pytest.mark.parametrize("outcome", ["bye", "pending", "draw", None])
def test_unrecordable_outcomes_are_rejected(outcome):
    state = _state()
    before = state.to_dict()

    with pytest.raises(InvalidOutcomeError):
        ResultRecorder(2).record_result(state, "m1", outcome)
    assert state.to_dict() == before


def test_unknown_match():
    state = _state()

    with pytest.raises(UnknownMatchError):
        ResultRecorder(2).record_result(state, "nope", MatchOutcome.PLAYER1_WIN)
    with pytest.raises(UnknownMatchError):
        ResultRecorder(2).undo_result(state, "nope")


def test_decided_match_cannot_be_recorded_again():
    state = _state()
    recorder = ResultRecorder(2)
    recorder.record_result(state, "m1", MatchOutcome.PLAYER1_WIN)
    before = state.to_dict()

    with pytest.raises(AlreadyDecidedError):
        recorder.record_result(state, "m1", MatchOutcome.PLAYER2_WIN)
    assert state.to_dict() == before


def test_bye_is_not_editable_per_match():
    state = _state()
    bye_id = state.matches[1].id
    recorder = ResultRecorder(2)

    with pytest.raises(AlreadyDecidedError):
        recorder.record_result(state, bye_id, MatchOutcome.PLAYER1_WIN)
    with pytest.raises(ImmutableByeError):
        recorder.undo_result(state, bye_id)
    assert state.players["C"].wins == 1


def test_undo_pending_match():
    with pytest.raises(NotDecidedError):
        ResultRecorder(2).undo_result(_state(), "m1")


@pytest.mark.parametrize("threshold", [1, 2, None])
@pytest.mark.parametrize("outcome", RECORDABLE)
def test_undo_is_exact_inverse(outcome, threshold):
    state = _state(A={"losses": 1, "wins": 2, "opponent_ids": ["X"]})
    recorder = ResultRecorder(threshold)
    state.players["A"].update_elimination(threshold)
    before = _fields(state, "A", "B")

    recorder.record_result(state, "m1", outcome)
    recorder.undo_result(state, "m1")

    assert _fields(state, "A", "B") == before
    assert state.get_match("m1").outcome is MatchOutcome.PENDING


def test_undo_then_record_again():
    state = _state()
    recorder = ResultRecorder(2)

    recorder.record_result(state, "m1", MatchOutcome.PLAYER1_WIN)
    recorder.undo_result(state, "m1")
    recorder.record_result(state, "m1", MatchOutcome.PLAYER2_WIN)

    assert state.players["B"].points == 3
    assert state.players["A"].points == 0
    assert state.players["A"].opponent_ids == ["B"]


def test_undo_refuses_out_of_sync_history():
    state = _state()
    recorder = ResultRecorder(2)
    recorder.record_result(state, "m1", MatchOutcome.PLAYER1_WIN)
    state.players["A"].opponent_ids.append("C")
    before = state.to_dict()

    with pytest.raises(HistoryMismatchError):
        recorder.undo_result(state, "m1")
    assert state.to_dict() == before


def test_points_follow_wins_through_record_and_undo():
    state = _state()
    recorder = ResultRecorder(None)

    for outcome in RECORDABLE * 2:
        recorder.record_result(state, "m1", outcome)
        for player in state.players.values():
            assert player.points == 3 * player.wins
        recorder.undo_result(state, "m1")
        for player in state.players.values():
            assert player.points == 3 * player.wins
