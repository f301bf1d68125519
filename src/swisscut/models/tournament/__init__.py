"""Data models for tournament state."""

from swisscut.models.tournament.history import HistoryStack
from swisscut.models.tournament.match import RECORDABLE_OUTCOMES, Match, MatchOutcome
from swisscut.models.tournament.tournament_config import TournamentConfig
from swisscut.models.tournament.tournament_state import (
    TournamentPhase,
    TournamentState,
)

__all__ = [
    "HistoryStack",
    "Match",
    "MatchOutcome",
    "RECORDABLE_OUTCOMES",
    "TournamentConfig",
    "TournamentPhase",
    "TournamentState",
]
