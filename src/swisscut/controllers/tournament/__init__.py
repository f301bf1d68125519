"""Tournament controllers: rounds, results and standings."""

from swisscut.controllers.tournament.result_recorder import ResultRecorder
from swisscut.controllers.tournament.round_manager import RoundManager
from swisscut.controllers.tournament.standings import (
    compute_standings,
    find_champion,
    standings_key,
)

__all__ = [
    "ResultRecorder",
    "RoundManager",
    "compute_standings",
    "find_champion",
    "standings_key",
]
