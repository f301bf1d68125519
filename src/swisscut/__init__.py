"""Swiss Cut: Swiss pairing with elimination after a loss threshold.

Typical use::

    from swisscut import Tournament

    tournament = Tournament()
    for name in ("Ana", "Ben", "Cleo"):
        tournament.add_player(name)
    tournament.start()
"""

from swisscut.models.player import Player
from swisscut.models.tournament import (
    Match,
    MatchOutcome,
    TournamentConfig,
    TournamentPhase,
    TournamentState,
)
from swisscut.tournament import Tournament

__all__ = [
    "Match",
    "MatchOutcome",
    "Player",
    "Tournament",
    "TournamentConfig",
    "TournamentPhase",
    "TournamentState",
]
