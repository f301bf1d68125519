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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# Persistence document format
DOCUMENT_VERSION = 1

# Match points
WIN_POINTS = 3  # a bye counts as a win

# Elimination policy
DEFAULT_ELIMINATION_THRESHOLD = 2  # losses; None disables elimination

# Lifecycle
MIN_PLAYERS_TO_START = 2

# Upper bound on the no-rematch search before falling back to greedy pairing
DEFAULT_MAX_PAIRING_SEARCH_STEPS = 50_000

# Match outcome values (for serialization)
OUTCOME_PENDING = "pending"
OUTCOME_PLAYER1_WIN = "player1Win"
OUTCOME_PLAYER2_WIN = "player2Win"
OUTCOME_DOUBLE_LOSS = "doubleLoss"
OUTCOME_BYE = "bye"

# Tournament phase values (for serialization)
PHASE_SETUP = "setup"
PHASE_IN_PROGRESS = "inProgress"
PHASE_FINISHED = "finished"

# Legacy "screen" values found in older save files
LEGACY_SCREEN_PHASES = {
    "setup": PHASE_SETUP,
    "tournament": PHASE_IN_PROGRESS,
    "finished": PHASE_FINISHED,
}

# Id prefixes
PLAYER_ID_PREFIX = "player_"
MATCH_ID_PREFIX = "match_"
