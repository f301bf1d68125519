"""Exceptions for use in Swiss Cut"""

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


# ========== Base Application Exception ==========


class SwissCutException(Exception):
    """Base exception for all Swiss Cut errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Validation Exceptions ==========


class ValidationException(SwissCutException):
    """Base exception for input rejected before any state is touched."""

    pass


class InvalidNameError(ValidationException):
    """Raised when a player name is empty after trimming."""

    pass


class DuplicateNameError(ValidationException):
    """Raised when a player name is already registered."""

    pass


class InvalidOutcomeError(ValidationException):
    """Raised when a result is not one of player1Win, player2Win or doubleLoss."""

    pass


class NotEnoughPlayersError(ValidationException):
    """Raised when starting a tournament with too few players."""

    pass


class MalformedDocumentError(ValidationException):
    """Raised when a saved tournament document cannot be read."""

    pass


# ========== Tournament State Exceptions ==========


class TournamentStateException(SwissCutException):
    """Base exception for operations that do not fit the current tournament state.

    These never leave the tournament partially updated; the failed
    operation is a no-op.
    """

    pass


class InvalidPhaseError(TournamentStateException):
    """Raised when an operation is not allowed in the current phase."""

    pass


class UnknownPlayerError(TournamentStateException):
    """Raised when a requested player cannot be found."""

    pass


class AlreadyDroppedError(TournamentStateException):
    """Raised when dropping a player that has already withdrawn."""

    pass


class UnknownMatchError(TournamentStateException):
    """Raised when a match id is not part of the current round."""

    pass


class AlreadyDecidedError(TournamentStateException):
    """Raised when recording a result for a match that already has one."""

    pass


class NotDecidedError(TournamentStateException):
    """Raised when undoing a result for a match that is still pending."""

    pass


class ImmutableByeError(TournamentStateException):
    """Raised when undoing a bye through the per-match path."""

    pass


class RoundIncompleteError(TournamentStateException):
    """Raised when advancing while matches are still pending."""

    pass


class EmptyHistoryError(TournamentStateException):
    """Raised when there is no snapshot left to undo to."""

    pass


class HistoryMismatchError(TournamentStateException):
    """Raised when a player's opponent history does not end with the match being undone."""

    pass
