"""Saving and loading tournaments as JSON documents."""

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

import json
import random
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dateutil.parser import isoparse

from swisscut.constants import (
    DOCUMENT_VERSION,
    LEGACY_SCREEN_PHASES,
    SAVE_FILE_EXTENSION,
)
from swisscut.exceptions import MalformedDocumentError
from swisscut.models.tournament import HistoryStack, TournamentConfig, TournamentState
from swisscut.tournament import Tournament
from swisscut.type_hints import Notifier
from swisscut.utils import setup_logger

logger = setup_logger(__name__)

REQUIRED_FIELDS = ("players", "currentRound")


def serialize(tournament: Tournament) -> Dict[str, Any]:
    """Build a self-contained document of the tournament, undo history included."""
    document = {
        "version": DOCUMENT_VERSION,
        "date": datetime.now(timezone.utc).isoformat(),
        "config": tournament.config.to_dict(),
    }
    document.update(tournament.state.to_dict())
    document["history"] = tournament.history.to_list()
    return document


def _normalize_phase(data: Dict[str, Any]) -> Dict[str, Any]:
    """Map the legacy ``screen`` field onto ``phase``."""
    if "phase" in data or "screen" not in data:
        return data
    screen = data["screen"]
    if screen not in LEGACY_SCREEN_PHASES:
        raise ValueError(f"unknown screen {screen!r}")
    normalized = dict(data)
    normalized["phase"] = LEGACY_SCREEN_PHASES[screen]
    return normalized


def read_document_date(document: Dict[str, Any]) -> Optional[datetime]:
    """Timestamp the document was written, if it carries a readable one."""
    raw = document.get("date")
    if raw is None:
        return None
    try:
        return isoparse(str(raw))
    except ValueError:
        logger.warning("Ignoring unreadable document date: %r", raw)
        return None


def deserialize(
    document: Dict[str, Any],
    *,
    rng: Optional[random.Random] = None,
    notifier: Optional[Notifier] = None,
) -> Tournament:
    """Rebuild a tournament from a document produced by :func:`serialize`.

    ``players`` and ``currentRound`` are required. Missing ``matches``,
    ``pastMatches`` and ``history`` default to empty; a missing phase
    defaults to setup before round 1 and to in progress after.

    Raises:
        MalformedDocumentError: If the document is incomplete or inconsistent
    """
    try:
        if not isinstance(document, dict):
            raise TypeError("document must be a JSON object")
        missing = [f for f in REQUIRED_FIELDS if f not in document]
        if missing:
            raise KeyError(", ".join(missing))

        version = document.get("version", DOCUMENT_VERSION)
        if version != DOCUMENT_VERSION:
            logger.warning(
                "Document version %s differs from %s; reading it as-is",
                version,
                DOCUMENT_VERSION,
            )

        config = TournamentConfig.from_dict(document.get("config") or {})
        state = TournamentState.from_dict(_normalize_phase(document))
        history = HistoryStack.from_list(
            [_normalize_phase(s) for s in document.get("history") or []]
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        message = f"Could not load tournament: malformed document ({e})"
        if notifier is not None:
            notifier(message)
        logger.error(message)
        raise MalformedDocumentError(message) from e

    saved_at = read_document_date(document)
    logger.info(
        "Loaded tournament %s (round %s, %s, saved %s)",
        config.name,
        state.current_round,
        state.phase.value,
        saved_at.isoformat() if saved_at else "unknown",
    )
    return Tournament(config, rng=rng, notifier=notifier, state=state, history=history)


def dumps(tournament: Tournament) -> bytes:
    """Serialize a tournament to UTF-8 JSON bytes."""
    return json.dumps(serialize(tournament), indent=2).encode("utf-8")


def loads(
    data: Union[bytes, str],
    *,
    rng: Optional[random.Random] = None,
    notifier: Optional[Notifier] = None,
) -> Tournament:
    """Load a tournament from JSON bytes produced by :func:`dumps`."""
    try:
        document = json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        message = f"Could not load tournament: invalid JSON ({e})"
        if notifier is not None:
            notifier(message)
        logger.error(message)
        raise MalformedDocumentError(message) from e
    return deserialize(document, rng=rng, notifier=notifier)


def save_tournament(tournament: Tournament, path: Union[str, Path]) -> Path:
    """Write the tournament to ``path``, adding the save extension if missing."""
    path = Path(path)
    if path.suffix != SAVE_FILE_EXTENSION:
        path = path.with_name(path.name + SAVE_FILE_EXTENSION)
    path.write_bytes(dumps(tournament))
    logger.info("Saved tournament %s to %s", tournament.name, path)
    return path


def load_tournament(
    path: Union[str, Path],
    *,
    rng: Optional[random.Random] = None,
    notifier: Optional[Notifier] = None,
) -> Tournament:
    """Read a tournament saved with :func:`save_tournament`."""
    return loads(Path(path).read_bytes(), rng=rng, notifier=notifier)
