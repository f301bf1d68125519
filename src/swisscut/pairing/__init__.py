"""Pairing systems for Swiss Cut."""

from swisscut.pairing.swiss_cut import (
    create_swiss_cut_pairings,
    get_pairing_candidates,
    select_bye_player,
)

__all__ = [
    "create_swiss_cut_pairings",
    "get_pairing_candidates",
    "select_bye_player",
]
