"""Controllers that mutate tournament state."""

from swisscut.controllers.player import PlayerRegistry

__all__ = ["PlayerRegistry"]
