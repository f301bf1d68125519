"""Type hints used in Swiss Cut."""

from typing import Callable, Tuple

# Identifiers
PlayerId = str

# Engine -> caller message hook
Notifier = Callable[[str], None]

# A pairing of two player ids
PairingIDs = Tuple[PlayerId, PlayerId]

#  LocalWords:  PairingIDs
