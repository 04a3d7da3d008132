"""Intent types understood by the Star Gazer skill."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class IntentType(str, Enum):
    """Enumeration of every intent name the interaction model can send."""

    CONSTELLATIONS = "ConstellationsIntent"
    CONSTELLATIONS_MYTH = "ConstellationsMythIntent"
    GET_MORE_INFO = "GetMoreInfoIntent"
    STOP = "AMAZON.StopIntent"
    CANCEL = "AMAZON.CancelIntent"
    HELP = "AMAZON.HelpIntent"

    @classmethod
    def parse(cls, name: Optional[str]) -> Optional["IntentType"]:
        """Return the member for ``name`` or ``None`` when it is not recognized."""
        if not name:
            return None
        try:
            return cls(name)
        except ValueError:
            return None


CONSTELLATION_SLOT = "Constellation"


__all__ = ["IntentType", "CONSTELLATION_SLOT"]
