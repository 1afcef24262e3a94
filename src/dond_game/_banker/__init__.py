# Area: Banker
"""
Banker package: offer pricing, rounding and tone selection.
"""

from .offer_engine import (
    DEFAULT_AGGRESSIVENESS,
    DIFFICULTY_LEVELS,
    MINIMUM_OFFER,
    Offer,
    OfferEngine,
    resolve_difficulty,
)
from .tone import OfferTone

__all__ = [
    "DEFAULT_AGGRESSIVENESS",
    "DIFFICULTY_LEVELS",
    "MINIMUM_OFFER",
    "Offer",
    "OfferEngine",
    "OfferTone",
    "resolve_difficulty",
]
