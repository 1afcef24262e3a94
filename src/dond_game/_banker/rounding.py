# Area: Banker
"""Round offers to denomination-appropriate granularity."""

from __future__ import annotations
import math
from fractions import Fraction
from typing import Union

from .._board.values import units

# (upper bound exclusive, step) in base units
ROUNDING_STEPS = (
    (100, 5),
    (1_000, 10),
    (10_000, 100),
    (100_000, 500),
    (500_000, 1_000),
)
TOP_STEP = 5_000


def round_half_up(value: Union[int, Fraction]) -> int:
    return math.floor(Fraction(value) + Fraction(1, 2))


def rounding_step(offer: Union[int, Fraction]) -> int:
    """Granularity in minor units for an offer of this size."""
    for bound, step in ROUNDING_STEPS:
        if offer < units(bound):
            return units(step)
    return units(TOP_STEP)


def round_offer(offer: Union[int, Fraction]) -> int:
    """Round to the nearest step (half-up), in minor units."""
    step = rounding_step(offer)
    return round_half_up(Fraction(offer) / step) * step
