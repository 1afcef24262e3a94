# Area: Banker
"""
dond_game._banker.multipliers — Offer multipliers
=================================================

Round, psychology and risk multipliers applied to the expected value
of the values still in play. All arithmetic is exact (Fraction) over
integer minor units.
"""

from __future__ import annotations
from fractions import Fraction
from typing import Sequence

from .._board.values import HIGH_VALUE_FLOOR, LOW_VALUE_CEILING, units

# remaining-count threshold -> multiplier; checked in order, take precedence
ENDGAME_ROUND_MULTIPLIERS = (
    (2, Fraction("0.95")),
    (3, Fraction("0.90")),
    (5, Fraction("0.85")),
    (10, Fraction("0.80")),
)

# round number -> multiplier, for rounds 1-6
ROUND_RAMP = {
    1: Fraction("0.25"),
    2: Fraction("0.35"),
    3: Fraction("0.45"),
    4: Fraction("0.55"),
    5: Fraction("0.65"),
    6: Fraction("0.75"),
}
LATE_ROUND_MULTIPLIER = Fraction("0.70")

# coefficient-of-variation threshold -> multiplier, highest first
RISK_BANDS = (
    (2, Fraction("0.85")),
    (Fraction("1.5"), Fraction("0.90")),
    (1, Fraction("0.95")),
)

PRESSURE_WINDOW = 3
PRESSURE_RATIO = Fraction("0.6")
PRESSURE_BOOST = Fraction("1.1")

MOSTLY_HIGH_RATIO = Fraction("0.7")
MOSTLY_HIGH_BOOST = Fraction("1.05")
HIGH_MAJORITY_RATIO = Fraction("0.5")
HIGH_MAJORITY_BOOST = Fraction("1.02")
MOSTLY_LOW_RATIO = Fraction("0.6")
MOSTLY_LOW_BOOST = Fraction("1.15")

FINAL_CASES_THRESHOLD = 3
FINAL_HIGH_BOOST = Fraction("1.1")


def expected_value(values: Sequence[int]) -> Fraction:
    """Arithmetic mean; zero for an empty sequence."""
    if not values:
        return Fraction(0)
    return Fraction(sum(values), len(values))


def round_multiplier(round_number: int, remaining_count: int) -> Fraction:
    """Endgame thresholds first, then the round-indexed ramp."""
    for threshold, multiplier in ENDGAME_ROUND_MULTIPLIERS:
        if remaining_count <= threshold:
            return multiplier
    return ROUND_RAMP.get(round_number, LATE_ROUND_MULTIPLIER)


def psychology_multiplier(values: Sequence[int], prior_offers: Sequence[int]) -> Fraction:
    """
    Skew from the rejection pattern and the high/low mix of values.

    Args:
        values: Valid values still in play (held container excluded)
        prior_offers: Offers already made this session, oldest first
    """
    multiplier = Fraction(1)
    if not values:
        return multiplier

    if len(prior_offers) > PRESSURE_WINDOW:
        recent = prior_offers[-PRESSURE_WINDOW:]
        average_recent = Fraction(sum(recent), len(recent))
        if average_recent > expected_value(values) * PRESSURE_RATIO:
            multiplier *= PRESSURE_BOOST

    high_floor = units(HIGH_VALUE_FLOOR)
    low_ceiling = units(LOW_VALUE_CEILING)
    total = len(values)
    high_share = Fraction(sum(1 for v in values if v >= high_floor), total)
    low_share = Fraction(sum(1 for v in values if v < low_ceiling), total)

    if high_share > MOSTLY_HIGH_RATIO:
        multiplier *= MOSTLY_HIGH_BOOST
    elif high_share > HIGH_MAJORITY_RATIO:
        multiplier *= HIGH_MAJORITY_BOOST
    elif low_share > MOSTLY_LOW_RATIO:
        multiplier *= MOSTLY_LOW_BOOST

    if total <= FINAL_CASES_THRESHOLD and high_share > 0:
        multiplier *= FINAL_HIGH_BOOST

    return multiplier


def variance(values: Sequence[int]) -> Fraction:
    """Population variance."""
    if not values:
        return Fraction(0)
    mean = expected_value(values)
    return sum(((v - mean) ** 2 for v in values), Fraction(0)) / len(values)


def risk_multiplier(values: Sequence[int]) -> Fraction:
    """
    Conservative discount from the coefficient of variation.

    cv > k is evaluated as variance > k**2 * mean**2 so no square root
    is taken.
    """
    mean = expected_value(values)
    if mean <= 0:
        return Fraction(1)
    spread = variance(values)
    for threshold, multiplier in RISK_BANDS:
        if spread > Fraction(threshold) ** 2 * mean ** 2:
            return multiplier
    return Fraction(1)
