# Area: Banker
"""
dond_game._banker.offer_engine — Banker offer engine
====================================================

Computes the buy-out offer for a round from the values still in play
(held container excluded), the round number and the offers already made
this session.

Pipeline:
    expected value -> round x psychology x risk multipliers
    -> aggressiveness -> endgame floor -> jitter -> rounding
    -> monotonic increase -> ceiling -> safety fallback

Empty or invalid input never raises: the engine degrades to a minimal
offer so that a round can always complete.
"""

from __future__ import annotations
import logging
import math
import numbers
import random
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .multipliers import (
    FINAL_CASES_THRESHOLD,
    expected_value,
    psychology_multiplier,
    risk_multiplier,
    round_multiplier,
)
from .rounding import round_half_up, round_offer
from .tone import OfferTone, banker_message, classify_offer
from .._board.values import units
from ..types import BankerAnalysis

logger = logging.getLogger("dond_game.banker")

DIFFICULTY_LEVELS: Dict[str, float] = {
    "easy": 0.3,
    "normal": 0.5,
    "hard": 0.7,
}
DEFAULT_AGGRESSIVENESS = 0.5
AGGRESSIVENESS_SPAN = Fraction("0.2")

ENDGAME_FLOOR = Fraction("0.85")
JITTER_LOW = 0.95
JITTER_HIGH = 1.05
MIN_INCREASE = Fraction("1.05")
ENDGAME_CEILING = Fraction("0.95")
STANDARD_CEILING = Fraction("0.85")
FALLBACK_SHARE = Fraction(1, 10)
MINIMUM_OFFER = units(1)


@dataclass(frozen=True)
class Offer:
    """
    One banker offer as shown to the player.

    Attributes:
        amount: Offer in minor units
        round_number: Round the offer was made in
        offer_number: 1-based position in the session's offer history
        tone: Flavour category
        message: Flavour line for the tone
        expected_value: Mean of the valid values priced (minor units, half-up)
        remaining_count: Number of values priced
    """

    amount: int
    round_number: int
    offer_number: int
    tone: OfferTone
    message: str
    expected_value: int
    remaining_count: int


def clamp_aggressiveness(level: float) -> float:
    return max(0.0, min(1.0, float(level)))


def resolve_difficulty(name: str) -> float:
    """Map a difficulty preset name to an aggressiveness level."""
    try:
        return DIFFICULTY_LEVELS[name.lower()]
    except (KeyError, AttributeError):
        raise ValueError(
            f"Unknown difficulty {name!r}; expected one of {sorted(DIFFICULTY_LEVELS)}"
        ) from None


def valid_values(values: Iterable[Any]) -> List[Fraction]:
    """Keep finite, positive, numeric values."""
    kept = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            continue
        if isinstance(value, float) and not math.isfinite(value):
            continue
        if value > 0:
            kept.append(Fraction(value))
    return kept


class OfferEngine:
    """
    Banker for one session.

    Holds only its own offer history, used for the monotonic-increase
    and rejection-pressure rules.

    Args:
        jitter_rng: Random source for the bounded jitter term
        aggressiveness: Difficulty knob in [0, 1]; 0.5 is neutral
    """

    def __init__(
        self,
        jitter_rng: Optional[random.Random] = None,
        aggressiveness: float = DEFAULT_AGGRESSIVENESS,
    ):
        self.jitter_rng = jitter_rng or random.Random()
        self.aggressiveness = clamp_aggressiveness(aggressiveness)
        self._offers: List[int] = []

    # ── Knob ────────────────────────────────────────────────────

    def set_aggressiveness(self, level: float) -> None:
        self.aggressiveness = clamp_aggressiveness(level)

    def set_difficulty(self, name: str) -> float:
        self.aggressiveness = resolve_difficulty(name)
        return self.aggressiveness

    def aggressiveness_factor(self) -> Fraction:
        level = Fraction(self.aggressiveness).limit_denominator(1000)
        return 1 + (Fraction(1, 2) - level) * AGGRESSIVENESS_SPAN

    # ── Offers ──────────────────────────────────────────────────

    def make_offer(self, remaining_values: Sequence[Any], round_number: int) -> Offer:
        """Compute, record and describe the offer for this round."""
        amount = self.calculate_offer(remaining_values, round_number)
        values = valid_values(remaining_values)
        expected = expected_value(values)
        tone = classify_offer(amount, expected, len(remaining_values), round_number)
        offer = Offer(
            amount=amount,
            round_number=round_number,
            offer_number=len(self._offers),
            tone=tone,
            message=banker_message(tone, len(self._offers)),
            expected_value=round_half_up(expected),
            remaining_count=len(values),
        )
        logger.info(
            f"Offer #{offer.offer_number} round={round_number} "
            f"amount={amount} tone={tone.value}"
        )
        return offer

    def calculate_offer(self, remaining_values: Sequence[Any], round_number: int) -> int:
        """
        Compute the offer in minor units and append it to the history.

        Args:
            remaining_values: Values still in play, held container excluded
            round_number: 1-based round index
        """
        amount = self._compute(list(remaining_values), round_number)
        self._offers.append(amount)
        return amount

    def _compute(self, remaining_values: List[Any], round_number: int) -> int:
        values = valid_values(remaining_values)
        if not values:
            logger.warning(
                f"No valid values to price ({len(remaining_values)} given); "
                f"falling back to minimal offer"
            )
            return MINIMUM_OFFER

        expected = expected_value(values)
        count = len(values)

        offer = (
            expected
            * round_multiplier(round_number, count)
            * psychology_multiplier(values, self._offers)
            * risk_multiplier(values)
            * self.aggressiveness_factor()
        )

        if count <= FINAL_CASES_THRESHOLD:
            offer = max(offer, expected * ENDGAME_FLOOR)

        offer *= Fraction(self.jitter_rng.uniform(JITTER_LOW, JITTER_HIGH))
        offer = Fraction(round_offer(offer))

        if self._offers and round_number > 1:
            offer = max(offer, Fraction(math.ceil(self._offers[-1] * MIN_INCREASE)))

        ceiling_share = (
            ENDGAME_CEILING if len(remaining_values) <= FINAL_CASES_THRESHOLD
            else STANDARD_CEILING
        )
        offer = min(offer, expected * ceiling_share)
        amount = math.floor(offer)

        if amount <= 0:
            amount = max(MINIMUM_OFFER, round_half_up(min(values) * FALLBACK_SHARE))
            logger.warning(f"Offer degenerated; conservative fallback {amount}")

        logger.debug(
            f"Priced {count} values: expected={float(expected):.2f} "
            f"round={round_number} offer={amount}"
        )
        return amount

    # ── History ─────────────────────────────────────────────────

    def history(self) -> List[int]:
        return list(self._offers)

    @property
    def current_offer(self) -> int:
        return self._offers[-1] if self._offers else 0

    @property
    def offer_count(self) -> int:
        return len(self._offers)

    def reset(self) -> None:
        self._offers = []

    def analysis(self, final_value: int) -> Optional[BankerAnalysis]:
        """Compare the offers made with the value the player ended with."""
        if not self._offers:
            return None
        max_offer = max(self._offers)
        last_offer = self._offers[-1]
        return {
            "total_offers": len(self._offers),
            "max_offer": max_offer,
            "last_offer": last_offer,
            "average_offer": round_half_up(Fraction(sum(self._offers), len(self._offers))),
            "final_value": final_value,
            "max_offer_difference": final_value - max_offer,
            "last_offer_difference": final_value - last_offer,
            "player_made_good_choice": final_value > max_offer,
            "offers": list(self._offers),
        }

    def simulate(self, scenarios: Sequence[Sequence[Any]]) -> List[int]:
        """
        Offers a fresh banker would make for successive scenarios.

        Scenario i is priced as round i + 1. This engine's own history is
        left untouched.
        """
        sandbox = OfferEngine(jitter_rng=self.jitter_rng, aggressiveness=self.aggressiveness)
        return [
            sandbox.calculate_offer(values, index + 1)
            for index, values in enumerate(scenarios)
        ]
