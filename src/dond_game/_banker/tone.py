# Area: Banker
"""
dond_game._banker.tone — Offer tone categories
==============================================

Presentation metadata only: picks a tone and a flavour line for an offer.
Both are deterministic given the offer, the state and the offer number.
"""

from __future__ import annotations
from enum import Enum
from fractions import Fraction
from typing import Dict, Tuple


class OfferTone(Enum):
    """Flavour category for a banker offer."""
    GENEROUS = "generous"
    FAIR = "fair"
    LOW = "low"
    PRESSURE = "pressure"
    FINAL = "final"


FINAL_TONE_REMAINING = 2
PRESSURE_TONE_ROUND = 4
GENEROUS_RATIO = Fraction("0.7")
FAIR_RATIO = Fraction("0.4")

MESSAGES: Dict[OfferTone, Tuple[str, ...]] = {
    OfferTone.GENEROUS: (
        "This is an excellent offer! Don't let it slip away!",
        "I'm being very generous here. Take it!",
        "You won't see an offer like this again!",
        "This is more than fair - take the deal!",
        "I'm practically giving money away here!",
    ),
    OfferTone.FAIR: (
        "This is a solid offer. What do you say?",
        "A fair deal for both of us. Deal or no deal?",
        "This offer reflects the current situation well.",
        "A reasonable offer given what's left.",
        "This is what the math says it's worth.",
    ),
    OfferTone.LOW: (
        "Let's start with this reasonable offer.",
        "This is what I can offer right now.",
        "Take this guaranteed money!",
        "A bird in the hand is worth two in the bush.",
        "Don't risk it all for potentially nothing!",
    ),
    OfferTone.PRESSURE: (
        "The pressure is mounting! What's it going to be?",
        "Time is running out... Deal or no deal?",
        "The stakes are high! Make your choice!",
        "This could be your last good offer!",
        "Don't let greed cloud your judgment!",
    ),
    OfferTone.FINAL: (
        "This is it - my final offer!",
        "Last chance to walk away with guaranteed money!",
        "All or nothing time! What's your decision?",
        "One briefcase left... is it worth the risk?",
        "Take the guaranteed money or risk it all!",
    ),
}


def classify_offer(
    amount: int, expected: Fraction, remaining_count: int, round_number: int
) -> OfferTone:
    """Endgame and late-round tones win over the offer-to-expectation ratio."""
    if remaining_count <= FINAL_TONE_REMAINING:
        return OfferTone.FINAL
    if round_number > PRESSURE_TONE_ROUND:
        return OfferTone.PRESSURE
    ratio = Fraction(amount) / expected if expected > 0 else Fraction(0)
    if ratio > GENEROUS_RATIO:
        return OfferTone.GENEROUS
    if ratio > FAIR_RATIO:
        return OfferTone.FAIR
    return OfferTone.LOW


def banker_message(tone: OfferTone, offer_number: int) -> str:
    lines = MESSAGES[tone]
    return lines[(max(offer_number, 1) - 1) % len(lines)]
