# Area: Banker Tests
"""Tests for offer rounding."""

from fractions import Fraction

import pytest

from dond_game._banker.rounding import round_half_up, round_offer, rounding_step
from dond_game._board.values import units


class TestRoundHalfUp:
    """Tests for round_half_up()."""

    def test_half_rounds_up(self):
        assert round_half_up(Fraction(5, 2)) == 3

    def test_below_half_rounds_down(self):
        assert round_half_up(Fraction(249, 100)) == 2

    def test_integers_unchanged(self):
        assert round_half_up(7) == 7


class TestRoundingStep:
    """Tests for the step table."""

    @pytest.mark.parametrize("offer_units,step_units", [
        (50, 5),
        (99, 5),
        (100, 10),
        (999, 10),
        (1_000, 100),
        (50_000, 500),
        (250_000, 1_000),
        (500_000, 5_000),
        (900_000, 5_000),
    ])
    def test_steps(self, offer_units, step_units):
        assert rounding_step(units(offer_units)) == units(step_units)


class TestRoundOffer:
    """Tests for round_offer()."""

    def test_rounds_to_nearest_step(self):
        assert round_offer(Fraction(1_249)) == 1_000

    def test_half_step_rounds_up(self):
        assert round_offer(Fraction(1_250)) == 1_500

    def test_mid_range(self):
        assert round_offer(units(12_345)) == units(12_500)

    def test_exact_multiple(self):
        assert round_offer(units(600_000)) == units(600_000)

    def test_tiny_offer_rounds_to_zero(self):
        assert round_offer(Fraction(1)) == 0

    def test_result_is_int(self):
        assert isinstance(round_offer(Fraction(123_456, 7)), int)
