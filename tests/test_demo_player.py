# Area: Shared Tests
"""Tests for the automatic DemoPlayer."""

import random

from dond_game._game.controller import GameController
from dond_game._game.enums import GamePhase
from dond_game._game.notifications import OfferMade, SwitchOffered
from dond_game.demo_player import DemoPlayer


def make_player(seed=1, **kwargs):
    controller = GameController(
        shuffle_rng=random.Random(seed), jitter_rng=random.Random(seed + 1)
    )
    return controller, DemoPlayer(controller, rng=random.Random(seed), **kwargs)


class TestDemoPlayerSessions:
    """Tests for whole automatic sessions."""

    def test_plays_to_completion(self):
        controller, player = make_player()
        outcome = player.play_session()
        assert outcome is not None
        assert controller.phase.is_terminal

    def test_accept_round_takes_first_offer(self):
        controller, player = make_player(accept_round=1)
        outcome = player.play_session()
        assert outcome.deal_taken is True
        assert controller.phase == GamePhase.DEAL_ACCEPTED
        assert len(controller.offer_history()) == 1
        assert outcome.final_amount == controller.offer_history()[0]

    def test_never_accepting_reaches_switch(self):
        controller, player = make_player(accept_ratio=10, switch=True)
        outcome = player.play_session()
        assert outcome.deal_taken is False
        assert outcome.switched is True
        assert controller.phase == GamePhase.CONCLUDED
        assert len(controller.offer_history()) == 6
        assert any(isinstance(n, SwitchOffered) for n in player.notifications)

    def test_keeps_by_default(self):
        controller, player = make_player(accept_ratio=10)
        outcome = player.play_session()
        assert outcome.switched is False
        assert outcome.final_container_id == outcome.original_container_id

    def test_repeated_sessions(self):
        controller, player = make_player()
        player.play_session()
        player.play_session()
        assert controller.session.session_number == 3
        assert controller.phase.is_terminal

    def test_notifications_reset_per_session(self):
        controller, player = make_player(accept_round=1)
        player.play_session()
        player.play_session()
        assert player.notifications[0].session_number == 3
        assert sum(isinstance(n, OfferMade) for n in player.notifications) == 1

    def test_detach(self):
        controller, player = make_player()
        player.detach()
        controller.start_session()
        assert controller.phase == GamePhase.SELECTING


class TestShouldAccept:
    """Tests for the acceptance rule."""

    def test_ratio_threshold(self):
        _, player = make_player(accept_ratio=0.8)
        assert player.should_accept(80, 100, 1) is True
        assert player.should_accept(79, 100, 1) is False

    def test_accept_round(self):
        _, player = make_player(accept_round=4)
        assert player.should_accept(1, 100, 3) is False
        assert player.should_accept(1, 100, 4) is True

    def test_zero_expected(self):
        _, player = make_player()
        assert player.should_accept(100, 0, 1) is False
