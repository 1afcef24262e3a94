# Area: Game Tests
"""Tests for the GameController intents, rejections and notifications."""

import random
from unittest.mock import Mock

import pytest

from dond_game._board.values import ValueSet
from dond_game._game.controller import GameController, IntentResult
from dond_game._game.enums import GameIntent, GamePhase
from dond_game._game.notifications import (
    ContainerEliminated,
    ContainerSelected,
    DealAccepted,
    IntentRejected,
    OfferMade,
    RoundAdvanced,
    SessionStarted,
)
from dond_game.errors import ConfigurationError


def fixed_jitter(value=1.0):
    return Mock(**{"uniform.return_value": value})


def make_controller(seed=1, **kwargs):
    return GameController(
        shuffle_rng=random.Random(seed), jitter_rng=fixed_jitter(), **kwargs
    )


def received(listener):
    return [call.args[0] for call in listener.call_args_list]


def finish_round(controller):
    for _ in range(controller.cases_left_this_round):
        controller.eliminate_container(controller.available_containers()[0])


class TestSessionStart:
    """Tests for session creation."""

    def test_starts_in_selecting(self):
        controller = make_controller()
        assert controller.phase == GamePhase.SELECTING
        assert controller.round == 1
        assert controller.held_container_id is None
        assert len(controller.remaining_values()) == 26

    def test_configuration_error_prevents_session(self):
        with pytest.raises(ConfigurationError):
            GameController(value_set=ValueSet([100, 200, 300]))

    def test_start_session_emits_session_started(self):
        controller = make_controller()
        listener = Mock()
        controller.subscribe(listener)
        controller.start_session()
        assert received(listener) == [SessionStarted(session_number=2, container_count=26)]

    def test_start_session_discards_state(self):
        controller = make_controller()
        controller.select_container(7)
        finish_round(controller)
        controller.start_session()
        assert controller.phase == GamePhase.SELECTING
        assert controller.round == 1
        assert controller.offer_history() == []
        assert controller.eliminated_values() == []
        assert controller.outcome is None


class TestSelect:
    """Tests for the select intent."""

    def test_select_moves_to_playing(self):
        controller = make_controller()
        result = controller.select_container(7)
        assert result == IntentResult(GameIntent.SELECT, accepted=True)
        assert controller.phase == GamePhase.PLAYING
        assert controller.held_container_id == 7
        assert controller.quota == 6
        assert controller.eliminated_this_round == 0

    def test_select_notification(self):
        controller = make_controller()
        listener = Mock()
        controller.subscribe(listener)
        controller.select_container(7)
        assert received(listener) == [ContainerSelected(container_id=7, quota=6)]

    def test_unknown_container_rejected(self):
        controller = make_controller()
        result = controller.select_container(27)
        assert not result
        assert result.reason == "no such container"
        assert controller.phase == GamePhase.SELECTING

    def test_second_select_rejected(self):
        controller = make_controller()
        controller.select_container(7)
        result = controller.select_container(8)
        assert result.accepted is False
        assert controller.held_container_id == 7


class TestEliminate:
    """Tests for the eliminate intent."""

    def test_eliminate_before_select_rejected(self):
        controller = make_controller()
        assert not controller.eliminate_container(3)
        assert controller.eliminated_values() == []

    def test_eliminate_counts_toward_quota(self):
        controller = make_controller()
        controller.select_container(7)
        controller.eliminate_container(1)
        assert controller.eliminated_this_round == 1
        assert controller.cases_left_this_round == 5
        assert controller.phase == GamePhase.PLAYING

    def test_eliminate_notification_carries_value(self):
        controller = make_controller()
        value = controller.board.value_assignment()[1]
        controller.select_container(7)
        listener = Mock()
        controller.subscribe(listener)
        controller.eliminate_container(1)
        assert received(listener) == [ContainerEliminated(
            container_id=1, value=value, round_number=1,
            eliminated_this_round=1, quota=6,
        )]

    def test_eliminate_held_is_noop(self):
        controller = make_controller()
        controller.select_container(7)
        controller.eliminate_container(1)
        listener = Mock()
        controller.subscribe(listener)

        result = controller.eliminate_container(7)

        assert result.accepted is False
        assert controller.eliminated_this_round == 1
        assert controller.phase == GamePhase.PLAYING
        assert len(controller.eliminated_values()) == 1
        assert received(listener) == [IntentRejected(
            intent="eliminate", phase="playing",
            reason="container is held", container_id=7,
        )]

    def test_eliminate_twice_is_noop(self):
        controller = make_controller()
        controller.select_container(7)
        controller.eliminate_container(1)
        result = controller.eliminate_container(1)
        assert result.reason == "container already eliminated"
        assert controller.eliminated_this_round == 1

    def test_quota_met_presents_offer(self):
        controller = make_controller()
        controller.select_container(7)
        listener = Mock()
        controller.subscribe(listener)
        finish_round(controller)
        notes = received(listener)
        assert isinstance(notes[-2], ContainerEliminated)
        assert isinstance(notes[-1], OfferMade)
        assert notes[-1].amount == controller.current_offer.amount
        assert controller.phase == GamePhase.OFFER_PRESENTED
        assert controller.eliminated_this_round == 6

    def test_no_elimination_while_offer_pending(self):
        controller = make_controller()
        controller.select_container(7)
        finish_round(controller)
        result = controller.eliminate_container(controller.available_containers()[0])
        assert not result
        assert controller.eliminated_this_round == 6


class TestOfferDecision:
    """Tests for accept and reject."""

    def test_accept_ends_session_with_deal(self):
        controller = make_controller()
        controller.select_container(7)
        finish_round(controller)
        offer = controller.current_offer.amount
        held_value = controller.board.held_value()
        listener = Mock()
        controller.subscribe(listener)

        assert controller.accept_offer()

        assert controller.phase == GamePhase.DEAL_ACCEPTED
        assert received(listener) == [DealAccepted(
            amount=offer, held_value=held_value, held_container_id=7,
        )]
        outcome = controller.outcome
        assert outcome.deal_taken is True
        assert outcome.final_amount == offer
        assert outcome.held_value == held_value
        assert outcome.switched is False

    def test_reject_advances_round(self):
        controller = make_controller()
        controller.select_container(7)
        finish_round(controller)
        listener = Mock()
        controller.subscribe(listener)

        assert controller.reject_offer()

        assert controller.phase == GamePhase.PLAYING
        assert controller.round == 2
        assert controller.quota == 5
        assert controller.eliminated_this_round == 0
        assert controller.current_offer is None
        assert received(listener) == [RoundAdvanced(round_number=2, quota=5)]

    def test_accept_without_offer_rejected(self):
        controller = make_controller()
        controller.select_container(7)
        result = controller.accept_offer()
        assert result.accepted is False
        assert controller.phase == GamePhase.PLAYING

    def test_intents_after_terminal_rejected(self):
        controller = make_controller()
        controller.select_container(7)
        finish_round(controller)
        controller.accept_offer()
        assert not controller.reject_offer()
        assert not controller.eliminate_container(controller.available_containers()[0])
        assert controller.phase == GamePhase.DEAL_ACCEPTED

    def test_offer_history(self):
        controller = make_controller()
        controller.select_container(7)
        finish_round(controller)
        first = controller.current_offer.amount
        controller.reject_offer()
        finish_round(controller)
        assert controller.offer_history() == [first, controller.current_offer.amount]


class TestListeners:
    """Tests for subscription and delivery."""

    def test_unsubscribe(self):
        controller = make_controller()
        listener = Mock()
        controller.subscribe(listener)
        controller.unsubscribe(listener)
        controller.select_container(7)
        listener.assert_not_called()

    def test_subscribe_twice_delivers_once(self):
        controller = make_controller()
        listener = Mock()
        controller.subscribe(listener)
        controller.subscribe(listener)
        controller.select_container(7)
        assert listener.call_count == 1

    def test_failing_listener_does_not_break_delivery(self, caplog):
        controller = make_controller()
        broken = Mock(side_effect=RuntimeError("boom"))
        healthy = Mock()
        controller.subscribe(broken)
        controller.subscribe(healthy)

        result = controller.select_container(7)

        assert result.accepted
        assert healthy.call_count == 1
        assert controller.phase == GamePhase.PLAYING
        assert "Listener failed" in caplog.text

    def test_listener_can_drive_next_intent(self):
        """Intents dispatched from a listener run after the current delivery."""
        controller = make_controller()
        order = []

        def on_note(note):
            order.append(note.kind)
            if isinstance(note, ContainerSelected):
                controller.eliminate_container(1)

        controller.subscribe(on_note)
        controller.select_container(7)
        assert order == ["container_selected", "container_eliminated"]
        assert controller.eliminated_this_round == 1


class TestSwitch:
    """Tests for choose_switch validation."""

    def test_switch_outside_decision_rejected(self):
        controller = make_controller()
        controller.select_container(7)
        result = controller.choose_switch(True)
        assert result.accepted is False
        assert controller.held_container_id == 7


class TestDifficulty:
    """Tests for set_difficulty()."""

    def test_set_difficulty(self):
        controller = make_controller()
        assert controller.set_difficulty("easy") == 0.3
        assert controller.engine.aggressiveness == 0.3

    def test_difficulty_survives_new_session(self):
        controller = make_controller()
        controller.set_difficulty("hard")
        controller.start_session()
        assert controller.engine.aggressiveness == 0.7

    def test_unknown_difficulty(self):
        controller = make_controller()
        with pytest.raises(ConfigurationError):
            controller.set_difficulty("impossible")
