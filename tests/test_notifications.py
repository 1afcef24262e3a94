# Area: Game Tests
"""Tests for notification value objects and the session history."""

import dataclasses

import pytest

from dond_game._banker.tone import OfferTone
from dond_game._game.notifications import (
    ContainerSelected,
    IntentRejected,
    OfferMade,
    SessionOutcome,
)
from dond_game._game.session import GameSession, HistoryEntry


class TestNotifications:
    """Tests for notification dataclasses."""

    def test_frozen(self):
        note = ContainerSelected(container_id=7, quota=6)
        with pytest.raises(dataclasses.FrozenInstanceError):
            note.container_id = 8

    def test_to_dict_includes_kind(self):
        note = ContainerSelected(container_id=7, quota=6)
        assert note.to_dict() == {"container_id": 7, "quota": 6, "kind": "container_selected"}

    def test_to_dict_flattens_enums(self):
        note = OfferMade(
            amount=1_000, round_number=2, tone=OfferTone.FAIR,
            message="hi", offer_number=2,
        )
        assert note.to_dict()["tone"] == "fair"

    def test_rejection_default_container(self):
        note = IntentRejected(intent="accept", phase="playing", reason="nope")
        assert note.container_id is None
        assert note.kind == "intent_rejected"


class TestSessionOutcome:
    """Tests for SessionOutcome."""

    def test_to_dict(self):
        outcome = SessionOutcome(
            final_amount=500, held_value=100, deal_taken=True, switched=False,
            original_container_id=3, final_container_id=3,
        )
        data = outcome.to_dict()
        assert data["final_amount"] == 500
        assert data["other_value"] is None


class TestGameSession:
    """Tests for session bookkeeping."""

    def test_defaults(self):
        session = GameSession()
        assert session.round_number == 1
        assert session.elimination_quota == 6
        assert session.cases_left_this_round == 6
        assert session.phase.value == "selecting"

    def test_cases_left_never_negative(self):
        session = GameSession(elimination_quota=2, eliminated_this_round=5)
        assert session.cases_left_this_round == 0

    def test_record_appends_history(self):
        session = GameSession()
        entry = session.record("case_selected", case_number=7)
        assert session.history == [entry]
        assert entry.to_dict()["case_number"] == 7
        assert entry.to_dict()["round"] == 1
        assert entry.to_dict()["phase"] == "selecting"

    def test_history_entry_to_dict(self):
        entry = HistoryEntry("t", "deal_rejected", 3, "playing", {"quota": 4})
        assert entry.to_dict() == {
            "timestamp": "t", "event": "deal_rejected",
            "round": 3, "phase": "playing", "quota": 4,
        }
