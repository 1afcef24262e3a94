# Area: Game
"""
dond_game._game.session — Session state
=======================================

Round bookkeeping for one session. Owned exclusively by the
GameController; Board and OfferEngine hold no phase information.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .enums import GamePhase
from .notifications import SessionOutcome
from .quota import FIRST_ROUND_QUOTA
from .state_machine import GameStateMachine
from .._banker.offer_engine import Offer


@dataclass
class HistoryEntry:
    """One accepted transition, for statistics and export."""
    timestamp: str
    event: str
    round_number: int
    phase: str
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "event": self.event,
            "round": self.round_number,
            "phase": self.phase,
            **self.data,
        }


@dataclass
class GameSession:
    """
    Mutable state of one session.

    Attributes:
        session_number: 1-based count of sessions started by the controller
        round_number: Starts at 1, +1 per rejected offer
        elimination_quota: Containers to open before the next decision point
        eliminated_this_round: Containers opened in the current round
        offer_history: Amounts shown to the player, oldest first
        held_container_id: Container currently held
        original_container_id: Container picked at the start
        current_offer: Offer awaiting a decision, if any
        outcome: Final result once the session is terminal
        history: Accepted transitions, oldest first
    """

    session_number: int = 1
    round_number: int = 1
    elimination_quota: int = FIRST_ROUND_QUOTA
    eliminated_this_round: int = 0
    offer_history: List[int] = field(default_factory=list)
    held_container_id: Optional[int] = None
    original_container_id: Optional[int] = None
    current_offer: Optional[Offer] = None
    outcome: Optional[SessionOutcome] = None
    history: List[HistoryEntry] = field(default_factory=list)
    machine: GameStateMachine = field(default_factory=GameStateMachine)

    @property
    def phase(self) -> GamePhase:
        return self.machine.current_phase

    @property
    def cases_left_this_round(self) -> int:
        return max(self.elimination_quota - self.eliminated_this_round, 0)

    def record(self, event: str, **data: Any) -> HistoryEntry:
        entry = HistoryEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            event=event,
            round_number=self.round_number,
            phase=self.phase.value,
            data=data,
        )
        self.history.append(entry)
        return entry
