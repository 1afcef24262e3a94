# Area: Game
"""
Game package: round state machine, session state, notifications and
the GameController that ties the Board and the OfferEngine together.
"""

from .capability import DebugCapability
from .controller import GameController, IntentResult
from .enums import GameEvent, GameIntent, GamePhase
from .notifications import (
    ContainerEliminated,
    ContainerSelected,
    DealAccepted,
    IntentRejected,
    Notification,
    OfferMade,
    RoundAdvanced,
    SessionConcluded,
    SessionOutcome,
    SessionStarted,
    SwitchOffered,
)
from .quota import FIRST_ROUND_QUOTA, quota_for
from .session import GameSession, HistoryEntry
from .state_machine import GameStateMachine

__all__ = [
    "DebugCapability",
    "GameController",
    "IntentResult",
    "GameEvent",
    "GameIntent",
    "GamePhase",
    "ContainerEliminated",
    "ContainerSelected",
    "DealAccepted",
    "IntentRejected",
    "Notification",
    "OfferMade",
    "RoundAdvanced",
    "SessionConcluded",
    "SessionOutcome",
    "SessionStarted",
    "SwitchOffered",
    "FIRST_ROUND_QUOTA",
    "quota_for",
    "GameSession",
    "HistoryEntry",
    "GameStateMachine",
]
