# Area: Game
"""
dond_game._game.notifications — Outbound notification value objects
===================================================================

Every accepted transition produces one or more frozen notifications that
the GameController delivers, in order, to its subscribed listeners.
Notifications describe what happened; they carry no rendering instructions.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional

from .._banker.tone import OfferTone


@dataclass(frozen=True)
class Notification:
    """Base class for outbound notifications."""

    kind: ClassVar[str] = "notification"

    def to_dict(self) -> Dict[str, Any]:
        data = {
            key: value.value if isinstance(value, Enum) else value
            for key, value in asdict(self).items()
        }
        data["kind"] = self.kind
        return data


@dataclass(frozen=True)
class SessionStarted(Notification):
    kind: ClassVar[str] = "session_started"

    session_number: int
    container_count: int


@dataclass(frozen=True)
class ContainerSelected(Notification):
    kind: ClassVar[str] = "container_selected"

    container_id: int
    quota: int


@dataclass(frozen=True)
class ContainerEliminated(Notification):
    kind: ClassVar[str] = "container_eliminated"

    container_id: int
    value: int
    round_number: int
    eliminated_this_round: int
    quota: int


@dataclass(frozen=True)
class OfferMade(Notification):
    kind: ClassVar[str] = "offer_made"

    amount: int
    round_number: int
    tone: OfferTone
    message: str
    offer_number: int


@dataclass(frozen=True)
class RoundAdvanced(Notification):
    kind: ClassVar[str] = "round_advanced"

    round_number: int
    quota: int


@dataclass(frozen=True)
class DealAccepted(Notification):
    kind: ClassVar[str] = "deal_accepted"

    amount: int
    held_value: int
    held_container_id: int


@dataclass(frozen=True)
class SwitchOffered(Notification):
    kind: ClassVar[str] = "switch_offered"

    other_container_id: int
    held_container_id: int


@dataclass(frozen=True)
class SessionConcluded(Notification):
    kind: ClassVar[str] = "session_concluded"

    final_value: int
    switched: bool
    final_container_id: int
    other_container_id: Optional[int]
    other_value: Optional[int]


@dataclass(frozen=True)
class IntentRejected(Notification):
    kind: ClassVar[str] = "intent_rejected"

    intent: str
    phase: str
    reason: str
    container_id: Optional[int] = None


@dataclass(frozen=True)
class SessionOutcome:
    """
    Final result of a session.

    Attributes:
        final_amount: What the player walks away with (minor units)
        held_value: Value of the container held at the end
        deal_taken: True when the session ended by accepting an offer
        switched: True when the player switched at the final decision
        original_container_id: Container picked at the start
        final_container_id: Container held at the end
        other_value: Value of the container left behind (switch path only)
    """

    final_amount: int
    held_value: int
    deal_taken: bool
    switched: bool
    original_container_id: int
    final_container_id: int
    other_value: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
