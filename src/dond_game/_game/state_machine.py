# Area: Game
"""
dond_game._game.state_machine — Round state machine
===================================================

Tracks the phase of one session and validates both transitions and
the inbound intents allowed in each phase.
"""

import logging
from typing import Optional

from .enums import GameEvent, GameIntent, GamePhase
from ..errors import IllegalIntentError

logger = logging.getLogger("dond_game.state_machine")


# Valid state transitions: {current_phase: {event: next_phase}}
TRANSITIONS = {
    GamePhase.SELECTING: {
        GameEvent.CONTAINER_SELECTED: GamePhase.PLAYING,
    },
    GamePhase.PLAYING: {
        GameEvent.ROUND_COMPLETE: GamePhase.OFFER_PRESENTED,
        GameEvent.FINAL_PAIR_REACHED: GamePhase.SWITCH_DECISION,
    },
    GamePhase.OFFER_PRESENTED: {
        GameEvent.OFFER_ACCEPTED: GamePhase.DEAL_ACCEPTED,
        GameEvent.OFFER_REJECTED: GamePhase.PLAYING,
    },
    GamePhase.SWITCH_DECISION: {
        GameEvent.SWITCH_DECIDED: GamePhase.CONCLUDED,
    },
    GamePhase.DEAL_ACCEPTED: {},
    GamePhase.CONCLUDED: {},
}

# Intents accepted in each phase
PHASE_INTENTS = {
    GamePhase.SELECTING: {GameIntent.SELECT},
    GamePhase.PLAYING: {GameIntent.ELIMINATE},
    GamePhase.OFFER_PRESENTED: {GameIntent.ACCEPT, GameIntent.REJECT},
    GamePhase.SWITCH_DECISION: {GameIntent.CHOOSE_SWITCH},
    GamePhase.DEAL_ACCEPTED: set(),
    GamePhase.CONCLUDED: set(),
}


class GameStateMachine:
    """
    State machine for one session.

    Attributes:
        current_phase: The phase the session is in
        previous_phase: The phase before the last transition, if any
    """

    def __init__(self):
        self.current_phase = GamePhase.SELECTING
        self.previous_phase: Optional[GamePhase] = None

    def can_transition(self, event: GameEvent) -> bool:
        return event in TRANSITIONS.get(self.current_phase, {})

    def transition(self, event: GameEvent) -> GamePhase:
        """
        Execute a transition.

        Raises:
            IllegalIntentError: If the event is not valid in the current phase
        """
        if not self.can_transition(event):
            raise IllegalIntentError(
                event.value.lower(),
                f"{event.value} is not valid in phase {self.current_phase.value}",
                phase=self.current_phase.value,
            )
        next_phase = TRANSITIONS[self.current_phase][event]
        logger.debug(
            f"Transition {self.current_phase.value} -> {next_phase.value} ({event.value})"
        )
        self.previous_phase = self.current_phase
        self.current_phase = next_phase
        return next_phase

    def accepts(self, intent: GameIntent) -> bool:
        return intent in PHASE_INTENTS.get(self.current_phase, set())

    def require(self, intent: GameIntent) -> None:
        """Raise IllegalIntentError unless the intent is allowed now."""
        if not self.accepts(intent):
            raise IllegalIntentError(
                intent.value,
                f"not allowed in phase {self.current_phase.value}",
                phase=self.current_phase.value,
            )

    @property
    def is_terminal(self) -> bool:
        return self.current_phase.is_terminal

    def reset(self) -> None:
        self.current_phase = GamePhase.SELECTING
        self.previous_phase = None
