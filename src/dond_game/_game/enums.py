# Area: Game
"""
dond_game._game.enums — Round state machine enums
=================================================

Defines the phases, triggering events and inbound intents of the
round/elimination state machine.
"""

from enum import Enum


class GamePhase(Enum):
    """
    Phases of a session.

    State transitions:
    SELECTING -> PLAYING (on CONTAINER_SELECTED)
    PLAYING -> OFFER_PRESENTED (on ROUND_COMPLETE)
    PLAYING -> SWITCH_DECISION (on FINAL_PAIR_REACHED)
    OFFER_PRESENTED -> DEAL_ACCEPTED (on OFFER_ACCEPTED)
    OFFER_PRESENTED -> PLAYING (on OFFER_REJECTED)
    SWITCH_DECISION -> CONCLUDED (on SWITCH_DECIDED)
    DEAL_ACCEPTED and CONCLUDED are terminal.
    """
    SELECTING = "selecting"
    PLAYING = "playing"
    OFFER_PRESENTED = "offer_presented"
    DEAL_ACCEPTED = "deal_accepted"
    SWITCH_DECISION = "switch_decision"
    CONCLUDED = "concluded"

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.DEAL_ACCEPTED, GamePhase.CONCLUDED)


class GameEvent(Enum):
    """
    Events that move the state machine.

    Events are triggered by:
    - CONTAINER_SELECTED: select intent accepted by the Board
    - ROUND_COMPLETE: elimination quota met with more than two containers left
    - FINAL_PAIR_REACHED: elimination quota met with two containers left
    - OFFER_ACCEPTED: accept intent
    - OFFER_REJECTED: reject intent
    - SWITCH_DECIDED: switch-or-keep intent
    """
    CONTAINER_SELECTED = "CONTAINER_SELECTED"
    ROUND_COMPLETE = "ROUND_COMPLETE"
    FINAL_PAIR_REACHED = "FINAL_PAIR_REACHED"
    OFFER_ACCEPTED = "OFFER_ACCEPTED"
    OFFER_REJECTED = "OFFER_REJECTED"
    SWITCH_DECIDED = "SWITCH_DECIDED"


class GameIntent(Enum):
    """Inbound player intents."""
    SELECT = "select"
    ELIMINATE = "eliminate"
    ACCEPT = "accept"
    REJECT = "reject"
    CHOOSE_SWITCH = "choose_switch"
