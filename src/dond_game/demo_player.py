# Area: Shared
"""
dond_game.demo_player — Automatic player
========================================

A ready-to-use listener that plays whole sessions on its own: random
pick, random eliminations, accepts an offer once it is close enough to
the expected value, and keeps (or switches) at the final decision.

Usage:
    from dond_game import GameController, DemoPlayer

    player = DemoPlayer(GameController())
    outcome = player.play_session()
"""

from __future__ import annotations
import logging
import random
from fractions import Fraction
from typing import List, Optional

from ._game.controller import GameController
from ._game.enums import GamePhase
from ._game.notifications import (
    ContainerEliminated,
    ContainerSelected,
    Notification,
    OfferMade,
    RoundAdvanced,
    SessionOutcome,
    SessionStarted,
    SwitchOffered,
)

logger = logging.getLogger("dond_game.demo_player")


class DemoPlayer:
    """
    Listener-driven automatic player.

    Args:
        controller: Controller to drive; the player subscribes itself
        rng: Random source for picks and eliminations
        accept_ratio: Accept when offer / expected value reaches this
        accept_round: Accept any offer from this round on, if set
        switch: Decision at the final pair
    """

    def __init__(
        self,
        controller: GameController,
        rng: Optional[random.Random] = None,
        accept_ratio: float = 0.8,
        accept_round: Optional[int] = None,
        switch: bool = False,
    ):
        self.controller = controller
        self.rng = rng or random.Random()
        self.accept_ratio = Fraction(accept_ratio).limit_denominator(1000)
        self.accept_round = accept_round
        self.switch = switch
        self.notifications: List[Notification] = []
        controller.subscribe(self)

    def __call__(self, notification: Notification) -> None:
        self.notifications.append(notification)
        if isinstance(notification, SessionStarted):
            self._pick()
        elif isinstance(notification, (ContainerSelected, ContainerEliminated, RoundAdvanced)):
            self._eliminate_next()
        elif isinstance(notification, OfferMade):
            self._decide(notification)
        elif isinstance(notification, SwitchOffered):
            self.controller.choose_switch(self.switch)

    def play_session(self) -> Optional[SessionOutcome]:
        """Start a new session and play it to the end."""
        self.notifications = []
        self.controller.start_session()
        return self.controller.outcome

    def detach(self) -> None:
        self.controller.unsubscribe(self)

    def _pick(self) -> None:
        choice = self.rng.choice(self.controller.available_containers())
        self.controller.select_container(choice)

    def _eliminate_next(self) -> None:
        if self.controller.phase != GamePhase.PLAYING:
            return
        target = self.controller.board.random_available(self.rng)
        if target is not None:
            self.controller.eliminate_container(target)

    def should_accept(self, amount: int, expected_value: int, round_number: int) -> bool:
        if self.accept_round is not None and round_number >= self.accept_round:
            return True
        if expected_value <= 0:
            return False
        return Fraction(amount, expected_value) >= self.accept_ratio

    def _decide(self, offer: OfferMade) -> None:
        current = self.controller.current_offer
        expected = current.expected_value if current else 0
        if self.should_accept(offer.amount, expected, offer.round_number):
            logger.debug(f"Accepting {offer.amount} in round {offer.round_number}")
            self.controller.accept_offer()
        else:
            self.controller.reject_offer()
