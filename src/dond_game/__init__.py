"""
dond_game — Deal or No Deal Round Engine
========================================

Copyright (c) 2026 Dr. Yoram Segal and Omry Tzabar. All rights reserved.

PROPRIETARY SOFTWARE — No modifications, redistribution, or derivative works
permitted. Usage restricted to courses delivered by Dr. Yoram Segal unless
prior written approval is granted. See LICENSE file for full terms.

Quick Start (automatic play):
    from dond_game import GameController, DemoPlayer
    player = DemoPlayer(GameController())
    outcome = player.play_session()

Hosting a session:
    from dond_game import GameController
    controller = GameController()
    controller.subscribe(my_listener)       # receives notifications
    controller.select_container(7)
    controller.eliminate_container(3)       # ... until an offer is made
    controller.reject_offer()

The core performs no rendering and no I/O: a Presentation layer sends
intents, receives notifications and decides pacing.

All amounts are integers in minor units (pence); use format_amount()
at the display boundary.
"""

from ._board import Board, Container, ContainerState, ValueSet, format_amount, to_minor_units
from ._banker import DIFFICULTY_LEVELS, Offer, OfferEngine, OfferTone
from ._game import (
    DebugCapability,
    GameController,
    GamePhase,
    GameIntent,
    IntentResult,
    # Notifications
    Notification,
    SessionStarted,
    ContainerSelected,
    ContainerEliminated,
    OfferMade,
    RoundAdvanced,
    DealAccepted,
    SwitchOffered,
    SessionConcluded,
    IntentRejected,
    SessionOutcome,
)
from .config import GameSettings, load_settings
from .demo_player import DemoPlayer
from .devtools import DevTools
from ._shared.logging_config import setup_logging
from .errors import (
    DondGameError,
    ConfigurationError,
    IllegalIntentError,
    InvalidSelectionError,
    InvalidEliminationError,
    InvalidSwitchError,
    CapabilityError,
)
from .types import (
    BoardStatistics,
    ValueDistribution,
    GameStatistics,
    BankerAnalysis,
    GameExport,
)

__all__ = [
    # Core
    "Board",
    "Container",
    "ContainerState",
    "ValueSet",
    "format_amount",
    "to_minor_units",
    "DIFFICULTY_LEVELS",
    "Offer",
    "OfferEngine",
    "OfferTone",
    "GameController",
    "GamePhase",
    "GameIntent",
    "IntentResult",
    # Notifications
    "Notification",
    "SessionStarted",
    "ContainerSelected",
    "ContainerEliminated",
    "OfferMade",
    "RoundAdvanced",
    "DealAccepted",
    "SwitchOffered",
    "SessionConcluded",
    "IntentRejected",
    "SessionOutcome",
    # Hosting
    "DebugCapability",
    "DevTools",
    "DemoPlayer",
    "GameSettings",
    "load_settings",
    "setup_logging",
    # Errors
    "DondGameError",
    "ConfigurationError",
    "IllegalIntentError",
    "InvalidSelectionError",
    "InvalidEliminationError",
    "InvalidSwitchError",
    "CapabilityError",
    # Types
    "BoardStatistics",
    "ValueDistribution",
    "GameStatistics",
    "BankerAnalysis",
    "GameExport",
]
__version__ = "1.0.0"
__license__ = "Proprietary — Copyright (c) 2026 Dr. Yoram Segal and Omry Tzabar"
__author__ = "Dr. Yoram Segal and Omry Tzabar"
