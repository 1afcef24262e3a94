# Area: Board
"""
dond_game._board.container — Container state
============================================

One sealed container per id. The Board is the only writer of state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ContainerState(Enum):
    """
    Lifecycle of a container within a session.

    State transitions:
    IN_PLAY -> HELD (player's initial pick, or the final switch)
    IN_PLAY -> ELIMINATED (opened by the player)
    HELD -> IN_PLAY (only inside a switch, for the container given up)
    """
    IN_PLAY = "in_play"
    HELD = "held"
    ELIMINATED = "eliminated"


@dataclass
class Container:
    """
    A sealed container bound to one denomination for the session.

    Attributes:
        container_id: Stable id, 1..26
        value: Denomination in minor units, assigned by the shuffle
        state: Current lifecycle state
    """

    container_id: int
    value: Optional[int] = None
    state: ContainerState = ContainerState.IN_PLAY

    @property
    def is_held(self) -> bool:
        return self.state == ContainerState.HELD

    @property
    def is_eliminated(self) -> bool:
        return self.state == ContainerState.ELIMINATED

    @property
    def is_available(self) -> bool:
        """In play and not held: eligible for elimination."""
        return self.state == ContainerState.IN_PLAY
