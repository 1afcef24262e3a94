# Area: Board
"""
dond_game._board.board — Container board
========================================

Source of truth for container existence, value assignment and
held/eliminated state. Pure query/mutation surface with no presentation
concerns; every mutation validates its input and either succeeds or
raises a named IllegalIntentError subclass.
"""

from __future__ import annotations
import logging
import random
from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

from .container import Container, ContainerState
from .values import CONTAINER_COUNT, ValueSet
from ..types import BoardStatistics
from ..errors import (
    ConfigurationError,
    InvalidEliminationError,
    InvalidSelectionError,
    InvalidSwitchError,
)

logger = logging.getLogger("dond_game.board")


class Board:
    """
    The 26 containers of one session.

    Args:
        value_set: Denomination table; defaults to ValueSet.standard()
        rng: Random source for the session-start shuffle
        container_count: Number of containers; must match the table size
    """

    def __init__(
        self,
        value_set: Optional[ValueSet] = None,
        rng: Optional[random.Random] = None,
        container_count: int = CONTAINER_COUNT,
    ):
        self.value_set = value_set or ValueSet.standard()
        self.rng = rng or random.Random()
        self.container_count = container_count
        self._containers: Dict[int, Container] = {}
        self.initialize()

    # ── Lifecycle ───────────────────────────────────────────────

    def initialize(self) -> None:
        """(Re)create all containers and assign a fresh uniform permutation."""
        if len(self.value_set) != self.container_count:
            raise ConfigurationError(
                f"Mismatch: {len(self.value_set)} values for "
                f"{self.container_count} containers",
                details={
                    "values": len(self.value_set),
                    "containers": self.container_count,
                },
            )

        shuffled = list(self.value_set.values)
        # random.shuffle is a Fisher-Yates shuffle
        self.rng.shuffle(shuffled)

        self._containers = {
            number: Container(container_id=number, value=value)
            for number, value in zip(range(1, self.container_count + 1), shuffled)
        }
        logger.debug(f"Board initialized with {self.container_count} containers")

    # ── Mutations ───────────────────────────────────────────────

    def select_held(self, container_id: int) -> None:
        """Mark an in-play container as the player's own."""
        container = self._lookup(container_id)
        if container is None:
            raise InvalidSelectionError(container_id, "no such container")
        if self.held_container_id is not None:
            raise InvalidSelectionError(
                container_id,
                f"container {self.held_container_id} is already held",
            )
        if container.state != ContainerState.IN_PLAY:
            raise InvalidSelectionError(
                container_id, f"container is {container.state.value}"
            )
        container.state = ContainerState.HELD
        logger.debug(f"Container {container_id} held")

    def eliminate(self, container_id: int) -> int:
        """Open an in-play, non-held container and return its value."""
        container = self._lookup(container_id)
        if container is None:
            raise InvalidEliminationError(container_id, "no such container")
        if container.state == ContainerState.HELD:
            raise InvalidEliminationError(container_id, "container is held")
        if container.state == ContainerState.ELIMINATED:
            raise InvalidEliminationError(container_id, "container already eliminated")
        container.state = ContainerState.ELIMINATED
        logger.debug(f"Container {container_id} eliminated")
        return container.value

    def switch_held(self, new_container_id: int) -> int:
        """
        Atomically swap the held container.

        The previously held container returns to IN_PLAY.

        Returns:
            The id of the container given up
        """
        current = self.held_container_id
        if current is None:
            raise InvalidSwitchError(new_container_id, "no container is held")
        target = self._lookup(new_container_id)
        if target is None:
            raise InvalidSwitchError(new_container_id, "no such container")
        if target.state != ContainerState.IN_PLAY:
            raise InvalidSwitchError(
                new_container_id, f"container is {target.state.value}"
            )
        self._containers[current].state = ContainerState.IN_PLAY
        target.state = ContainerState.HELD
        logger.debug(f"Held container switched {current} -> {new_container_id}")
        return current

    # ── Queries ─────────────────────────────────────────────────

    @property
    def containers(self) -> Tuple[Container, ...]:
        """Copies of all containers, ordered by id."""
        return tuple(replace(c) for _, c in sorted(self._containers.items()))

    def container(self, container_id: int) -> Optional[Container]:
        found = self._lookup(container_id)
        return replace(found) if found else None

    @property
    def held_container_id(self) -> Optional[int]:
        for number, container in self._containers.items():
            if container.is_held:
                return number
        return None

    def held_value(self) -> Optional[int]:
        held = self.held_container_id
        return self._containers[held].value if held is not None else None

    def remaining_values(self) -> List[int]:
        """Values of all non-eliminated containers, held one included."""
        return [c.value for _, c in sorted(self._containers.items()) if not c.is_eliminated]

    def remaining_count(self) -> int:
        return sum(1 for c in self._containers.values() if not c.is_eliminated)

    def eliminated_values(self) -> List[int]:
        return [c.value for _, c in sorted(self._containers.items()) if c.is_eliminated]

    def eliminated_count(self) -> int:
        return sum(1 for c in self._containers.values() if c.is_eliminated)

    def available_for_elimination(self) -> List[int]:
        """Ids of containers that are in play and not held."""
        return [n for n, c in sorted(self._containers.items()) if c.is_available]

    other_in_play_ids = available_for_elimination

    def available_values(self) -> List[int]:
        """Values still in play excluding the held container."""
        return [c.value for _, c in sorted(self._containers.items()) if c.is_available]

    def is_available(self, container_id: int) -> bool:
        container = self._lookup(container_id)
        return container is not None and container.is_available

    def random_available(self, rng: Optional[random.Random] = None) -> Optional[int]:
        available = self.available_for_elimination()
        if not available:
            return None
        return (rng or self.rng).choice(available)

    def value_assignment(self) -> Dict[int, int]:
        """Full id -> value mapping. Debug use only."""
        return {n: c.value for n, c in sorted(self._containers.items())}

    def statistics(self) -> BoardStatistics:
        remaining = self.remaining_values()
        eliminated = self.eliminated_values()
        return {
            "total_containers": len(self._containers),
            "remaining_containers": len(remaining),
            "eliminated_containers": len(eliminated),
            "held_container_id": self.held_container_id,
            "remaining_values": remaining,
            "eliminated_values": eliminated,
            "min_remaining_value": min(remaining) if remaining else None,
            "max_remaining_value": max(remaining) if remaining else None,
            "average_remaining_value": (
                sum(remaining) // len(remaining) if remaining else None
            ),
        }

    # ── Internals ───────────────────────────────────────────────

    def _lookup(self, container_id: Any) -> Optional[Container]:
        if isinstance(container_id, bool) or not isinstance(container_id, int):
            return None
        return self._containers.get(container_id)
