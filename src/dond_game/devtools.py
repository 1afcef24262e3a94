# Area: Shared
"""
dond_game.devtools — Developer tools
====================================

Debug-only operations on a running controller. Construction requires the
DebugCapability the host passed to the controller, so nothing here is
reachable through ambient state.

Usage:
    capability = DebugCapability()
    controller = GameController(debug_capability=capability)
    tools = DevTools(controller, capability)
    tools.reveal_cases()
"""

from typing import Dict

from ._game.capability import DebugCapability
from ._game.controller import GameController, IntentResult
from .types import GameExport, GameStatistics


class DevTools:
    """
    Capability-gated debug surface for one controller.

    Raises:
        CapabilityError: If the capability does not match the controller's
    """

    def __init__(self, controller: GameController, capability: DebugCapability):
        controller.check_capability(capability)
        self._controller = controller
        self._capability = capability

    def reveal_cases(self) -> Dict[int, int]:
        """Every container's value, by id."""
        return self._controller.board.value_assignment()

    def force_offer(self) -> IntentResult:
        """End the current round now (PLAYING only)."""
        return self._controller.debug_end_round(self._capability)

    def skip_to_end(self) -> IntentResult:
        """Open all non-held containers but one, then evaluate (PLAYING only)."""
        return self._controller.debug_skip_to_end(self._capability)

    def stats(self) -> GameStatistics:
        return self._controller.statistics()

    def export(self) -> GameExport:
        return self._controller.export()

    def set_difficulty(self, name: str) -> float:
        return self._controller.set_difficulty(name)
