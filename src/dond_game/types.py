"""
dond_game.types — TypedDict schemas for statistics and export
=============================================================

Documents the exact structure of the read-only dicts returned by
GameController.statistics(), GameController.export() and
OfferEngine.analysis(). All amounts are integers in minor units.

All types are exported from the main package:

    from dond_game import GameStatistics, GameExport, ...

Use __annotations__ to inspect fields:

    >>> BoardStatistics.__annotations__
    {'total_containers': int, 'remaining_containers': int, ...}
"""

from typing import Any, Dict, List, Optional, TypedDict


class BoardStatistics(TypedDict):
    """Board.statistics()."""
    total_containers: int
    remaining_containers: int           # held container included
    eliminated_containers: int
    held_container_id: Optional[int]
    remaining_values: List[int]
    eliminated_values: List[int]
    min_remaining_value: Optional[int]
    max_remaining_value: Optional[int]
    average_remaining_value: Optional[int]


class ValueDistribution(TypedDict):
    """value_distribution() over the remaining values."""
    total: int
    low_values: int                     # below 1,000 units
    mid_values: int
    high_values: int                    # 100,000 units and above
    low_sum: int
    mid_sum: int
    high_sum: int
    total_sum: int


class GameStatistics(TypedDict):
    """GameController.statistics().

    Fields
    ------
    phase : str
        GamePhase value, e.g. "offer_presented".
    offers : List[int]
        Every offer shown this session, oldest first.
    history : List[Dict[str, Any]]
        Accepted transitions with timestamp, event, round and phase.
    """
    session_number: int
    round: int
    phase: str
    quota: int
    eliminated_this_round: int
    held_container_id: Optional[int]
    board: BoardStatistics
    distribution: ValueDistribution
    offers: List[int]
    aggressiveness: float
    history: List[Dict[str, Any]]


class BankerAnalysis(TypedDict):
    """OfferEngine.analysis()."""
    total_offers: int
    max_offer: int
    last_offer: int
    average_offer: int
    final_value: int
    max_offer_difference: int
    last_offer_difference: int
    player_made_good_choice: bool
    offers: List[int]


class GameExport(TypedDict):
    """GameController.export()."""
    game_stats: GameStatistics
    game_phase: str                     # e.g. "Mid Game"
    outcome: Optional[Dict[str, Any]]   # SessionOutcome.to_dict()
    analysis: Optional[BankerAnalysis]
    timestamp: str                      # ISO-8601, UTC
