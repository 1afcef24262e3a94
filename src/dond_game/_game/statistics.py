# Area: Game
"""
dond_game._game.statistics — Read-only session snapshots
========================================================

Builds serializable statistics and export dicts for developer tools
and reporting. Nothing here mutates the session.
"""

from datetime import datetime, timezone

from .enums import GamePhase
from .session import GameSession
from .._banker.offer_engine import OfferEngine
from .._board.board import Board
from .._board.values import value_distribution
from ..types import GameExport, GameStatistics

PHASE_TITLES = {
    GamePhase.SELECTING: "Case Selection",
    GamePhase.OFFER_PRESENTED: "Banker Negotiation",
    GamePhase.SWITCH_DECISION: "Final Choice",
    GamePhase.DEAL_ACCEPTED: "Game Complete",
    GamePhase.CONCLUDED: "Game Complete",
}

# (remaining containers greater than, title) while PLAYING
PLAYING_TITLES = (
    (20, "Early Game"),
    (10, "Mid Game"),
    (5, "Late Game"),
)


def phase_description(session: GameSession, board: Board) -> str:
    """Human-readable stage of the session."""
    if session.phase in PHASE_TITLES:
        return PHASE_TITLES[session.phase]
    remaining = board.remaining_count()
    for threshold, title in PLAYING_TITLES:
        if remaining > threshold:
            return title
    return "Final Rounds"


def help_text(session: GameSession) -> str:
    phase = session.phase
    if phase == GamePhase.SELECTING:
        return (
            "Choose any briefcase as your case. "
            "It stays with you throughout the game."
        )
    if phase == GamePhase.PLAYING:
        left = session.cases_left_this_round
        plural = "" if left == 1 else "s"
        return f"You need to eliminate {left} more briefcase{plural} this round."
    if phase == GamePhase.OFFER_PRESENTED:
        return (
            "The banker is making you an offer! Accept the guaranteed money, "
            "or reject it to keep playing."
        )
    if phase == GamePhase.SWITCH_DECISION:
        return "Two briefcases are left. Switch to the other one, or keep your own."
    return "Game completed! Start a new session to play again."


def build_statistics(session: GameSession, board: Board, engine: OfferEngine) -> GameStatistics:
    """Serializable statistics for the current session."""
    return {
        "session_number": session.session_number,
        "round": session.round_number,
        "phase": session.phase.value,
        "quota": session.elimination_quota,
        "eliminated_this_round": session.eliminated_this_round,
        "held_container_id": session.held_container_id,
        "board": board.statistics(),
        "distribution": value_distribution(board.remaining_values()),
        "offers": list(session.offer_history),
        "aggressiveness": engine.aggressiveness,
        "history": [entry.to_dict() for entry in session.history],
    }


def build_export(session: GameSession, board: Board, engine: OfferEngine) -> GameExport:
    """Statistics plus outcome and banker analysis, stamped for export."""
    outcome = session.outcome
    return {
        "game_stats": build_statistics(session, board, engine),
        "game_phase": phase_description(session, board),
        "outcome": outcome.to_dict() if outcome else None,
        "analysis": engine.analysis(outcome.held_value) if outcome else None,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
