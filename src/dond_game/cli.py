# Area: Shared
"""
dond_game.cli — Command-line interface
======================================

Plays automatic sessions with the DemoPlayer and prints one summary
line per session.

Usage:
    python -m dond_game                              # One session
    python -m dond_game --games 5 --seed 42          # Reproducible batch
    python -m dond_game --difficulty hard --switch   # Harder banker, switch at the end
    python -m dond_game --config settings.json       # Settings from file

Settings can also come from a .env file or DOND_* environment variables.
"""

import argparse
import random
import sys
from typing import List, Optional

from ._board.values import format_amount
from ._game.controller import GameController
from ._game.notifications import SessionOutcome
from ._shared.logging_config import log_error, setup_logging
from .config import GameSettings, load_settings
from .demo_player import DemoPlayer
from .errors import ConfigurationError


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Deal or No Deal round engine - play automatic sessions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m dond_game --games 10 --seed 7
  python -m dond_game --difficulty easy --accept-ratio 0.7
  DOND_DIFFICULTY=hard python -m dond_game
        """,
    )

    parser.add_argument("--config", type=str, help="Path to JSON settings file")
    parser.add_argument("--seed", type=int, help="Seed for shuffle, jitter and player")
    parser.add_argument(
        "--difficulty",
        choices=["easy", "normal", "hard"],
        help="Banker difficulty preset",
    )
    parser.add_argument(
        "--aggressiveness",
        type=float,
        help="Banker aggressiveness in [0, 1] (ignored when --difficulty is set)",
    )
    parser.add_argument(
        "--accept-ratio",
        type=float,
        help="Accept an offer once offer / expected value reaches this ratio",
    )
    parser.add_argument("--accept-round", type=int, help="Accept any offer from this round on")
    parser.add_argument(
        "--switch",
        action="store_true",
        default=None,
        help="Switch containers at the final decision",
    )
    parser.add_argument("--games", type=int, help="Number of sessions to play")
    parser.add_argument("--log-file", type=str, help="JSON log file path ('' disables)")
    parser.add_argument("--log-level", type=str, help="Log level (DEBUG, INFO, ...)")

    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> GameSettings:
    return load_settings(
        config_path=args.config,
        overrides={
            "seed": args.seed,
            "difficulty": args.difficulty,
            "aggressiveness": args.aggressiveness,
            "accept_ratio": args.accept_ratio,
            "accept_round": args.accept_round,
            "switch": args.switch,
            "games": args.games,
            "log_file": args.log_file,
            "log_level": args.log_level,
        },
    )


def format_summary(number: int, outcome: Optional[SessionOutcome], offers: List[int]) -> str:
    """One line describing how a session ended."""
    if outcome is None:
        return f"Game {number}: unfinished"
    best = format_amount(max(offers)) if offers else "none"
    if outcome.deal_taken:
        return (
            f"Game {number}: DEAL at {format_amount(outcome.final_amount)} "
            f"(case held {format_amount(outcome.held_value)}, best offer {best})"
        )
    verb = "switched to" if outcome.switched else "kept"
    return (
        f"Game {number}: NO DEAL, {verb} case {outcome.final_container_id} "
        f"worth {format_amount(outcome.final_amount)} "
        f"(other case {format_amount(outcome.other_value or 0)}, best offer {best})"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    try:
        settings = settings_from_args(args)
    except ConfigurationError as e:
        log_error(e)
        return 1

    setup_logging(settings.log_file, settings.log_level)

    controller = GameController(
        shuffle_rng=settings.shuffle_rng(),
        jitter_rng=settings.jitter_rng(),
        aggressiveness=settings.effective_aggressiveness,
    )
    player = DemoPlayer(
        controller,
        rng=random.Random(settings.seed),
        accept_ratio=settings.accept_ratio,
        accept_round=settings.accept_round,
        switch=settings.switch,
    )

    for number in range(1, settings.games + 1):
        outcome = player.play_session()
        print(format_summary(number, outcome, controller.offer_history()))

    return 0


if __name__ == "__main__":
    sys.exit(main())
