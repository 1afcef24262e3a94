# Area: Shared
"""
Shared utilities: logging configuration.
"""

from .logging_config import (
    JSONFormatter,
    TerminalFormatter,
    log_error,
    resolve_level,
    setup_logging,
)

__all__ = [
    "JSONFormatter",
    "TerminalFormatter",
    "log_error",
    "resolve_level",
    "setup_logging",
]
