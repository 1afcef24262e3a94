# Area: Shared
"""
dond_game.errors — Custom exception classes
===========================================

Defines the exception hierarchy for the round engine.
Each exception stores full context for structured logging.

Configuration errors are fatal and propagate out of session start.
Illegal-intent errors are raised by the Board and the state machine and
converted into rejection results by the GameController.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


class DondGameError(Exception):
    """Base exception for all dond_game package errors."""
    pass


class ConfigurationError(DondGameError):
    """Raised when the denomination table or settings are unusable."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.details = details or {}
        super().__init__(message)

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="CONFIGURATION_ERROR",
            summary=str(self),
            context=self.details,
            problems=None,
        )


class IllegalIntentError(DondGameError):
    """Raised when an intent is not valid for the current phase or target."""

    def __init__(
        self,
        intent: str,
        reason: str,
        phase: Optional[str] = None,
        container_id: Optional[int] = None,
    ):
        self.intent = intent
        self.reason = reason
        self.phase = phase
        self.container_id = container_id
        super().__init__(f"Intent '{intent}' rejected: {reason}")

    def context(self) -> Dict[str, Any]:
        return {
            "intent": self.intent,
            "phase": self.phase,
            "container_id": self.container_id,
        }

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="ILLEGAL_INTENT",
            summary=str(self),
            context=self.context(),
            problems=[self.reason],
        )


class InvalidSelectionError(IllegalIntentError):
    """Raised when the player picks a container that cannot be held."""

    def __init__(self, container_id: Any, reason: str):
        super().__init__("select", reason, container_id=container_id)


class InvalidEliminationError(IllegalIntentError):
    """Raised when a container cannot be opened."""

    def __init__(self, container_id: Any, reason: str):
        super().__init__("eliminate", reason, container_id=container_id)


class InvalidSwitchError(IllegalIntentError):
    """Raised when the held container cannot be swapped."""

    def __init__(self, container_id: Any, reason: str):
        super().__init__("switch", reason, container_id=container_id)


class CapabilityError(DondGameError):
    """Raised when a debug operation is attempted without a valid capability."""
    pass


def _format_error_block(
    error_type: str,
    summary: str,
    context: Dict[str, Any],
    problems: Optional[List[str]],
) -> str:
    """Format a structured error block for the log file."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        f" {error_type}",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Summary:      {summary}",
        "",
        " ── CONTEXT " + "─" * 52,
        _indent_json(context),
    ]

    if problems:
        lines.append("")
        lines.append(" ── PROBLEMS " + "─" * 51)
        for problem in problems:
            lines.append(f" • {problem}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
